# =============================================================================
# pixabay/client.py  —  The Single HTTP Call
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Performs ONE GET request against a Pixabay endpoint and returns the
#   decoded JSON body.  Anything other than a 2xx response with valid JSON
#   is raised as UpstreamError; the gateway turns that into an error result.
#
# THE CREDENTIAL:
#   The API key travels as the "key" query parameter (Pixabay does not
#   accept it as a header).  It is added LAST, after the caller's
#   parameters, so there is exactly one key per request.  Logged URLs have
#   the key replaced with "***", and the httpx/httpcore loggers are held at
#   WARNING so their own request lines (full URL) never reach the log.
#
# CONNECTION HANDLING:
#   A fresh httpx.AsyncClient is opened per call and closed when the call
#   finishes.  There is no shared connection pool and no shared state, so
#   concurrent tool calls never interfere with each other.  The optional
#   `transport` argument lets tests plug in httpx.MockTransport.
# =============================================================================

import json
import logging
from collections.abc import Mapping
from typing import Any, Optional

import httpx

from pixabay.config import PixabayConfig
from pixabay.models import ConfigurationError, UpstreamError

logger = logging.getLogger(__name__)

# httpx and httpcore log every request URL at INFO, credential included.
for _name in ("httpx", "httpcore"):
    logging.getLogger(_name).setLevel(logging.WARNING)

REDACTED = "***"


def redact_url(url: httpx.URL) -> str:
    """Return the URL as text with the credential hidden."""
    if "key" in url.params:
        url = url.copy_set_param("key", REDACTED)
    return str(url)


class PixabayClient:
    """Thin async wrapper around the two Pixabay search endpoints."""

    def __init__(self, config: PixabayConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        self._config = config
        self._transport = transport

    def build_params(self, query: Mapping[str, str]) -> dict[str, str]:
        """Caller's query plus the injected credential."""
        if not self._config.has_credential:
            raise ConfigurationError("PIXABAY_API_KEY environment variable is required")
        params = {name: value for name, value in query.items() if name != "key"}
        params["key"] = self._config.api_key
        return params

    async def get(self, endpoint: str, query: Mapping[str, str], label: str = "Pixabay API") -> Any:
        """GET `endpoint` with `query` and return the parsed JSON body.

        Raises:
            ConfigurationError: the API key is missing (no request is sent).
            UpstreamError: non-2xx status, undecodable body, or a transport
                failure such as DNS errors, refused connections or timeouts.
        """
        params = self.build_params(query)

        async with httpx.AsyncClient(timeout=self._config.timeout_s, transport=self._transport) as client:
            request = client.build_request("GET", endpoint, params=params)
            logger.info("%s Request: %s", label, redact_url(request.url))
            try:
                response = await client.send(request)
            except httpx.HTTPError as exc:
                logger.warning("%s request failed: %s: %s", label, type(exc).__name__, exc)
                raise UpstreamError(f"Pixabay API request failed: {type(exc).__name__}: {exc}") from exc

        if not response.is_success:
            body = response.text
            logger.warning("%s Error Response: %s", label, body)
            raise UpstreamError(f"Pixabay API error: {response.status_code} {response.reason_phrase} - {body}")

        # json.loads on the raw bytes detects UTF-8/16/32 and a UTF-8 BOM; a
        # body that is not valid in any of them raises UnicodeDecodeError,
        # which like JSONDecodeError is a ValueError.
        try:
            return json.loads(response.content)
        except ValueError as exc:
            logger.warning("%s returned an undecodable body: %s", label, exc)
            raise UpstreamError(f"Pixabay API returned invalid JSON: {exc}") from exc
