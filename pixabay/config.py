# =============================================================================
# pixabay/config.py  —  Process Configuration
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Reads the Pixabay settings from the environment ONCE, at process start,
#   into an immutable PixabayConfig value.  The gateway receives that value
#   in its constructor; nothing reads os.environ after startup.
#
# ENVIRONMENT VARIABLES:
#   PIXABAY_API_KEY    →  Required secret.  A missing key does NOT stop the
#                         server from starting (tool discovery still works);
#                         every tool call reports it instead.
#   PIXABAY_TIMEOUT_S  →  Optional request timeout in seconds (default 10).
#
#   Callers are expected to run load_dotenv() first so a local .env file
#   is honoured (tools/mcp_server.py and main.py both do).
# =============================================================================

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

API_KEY_ENV = "PIXABAY_API_KEY"
TIMEOUT_ENV = "PIXABAY_TIMEOUT_S"

IMAGE_ENDPOINT = "https://pixabay.com/api/"
VIDEO_ENDPOINT = "https://pixabay.com/api/videos/"
DEFAULT_TIMEOUT_S = 10.0


@dataclass(frozen=True)
class PixabayConfig:
    """Immutable settings shared by every tool call."""

    api_key: str = ""
    image_endpoint: str = IMAGE_ENDPOINT
    video_endpoint: str = VIDEO_ENDPOINT
    timeout_s: float = DEFAULT_TIMEOUT_S

    @property
    def has_credential(self) -> bool:
        return bool(self.api_key)

    def __repr__(self) -> str:
        # Keep the secret out of tracebacks and debug logs.
        key = "***" if self.api_key else "''"
        return (
            f"PixabayConfig(api_key={key}, image_endpoint={self.image_endpoint!r}, "
            f"video_endpoint={self.video_endpoint!r}, timeout_s={self.timeout_s!r})"
        )


def _parse_timeout(raw: str | None) -> float:
    """Parse PIXABAY_TIMEOUT_S, falling back to the default on bad input."""
    if raw is None or not raw.strip():
        return DEFAULT_TIMEOUT_S
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Ignoring invalid %s=%r; using %.0fs", TIMEOUT_ENV, raw, DEFAULT_TIMEOUT_S)
        return DEFAULT_TIMEOUT_S
    if value <= 0:
        logger.warning("Ignoring non-positive %s=%r; using %.0fs", TIMEOUT_ENV, raw, DEFAULT_TIMEOUT_S)
        return DEFAULT_TIMEOUT_S
    return value


def load_config(environ: dict[str, str] | None = None) -> PixabayConfig:
    """Build a PixabayConfig from the environment.

    Args:
        environ: Mapping to read from.  Defaults to os.environ; tests pass
                 a plain dict instead of patching the process environment.

    Returns:
        A frozen PixabayConfig.  The API key may be empty.
    """
    env = os.environ if environ is None else environ
    return PixabayConfig(
        api_key=env.get(API_KEY_ENV, "").strip(),
        timeout_s=_parse_timeout(env.get(TIMEOUT_ENV)),
    )
