# =============================================================================
# pixabay/gateway.py  —  The Tool Gateway
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Owns the four tools exposed to agents:
#
#       search_images     → GET https://pixabay.com/api/
#       search_videos     → GET https://pixabay.com/api/videos/
#       get_image_by_id   → search_images with `id` as the only filter
#       get_video_by_id   → search_videos with `id` as the only filter
#
#   and the two protocol-facing operations:
#
#       list_tools()                → the static descriptors (never fails)
#       call_tool(name, arguments)  → validate, dispatch, return ToolResult
#
# THE FLOW OF ONE CALL:
#   1. Unknown tool name?        → "Error: Unknown tool: <name>"
#   2. Arguments fail the model? → "Error: Invalid arguments for <tool>: ..."
#   3. API key missing?          → "Error: PIXABAY_API_KEY ... is required"
#   4. One GET to Pixabay        → pretty JSON, or "Error: Pixabay API ..."
#
#   Steps 1-3 never touch the network.  Every expected failure comes back
#   as a ToolResult; the protocol call itself always succeeds.
# =============================================================================

import logging
from collections.abc import Awaitable, Callable, Mapping
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from pixabay.client import PixabayClient
from pixabay.config import PixabayConfig
from pixabay.models import PixabayError, ToolDescriptor, ToolResult
from pixabay.params import (
    ImageSearchParams,
    MediaIdParams,
    ToolParams,
    VideoSearchParams,
    describe_validation_error,
)

logger = logging.getLogger(__name__)


def _schema(model: type[ToolParams]) -> dict[str, Any]:
    schema = model.model_json_schema()
    schema.pop("title", None)
    schema.pop("description", None)
    return schema


# -----------------------------------------------------------------------------
# Tool registry — built once at import time, never mutated
# -----------------------------------------------------------------------------
# The descriptions are what an LLM reads in tools/list; tools/mcp_server.py
# registers its FastMCP tools with these same strings.
TOOL_DESCRIPTORS: tuple[ToolDescriptor, ...] = (
    ToolDescriptor(
        name="search_images",
        description=(
            "Search for royalty-free images on Pixabay. Every filter is optional; leave out "
            "the ones you don't need. Returns Pixabay's JSON response (total, totalHits, hits[] "
            "with previewURL, webformatURL, largeImageURL, tags, user, pageURL, ...) as text, "
            "or a line starting with \"Error:\" describing what went wrong."
        ),
        input_schema=_schema(ImageSearchParams),
    ),
    ToolDescriptor(
        name="search_videos",
        description=(
            "Search for royalty-free videos on Pixabay. Returns Pixabay's JSON response "
            "(hits[] with a `videos` object holding large/medium/small/tiny renditions, "
            "duration, tags, user, pageURL, ...) as text, or a line starting with \"Error:\"."
        ),
        input_schema=_schema(VideoSearchParams),
    ),
    ToolDescriptor(
        name="get_image_by_id",
        description="Retrieve a specific image by its Pixabay ID",
        input_schema=_schema(MediaIdParams),
    ),
    ToolDescriptor(
        name="get_video_by_id",
        description="Retrieve a specific video by its Pixabay ID",
        input_schema=_schema(MediaIdParams),
    ),
)

DESCRIPTORS: dict[str, ToolDescriptor] = {descriptor.name: descriptor for descriptor in TOOL_DESCRIPTORS}
TOOL_NAMES = frozenset(DESCRIPTORS)

# Closed dispatch table: tool name → (argument model, MediaGateway method).
ROUTES: dict[str, tuple[type[ToolParams], str]] = {
    "search_images": (ImageSearchParams, "search_images"),
    "search_videos": (VideoSearchParams, "search_videos"),
    "get_image_by_id": (MediaIdParams, "_image_by_id"),
    "get_video_by_id": (MediaIdParams, "_video_by_id"),
}

if set(ROUTES) != TOOL_NAMES:
    raise RuntimeError(f"Tool routes {sorted(ROUTES)} do not match descriptors {sorted(TOOL_NAMES)}")


class MediaGateway:
    """Translates tool calls into Pixabay requests and back."""

    def __init__(self, config: PixabayConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.config = config
        self._client = PixabayClient(config, transport=transport)
        self._routes: dict[str, tuple[type[ToolParams], Callable[[Any], Awaitable[ToolResult]]]] = {
            name: (model, getattr(self, method)) for name, (model, method) in ROUTES.items()
        }

    # -------------------------------------------------------------------------
    # Discovery
    # -------------------------------------------------------------------------
    @staticmethod
    def list_tools() -> list[ToolDescriptor]:
        """All tool descriptors.  Works without an API key."""
        return list(TOOL_DESCRIPTORS)

    # -------------------------------------------------------------------------
    # Invocation
    # -------------------------------------------------------------------------
    async def call_tool(self, name: str, arguments: Optional[Mapping[str, Any]] = None) -> ToolResult:
        """Validate `arguments` for tool `name` and run it."""
        route = self._routes.get(name)
        if route is None:
            logger.warning("Rejected call to unknown tool %r", name)
            return ToolResult.error(f"Unknown tool: {name}")

        model, handler = route
        try:
            params = model.model_validate(dict(arguments or {}))
        except ValidationError as exc:
            detail = describe_validation_error(exc)
            logger.warning("Invalid arguments for %s: %s", name, detail)
            return ToolResult.error(f"Invalid arguments for {name}: {detail}")

        return await handler(params)

    async def search_images(self, params: ImageSearchParams) -> ToolResult:
        return await self._search(self.config.image_endpoint, params, "Pixabay API")

    async def search_videos(self, params: VideoSearchParams) -> ToolResult:
        return await self._search(self.config.video_endpoint, params, "Pixabay Video API")

    async def get_image_by_id(self, id: str) -> ToolResult:
        """Convenience form of search_images({"id": id})."""
        return await self.call_tool("get_image_by_id", {"id": id})

    async def get_video_by_id(self, id: str) -> ToolResult:
        """Convenience form of search_videos({"id": id})."""
        return await self.call_tool("get_video_by_id", {"id": id})

    async def _image_by_id(self, params: MediaIdParams) -> ToolResult:
        return await self.search_images(ImageSearchParams(id=params.id))

    async def _video_by_id(self, params: MediaIdParams) -> ToolResult:
        return await self.search_videos(VideoSearchParams(id=params.id))

    async def _search(self, endpoint: str, params: ToolParams, label: str) -> ToolResult:
        try:
            payload = await self._client.get(endpoint, params.to_query(), label=label)
        except PixabayError as exc:
            return ToolResult.error(str(exc))
        return ToolResult.ok(payload)
