# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Exposes the Pixabay gateway as MCP tools.  Each tool is a thin wrapper
#   around MediaGateway.call_tool() — it logs the call, forwards the
#   arguments, and returns the result text.
#
# HOW IT WORKS (the flow):
#   1. An agent lists tools and sees search_images, search_videos,
#      get_image_by_id and get_video_by_id
#   2. It calls one by name via MCP (e.g., "search_images")
#   3. FastMCP validates the arguments against the function signature
#      (Literal enums, Field bounds) and routes to the function below
#   4. The function hands the arguments to the gateway, which validates
#      them again, performs ONE GET to Pixabay, and returns a ToolResult
#   5. The agent receives the pretty-printed Pixabay JSON, or a line
#      starting with "Error:" it can reason about like any other text
#
# RESOURCES AND PROMPTS:
#   None are registered, so resources/list and prompts/list return empty
#   collections.  This server only offers callable tools.
#
# RUNNING THIS SERVER:
#   python -m tools.mcp_server        (stdio transport, from the repo root)
# =============================================================================

import logging
import sys
from typing import Any

from dotenv import load_dotenv
from fastmcp import FastMCP

from pixabay.config import load_config
from pixabay.gateway import DESCRIPTORS, MediaGateway
from pixabay.params import (
    Category,
    Colors,
    EditorsChoice,
    ImageTypeFilter,
    Lang,
    MediaId,
    MinHeight,
    MinWidth,
    OrientationFilter,
    Page,
    PerPage,
    Query,
    SafeSearch,
    SearchId,
    SortOrder,
    VideoTypeFilter,
)

# =============================================================================
# Logging Setup
# =============================================================================
# Logs go to STDERR because STDOUT carries the MCP JSON-RPC stream.
#
# ANSI COLOR CODES:
#     - CYAN for incoming requests (tool name + parameters)
#     - GREEN for response summaries
#     - YELLOW for status lines (errors, outbound request URLs)
# =============================================================================

_CYAN = "\033[36m"     # Requests (tool calls with params)
_GREEN = "\033[32m"    # Responses
_YELLOW = "\033[33m"   # Status/progress messages
_RESET = "\033[0m"     # Reset to default terminal color

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items() if v is not None)
    logging.info(f"{_CYAN}{tool_name} called with: {param_str or '(no filters)'}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, text: str, is_error: bool) -> str:
    """Log a one-line summary of the result in GREEN, then return the text."""
    if is_error:
        _log_status(text)
    logging.info(f"{_GREEN}  ← {tool_name} response: {len(text)} chars{' (error)' if is_error else ''}{_RESET}")
    return text


# =============================================================================
# Configuration + gateway
# =============================================================================
# The .env file is read once, here, at process start.  A missing
# PIXABAY_API_KEY does not stop the server: tools/list must still work so
# agents can discover the tools, and each call reports the missing key.
# =============================================================================
load_dotenv()
gateway = MediaGateway(load_config())

if not gateway.config.has_credential:
    _log_status("PIXABAY_API_KEY is not set; tool calls will return a configuration error")

mcp = FastMCP("pixabay-mcp-server")


async def _call(tool_name: str, arguments: dict[str, Any]) -> str:
    _log_request(tool_name, **arguments)
    result = await gateway.call_tool(tool_name, arguments)
    return _log_response(tool_name, result.text, result.is_error)


# =============================================================================
# TOOL 1: search_images
# =============================================================================
# Parameter annotations and descriptions come from pixabay/, so tools/list
# advertises exactly what the gateway accepts.
# =============================================================================
@mcp.tool(description=DESCRIPTORS["search_images"].description)
async def search_images(
    q: Query = None,
    lang: Lang = None,
    id: SearchId = None,
    image_type: ImageTypeFilter = None,
    orientation: OrientationFilter = None,
    category: Category = None,
    min_width: MinWidth = None,
    min_height: MinHeight = None,
    colors: Colors = None,
    editors_choice: EditorsChoice = None,
    safesearch: SafeSearch = None,
    order: SortOrder = None,
    page: Page = None,
    per_page: PerPage = None,
) -> str:
    """Forward an image search to the gateway."""
    return await _call("search_images", {
        "q": q,
        "lang": lang,
        "id": id,
        "image_type": image_type,
        "orientation": orientation,
        "category": category,
        "min_width": min_width,
        "min_height": min_height,
        "colors": colors,
        "editors_choice": editors_choice,
        "safesearch": safesearch,
        "order": order,
        "page": page,
        "per_page": per_page,
    })


# =============================================================================
# TOOL 2: search_videos
# =============================================================================
@mcp.tool(description=DESCRIPTORS["search_videos"].description)
async def search_videos(
    q: Query = None,
    lang: Lang = None,
    id: SearchId = None,
    video_type: VideoTypeFilter = None,
    category: Category = None,
    min_width: MinWidth = None,
    min_height: MinHeight = None,
    editors_choice: EditorsChoice = None,
    safesearch: SafeSearch = None,
    order: SortOrder = None,
    page: Page = None,
    per_page: PerPage = None,
) -> str:
    """Forward a video search to the gateway."""
    return await _call("search_videos", {
        "q": q,
        "lang": lang,
        "id": id,
        "video_type": video_type,
        "category": category,
        "min_width": min_width,
        "min_height": min_height,
        "editors_choice": editors_choice,
        "safesearch": safesearch,
        "order": order,
        "page": page,
        "per_page": per_page,
    })


# =============================================================================
# TOOLS 3 & 4: lookups by ID
# =============================================================================
@mcp.tool(description=DESCRIPTORS["get_image_by_id"].description)
async def get_image_by_id(id: MediaId) -> str:
    return await _call("get_image_by_id", {"id": id})


@mcp.tool(description=DESCRIPTORS["get_video_by_id"].description)
async def get_video_by_id(id: MediaId) -> str:
    return await _call("get_video_by_id", {"id": id})


# =============================================================================
# Server entry point
# =============================================================================
def main() -> None:
    _log_status("Pixabay MCP Server running on stdio")
    mcp.run()


if __name__ == "__main__":
    main()
