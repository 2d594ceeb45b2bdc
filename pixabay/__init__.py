# =============================================================================
# pixabay/__init__.py
# =============================================================================
# This package contains ALL the adapter logic for the Pixabay MCP server.
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP, Google ADK, or any orchestration
#   framework.  The only third-party pieces are httpx (the HTTP call) and
#   pydantic (argument validation).  tools/mcp_server.py wraps the gateway
#   defined here in MCP tool functions; the agent never imports it directly.
#
# MODULES:
#   config.py  →  PixabayConfig + load_config() (environment → frozen value)
#   models.py  →  ToolResult and ToolDescriptor dataclasses, error classes
#   params.py  →  Per-tool parameter models and query-string normalization
#   client.py  →  One GET against Pixabay, errors turned into exceptions
#   gateway.py →  Tool registry, validation, dispatch, error → ToolResult
# =============================================================================

from pixabay.config import PixabayConfig, load_config
from pixabay.gateway import MediaGateway
from pixabay.models import ToolDescriptor, ToolResult

__all__ = [
    "MediaGateway",
    "PixabayConfig",
    "ToolDescriptor",
    "ToolResult",
    "load_config",
]
