# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the FastMCP server that exposes the Pixabay gateway.
#
# ARCHITECTURAL ROLE:
#   tools/ is the "translation layer" between MCP and the pixabay/ package.
#   mcp_server.py:
#     1. Builds one MediaGateway from the environment at startup
#     2. Wraps each gateway tool in a FastMCP tool function
#     3. Logs every call to stderr
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT build query strings or talk HTTP (that's in pixabay/)
#   - They do NOT reshape Pixabay's JSON (it is passed through as-is)
#   - They do NOT know about Google ADK
#
# TOOL CONTRACTS:
#   Each tool has a descriptive name, a docstring the LLM reads to decide
#   when to call it, and typed parameters with the same enums and bounds
#   the gateway enforces.
# =============================================================================
