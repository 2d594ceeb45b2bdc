# =============================================================================
# agent/__init__.py
# =============================================================================
# This package contains the Google ADK agent that consumes the Pixabay MCP
# server.  It is an example client: the server works with any MCP host.
#
# ARCHITECTURAL ROLE:
#   The agent/ layer decides WHICH tool to call and with WHICH filters, then
#   turns Pixabay's JSON into an answer for the user.
#
# WHAT THE AGENT IS NOT:
#   - It is NOT the HTTP adapter (that's in pixabay/)
#   - It is NOT the tool definitions (that's in tools/)
# =============================================================================
