# =============================================================================
# agent/__init__.py
# =============================================================================
# A demo client for the CSS tutor server: a Google ADK agent that launches
# tools/mcp_server.py over stdio and follows the tutor workflow with a real
# user at the keyboard (see main.py).
#
# The server does not depend on this package.  Any MCP-capable agent can
# drive it; this one exists so the whole loop can be tried end to end.
# =============================================================================
