# =============================================================================
# tools/__init__.py
# =============================================================================
# This package is the MCP surface of the CSS tutor.
#
# ARCHITECTURAL ROLE:
#   tools/ is the "translation layer" between the MCP protocol and core/:
#     - registry.py    the dispatch contract every tool call goes through
#     - operations.py  the three tools and the startup build of the tool set
#     - resources.py   the css_knowledge_memory resource
#     - prompts.py     the css-tutor-guidance prompt
#     - context.py     the ServerContext handed to all of the above
#     - mcp_server.py  FastMCP wiring and the server entry point
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT validate or write the knowledge file themselves (core/ does)
#   - They do NOT decide which concepts to teach (that's the agent's job)
# =============================================================================
