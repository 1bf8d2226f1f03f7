# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL business logic for the CSS tutor server:
# the knowledge record schema, the file-backed knowledge store, the
# upstream update fetcher, and the error taxonomy they share.
#
# CRITICAL ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP, Google ADK, or any orchestration
#   framework.  pydantic is the only third-party import, and only for the
#   record schema.  The tools/ layer wraps this package; it never leaks in.
# =============================================================================
