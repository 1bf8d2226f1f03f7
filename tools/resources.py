# =============================================================================
# tools/resources.py  —  The css_knowledge_memory Resource
# =============================================================================
#
# Exposes the current KnowledgeRecord as a readable, URI-addressed resource.
# There is one global profile, so any path after the base URI is ignored:
# memory://css_knowledge_memory/ and memory://css_knowledge_memory/alex both
# return the same document.
#
# The capability flags advertise write support, but this class never writes.
# Mutation always goes through the write_to_memory tool.
# =============================================================================

import json
import logging
from types import MappingProxyType
from typing import Any, Dict

from core.knowledge_store import KnowledgeStore

logger = logging.getLogger(__name__)

RESOURCE_NAME = "css_knowledge_memory"
RESOURCE_URI_BASE = f"memory://{RESOURCE_NAME}/"
MIME_TYPE = "application/json"


class KnowledgeResource:
    """Read-only surface over the KnowledgeStore."""

    name = RESOURCE_NAME
    uri_base = RESOURCE_URI_BASE
    mime_type = MIME_TYPE
    description = "The user's CSS knowledge profile (concept name -> known)."
    # Informational only: FastMCP has no capability flags on resources, so
    # these are not sent to clients.  Writes go through write_to_memory.
    capabilities = MappingProxyType({"read": True, "write": True})

    def __init__(self, store: KnowledgeStore):
        self._store = store

    def read(self, uri: str = RESOURCE_URI_BASE) -> Dict[str, Any]:
        """Return {uri, mimeType, text} for the current record.

        CorruptState from the store propagates unchanged.
        """
        try:
            record = self._store.load()
        except Exception:
            logger.error("Error handling resource request for %s", uri)
            raise
        return {
            "uri": str(uri),
            "mimeType": self.mime_type,
            "text": json.dumps(record.to_document()),
        }
