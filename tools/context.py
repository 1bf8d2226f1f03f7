# =============================================================================
# tools/context.py  —  Server Context
# =============================================================================
#
# Everything a handler needs is reached through one ServerContext built at
# startup.  There are no module-level singletons: tests build their own
# context around a temp file and a stub fetcher.
# =============================================================================

from dataclasses import dataclass, field
from typing import Optional

from core.config import Settings
from core.knowledge_store import KnowledgeStore
from core.updates import UpdateFetcher
from tools.registry import OperationRegistry


@dataclass
class ServerContext:
    settings: Settings
    store: KnowledgeStore
    fetcher: Optional[UpdateFetcher] = None
    registry: OperationRegistry = field(default_factory=OperationRegistry)


def create_context(settings: Settings) -> ServerContext:
    """Build the store, the optional fetcher, and the final operation set."""
    # Imported here: operations imports ServerContext from this module.
    from tools.operations import build_registry

    fetcher = None
    if settings.updates_enabled:
        fetcher = UpdateFetcher(
            api_key=settings.openrouter_api_key,
            model=settings.updates_model,
            timeout=settings.http_timeout,
            site_url=settings.site_url,
            app_title=settings.app_title,
        )

    context = ServerContext(
        settings=settings,
        store=KnowledgeStore(settings.memory_path),
        fetcher=fetcher,
    )
    context.registry = build_registry(context)
    return context
