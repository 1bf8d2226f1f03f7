# =============================================================================
# tools/operations.py  —  The Three Tools
# =============================================================================
#
# Each tool is a thin handler around core/:
#
#   read_from_memory    → KnowledgeStore.load()
#   write_to_memory     → KnowledgeStore.record_concept()
#   get_latest_updates  → UpdateFetcher.fetch()
#
# TOOL NAMING:
#   The names and descriptions are the external contract: the calling agent's
#   guidance prompt refers to them by name, so they must not drift.
#
# CONDITIONAL REGISTRATION:
#   build_registry() walks _REGISTRATIONS once at startup.  Each entry pairs
#   a predicate on the context with a function that registers one operation.
#   get_latest_updates is only present when an API key was configured; when
#   it is absent, callers get "operation not found" rather than a tool that
#   always fails.
# =============================================================================

import json
import logging
from typing import Callable

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr

from tools.context import ServerContext
from tools.registry import NoInput, Operation, OperationRegistry, OperationResult

logger = logging.getLogger(__name__)

READ_FROM_MEMORY = "read_from_memory"
WRITE_TO_MEMORY = "write_to_memory"
GET_LATEST_UPDATES = "get_latest_updates"


class WriteMemoryInput(BaseModel):
    """Arguments of write_to_memory."""

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    concept: StrictStr = Field(
        ..., min_length=1, description="The CSS concept name (e.g., 'Flexbox')"
    )
    known: StrictBool = Field(
        ..., description="Whether the user knows this concept (true/false)"
    )


def _register_read_from_memory(registry: OperationRegistry, context: ServerContext) -> None:
    def handler(_: NoInput) -> OperationResult:
        record = context.store.load()
        return OperationResult.success(json.dumps(record.to_document(), indent=2))

    registry.register(Operation(
        name=READ_FROM_MEMORY,
        description="Reads the user's current CSS knowledge from memory.",
        handler=handler,
    ))


def _register_write_to_memory(registry: OperationRegistry, context: ServerContext) -> None:
    def handler(args: WriteMemoryInput) -> OperationResult:
        context.store.record_concept(args.concept, args.known)
        return OperationResult.success(
            f"Memory updated successfully for concept: {args.concept}"
        )

    registry.register(Operation(
        name=WRITE_TO_MEMORY,
        description="Updates the user's CSS knowledge memory for a specific concept.",
        handler=handler,
        input_model=WriteMemoryInput,
    ))


def _register_get_latest_updates(registry: OperationRegistry, context: ServerContext) -> None:
    fetcher = context.fetcher

    def handler(_: NoInput) -> OperationResult:
        return OperationResult.success(fetcher.fetch())

    registry.register(Operation(
        name=GET_LATEST_UPDATES,
        description=(
            "Fetches recent news and updates about CSS features using "
            "Perplexity Sonar via OpenRouter."
        ),
        handler=handler,
    ))


def _always(_: ServerContext) -> bool:
    return True


def _has_fetcher(context: ServerContext) -> bool:
    return context.fetcher is not None


Registration = Callable[[OperationRegistry, ServerContext], None]

_REGISTRATIONS: list[tuple[Callable[[ServerContext], bool], Registration]] = [
    (_always, _register_read_from_memory),
    (_always, _register_write_to_memory),
    (_has_fetcher, _register_get_latest_updates),
]


def build_registry(context: ServerContext) -> OperationRegistry:
    """Construct the final operation set for this process."""
    registry = OperationRegistry()
    for predicate, register in _REGISTRATIONS:
        if predicate(context):
            register(registry, context)
        else:
            logger.warning(
                "Skipping %s: its precondition is not met "
                "(is OPENROUTER_API_KEY set?)", register.__name__.replace("_register_", "")
            )
    return registry
