# =============================================================================
# tools/registry.py  —  Operation Registry & Dispatch Contract
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Maps operation names to handlers and defines the ONE way they are called.
#   FastMCP never calls a handler directly; it calls dispatch(), which:
#
#     1. Looks the operation up          → unknown name  → OperationNotFound
#     2. Validates the raw arguments     → bad arguments → InvalidInput
#        against the declared pydantic model (handler NOT invoked)
#     3. Invokes the handler             → its OperationResult, verbatim
#     4. Catches what the handler raises → TutorError    → tagged failure
#                                        → anything else → InternalError
#
#   Nothing escapes dispatch().  One failed call cannot take the server down
#   or leave state behind for the next call.
# =============================================================================

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, Mapping, Optional

from pydantic import BaseModel, ConfigDict, ValidationError

from core.errors import TutorError, describe_validation_error

logger = logging.getLogger(__name__)


class NoInput(BaseModel):
    """Input shape for operations that take no arguments."""

    model_config = ConfigDict(extra="forbid")


@dataclass(frozen=True)
class OperationResult:
    """The uniform outcome of every operation: text on success, tagged error otherwise."""

    ok: bool
    text: str
    error_kind: Optional[str] = None

    @classmethod
    def success(cls, text: str) -> "OperationResult":
        return cls(ok=True, text=text)

    @classmethod
    def failure(cls, kind: str, message: str) -> "OperationResult":
        return cls(ok=False, text=message, error_kind=kind)

    def describe(self) -> str:
        return self.text if self.ok else f"{self.error_kind}: {self.text}"


Handler = Callable[[BaseModel], OperationResult]


@dataclass(frozen=True)
class Operation:
    name: str
    description: str
    handler: Handler
    input_model: type = NoInput


class OperationRegistry:
    """Named operations with declared input shapes and a uniform dispatch."""

    def __init__(self):
        self._operations: Dict[str, Operation] = {}

    def register(self, operation: Operation) -> Operation:
        if operation.name in self._operations:
            raise ValueError(f"Operation '{operation.name}' is already registered.")
        self._operations[operation.name] = operation
        logger.debug("Registered operation %s", operation.name)
        return operation

    def get(self, name: str) -> Optional[Operation]:
        return self._operations.get(name)

    def names(self) -> list[str]:
        return list(self._operations)

    def __contains__(self, name: str) -> bool:
        return name in self._operations

    def __iter__(self) -> Iterator[Operation]:
        return iter(list(self._operations.values()))

    def __len__(self) -> int:
        return len(self._operations)

    def dispatch(self, name: str, raw_input: Optional[Mapping[str, Any]] = None) -> OperationResult:
        """Validate `raw_input` against the operation's shape and run it."""
        operation = self._operations.get(name)
        if operation is None:
            logger.warning("Unknown operation requested: %s", name)
            return OperationResult.failure(
                "OperationNotFound", f"Operation '{name}' not found."
            )

        try:
            validated = operation.input_model.model_validate(dict(raw_input or {}))
        except ValidationError as e:
            message = describe_validation_error(e)
            logger.warning("Invalid input for %s: %s", name, message)
            return OperationResult.failure("InvalidInput", message)

        try:
            return operation.handler(validated)
        except TutorError as e:
            logger.error("Operation %s failed with %s: %s", name, e.kind, e)
            return OperationResult.failure(e.kind, str(e))
        except Exception as e:
            logger.exception("Operation %s raised an unexpected error", name)
            return OperationResult.failure("InternalError", f"{type(e).__name__}: {e}")
