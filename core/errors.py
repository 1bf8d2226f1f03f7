# =============================================================================
# core/errors.py  —  Error Taxonomy
# =============================================================================
#
# Every failure the server can report maps to exactly one class below.  The
# registry turns them into tagged failure results, so the `kind` string is
# part of what the calling agent sees ("InvalidInput: concept: ...").
# =============================================================================


class TutorError(Exception):
    """Base class for every failure reported back to the calling agent."""

    kind = "TutorError"


class CorruptState(TutorError):
    """The backing file is unreadable, unparsable, or fails the schema."""

    kind = "CorruptState"


class InvalidRecord(TutorError):
    """A record handed to save() fails the schema."""

    kind = "InvalidRecord"


class InvalidInput(TutorError):
    """An operation was invoked with arguments violating its input shape."""

    kind = "InvalidInput"


class UpstreamError(TutorError):
    """The summarization API failed or returned no usable content."""

    kind = "UpstreamError"


class NotConfigured(TutorError):
    """A credential-dependent component was built without its credential."""

    kind = "NotConfigured"


def describe_validation_error(error) -> str:
    """Flatten a pydantic ValidationError into one line: 'concept: ...; known: ...'."""
    parts = []
    for detail in error.errors():
        location = ".".join(str(item) for item in detail["loc"]) or "input"
        parts.append(f"{location}: {detail['msg']}")
    return "; ".join(parts)
