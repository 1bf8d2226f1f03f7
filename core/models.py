# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# There is exactly one persisted noun: the KnowledgeRecord, a user's map of
# CSS concept name -> "do they know it?".
#
# WHY PYDANTIC (AND NOT A PLAIN DATACLASS)?
#   The record crosses a trust boundary twice: once when it is read from disk
#   (someone may have hand-edited the file) and once when it is written back.
#   A dataclass only documents the shape; a pydantic model ENFORCES it.
#   Strict types mean "true" or 1 are rejected as booleans instead of being
#   silently coerced, and extra="forbid" means no other shape is accepted.
#
# ON-DISK LAYOUT:
#   {"user_id": "user123", "known_concepts": {"flexbox": true}}
#   The Python attribute is owner_id; the alias keeps the file format stable.
# =============================================================================

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr


class KnowledgeRecord(BaseModel):
    """A single user's CSS knowledge profile."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    owner_id: StrictStr = Field(alias="user_id")
    known_concepts: Dict[StrictStr, StrictBool] = Field(default_factory=dict)

    def to_document(self) -> Dict[str, Any]:
        """Return the record in its persisted (aliased) JSON layout."""
        return self.model_dump(by_alias=True)

    def with_concept(self, concept: str, known: bool) -> "KnowledgeRecord":
        """Return a NEW record with one concept flag replaced or inserted.

        The returned record owns a fresh mapping; self is left untouched.
        """
        concepts = dict(self.known_concepts)
        concepts[concept] = known
        return KnowledgeRecord(user_id=self.owner_id, known_concepts=concepts)
