# =============================================================================
# core/knowledge_store.py  —  Knowledge Profile Storage & Retrieval
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Owns the single JSON file that holds the user's KnowledgeRecord.  It is
#   the ONLY code in the project that writes that file.
#
# THE VALIDATION BOUNDARY:
#   load() and save() both run the record through the same pydantic schema.
#   A bad file is reported as CorruptState; a bad record handed to save() is
#   reported as InvalidRecord and never reaches the disk.
#
# THE MERGE:
#   update_concept() is a pure function of (record, concept, known).  It does
#   not touch storage, which keeps it testable without a file.  Callers that
#   want the full "load, merge, save" cycle use record_concept(), which holds
#   the store's lock so two concurrent writers cannot lose each other's
#   update.
#
# ATOMIC WRITES:
#   save() writes to a temp file in the same directory and os.replace()s it
#   over the real file.  A reader sees either the old document or the new
#   one, never half of each.
# =============================================================================

import json
import logging
import os
import stat
import tempfile
import threading
from pathlib import Path
from typing import Any, Mapping, Union

from pydantic import ValidationError

from core.errors import CorruptState, InvalidRecord, describe_validation_error as _describe
from core.models import KnowledgeRecord

logger = logging.getLogger(__name__)


class KnowledgeStore:
    """Schema-validated access to the single KnowledgeRecord on disk."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._write_lock = threading.Lock()

    def load(self) -> KnowledgeRecord:
        """Read, parse, and validate the backing file.

        Raises:
            CorruptState: the file is missing, unreadable, not JSON, or does
                not match the KnowledgeRecord schema.
        """
        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as e:
            logger.error("Cannot read knowledge file %s: %s", self.path, e)
            raise CorruptState(f"Failed to read memory file {self.path}: {e}") from e

        try:
            document = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.error("Knowledge file %s is not valid JSON: %s", self.path, e)
            raise CorruptState(f"Failed to parse memory file {self.path}: {e}") from e

        try:
            return KnowledgeRecord.model_validate(document)
        except ValidationError as e:
            logger.error("Knowledge file %s fails schema: %s", self.path, _describe(e))
            raise CorruptState(
                f"Memory file {self.path} does not match the schema: {_describe(e)}"
            ) from e

    def save(self, record: Union[KnowledgeRecord, Mapping[str, Any]]) -> None:
        """Validate `record` and atomically replace the backing file with it.

        The record is re-validated even when it is already a KnowledgeRecord,
        so a model built with model_construct() or mutated after creation
        cannot slip past the schema.

        Raises:
            InvalidRecord: the record does not match the schema.  The file on
                disk is left exactly as it was.
        """
        if isinstance(record, KnowledgeRecord):
            document = record.model_dump(by_alias=True)
        elif isinstance(record, Mapping):
            document = dict(record)
        else:
            logger.error("Refusing to save a %s as a knowledge record", type(record).__name__)
            raise InvalidRecord(
                f"Refusing to save invalid record: expected a mapping, got {type(record).__name__}"
            )

        try:
            validated = KnowledgeRecord.model_validate(document)
        except ValidationError as e:
            logger.error("Refusing to save invalid record: %s", _describe(e))
            raise InvalidRecord(f"Refusing to save invalid record: {_describe(e)}") from e

        payload = json.dumps(validated.to_document(), indent=2)
        mode = self._file_mode()
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(payload)
                handle.flush()
                os.fsync(handle.fileno())
            os.chmod(tmp_name, mode)
            os.replace(tmp_name, self.path)
        except BaseException:
            # Never leave the temp file behind, whatever went wrong.
            try:
                os.unlink(tmp_name)
            except FileNotFoundError:
                pass
            raise
        logger.debug("Saved knowledge record for %s to %s", validated.owner_id, self.path)

    def _file_mode(self) -> int:
        """Permissions for the next save: the current file's, else rw-r--r--."""
        try:
            return stat.S_IMODE(self.path.stat().st_mode)
        except FileNotFoundError:
            return 0o644

    @staticmethod
    def update_concept(current: KnowledgeRecord, concept: str, known: bool) -> KnowledgeRecord:
        """Pure merge: `current` with known_concepts[concept] set to `known`.

        Every other concept is carried over unchanged and `current` itself is
        not modified.

        Raises:
            InvalidRecord: the concept or flag has the wrong type.
        """
        try:
            return current.with_concept(concept, known)
        except ValidationError as e:
            raise InvalidRecord(f"Cannot merge concept {concept!r}: {_describe(e)}") from e

    def record_concept(self, concept: str, known: bool) -> KnowledgeRecord:
        """Load, merge one concept, and save, as a single critical section.

        Returns the record exactly as it was persisted.
        """
        with self._write_lock:
            current = self.load()
            updated = self.update_concept(current, concept, known)
            self.save(updated)
        logger.info("Recorded concept %r=%s for %s", concept, known, updated.owner_id)
        return updated
