"""Shared pytest fixtures for the CSS tutor server tests."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from core.config import Settings
from core.knowledge_store import KnowledgeStore
from core.updates import UpdateFetcher
from tools.context import ServerContext
from tools.operations import build_registry


def write_document(path: Path, document) -> None:
    path.write_text(json.dumps(document), encoding="utf-8")


@pytest.fixture
def memory_file(tmp_path: Path) -> Path:
    """A backing file seeded with a small valid profile."""
    path = tmp_path / "memory.json"
    write_document(path, {"user_id": "u1", "known_concepts": {"flexbox": True}})
    return path


@pytest.fixture
def store(memory_file: Path) -> KnowledgeStore:
    return KnowledgeStore(memory_file)


@pytest.fixture
def make_context(memory_file: Path):
    """Build a ServerContext around the temp file, with or without a fetcher."""

    def _make(fetcher=None, path: Path | None = None) -> ServerContext:
        path = path or memory_file
        context = ServerContext(
            settings=Settings(memory_path=path, openrouter_api_key="k" if fetcher else None),
            store=KnowledgeStore(path),
            fetcher=fetcher,
        )
        context.registry = build_registry(context)
        return context

    return _make


@pytest.fixture
def fake_urlopen_response():
    """Build a urlopen() stand-in whose context manager yields `body`."""

    def _make(body) -> MagicMock:
        raw = body if isinstance(body, bytes) else json.dumps(body).encode("utf-8")
        response = MagicMock()
        response.__enter__.return_value.read.return_value = raw
        return response

    return _make


@pytest.fixture
def fetcher() -> UpdateFetcher:
    return UpdateFetcher(api_key="test-key", model="perplexity/sonar-pro", timeout=5)
