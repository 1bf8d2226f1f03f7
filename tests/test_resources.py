"""Tests for the css_knowledge_memory resource and the guidance prompt."""

import json

import pytest

from core.errors import CorruptState
from tools.prompts import PROMPT_NAME, get_guidance_prompt
from tools.resources import RESOURCE_URI_BASE, KnowledgeResource


class TestKnowledgeResource:
    def test_read_returns_json_record(self, store):
        contents = KnowledgeResource(store).read(RESOURCE_URI_BASE)

        assert contents["uri"] == "memory://css_knowledge_memory/"
        assert contents["mimeType"] == "application/json"
        assert json.loads(contents["text"]) == {
            "user_id": "u1",
            "known_concepts": {"flexbox": True},
        }

    def test_path_suffix_is_ignored(self, store):
        resource = KnowledgeResource(store)

        base = resource.read(RESOURCE_URI_BASE)
        nested = resource.read(RESOURCE_URI_BASE + "someone/else")

        assert nested["uri"] == RESOURCE_URI_BASE + "someone/else"
        assert nested["text"] == base["text"]

    def test_reflects_latest_write(self, store):
        resource = KnowledgeResource(store)
        store.record_concept("grid", False)

        assert json.loads(resource.read()["text"])["known_concepts"] == {
            "flexbox": True,
            "grid": False,
        }

    def test_corrupt_state_propagates(self, memory_file, store):
        memory_file.write_text("{", encoding="utf-8")

        with pytest.raises(CorruptState):
            KnowledgeResource(store).read()

    def test_advertises_read_and_write(self, store):
        assert dict(KnowledgeResource(store).capabilities) == {"read": True, "write": True}

    def test_capabilities_cannot_be_mutated(self, store):
        with pytest.raises(TypeError):
            KnowledgeResource(store).capabilities["write"] = False

        assert KnowledgeResource.capabilities["write"] is True


def test_guidance_prompt_names_every_tool_in_order():
    text = get_guidance_prompt().lower()

    assert PROMPT_NAME == "css-tutor-guidance"
    positions = [text.index(f"call `{name}`") for name in
                 ("get_latest_updates", "read_from_memory", "write_to_memory")]
    assert positions == sorted(positions)
    assert "_must_ be from the response returned by `get_latest_updates`" in text
