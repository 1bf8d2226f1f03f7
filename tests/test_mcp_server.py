"""End-to-end tests of the FastMCP server through an in-memory client."""

import json
from unittest.mock import MagicMock

import pytest
from fastmcp import Client
from fastmcp.exceptions import ToolError

from tools.mcp_server import SERVER_NAME, create_server


@pytest.fixture
def server(make_context):
    return create_server(make_context())


@pytest.fixture
def server_with_updates(make_context):
    fetcher = MagicMock()
    fetcher.fetch.return_value = "Anchor positioning is here."
    return create_server(make_context(fetcher=fetcher))


class TestTools:
    @pytest.mark.asyncio
    async def test_lists_memory_tools_without_credential(self, server):
        async with Client(server) as client:
            tools = await client.list_tools()

        assert {tool.name for tool in tools} == {"read_from_memory", "write_to_memory"}

    @pytest.mark.asyncio
    async def test_lists_update_tool_with_credential(self, server_with_updates):
        async with Client(server_with_updates) as client:
            tools = {tool.name: tool for tool in await client.list_tools()}

        assert set(tools) == {"read_from_memory", "write_to_memory", "get_latest_updates"}
        schema = tools["write_to_memory"].inputSchema
        assert set(schema["required"]) == {"concept", "known"}
        assert schema["properties"]["known"]["type"] == "boolean"

    @pytest.mark.asyncio
    async def test_write_then_read(self, server):
        async with Client(server) as client:
            written = await client.call_tool("write_to_memory", {"concept": "grid", "known": True})
            read = await client.call_tool("read_from_memory", {})

        assert written.content[0].text == "Memory updated successfully for concept: grid"
        assert json.loads(read.content[0].text)["known_concepts"] == {"flexbox": True, "grid": True}

    @pytest.mark.asyncio
    async def test_invalid_input_is_an_error_result(self, server, memory_file):
        before = memory_file.read_bytes()

        async with Client(server) as client:
            with pytest.raises(ToolError, match="InvalidInput"):
                await client.call_tool("write_to_memory", {"concept": "", "known": True})
            # The server is still healthy afterwards.
            read = await client.call_tool("read_from_memory", {})

        assert memory_file.read_bytes() == before
        assert json.loads(read.content[0].text)["user_id"] == "u1"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("known", ["true", 1, "1", 0, None])
    async def test_non_boolean_known_is_rejected(self, server, memory_file, known):
        before = memory_file.read_bytes()

        async with Client(server) as client:
            with pytest.raises(ToolError):
                await client.call_tool("write_to_memory", {"concept": "grid", "known": known})

        assert memory_file.read_bytes() == before

    @pytest.mark.asyncio
    async def test_non_string_concept_is_rejected(self, server, memory_file):
        before = memory_file.read_bytes()

        async with Client(server) as client:
            with pytest.raises(ToolError):
                await client.call_tool("write_to_memory", {"concept": 7, "known": True})

        assert memory_file.read_bytes() == before

    @pytest.mark.asyncio
    async def test_unconfigured_update_tool_is_unknown(self, server):
        async with Client(server) as client:
            with pytest.raises(ToolError):
                await client.call_tool("get_latest_updates", {})

    @pytest.mark.asyncio
    async def test_get_latest_updates(self, server_with_updates):
        async with Client(server_with_updates) as client:
            result = await client.call_tool("get_latest_updates", {})

        assert result.content[0].text == "Anchor positioning is here."


class TestResourceAndPrompt:
    @pytest.mark.asyncio
    async def test_read_resource(self, server):
        async with Client(server) as client:
            contents = await client.read_resource("memory://css_knowledge_memory/")

        assert json.loads(contents[0].text) == {"user_id": "u1", "known_concepts": {"flexbox": True}}

    @pytest.mark.asyncio
    async def test_resource_path_suffix_is_ignored(self, server):
        async with Client(server) as client:
            contents = await client.read_resource("memory://css_knowledge_memory/users/u9")

        assert json.loads(contents[0].text)["user_id"] == "u1"

    @pytest.mark.asyncio
    async def test_guidance_prompt(self, server):
        async with Client(server) as client:
            prompts = await client.list_prompts()
            result = await client.get_prompt("css-tutor-guidance")

        assert [prompt.name for prompt in prompts] == ["css-tutor-guidance"]
        assert result.messages[0].role == "assistant"
        assert "get_latest_updates" in result.messages[0].content.text


def test_server_identity(server):
    assert server.name == SERVER_NAME
