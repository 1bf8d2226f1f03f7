# =============================================================================
# tools/mcp_server.py  —  FastMCP Server (tools, resource, prompt)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Binds everything the server exposes onto a FastMCP instance:
#     - every operation in the context's OperationRegistry, as a tool
#     - the css_knowledge_memory resource
#     - the css-tutor-guidance prompt
#
# HOW A TOOL CALL FLOWS:
#   1. The agent calls a tool by name via MCP (e.g., "write_to_memory")
#   2. FastMCP routes the call to the adapter bound below
#   3. The adapter hands the arguments to OperationRegistry.dispatch()
#   4. Success → the result text is returned to the agent
#      Failure → a ToolError "<Kind>: <message>" is raised, which FastMCP
#                reports as an error result; the server keeps serving
#
# RUNNING THIS SERVER:
#   a) Standalone:  python -m tools.mcp_server   (or the css-tutor-mcp script)
#   b) Spawned by the tutor agent (agent/tutor_agent.py) via stdio transport
# =============================================================================

import json
import logging
import sys
from typing import Annotated, Callable, Optional

from dotenv import load_dotenv
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from mcp.types import PromptMessage, TextContent
from pydantic import Field, StrictBool, StrictStr

from core.config import Settings
from tools.context import ServerContext, create_context
from tools.operations import WRITE_TO_MEMORY
from tools.prompts import PROMPT_DESCRIPTION, PROMPT_NAME, PROMPT_ROLE, get_guidance_prompt
from tools.registry import NoInput, Operation, OperationResult
from tools.resources import KnowledgeResource

SERVER_NAME = "css-tutor-mcp-server"
SERVER_VERSION = "0.0.1"

# =============================================================================
# Logging Setup
# =============================================================================
# We log to STDERR because the MCP server talks to the agent over STDOUT.
# Anything we printed to stdout would corrupt the JSON-RPC stream.
#
# Colors: CYAN for incoming calls, YELLOW for status, GREEN for responses.
# =============================================================================

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"

logger = logging.getLogger("css_tutor.mcp")


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [MCP] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logger.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, text: str) -> str:
    """Log the tool response in GREEN, then return it."""
    logger.info(f"{_GREEN}  ← {tool_name} response: {json.dumps(text)}{_RESET}")
    return text


def _finish(tool_name: str, result: OperationResult) -> str:
    if result.ok:
        return _log_response(tool_name, result.text)
    _log_status(f"{tool_name} failed: {result.describe()}")
    raise ToolError(result.describe())


# =============================================================================
# Tool adapters
# =============================================================================
# FastMCP builds each tool's input schema from the adapter's signature, so
# every input shape needs an adapter with matching typed parameters.  The
# adapters do no work of their own: validation and execution stay in
# OperationRegistry.dispatch().
# Parameter types are strict so FastMCP cannot coerce "true" or 1 into a
# boolean before the registry sees it.
# =============================================================================

def _no_input_adapter(context: ServerContext, operation: Operation) -> Callable[[], str]:
    name = operation.name

    def tool() -> str:
        _log_request(name)
        return _finish(name, context.registry.dispatch(name, {}))

    return tool


def _write_to_memory_adapter(context: ServerContext, operation: Operation) -> Callable[..., str]:
    name = operation.name

    def tool(
        concept: Annotated[StrictStr, Field(description="The CSS concept name (e.g., 'Flexbox')")],
        known: Annotated[StrictBool, Field(description="Whether the user knows this concept (true/false)")],
    ) -> str:
        _log_request(name, concept=concept, known=known)
        return _finish(name, context.registry.dispatch(name, {"concept": concept, "known": known}))

    return tool


_ADAPTERS = {
    WRITE_TO_MEMORY: _write_to_memory_adapter,
}


def _adapter_for(context: ServerContext, operation: Operation) -> Callable[..., str]:
    if operation.input_model is NoInput:
        return _no_input_adapter(context, operation)
    try:
        factory = _ADAPTERS[operation.name]
    except KeyError:
        raise ValueError(f"No MCP adapter for operation '{operation.name}'") from None
    return factory(context, operation)


# =============================================================================
# Server construction
# =============================================================================

def create_server(context: ServerContext) -> FastMCP:
    """Create a FastMCP server exposing `context`'s tools, resource and prompt."""
    mcp = FastMCP(SERVER_NAME, version=SERVER_VERSION)

    for operation in context.registry:
        mcp.tool(
            _adapter_for(context, operation),
            name=operation.name,
            description=operation.description,
        )
    logger.info("Registered tools: %s", ", ".join(context.registry.names()))

    resource = KnowledgeResource(context.store)

    @mcp.resource(
        resource.uri_base,
        name=resource.name,
        description=resource.description,
        mime_type=resource.mime_type,
    )
    def css_knowledge_memory() -> str:
        _log_request("resource", uri=resource.uri_base)
        return resource.read(resource.uri_base)["text"]

    # Same record for any suffix: there is only one profile.
    @mcp.resource(
        resource.uri_base + "{path*}",
        name=f"{resource.name}_path",
        description=resource.description,
        mime_type=resource.mime_type,
    )
    def css_knowledge_memory_path(path: str) -> str:
        uri = resource.uri_base + path
        _log_request("resource", uri=uri)
        return resource.read(uri)["text"]

    @mcp.prompt(name=PROMPT_NAME, description=PROMPT_DESCRIPTION)
    def css_tutor_guidance() -> list[PromptMessage]:
        return [
            PromptMessage(
                role=PROMPT_ROLE,
                content=TextContent(type="text", text=get_guidance_prompt()),
            )
        ]

    return mcp


def main(settings: Optional[Settings] = None) -> None:
    """Load .env, build the context, and serve over stdio."""
    load_dotenv()
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    context = create_context(settings)
    if not settings.updates_enabled:
        logger.warning(
            "OPENROUTER_API_KEY not found. 'get_latest_updates' tool will not be registered."
        )
    logger.info("Serving knowledge file %s", settings.memory_path)
    create_server(context).run()


# =============================================================================
# Server entry point
# =============================================================================
if __name__ == "__main__":
    main()
