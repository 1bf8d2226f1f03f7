# =============================================================================
# agent/tutor_agent.py  —  Google ADK Agent Configuration
# =============================================================================
#
# Google ADK is the agent framework (tool calling, sessions); the reasoning
# model is reached through LiteLlm and OpenRouter, so one OPENROUTER_API_KEY
# serves both the agent and the server's get_latest_updates tool.
#
#   ADK Agent ──▶ LiteLlm ──▶ OpenRouter ──▶ model
#       │
#       └── MCPToolset (stdio) ──▶ python -m tools.mcp_server
#                                     ├─ read_from_memory
#                                     ├─ write_to_memory
#                                     └─ get_latest_updates
# =============================================================================

import os

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import MCPToolset
from mcp import StdioServerParameters

from agent.prompt import get_tutor_prompt

DEFAULT_AGENT_MODEL = "openrouter/openai/gpt-4o"


def server_parameters() -> StdioServerParameters:
    """How ADK should launch the tutor MCP server as a subprocess.

    "uv run" makes the subprocess use the project's virtualenv, so fastmcp
    and the core/ package are importable without manual activation.
    """
    project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    return StdioServerParameters(
        command="uv",
        args=["run", "--directory", project_root, "python", "-m", "tools.mcp_server"],
    )


def create_agent(model: str = "") -> Agent:
    """Create the CSS tutor agent connected to the tutor MCP server."""
    model = model or os.environ.get("CSS_TUTOR_AGENT_MODEL") or DEFAULT_AGENT_MODEL

    return Agent(
        name="css_tutor",
        model=LiteLlm(model=model),
        instruction=get_tutor_prompt(),
        tools=[MCPToolset(connection_params=server_parameters())],
    )
