# =============================================================================
# main.py  —  Interactive CSS Tutor Session
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py
#
# WHAT HAPPENS:
#   1. Creates the ADK tutor agent (agent/tutor_agent.py), which launches the
#      MCP server (tools/mcp_server.py) as a subprocess
#   2. Opens an in-memory session
#   3. Sends each line you type to the agent and prints its final reply
#
# To run only the server (for another MCP client), use:
#   uv run python -m tools.mcp_server
# =============================================================================

import asyncio

from dotenv import load_dotenv

# Load .env BEFORE creating the agent: LiteLlm reads OPENROUTER_API_KEY from
# the environment when it initializes, and the server subprocess inherits it.
load_dotenv()

from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai import types

from agent.tutor_agent import create_agent

APP_NAME = "css_tutor"
USER_ID = "demo_user"


async def run_tutor():
    """Run the CSS tutor agent interactively until the user quits."""
    print("=" * 70)
    print("  CSS TUTOR")
    print("  Powered by Google ADK + FastMCP")
    print("=" * 70)
    print("\nInitializing agent...")
    agent = create_agent()

    session_service = InMemorySessionService()
    runner = Runner(agent=agent, app_name=APP_NAME, session_service=session_service)
    session = await session_service.create_session(app_name=APP_NAME, user_id=USER_ID)

    print("Agent ready. Try: \"What's new in CSS for me?\"  (type 'quit' to exit)")
    print("-" * 70)

    while True:
        try:
            user_input = input("\nYou: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\n\nGoodbye!")
            break

        if user_input.lower() in ("quit", "exit", "q"):
            print("\nGoodbye!")
            break
        if not user_input:
            continue

        user_message = types.Content(role="user", parts=[types.Part(text=user_input)])
        final_response = ""

        async for event in runner.run_async(
            user_id=USER_ID,
            session_id=session.id,
            new_message=user_message,
        ):
            if event.content and event.content.parts:
                for part in event.content.parts:
                    if getattr(part, "text", None):
                        final_response = part.text
                    if getattr(part, "function_call", None):
                        print(f"  [tool] {part.function_call.name}")

        print("-" * 70)
        if final_response:
            print(f"\nTutor:\n\n{final_response}")
        else:
            print("\nNo response generated. The agent may have encountered an error.")


if __name__ == "__main__":
    asyncio.run(run_tutor())
