# =============================================================================
# agent/media_agent.py  —  Google ADK Agent wired to the Pixabay MCP server
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Creates an ADK Agent that can search Pixabay.  The agent holds no
#   search logic: it reasons with an LLM and calls the four tools exposed
#   by tools/mcp_server.py.
#
# MCP CONNECTION:
#   ADK starts the MCP server as a subprocess ("uv run python -m
#   tools.mcp_server") from the project root and talks to it over
#   stdin/stdout.  The Pixabay settings are forwarded explicitly because
#   the stdio client only passes a minimal environment to the child.
#
# MODEL:
#   OpenAI GPT-4o via OpenRouter + LiteLlm.  LiteLlm reads
#   OPENROUTER_API_KEY from the environment.
# =============================================================================

import os

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import MCPToolset
from mcp import StdioServerParameters

from agent.prompt import get_media_research_prompt
from pixabay.config import API_KEY_ENV, TIMEOUT_ENV

DEFAULT_MODEL = "openrouter/openai/gpt-4o"

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def server_environment() -> dict[str, str]:
    """The Pixabay variables to hand to the MCP server subprocess."""
    return {name: os.environ[name] for name in (API_KEY_ENV, TIMEOUT_ENV) if os.environ.get(name)}


def create_agent(model: str = DEFAULT_MODEL) -> Agent:
    """Create the media research agent.

    Args:
        model: LiteLlm model string.  Any OpenRouter model works, e.g.
               "openrouter/openai/gpt-4o-mini".

    Returns:
        A configured Google ADK Agent instance.
    """
    mcp_tools = MCPToolset(
        connection_params=StdioServerParameters(
            command="uv",
            args=["run", "python", "-m", "tools.mcp_server"],
            cwd=PROJECT_ROOT,
            env=server_environment(),
        ),
    )

    agent = Agent(
        name="pixabay_media_researcher",
        model=LiteLlm(model=model),
        instruction=get_media_research_prompt(),
        tools=[mcp_tools],
    )

    return agent
