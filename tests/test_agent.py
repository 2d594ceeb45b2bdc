"""Tests for the example ADK agent wiring (no LLM calls are made)."""

import pytest

from agent.prompt import get_media_research_prompt


def test_prompt_mentions_every_tool():
    prompt = get_media_research_prompt()
    for name in ("search_images", "search_videos", "get_image_by_id", "get_video_by_id"):
        assert name in prompt


def test_prompt_explains_error_results():
    assert '"Error:"' in get_media_research_prompt()


def test_server_environment_forwards_only_pixabay_settings(monkeypatch):
    pytest.importorskip("google.adk")
    from agent.media_agent import server_environment

    monkeypatch.setenv("PIXABAY_API_KEY", "abc")
    monkeypatch.delenv("PIXABAY_TIMEOUT_S", raising=False)
    monkeypatch.setenv("OPENROUTER_API_KEY", "llm-secret")
    assert server_environment() == {"PIXABAY_API_KEY": "abc"}


def test_create_agent_attaches_the_mcp_toolset():
    pytest.importorskip("google.adk")
    from google.adk.tools.mcp_tool import MCPToolset

    from agent.media_agent import create_agent

    agent = create_agent()
    assert agent.name == "pixabay_media_researcher"
    assert any(isinstance(tool, MCPToolset) for tool in agent.tools)
