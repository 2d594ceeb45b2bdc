"""Tests for the FastMCP server, exercised in memory through fastmcp.Client."""

import json

import pytest
from fastmcp import Client

from conftest import API_KEY, SAMPLE_IMAGES, RecordingHandler, make_gateway
from pixabay.gateway import MediaGateway
from tools import mcp_server


@pytest.fixture
def handler(monkeypatch):
    recording = RecordingHandler()
    monkeypatch.setattr(mcp_server, "gateway", make_gateway(recording))
    return recording


async def test_lists_the_four_tools_without_credential(monkeypatch):
    monkeypatch.setattr(mcp_server, "gateway", make_gateway(RecordingHandler(), api_key=""))
    async with Client(mcp_server.mcp) as client:
        tools = await client.list_tools()
    assert sorted(t.name for t in tools) == [
        "get_image_by_id", "get_video_by_id", "search_images", "search_videos",
    ]


async def test_tool_schemas_expose_enums_and_bounds():
    async with Client(mcp_server.mcp) as client:
        tools = {t.name: t for t in await client.list_tools()}
    image_schema = json.dumps(tools["search_images"].inputSchema)
    assert "illustration" in image_schema
    assert '"maximum": 200' in image_schema
    assert tools["get_image_by_id"].inputSchema["required"] == ["id"]


async def test_resources_and_prompts_are_empty():
    async with Client(mcp_server.mcp) as client:
        assert await client.list_resources() == []
        assert await client.list_prompts() == []


async def test_search_images_returns_pixabay_json(handler):
    async with Client(mcp_server.mcp) as client:
        result = await client.call_tool_mcp("search_images", {"q": "flower", "per_page": 3})

    assert not result.isError
    assert json.loads(result.content[0].text) == SAMPLE_IMAGES
    assert handler.last_params == {"q": "flower", "per_page": "3", "key": API_KEY}


async def test_get_video_by_id_forwards_the_id(handler):
    async with Client(mcp_server.mcp) as client:
        await client.call_tool_mcp("get_video_by_id", {"id": "125"})
    assert handler.last_params == {"id": "125", "key": API_KEY}


async def test_upstream_error_is_ordinary_text(monkeypatch):
    monkeypatch.setattr(
        mcp_server, "gateway",
        make_gateway(RecordingHandler(status_code=429, text="[ERROR 429] Too many requests")),
    )
    async with Client(mcp_server.mcp) as client:
        result = await client.call_tool_mcp("search_videos", {"q": "rain"})

    assert not result.isError
    text = result.content[0].text
    assert text.startswith("Error: Pixabay API error: 429")
    assert "[ERROR 429] Too many requests" in text


async def test_missing_key_is_reported_at_call_time(monkeypatch):
    recording = RecordingHandler()
    monkeypatch.setattr(mcp_server, "gateway", make_gateway(recording, api_key=""))
    async with Client(mcp_server.mcp) as client:
        result = await client.call_tool_mcp("get_image_by_id", {"id": "195893"})

    assert result.content[0].text == "Error: PIXABAY_API_KEY environment variable is required"
    assert recording.requests == []


async def test_out_of_range_per_page_never_reaches_pixabay(handler):
    async with Client(mcp_server.mcp) as client:
        result = await client.call_tool_mcp("search_images", {"q": "cats", "per_page": 1000})
    assert result.isError
    assert handler.requests == []


async def test_tools_list_matches_gateway_descriptors():
    async with Client(mcp_server.mcp) as client:
        served = {t.name: t for t in await client.list_tools()}

    for descriptor in MediaGateway.list_tools():
        tool = served[descriptor.name]
        assert tool.description == descriptor.description
        assert set(tool.inputSchema["properties"]) == set(descriptor.input_schema["properties"])
        assert sorted(tool.inputSchema.get("required", [])) == sorted(descriptor.input_schema.get("required", []))


@pytest.mark.parametrize("search, lookup", [
    ("search_images", "get_image_by_id"),
    ("search_videos", "get_video_by_id"),
])
async def test_search_with_id_matches_lookup_by_id(handler, search, lookup):
    async with Client(mcp_server.mcp) as client:
        by_search = await client.call_tool_mcp(search, {"id": "195893"})
        by_lookup = await client.call_tool_mcp(lookup, {"id": "195893"})

    assert not by_search.isError
    assert not by_lookup.isError
    first, second = handler.requests
    assert first.url.path == second.url.path
    assert sorted(first.url.params.multi_items()) == sorted(second.url.params.multi_items())
    assert dict(first.url.params) == {"id": "195893", "key": API_KEY}


async def test_empty_enum_values_are_dropped(handler):
    async with Client(mcp_server.mcp) as client:
        result = await client.call_tool_mcp("search_images", {"q": "sea", "image_type": "", "order": ""})

    assert not result.isError
    assert handler.last_params == {"q": "sea", "key": API_KEY}


async def test_empty_video_type_is_dropped(handler):
    async with Client(mcp_server.mcp) as client:
        result = await client.call_tool_mcp("search_videos", {"q": "rain", "video_type": ""})

    assert not result.isError
    assert handler.last_params == {"q": "rain", "key": API_KEY}
