"""
Tests for the MCP tool handlers.
"""

import json
from importlib.metadata import version

import pytest

from mcp_server.server import call_tool, list_tools


@pytest.mark.asyncio
async def test_list_tools():
    tools = await list_tools()
    assert [t.name for t in tools] == ["analyze_prompt", "search_prompts", "compare_models"]
    assert tools[0].inputSchema["required"] == ["prompt"]


@pytest.mark.asyncio
async def test_analyze_prompt_tool():
    content = await call_tool("analyze_prompt", {"prompt": "hi"})
    data = json.loads(content[0].text)
    assert data["score"] == 0
    assert data["label"] == "0/15"
    assert len(data["tips"]) == 4


@pytest.mark.asyncio
async def test_analyze_empty_prompt_tool():
    content = await call_tool("analyze_prompt", {})
    data = json.loads(content[0].text)
    assert data["tips"] == ["Prompt is empty"]


@pytest.mark.asyncio
async def test_search_prompts_tool():
    content = await call_tool("search_prompts", {"query": "blog"})
    data = json.loads(content[0].text)
    assert [p["id"] for p in data] == [1]


@pytest.mark.asyncio
async def test_compare_models_tool():
    content = await call_tool("compare_models", {"a": "gpt-4.1-mini"})
    data = json.loads(content[0].text)
    assert data["a"]["name"] == "GPT‑4.1 mini"
    assert data["b"]["id"] == "llama-3.1-70b"


@pytest.mark.asyncio
async def test_compare_unknown_model_returns_error_text():
    content = await call_tool("compare_models", {"a": "nope"})
    assert content[0].text == "Error: Unknown model: nope"


@pytest.mark.asyncio
async def test_unknown_tool():
    content = await call_tool("delete_models", {})
    assert content[0].text == "Error: unknown tool delete_models"


def test_mcp_major_version_has_decorator_api():
    assert int(version("mcp").split(".")[0]) < 2
