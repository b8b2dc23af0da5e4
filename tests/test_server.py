"""End-to-end server tests."""

import pytest
import json

from outline_mcp.server import server, list_tools, call_tool


@pytest.mark.asyncio
async def test_server_lists_four_tools():
    """Test that server lists all 4 tools."""
    tools = await list_tools()

    assert len(tools) == 4

    names = {t.name for t in tools}
    expected = {
        "get_file_outline", "get_source_outline",
        "get_github_file_outline", "list_languages",
    }
    assert names == expected


@pytest.mark.asyncio
async def test_source_outline_tool_schema():
    """Test get_source_outline tool has correct schema."""
    tools = await list_tools()

    tool = next(t for t in tools if t.name == "get_source_outline")

    props = tool.inputSchema["properties"]
    assert "content" in props
    assert "language" in props
    assert "cpp" in props["language"]["enum"]
    assert set(tool.inputSchema["required"]) == {"content", "language"}


@pytest.mark.asyncio
async def test_call_source_outline(monkeypatch):
    """Test calling a tool returns JSON text."""
    monkeypatch.setenv("OUTLINE_FILTER_KIND", "all")

    contents = await call_tool(
        "get_source_outline",
        {"content": "struct S {\n    int a;\nprivate:\n};\n", "language": "cpp"},
    )
    result = json.loads(contents[0].text)

    s = result["symbols"][0]
    assert s["kind"] == "Struct"
    assert [c["name"] for c in s["children"]] == ["a", "private"]


@pytest.mark.asyncio
async def test_call_unknown_tool():
    """Test unknown tools and bad arguments become error payloads."""
    contents = await call_tool("index_repo", {})
    assert json.loads(contents[0].text) == {"error": "Unknown tool: index_repo"}

    contents = await call_tool("get_source_outline", {})
    assert "error" in json.loads(contents[0].text)
