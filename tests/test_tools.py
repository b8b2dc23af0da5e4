"""Tests for tools module."""

import httpx
import pytest

from outline_mcp.config import OutlineConfig
from outline_mcp.tools.get_file_outline import get_file_outline
from outline_mcp.tools.get_github_file_outline import get_github_file_outline, parse_github_url
from outline_mcp.tools.get_source_outline import get_source_outline
from outline_mcp.tools.list_languages import list_languages


CPP_SOURCE = "class Foo {\npublic:\n    void bar();\n};\n"


def test_parse_github_url_full():
    """Test parsing full GitHub URL."""
    assert parse_github_url("https://github.com/owner/repo") == ("owner", "repo")


def test_parse_github_url_with_git():
    """Test parsing URL with .git suffix."""
    assert parse_github_url("https://github.com/owner/repo.git") == ("owner", "repo")


def test_parse_github_url_short():
    """Test parsing owner/repo shorthand."""
    assert parse_github_url("owner/repo") == ("owner", "repo")


def test_get_file_outline(tmp_path):
    """Test outlining a local file."""
    path = tmp_path / "widget.hpp"
    path.write_text(CPP_SOURCE)

    result = get_file_outline(str(path), config=OutlineConfig())

    assert result["language"] == "cpp"
    assert result["status"] == "ok"
    foo = result["symbols"][0]
    assert foo["name"] == "Foo"
    assert [c["name"] for c in foo["children"]] == ["public", "bar"]


def test_get_file_outline_errors(tmp_path):
    """Test missing and unsupported files."""
    assert "error" in get_file_outline(str(tmp_path / "missing.py"))

    notes = tmp_path / "notes.txt"
    notes.write_text("hello")
    assert "Unsupported file type" in get_file_outline(str(notes))["error"]


def test_get_file_outline_size_limit(tmp_path, monkeypatch):
    """Test the configured size limit."""
    monkeypatch.setenv("OUTLINE_MAX_FILE_SIZE", "10")
    path = tmp_path / "big.py"
    path.write_text("def f():\n    return 1\n")

    assert "too large" in get_file_outline(str(path))["error"]


def test_get_source_outline():
    """Test outlining inline source."""
    result = get_source_outline("def f():\n    pass\n", "python", config=OutlineConfig())

    assert result["symbols"][0]["name"] == "f"
    assert result["symbols"][0]["kind"] == "Function"

    unsupported = get_source_outline("x", "cobol")
    assert "error" in unsupported
    assert "python" in unsupported["supported"]


def test_list_languages():
    """Test the language listing."""
    result = list_languages()

    names = {entry["language"] for entry in result["languages"]}
    assert {"python", "cpp", "c", "go", "rust", "java", "javascript", "typescript"} <= names

    cpp = next(entry for entry in result["languages"] if entry["language"] == "cpp")
    assert ".cpp" in cpp["extensions"]
    assert cpp["access_specifiers"] == ["public", "private", "protected"]


@pytest.mark.asyncio
async def test_get_github_file_outline():
    """Test fetching and outlining a GitHub file."""
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, text=CPP_SOURCE)

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        result = await get_github_file_outline(
            "owner/repo", "include/foo.hpp", ref="main", github_token="tok",
            config=OutlineConfig(), client=client,
        )

    assert result["repo"] == "owner/repo"
    assert result["symbols"][0]["name"] == "Foo"

    request = requests[0]
    assert request.url.path == "/repos/owner/repo/contents/include/foo.hpp"
    assert request.url.params["ref"] == "main"
    assert request.headers["Authorization"] == "token tok"


@pytest.mark.asyncio
async def test_get_github_file_outline_not_found():
    """Test a 404 becomes an error dict."""
    transport = httpx.MockTransport(lambda request: httpx.Response(404))

    async with httpx.AsyncClient(transport=transport) as client:
        result = await get_github_file_outline("owner/repo", "src/main.py", client=client)

    assert result["error"] == "File not found: owner/repo/src/main.py"


@pytest.mark.asyncio
async def test_get_github_file_outline_unsupported_type():
    """Test unsupported suffixes are rejected before fetching."""
    result = await get_github_file_outline("owner/repo", "README.md")
    assert "Unsupported file type" in result["error"]
