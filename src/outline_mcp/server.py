"""MCP server for outline-mcp."""

import asyncio
import json
import logging
import os

from mcp.server import Server
from mcp.types import Tool, TextContent

from .parser import LANGUAGE_REGISTRY
from .tools.get_file_outline import get_file_outline
from .tools.get_source_outline import get_source_outline
from .tools.get_github_file_outline import get_github_file_outline
from .tools.list_languages import list_languages


# Create server
server = Server("outline-mcp")


@server.list_tools()
async def list_tools() -> list[Tool]:
    """List all available tools."""
    return [
        Tool(
            name="get_file_outline",
            description="Get the symbol outline (classes, functions, methods, fields, access sections) of a local source file.",
            inputSchema={
                "type": "object",
                "properties": {
                    "path": {
                        "type": "string",
                        "description": "Path to the file (absolute or relative, supports ~ for home directory)"
                    },
                    "language": {
                        "type": "string",
                        "description": "Optional language override; guessed from the file suffix otherwise",
                        "enum": sorted(LANGUAGE_REGISTRY)
                    }
                },
                "required": ["path"]
            }
        ),
        Tool(
            name="get_source_outline",
            description="Get the symbol outline of source code passed inline.",
            inputSchema={
                "type": "object",
                "properties": {
                    "content": {
                        "type": "string",
                        "description": "Source code to outline"
                    },
                    "language": {
                        "type": "string",
                        "description": "Language of the source",
                        "enum": sorted(LANGUAGE_REGISTRY)
                    }
                },
                "required": ["content", "language"]
            }
        ),
        Tool(
            name="get_github_file_outline",
            description="Fetch a file from a GitHub repository and return its symbol outline.",
            inputSchema={
                "type": "object",
                "properties": {
                    "repo": {
                        "type": "string",
                        "description": "GitHub repository URL or owner/repo string"
                    },
                    "file_path": {
                        "type": "string",
                        "description": "Path to the file within the repository (e.g., 'src/main.cpp')"
                    },
                    "ref": {
                        "type": "string",
                        "description": "Optional branch, tag or commit"
                    }
                },
                "required": ["repo", "file_path"]
            }
        ),
        Tool(
            name="list_languages",
            description="List the languages that can be outlined and their file suffixes.",
            inputSchema={
                "type": "object",
                "properties": {}
            }
        ),
    ]


@server.call_tool()
async def call_tool(name: str, arguments: dict) -> list[TextContent]:
    """Handle tool calls."""
    try:
        if name == "get_file_outline":
            result = get_file_outline(
                path=arguments["path"],
                language=arguments.get("language"),
            )
        elif name == "get_source_outline":
            result = get_source_outline(
                content=arguments["content"],
                language=arguments["language"],
            )
        elif name == "get_github_file_outline":
            result = await get_github_file_outline(
                repo=arguments["repo"],
                file_path=arguments["file_path"],
                ref=arguments.get("ref"),
            )
        elif name == "list_languages":
            result = list_languages()
        else:
            result = {"error": f"Unknown tool: {name}"}

        return [TextContent(type="text", text=json.dumps(result, indent=2))]

    except Exception as e:
        return [TextContent(type="text", text=json.dumps({"error": str(e)}, indent=2))]


async def run_server():
    """Run the MCP server."""
    from mcp.server.stdio import stdio_server

    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options()
        )


def main():
    """Main entry point."""
    # stdout carries the MCP stream, so log to stderr
    logging.basicConfig(
        level=os.environ.get("OUTLINE_LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    asyncio.run(run_server())


if __name__ == "__main__":
    main()
