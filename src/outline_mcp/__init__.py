"""Symbol outlines from tree-sitter queries, served over MCP."""

__version__ = "0.1.0"
