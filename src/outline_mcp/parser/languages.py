"""Language registry with LanguageSpec definitions for all supported languages."""

import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from tree_sitter import Query
from tree_sitter_language_pack import get_language, get_parser

from .tokens import ACCESS_SPECIFIERS

logger = logging.getLogger(__name__)

QUERY_DIR = Path(__file__).parent / "queries"


@dataclass
class LanguageSpec:
    """How to outline one language."""
    # tree-sitter language name (for tree-sitter-language-pack)
    ts_language: str

    # Query file under queries/, without the .scm suffix
    query_name: str

    # Keywords scanned as `keyword:` access-specifier sections
    access_specifiers: tuple[str, ...] = ()


# File extension to language mapping
LANGUAGE_EXTENSIONS = {
    ".py": "python",
    ".pyi": "python",
    ".js": "javascript",
    ".jsx": "javascript",
    ".mjs": "javascript",
    ".ts": "typescript",
    ".go": "go",
    ".rs": "rust",
    ".java": "java",
    ".c": "c",
    ".h": "c",
    ".cc": "cpp",
    ".cpp": "cpp",
    ".cxx": "cpp",
    ".hh": "cpp",
    ".hpp": "cpp",
    ".hxx": "cpp",
}


PYTHON_SPEC = LanguageSpec(ts_language="python", query_name="python")
JAVASCRIPT_SPEC = LanguageSpec(ts_language="javascript", query_name="javascript")
TYPESCRIPT_SPEC = LanguageSpec(ts_language="typescript", query_name="typescript")
GO_SPEC = LanguageSpec(ts_language="go", query_name="go")
RUST_SPEC = LanguageSpec(ts_language="rust", query_name="rust")
JAVA_SPEC = LanguageSpec(ts_language="java", query_name="java")
C_SPEC = LanguageSpec(ts_language="c", query_name="c")
CPP_SPEC = LanguageSpec(
    ts_language="cpp",
    query_name="cpp",
    access_specifiers=ACCESS_SPECIFIERS,
)


# Language registry
LANGUAGE_REGISTRY = {
    "python": PYTHON_SPEC,
    "javascript": JAVASCRIPT_SPEC,
    "typescript": TYPESCRIPT_SPEC,
    "go": GO_SPEC,
    "rust": RUST_SPEC,
    "java": JAVA_SPEC,
    "c": C_SPEC,
    "cpp": CPP_SPEC,
}


def language_for_path(path: str) -> Optional[str]:
    """Guess the language id from a file name."""
    return LANGUAGE_EXTENSIONS.get(Path(path).suffix.lower())


def load_parser(spec: LanguageSpec):
    """Return a tree-sitter parser for the spec, or None if unavailable."""
    try:
        return get_parser(spec.ts_language)
    except (LookupError, ValueError) as e:
        logger.debug("No tree-sitter parser for %s: %s", spec.ts_language, e)
        return None


def read_query_source(spec: LanguageSpec) -> Optional[str]:
    """Read the bundled query text for a language."""
    path = QUERY_DIR / f"{spec.query_name}.scm"
    if not path.is_file():
        return None
    return path.read_text(encoding="utf-8")


@lru_cache(maxsize=None)
def load_query(language: str) -> Optional[Query]:
    """Compile (once) the outline query for a registered language."""
    spec = LANGUAGE_REGISTRY.get(language)
    if spec is None:
        return None
    source = read_query_source(spec)
    if not source:
        return None
    return Query(get_language(spec.ts_language), source)


def is_supported(language: str) -> tuple[bool, Optional[str]]:
    """Check whether a language can be outlined.

    Returns:
        (True, None) or (False, reason)
    """
    spec = LANGUAGE_REGISTRY.get(language)
    if spec is None:
        return False, f"No queries defined for '{language}'"
    if load_parser(spec) is None:
        return False, f"No treesitter parser for {language}"
    if read_query_source(spec) is None:
        return False, f"No queries defined for '{language}'"
    return True, None
