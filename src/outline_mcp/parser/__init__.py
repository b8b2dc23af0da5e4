"""Parser package for building symbol outlines from tree-sitter queries."""

from .symbols import (
    Symbol,
    Range,
    SYMBOL_KINDS,
    CONTAINER_KINDS,
    ACCESS_SPECIFIER_KIND,
)
from .tokens import PendingToken, find_tokens
from .matches import Capture, normalize_match
from .extensions import LanguageExtension, StackEntry, EXTENSION_REGISTRY, get_extension
from .outline import OutlineBuilder, OutlineResult
from .languages import (
    LanguageSpec,
    LANGUAGE_REGISTRY,
    LANGUAGE_EXTENSIONS,
    is_supported,
    language_for_path,
)
from .extractor import fetch_symbols
from .hierarchy import walk_symbols, flatten_tree, symbol_to_dict

__all__ = [
    "Symbol",
    "Range",
    "SYMBOL_KINDS",
    "CONTAINER_KINDS",
    "ACCESS_SPECIFIER_KIND",
    "PendingToken",
    "find_tokens",
    "Capture",
    "normalize_match",
    "LanguageExtension",
    "StackEntry",
    "EXTENSION_REGISTRY",
    "get_extension",
    "OutlineBuilder",
    "OutlineResult",
    "LanguageSpec",
    "LANGUAGE_REGISTRY",
    "LANGUAGE_EXTENSIONS",
    "is_supported",
    "language_for_path",
    "fetch_symbols",
    "walk_symbols",
    "flatten_tree",
    "symbol_to_dict",
]
