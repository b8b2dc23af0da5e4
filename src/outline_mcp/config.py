"""Outline configuration: kind filtering, access-specifier keywords, hooks."""

import os
from dataclasses import dataclass, field
from typing import Callable, Optional, Sequence, Union


DEFAULT_FILTER_KIND = [
    "Class",
    "Constructor",
    "Enum",
    "Function",
    "Interface",
    "Module",
    "Method",
    "Struct",
]

# False/None keeps every kind; a list keeps only those kinds; a dict maps
# language -> either of the above, with "_" as the fallback entry.
FilterKind = Union[None, bool, Sequence[str], dict]

# (item, ctx) -> False to drop the item
PostParseHook = Callable[..., Optional[bool]]


def _split_env_list(value: str) -> list[str]:
    return [part.strip() for part in value.split(",") if part.strip()]


@dataclass
class OutlineConfig:
    """Settings consulted by every outline pass."""
    filter_kind: FilterKind = field(default_factory=lambda: list(DEFAULT_FILTER_KIND))
    access_specifiers: Optional[Sequence[str]] = None  # None: per-language default
    post_parse_symbol: Optional[PostParseHook] = None

    def get_filter_kind_map(self, language: str) -> frozenset[str]:
        """Return the set of kinds kept for a language."""
        # Deferred: the parser package imports this module
        from .parser.symbols import SYMBOL_KINDS

        filter_kind = self.filter_kind
        if isinstance(filter_kind, dict):
            if language in filter_kind:
                filter_kind = filter_kind[language]
            else:
                filter_kind = filter_kind.get("_", DEFAULT_FILTER_KIND)

        if filter_kind is None or filter_kind is False or filter_kind is True:
            return SYMBOL_KINDS
        return frozenset(filter_kind)

    def get_access_specifiers(self, default: Sequence[str]) -> tuple[str, ...]:
        """Keywords to scan for, given the language's own default."""
        if self.access_specifiers is None:
            return tuple(default)
        return tuple(self.access_specifiers)

    @classmethod
    def from_env(cls) -> "OutlineConfig":
        """Build a config from OUTLINE_* environment variables.

        OUTLINE_FILTER_KIND: "all" or a comma-separated list of kinds
        OUTLINE_ACCESS_SPECIFIERS: comma-separated keywords ("" disables)
        """
        config = cls()

        filter_kind = os.environ.get("OUTLINE_FILTER_KIND")
        if filter_kind is not None:
            if filter_kind.strip().lower() in ("all", "false", ""):
                config.filter_kind = False
            else:
                config.filter_kind = _split_env_list(filter_kind)

        access_specifiers = os.environ.get("OUTLINE_ACCESS_SPECIFIERS")
        if access_specifiers is not None:
            config.access_specifiers = _split_env_list(access_specifiers)

        return config
