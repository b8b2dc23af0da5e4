"""Line scanner for `keyword:` markers such as C++ access specifiers."""

import re
from dataclasses import dataclass
from typing import Iterable


ACCESS_SPECIFIERS = ("public", "private", "protected")


@dataclass
class PendingToken:
    """A scanned marker waiting to be placed in the outline."""
    line: int       # 1-indexed line number
    keyword: str


def find_tokens(text: str, keywords: Iterable[str]) -> tuple[list[int], list[str]]:
    """Find lines that start with `keyword:` after optional whitespace.

    Args:
        text: Full source text
        keywords: Marker keywords to look for (e.g. "public")

    Returns:
        Two parallel lists, line numbers (1-indexed, ascending) and the
        keyword found on each of those lines
    """
    keywords = [k for k in keywords if k]
    if not keywords:
        return [], []

    pattern = re.compile(
        r"^\s*(" + "|".join(re.escape(k) for k in keywords) + r"):"
    )

    lines = []
    tokens = []
    # Rows are counted on "\n" only, as tree-sitter does
    for lnum, line in enumerate(text.split("\n"), start=1):
        m = pattern.match(line.rstrip("\r"))
        if m:
            lines.append(lnum)
            tokens.append(m.group(1))

    return lines, tokens


def pending_tokens(lines: list[int], tokens: list[str]) -> list[PendingToken]:
    """Zip scanner output into a pending queue."""
    return [PendingToken(line=line, keyword=keyword) for line, keyword in zip(lines, tokens)]
