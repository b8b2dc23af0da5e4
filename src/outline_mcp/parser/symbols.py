"""Symbol dataclass, ranges and the symbol-kind vocabulary."""

import weakref
from dataclasses import dataclass, field
from typing import Optional


# LSP SymbolKind names accepted in query `kind` metadata
SYMBOL_KINDS = frozenset({
    "File", "Module", "Namespace", "Package", "Class", "Method", "Property",
    "Field", "Constructor", "Enum", "Interface", "Function", "Variable",
    "Constant", "String", "Number", "Boolean", "Array", "Object", "Key",
    "Null", "EnumMember", "Struct", "Event", "Operator", "TypeParameter",
})

# Kinds that can hold access-specifier sections
CONTAINER_KINDS = frozenset({"Class", "Struct"})

# Marker kind for `public:` style pseudo-symbols (never accepted from queries)
ACCESS_SPECIFIER_KIND = "AccessSpecifier"

ANONYMOUS_NAME = "<Anonymous>"
PARSE_ERROR_NAME = "<parse error>"


@dataclass(frozen=True)
class Range:
    """A span in the source: 1-indexed lines, 0-indexed columns."""
    lnum: int
    col: int
    end_lnum: int
    end_col: int

    @classmethod
    def from_nodes(cls, start_node, end_node) -> "Range":
        """Span from the start of `start_node` to the end of `end_node`.

        If `end_node` finishes before `start_node` begins, the end of
        `start_node` is used instead so the range is never inverted.
        """
        row, col = start_node.start_point[0], start_node.start_point[1]
        end_row, end_col = end_node.end_point[0], end_node.end_point[1]
        if (end_row, end_col) < (row, col):
            end_row, end_col = start_node.end_point[0], start_node.end_point[1]
        return cls(lnum=row + 1, col=col, end_lnum=end_row + 1, end_col=end_col)

    @classmethod
    def at_line(cls, lnum: int) -> "Range":
        """Zero-width range at the start of a line."""
        return cls(lnum=lnum, col=0, end_lnum=lnum, end_col=0)


@dataclass(eq=False)
class Symbol:
    """A node of the outline built from tree-sitter query matches."""
    kind: str                       # LSP kind name, or ACCESS_SPECIFIER_KIND
    name: str                       # Display name
    range: Range                    # Full extent
    selection_range: Range          # Identifying span (usually the name)
    level: int = 0                  # Nesting depth, 0 for roots
    scope: Optional[str] = None     # Namespace/visibility label
    children: Optional[list["Symbol"]] = None  # Created on first child
    _parent_ref: Optional[weakref.ref] = field(default=None, repr=False)

    @property
    def parent(self) -> Optional["Symbol"]:
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @parent.setter
    def parent(self, value: Optional["Symbol"]) -> None:
        self._parent_ref = weakref.ref(value) if value is not None else None

    @property
    def lnum(self) -> int:
        return self.range.lnum

    @property
    def end_lnum(self) -> int:
        return self.range.end_lnum

    def add_child(self, child: "Symbol") -> None:
        """Append a child, creating the child list if needed."""
        if self.children is None:
            self.children = []
        self.children.append(child)
        child.parent = self
