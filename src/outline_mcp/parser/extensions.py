"""Per-language hooks used while building an outline.

Each language may resolve structural parents differently and may touch up
symbols once they are built. The outline builder only talks to the
LanguageExtension interface; concrete classes are looked up by language id.
"""

from dataclasses import dataclass
from typing import Any, Iterator, Optional

from .matches import first_node
from .symbols import Symbol


@dataclass
class StackEntry:
    """A structural node and the outline item emitted for it."""
    node: Any
    item: Symbol


def node_key(node) -> tuple:
    """Identity of a syntax node within one tree."""
    return (node.start_byte, node.end_byte, node.type)


class SymbolStack:
    """Append-only record of emitted nodes, indexed by node identity."""

    def __init__(self):
        self.entries: list[StackEntry] = []
        self._by_node: dict[tuple, StackEntry] = {}

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[StackEntry]:
        return iter(self.entries)

    def append(self, entry: StackEntry) -> None:
        self.entries.append(entry)
        self._by_node[node_key(entry.node)] = entry

    def lookup(self, node) -> Optional[StackEntry]:
        """Latest entry emitted for exactly this node, or None."""
        entry = self._by_node.get(node_key(node))
        if entry is not None and entry.node == node:
            return entry
        return None

    def nearest_ancestor(self, node) -> Optional[StackEntry]:
        """Entry for `node` itself or its closest emitted ancestor."""
        current = node
        while current is not None:
            entry = self.lookup(current)
            if entry is not None:
                return entry
            current = current.parent
        return None


class LanguageExtension:
    """Default behaviour: nest a match under the nearest emitted ancestor."""

    def get_parent(
        self, stack: SymbolStack, match: dict, symbol_node
    ) -> tuple[Optional[Symbol], Any, int]:
        """Resolve the structural parent of a match.

        Only the ancestor chain of `symbol_node` is walked, so the cost does
        not grow with the number of symbols already emitted.

        Returns:
            (parent item, parent node, level) or (None, None, 0) at the root.
            The parent node is the match's own node when the same node was
            already emitted, which the caller treats as a duplicate.
        """
        entry = stack.nearest_ancestor(symbol_node)
        if entry is None:
            return None, None, 0
        return entry.item, entry.node, entry.item.level + 1

    def postprocess(self, item: Symbol, match: dict) -> Optional[bool]:
        """Adjust an item in place. Return False to drop it."""
        return None

    def postprocess_symbols(self, items: list[Symbol]) -> None:
        """Adjust the finished root list in place."""
        return None


class MethodExtension(LanguageExtension):
    """Functions nested inside a container become methods."""

    container_kinds = frozenset({"Class", "Struct", "Interface"})

    def postprocess(self, item: Symbol, match: dict) -> Optional[bool]:
        parent = item.parent
        if item.kind == "Function" and parent is not None and parent.kind in self.container_kinds:
            item.kind = "Method"
        return None


def is_module_level(node) -> bool:
    """True if `node` sits directly in a Python module, statement wrappers aside."""
    if node is None:
        return False
    parent = node.parent
    while parent is not None and parent.type == "expression_statement":
        parent = parent.parent
    return parent is not None and parent.type == "module"


class PythonExtension(MethodExtension):
    container_kinds = frozenset({"Class"})

    def postprocess(self, item: Symbol, match: dict) -> Optional[bool]:
        if item.kind == "Variable" and not is_module_level(first_node(match, "symbol", "type")):
            return False
        super().postprocess(item, match)
        # _name and __mangled are private by convention, __dunder__ is not
        name = item.name
        if item.scope is None and name.startswith("_") and not (
            name.startswith("__") and name.endswith("__")
        ):
            item.scope = "private"
        return None


class CppExtension(MethodExtension):
    """Splits out-of-class definitions like `Foo::bar` into scope and name."""

    def postprocess(self, item: Symbol, match: dict) -> Optional[bool]:
        super().postprocess(item, match)
        if item.kind in ("Function", "Method") and "::" in item.name:
            scope, _, name = item.name.rpartition("::")
            item.name = name
            if scope and item.scope is None:
                item.scope = scope
        return None


DEFAULT_EXTENSION = LanguageExtension()

EXTENSION_REGISTRY: dict[str, LanguageExtension] = {
    "python": PythonExtension(),
    "rust": MethodExtension(),
    "c": MethodExtension(),
    "cpp": CppExtension(),
}


def get_extension(language: str) -> LanguageExtension:
    """Return the extension registered for a language, or the default."""
    return EXTENSION_REGISTRY.get(language, DEFAULT_EXTENSION)
