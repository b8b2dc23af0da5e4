"""Assemble query matches into a nested symbol outline.

One OutlineBuilder owns all state for a single pass: the parent-resolution
stack, the open-class stack and the queue of pending access-specifier
tokens. Matches are fed in document order with add_match(); finish()
flushes leftover tokens and returns the result.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Container, Optional

from .extensions import LanguageExtension, StackEntry, SymbolStack
from .hierarchy import symbol_to_dict
from .matches import Capture, capture_node, first_node
from .symbols import (
    ACCESS_SPECIFIER_KIND,
    ANONYMOUS_NAME,
    CONTAINER_KINDS,
    PARSE_ERROR_NAME,
    SYMBOL_KINDS,
    Range,
    Symbol,
)
from .tokens import PendingToken

logger = logging.getLogger(__name__)

BACKEND_NAME = "treesitter"


@dataclass
class OutlineResult:
    """Root symbols of one pass plus parse metadata."""
    symbols: list[Symbol] = field(default_factory=list)
    lang: str = "unknown"
    backend_name: str = BACKEND_NAME
    syntax_tree: Any = None
    status: str = "ok"                  # "ok" | "partial" | "unsupported"
    diagnostic: Optional[str] = None    # Set when status is "partial"
    reason: Optional[str] = None        # Set when status is "unsupported"

    @property
    def ok(self) -> bool:
        return self.status == "ok"

    @property
    def partial(self) -> bool:
        return self.status == "partial"

    def to_dict(self) -> dict:
        """Serialize for tool output (the syntax tree is left out)."""
        result = {
            "language": self.lang,
            "backend": self.backend_name,
            "status": self.status,
            "symbols": [symbol_to_dict(s) for s in self.symbols],
        }
        if self.diagnostic:
            result["diagnostic"] = self.diagnostic
        if self.reason:
            result["reason"] = self.reason
        return result


class OutlineBuilder:
    """Single-pass builder turning normalized matches into a symbol tree."""

    def __init__(
        self,
        lang: str,
        source_bytes: bytes,
        extension: LanguageExtension,
        include_kind: Container[str],
        tokens: Optional[list[PendingToken]] = None,
        post_parse_symbol: Optional[Callable] = None,
        syntax_tree: Any = None,
    ):
        self.lang = lang
        self.source_bytes = source_bytes
        self.extension = extension
        self.include_kind = include_kind
        self.post_parse_symbol = post_parse_symbol
        self.syntax_tree = syntax_tree

        self.items: list[Symbol] = []
        self.stack = SymbolStack()
        self.classes: list[Symbol] = []
        self.pending: list[PendingToken] = list(tokens or [])
        self.last_node = None
        self.diagnostic: Optional[str] = None

    # -- text helpers -------------------------------------------------------

    def node_text(self, capture: Capture) -> Optional[str]:
        """Text of a captured node, honouring a `text` metadata override."""
        if "text" in capture.metadata:
            return capture.metadata["text"]
        node = capture.node
        try:
            return self.source_bytes[node.start_byte:node.end_byte].decode("utf-8")
        except UnicodeDecodeError:
            return None

    # -- per-match pipeline -------------------------------------------------

    def add_match(self, match: dict) -> bool:
        """Process one normalized match.

        Returns:
            False if the pass must stop (bad `kind` metadata), True otherwise
        """
        symbol_node = first_node(match, "symbol", "type")
        if symbol_node is None:
            return True

        parent_item, parent_node, level = self.extension.get_parent(
            self.stack, match, symbol_node
        )
        # Overlapping patterns can match the same node twice
        if parent_node is not None and parent_node == symbol_node:
            logger.debug("Skipping duplicate match for %s node", self.lang)
            return True

        kind = match.get("kind")
        if not kind:
            self._fail(f"Missing 'kind' metadata in query file for language {self.lang}")
            return False
        if not isinstance(kind, str) or kind not in SYMBOL_KINDS:
            self._fail(
                f"Invalid 'kind' metadata '{kind}' in query file for language {self.lang}"
            )
            return False

        item = self.build_item(match, symbol_node, kind, parent_item, level)
        if not self.accept(item, match):
            return True

        self.place_tokens(item, symbol_node)
        self.insert(symbol_node, item)
        self.last_node = symbol_node
        return True

    def build_item(
        self, match: dict, symbol_node, kind: str, parent_item: Optional[Symbol], level: int
    ) -> Symbol:
        """Build a Symbol from a match and its resolved parent."""
        # Location captures are optional and default to @symbol
        start_node = first_node(match, "start")
        if start_node is None:
            start_node = symbol_node
        end_node = first_node(match, "end")
        if end_node is None:
            end_node = start_node
        item_range = Range.from_nodes(start_node, end_node)

        name_capture = match.get("name")
        selection_node = capture_node(match, "selection")
        selection_range = None
        if selection_node is not None:
            selection_range = Range.from_nodes(selection_node, selection_node)

        if isinstance(name_capture, Capture):
            name = self.node_text(name_capture)
            if name is None:
                name = PARSE_ERROR_NAME
            if selection_range is None:
                selection_range = Range.from_nodes(name_capture.node, name_capture.node)
        else:
            name = ANONYMOUS_NAME

        scope = match.get("scope")
        if isinstance(scope, Capture):
            scope = self.node_text(scope)

        item = Symbol(
            kind=kind,
            name=name,
            range=item_range,
            selection_range=selection_range or item_range,
            level=level,
            scope=scope,
        )
        item.parent = parent_item
        return item

    def accept(self, item: Symbol, match: dict) -> bool:
        """Run the veto hooks and the kind filter."""
        if self.extension.postprocess(item, match) is False:
            return False
        if item.kind not in self.include_kind:
            return False
        if self.post_parse_symbol is not None:
            ctx = {
                "backend_name": BACKEND_NAME,
                "lang": self.lang,
                "syntax_tree": self.syntax_tree,
                "match": match,
            }
            if self.post_parse_symbol(item, ctx) is False:
                return False
        return True

    # -- access specifiers --------------------------------------------------

    def place_tokens(self, item: Symbol, symbol_node) -> None:
        """Attach pending tokens that sit in an open class before `item`."""
        added = []
        for idx, token in enumerate(self.pending):
            # Drop classes that closed before this token
            while len(self.classes) > 1 and token.line > self.classes[-1].end_lnum:
                self.classes.pop()
            # Remaining tokens belong to a later item
            if not self.classes or token.line >= item.lnum:
                break
            if token.line < self.classes[-1].end_lnum:
                self.add_access_specifier(symbol_node, self.classes[-1], token)
                added.append(idx)

        if item.kind in CONTAINER_KINDS:
            self.classes.append(item)

        for idx in reversed(added):
            del self.pending[idx]

    def add_access_specifier(self, symbol_node, container: Symbol, token: PendingToken) -> Symbol:
        """Insert a pseudo-symbol for `token` as a child of `container`."""
        token_range = Range.at_line(token.line)
        marker = Symbol(
            kind=ACCESS_SPECIFIER_KIND,
            name=token.keyword,
            range=token_range,
            selection_range=token_range,
            level=container.level + 1,
        )
        marker.parent = container
        self.insert(symbol_node, marker)
        return marker

    def flush_tokens(self) -> None:
        """Place leftover tokens under the last open class."""
        if not self.pending:
            return
        if not self.classes:
            logger.debug(
                "Dropping %d access specifier(s) outside any class in %s",
                len(self.pending), self.lang,
            )
            self.pending.clear()
            return
        container = self.classes[-1]
        for token in self.pending:
            self.add_access_specifier(self.last_node, container, token)
        self.pending.clear()

    # -- tree assembly ------------------------------------------------------

    def insert(self, symbol_node, item: Symbol) -> None:
        """Attach `item` under its parent (or at the root) and record it."""
        parent = item.parent
        if parent is not None:
            parent.add_child(item)
        else:
            self.items.append(item)
        self.stack.append(StackEntry(node=symbol_node, item=item))

    def _fail(self, message: str) -> None:
        logger.error(message)
        self.diagnostic = message

    def finish(self) -> OutlineResult:
        """Flush tokens, run the whole-tree hook and return the result."""
        self.flush_tokens()
        self.extension.postprocess_symbols(self.items)
        return OutlineResult(
            symbols=self.items,
            lang=self.lang,
            syntax_tree=self.syntax_tree,
            status="partial" if self.diagnostic else "ok",
            diagnostic=self.diagnostic,
        )
