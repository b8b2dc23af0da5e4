"""Walk and serialize symbol outlines."""

from typing import Iterator

from .symbols import Range, Symbol


def walk_symbols(symbols: list[Symbol]) -> Iterator[Symbol]:
    """Yield every symbol depth-first, in document order."""
    for symbol in symbols:
        yield symbol
        if symbol.children:
            yield from walk_symbols(symbol.children)


def flatten_tree(symbols: list[Symbol], depth: int = 0) -> list[tuple[Symbol, int]]:
    """Flatten symbol tree with depth information.

    Returns list of (symbol, depth) tuples for indentation.
    """
    result = []
    for symbol in symbols:
        result.append((symbol, depth))
        if symbol.children:
            result.extend(flatten_tree(symbol.children, depth + 1))
    return result


def _range_to_dict(r: Range) -> dict:
    return {"line": r.lnum, "col": r.col, "end_line": r.end_lnum, "end_col": r.end_col}


def symbol_to_dict(symbol: Symbol) -> dict:
    """Convert a Symbol and its children to output dicts."""
    result = {
        "kind": symbol.kind,
        "name": symbol.name,
        "level": symbol.level,
        **_range_to_dict(symbol.range),
        "selection": _range_to_dict(symbol.selection_range),
    }

    if symbol.scope is not None:
        result["scope"] = symbol.scope

    if symbol.children:
        result["children"] = [symbol_to_dict(c) for c in symbol.children]

    return result
