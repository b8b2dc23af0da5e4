"""Normalize raw tree-sitter query matches into one record per match.

Custom capture groups understood by the outline builder:

- symbol: the node that uniquely identifies the symbol (`type` is accepted
  as a legacy alias)
- name (optional): its text is used as the display name
- selection (optional): the identifying span, defaults to @name
- start (optional): where the symbol starts (default @symbol)
- end (optional): where the symbol ends (default @start)
- scope (optional): its text becomes the symbol's scope label

Pattern-level `#set!` directives supply `kind` and any custom keys; a dotted
key such as "name.text" attaches metadata to a single capture instead.
"""

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class Capture:
    """A captured node plus any metadata attached to the capture."""
    node: Any
    metadata: dict = field(default_factory=dict)


def normalize_match(
    captures: dict,
    settings: Optional[dict] = None,
    capture_metadata: Optional[dict] = None,
) -> dict[str, Any]:
    """Merge one match's captures and directives into a single record.

    Directives are applied first and never win over a capture. Captures
    overwrite on key collision, and when a capture holds several nodes the
    last one wins, so a query can bind the same role at more than one
    specificity.

    Args:
        captures: Capture name -> node, or list of nodes
        settings: Pattern-level directives (e.g. {"kind": "Class"})
        capture_metadata: Capture name -> metadata dict

    Returns:
        Dict keyed by logical role; captured roles hold Capture objects,
        directive roles hold plain values
    """
    match: dict[str, Any] = {}
    for key, value in (settings or {}).items():
        match.setdefault(key, value)

    capture_metadata = capture_metadata or {}
    for name, nodes in captures.items():
        if isinstance(nodes, (list, tuple)):
            if not nodes:
                continue
            node = nodes[-1]
        else:
            node = nodes
        match[name] = Capture(node=node, metadata=dict(capture_metadata.get(name) or {}))

    return match


def split_settings(settings: Optional[dict]) -> tuple[dict, dict]:
    """Separate pattern directives from capture directives.

    A dotted key targets one capture: `(#set! "name.text" "init")` gives the
    @name capture the metadata {"text": "init"}.

    Returns:
        (pattern settings, capture name -> metadata dict)
    """
    pattern: dict = {}
    per_capture: dict = {}
    for key, value in (settings or {}).items():
        capture, dot, attr = key.partition(".")
        if dot and capture and attr:
            per_capture.setdefault(capture, {})[attr] = value
        else:
            pattern[key] = value
    return pattern, per_capture


def capture_node(match: dict, key: str):
    """Return the node captured under `key`, or None."""
    value = match.get(key)
    if isinstance(value, Capture):
        return value.node
    return None


def first_node(match: dict, *keys: str):
    """Return the node of the first key that was captured, or None."""
    for key in keys:
        node = capture_node(match, key)
        if node is not None:
            return node
    return None
