"""Tests for match normalization."""

from outline_mcp.parser import Capture, normalize_match
from outline_mcp.parser.matches import capture_node, first_node, split_settings


class Node:
    def __init__(self, label):
        self.label = label


def test_directives_and_captures_merge():
    """Test settings and captures land in one record."""
    symbol, name = Node("symbol"), Node("name")
    match = normalize_match(
        {"symbol": [symbol], "name": [name]},
        {"kind": "Class", "priority": "2"},
    )

    assert match["kind"] == "Class"
    assert match["priority"] == "2"
    assert match["symbol"] == Capture(node=symbol)
    assert capture_node(match, "name") is name


def test_capture_wins_over_directive():
    """Test a literal capture overrides a directive of the same name."""
    scope = Node("scope")
    match = normalize_match({"scope": [scope]}, {"scope": "public"})

    assert isinstance(match["scope"], Capture)
    assert match["scope"].node is scope


def test_last_capture_wins():
    """Test the last node bound to a role is kept."""
    generic, specific = Node("generic"), Node("specific")
    match = normalize_match({"name": [generic, specific]}, {"kind": "Function"})

    assert capture_node(match, "name") is specific


def test_single_nodes_and_empty_lists():
    """Test bare nodes are accepted and empty captures are ignored."""
    symbol = Node("symbol")
    match = normalize_match({"symbol": symbol, "name": []})

    assert capture_node(match, "symbol") is symbol
    assert "name" not in match


def test_capture_metadata_is_attached():
    """Test per-capture metadata travels with the node."""
    name = Node("name")
    match = normalize_match({"name": [name]}, capture_metadata={"name": {"text": "alias"}})

    assert match["name"].metadata == {"text": "alias"}


def test_split_settings_routes_dotted_keys_to_captures():
    """Test dotted directive keys become capture metadata."""
    settings, capture_metadata = split_settings(
        {"kind": "Function", "name.text": "init", "scope": "public", ".odd": "x"}
    )

    assert settings == {"kind": "Function", "scope": "public", ".odd": "x"}
    assert capture_metadata == {"name": {"text": "init"}}
    assert split_settings(None) == ({}, {})


def test_first_node_prefers_earlier_keys():
    """Test the legacy @type capture is used only without @symbol."""
    symbol, legacy = Node("symbol"), Node("type")

    assert first_node(normalize_match({"type": [legacy]}), "symbol", "type") is legacy
    assert first_node(
        normalize_match({"symbol": [symbol], "type": [legacy]}), "symbol", "type"
    ) is symbol
    assert first_node(normalize_match({}, {"kind": "Class"}), "symbol", "type") is None
