"""Build a symbol outline from tree-sitter query matches."""

import logging
from typing import Optional

from tree_sitter import QueryCursor

from ..config import OutlineConfig
from .extensions import get_extension
from .languages import LANGUAGE_REGISTRY, load_parser, load_query
from .matches import normalize_match, split_settings
from .outline import OutlineBuilder, OutlineResult
from .tokens import find_tokens, pending_tokens

logger = logging.getLogger(__name__)


def fetch_symbols(
    content: str,
    language: str,
    config: Optional[OutlineConfig] = None,
) -> OutlineResult:
    """Parse source code and build its symbol outline.

    Every call parses from scratch; nothing is reused between calls.

    Args:
        content: Raw source code
        language: Language name (must be in LANGUAGE_REGISTRY)
        config: Filtering and hook settings (defaults to OutlineConfig())

    Returns:
        OutlineResult with the root symbols. Unsupported languages give an
        empty result with status "unsupported"; bad query metadata gives
        the symbols built so far with status "partial".
    """
    config = config or OutlineConfig()

    spec = LANGUAGE_REGISTRY.get(language)
    if spec is None:
        return OutlineResult(
            lang=language or "unknown",
            status="unsupported",
            reason=f"No queries defined for '{language}'",
        )

    parser = load_parser(spec)
    if parser is None:
        return OutlineResult(
            lang="unknown",
            status="unsupported",
            reason=f"No treesitter parser for {language}",
        )

    source_bytes = content.encode("utf-8")
    tree = parser.parse(source_bytes)
    query = load_query(language)
    if query is None or tree is None:
        return OutlineResult(
            lang=language,
            syntax_tree=tree,
            status="unsupported",
            reason=f"No queries defined for '{language}'",
        )

    token_lines, tokens = find_tokens(
        content, config.get_access_specifiers(spec.access_specifiers)
    )

    builder = OutlineBuilder(
        lang=language,
        source_bytes=source_bytes,
        extension=get_extension(language),
        include_kind=config.get_filter_kind_map(language),
        tokens=pending_tokens(token_lines, tokens),
        post_parse_symbol=config.post_parse_symbol,
        syntax_tree=tree,
    )

    cursor = QueryCursor(query)
    for pattern_index, captures in cursor.matches(tree.root_node):
        settings, capture_metadata = split_settings(query.pattern_settings(pattern_index))
        match = normalize_match(captures, settings, capture_metadata)
        if not builder.add_match(match):
            break

    result = builder.finish()
    logger.debug(
        "Outlined %s source: %d root symbol(s), status %s",
        language, len(result.symbols), result.status,
    )
    return result
