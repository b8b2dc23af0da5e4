"""Get the outline of inline source text."""

from typing import Optional

from ..config import OutlineConfig
from ..parser import LANGUAGE_REGISTRY, fetch_symbols


def get_source_outline(
    content: str,
    language: str,
    config: Optional[OutlineConfig] = None,
) -> dict:
    """Outline source code passed directly.

    Args:
        content: Source code
        language: Language name (e.g. "python", "cpp")
        config: Outline settings (default: read from the environment)
    """
    if language not in LANGUAGE_REGISTRY:
        return {
            "error": f"Unsupported language: {language}",
            "supported": sorted(LANGUAGE_REGISTRY),
        }

    result = fetch_symbols(content, language, config or OutlineConfig.from_env())
    return result.to_dict()
