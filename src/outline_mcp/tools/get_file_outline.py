"""Get file outline - symbols in a local source file."""

import os
from pathlib import Path
from typing import Optional

from ..config import OutlineConfig
from ..parser import fetch_symbols, language_for_path


DEFAULT_MAX_FILE_SIZE = 500 * 1024  # 500KB


def max_file_size() -> int:
    """Size limit for outlined files, from OUTLINE_MAX_FILE_SIZE."""
    value = os.environ.get("OUTLINE_MAX_FILE_SIZE")
    if not value:
        return DEFAULT_MAX_FILE_SIZE
    try:
        return int(value)
    except ValueError:
        return DEFAULT_MAX_FILE_SIZE


def get_file_outline(
    path: str,
    language: Optional[str] = None,
    config: Optional[OutlineConfig] = None,
) -> dict:
    """Get the symbol outline of a local file.

    Args:
        path: Path to the file (absolute or relative, supports ~)
        language: Language override; guessed from the suffix when omitted
        config: Outline settings (default: read from the environment)

    Returns:
        Dict with the outline, or an "error" key
    """
    file_path = Path(path).expanduser()

    if not file_path.is_file():
        return {"error": f"File not found: {path}"}

    language = language or language_for_path(file_path.name)
    if not language:
        return {"error": f"Unsupported file type: {file_path.suffix or file_path.name}"}

    try:
        if file_path.stat().st_size > max_file_size():
            return {"error": f"File too large to outline: {path}"}
        content = file_path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        return {"error": f"Could not read {path}: {e}"}

    result = fetch_symbols(content, language, config or OutlineConfig.from_env())

    return {"file": str(file_path), **result.to_dict()}
