"""List languages that can be outlined."""

from ..parser import LANGUAGE_EXTENSIONS, LANGUAGE_REGISTRY, is_supported


def list_languages() -> dict:
    """List registered languages with their file suffixes and availability.

    Returns:
        Dict with count and list of languages
    """
    languages = []
    for name, spec in LANGUAGE_REGISTRY.items():
        supported, reason = is_supported(name)
        entry = {
            "language": name,
            "extensions": sorted(ext for ext, lang in LANGUAGE_EXTENSIONS.items() if lang == name),
            "supported": supported,
        }
        if spec.access_specifiers:
            entry["access_specifiers"] = list(spec.access_specifiers)
        if reason:
            entry["reason"] = reason
        languages.append(entry)

    return {
        "count": len(languages),
        "languages": languages
    }
