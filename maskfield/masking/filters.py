"""Allowed-character filtering."""

from maskfield.core.config import MaskConfig
from maskfield.core.results import EditResult


def filter_allowed(text: str, position: int, config: MaskConfig) -> EditResult:
    """Drop every character outside ``config.allowed_chars``.

    Identity when no template is configured or every character is allowed.
    Each dropped character that sat before the caret moves the caret one
    step left. ``kept`` counts the characters kept so far, which is exactly
    where a dropped character lands relative to the already shifted caret.

    Examples:
        >>> digits = MaskConfig(template="#####", allowed_chars="0123456789")
        >>> filter_allowed("5a5b5", 5, digits)
        EditResult(text='555', position=3)
    """
    if not config.has_template or config.accepts_all_chars:
        return EditResult(text, position)

    allowed = config.allowed_chars
    kept_chars = []
    kept = 0
    for char in text:
        if char in allowed:
            kept_chars.append(char)
            kept += 1
        elif position > kept:
            position -= 1

    return EditResult("".join(kept_chars), position)


def simple_unformat(text: str, position: int, config: MaskConfig) -> EditResult:
    """Unformat by character class alone: the allowed-character filter.

    Use this rather than template matching for right-to-left masks or whenever
    the display text may not follow the template exactly.
    """
    return filter_allowed(text, position, config)
