"""Removal of the fixed left/right affixes around a field value."""

from maskfield.core.config import MaskConfig
from maskfield.core.results import EditResult


def strip_affixes(text: str, position: int, config: MaskConfig) -> EditResult:
    """Return the text without its affixes and the caret shifted to match.

    The right affix is removed first since it is only ever matched as an exact
    suffix. The left affix may have lost its last character to a backspace,
    so when the full affix is not found a one-character-shorter prefix is
    tried as well. The caret never goes below zero.

    Args:
        text: Current display text
        position: Caret offset into ``text``
        config: Field configuration supplying the affixes

    Returns:
        EditResult with the stripped text and the caret relative to it
    """
    result = text
    right = config.right_affix
    left = config.left_affix

    if right and result.endswith(right):
        result = result[: len(result) - len(right)]

    if left:
        if result.startswith(left):
            result = result[len(left):]
            position -= len(left)
        elif len(left) > 1:
            shortened = left[:-1]
            if result.startswith(shortened):
                result = result[len(shortened):]
                position -= len(shortened)

    if position < 0:
        position = 0

    return EditResult(result, position)
