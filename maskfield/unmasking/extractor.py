"""Reverse extraction: masked display text back to the raw value.

The loose extractor is lossy and heuristic. It locates the template's literal
runs by substring search and treats everything in between as entered
characters, so a raw value that itself contains a literal run can be split at
the wrong place. :func:`unformat_raw` and its legacy variants only read
left-to-right layouts; :func:`unformat_with_position` and
:func:`unformat_strict` follow the configured fill direction.
"""

import logging
from typing import List, Sequence, Tuple

from maskfield.core.config import FillDirection, MaskConfig
from maskfield.core.results import EditResult, ExtractionResult, MatchStatus
from maskfield.masking.formatter import format_text

logger = logging.getLogger(__name__)

Span = Tuple[int, int]


def _strip_right_affix(text: str, right_affix: str) -> str:
    if right_affix:
        index = text.rfind(right_affix)
        if index >= 0:
            return text[:index]
    return text


def _spans(text: str, literals: Sequence[str], from_right: bool = False) -> List[Span]:
    """Offsets of the entered text between successive literal runs.

    Runs are searched in template order, or in reverse from the end of the
    text when ``from_right`` is set. A run that is not found ends the search
    and everything not yet consumed counts as entered text.
    """
    runs = [literal for literal in literals if literal]
    spans = []
    if from_right:
        end = len(text)
        for literal in reversed(runs):
            found = text.rfind(literal, 0, end)
            if found < 0:
                break
            spans.append((found + len(literal), end))
            end = found
        spans.append((0, end))
        spans.reverse()
        return spans

    cursor = 0
    for literal in runs:
        found = text.find(literal, cursor)
        if found < 0:
            break
        spans.append((cursor, found))
        cursor = found + len(literal)
    spans.append((cursor, len(text)))
    return spans


def _extract(text: str, config: MaskConfig, from_right: bool = False) -> str:
    spans = _spans(text, config.parsed.literals, from_right)
    return "".join(text[start:end] for start, end in spans)


def unformat_raw(masked: str, config: MaskConfig) -> str:
    """Best-effort raw value of ``masked``, without any affix.

    Examples:
        >>> phone = MaskConfig(template="(###) ###-####")
        >>> unformat_raw("(555) 123-4567", phone)
        '5551234567'
        >>> unformat_raw("(555) 12", phone)
        '55512'
    """
    if not config.has_template:
        return masked
    return _extract(_strip_right_affix(masked, config.right_affix), config)


def unformat_with_suffix(masked: str, config: MaskConfig) -> str:
    """Legacy extraction: the raw value with the right affix appended again.

    Older call sites expect the suffix back on the value; new code should use
    :func:`unformat_raw`.
    """
    if not config.has_template:
        return masked
    return unformat_raw(masked, config) + config.right_affix


def unformat(masked: str, config: MaskConfig) -> str:
    """Legacy-compatible unformat; same as :func:`unformat_with_suffix`."""
    return unformat_with_suffix(masked, config)


def unformat_with_position(text: str, position: int, config: MaskConfig) -> EditResult:
    """Raw value of affix-free display ``text`` with the caret carried over.

    Literal runs are searched in the configured fill direction. The new
    caret is the number of raw characters that sat before the old one.

    Examples:
        >>> phone = MaskConfig(template="(###) ###-####")
        >>> unformat_with_position("(555) 1", 7, phone)
        EditResult(text='5551', position=4)
        >>> clock = MaskConfig(template="##:##", direction="rtl")
        >>> unformat_with_position("9:305", 5, clock)
        EditResult(text='9305', position=4)
    """
    if not config.has_template:
        return EditResult(text, position)

    from_right = config.direction == FillDirection.RIGHT_TO_LEFT
    spans = _spans(text, config.parsed.literals, from_right)
    raw = "".join(text[start:end] for start, end in spans)
    caret = sum(max(0, min(end, position) - start) for start, end in spans)
    return EditResult(raw, caret)


def unformat_strict(masked: str, config: MaskConfig) -> ExtractionResult:
    """Extract the raw value only when ``masked`` is exactly its rendering.

    Literal runs are located in the configured fill direction and the
    candidate is formatted again the same way, then compared with the input
    (right affix included when configured). Anything that does not re-render
    identically, including characters outside the allowed set, is
    reported as ``NO_MATCH``.
    """
    template = config.parsed
    if template.is_empty:
        return ExtractionResult(MatchStatus.MATCH, raw=masked, text=masked)

    from_right = config.direction == FillDirection.RIGHT_TO_LEFT
    candidate = _extract(_strip_right_affix(masked, config.right_affix), config, from_right)
    allowed = config.allowed_chars
    fits = len(candidate) <= template.slot_count and (
        allowed is None or all(char in allowed for char in candidate)
    )
    if fits:
        rendered, _ = format_text(candidate, len(candidate), config)
        if rendered == masked:
            return ExtractionResult(
                MatchStatus.MATCH, raw=candidate, text=masked, template=template.pattern
            )

    logger.debug(f"Strict extraction found no match for {masked!r} in {template.pattern!r}")
    return ExtractionResult(MatchStatus.NO_MATCH, text=masked, template=template.pattern)
