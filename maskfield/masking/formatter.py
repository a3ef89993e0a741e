"""Forward formatting: raw value to masked display text.

The two fill directions grew independently and trim overflow from opposite
ends, so they stay two separate functions that only share the parsed
template.
"""

import logging

from maskfield.core.config import FillDirection, MaskConfig
from maskfield.core.results import EditResult

logger = logging.getLogger(__name__)


def _clamp(position: int, upper: int) -> int:
    return max(0, min(position, upper))


def format_left_to_right(raw: str, position: int, config: MaskConfig) -> EditResult:
    """Fill slots from the first one onward.

    The literal run in front of each raw character is emitted before it and
    pushes the caret right when the caret was past that character. Trailing
    literals after the last entered character are not shown. Raw text that
    overflows the template is cut off at the template length.

    Examples:
        >>> phone = MaskConfig(template="(###) ###-####")
        >>> format_left_to_right("5551234567", 10, phone)
        EditResult(text='(555) 123-4567', position=14)
        >>> format_left_to_right("555", 3, phone)
        EditResult(text='(555', position=4)
    """
    template = config.parsed
    if template.is_empty:
        return EditResult(raw, position)

    start = position
    parts = []
    for index, char in enumerate(raw):
        literal = template.literal_before(index)
        parts.append(literal)
        if start > index:
            position += len(literal)
        parts.append(char)

    body = "".join(parts)
    if len(body) > template.length:
        logger.debug(f"Dropping {len(body) - template.length} overflow characters at the end")
        body = body[: template.length]

    return EditResult(body + config.right_affix, _clamp(position, len(body)))


def format_right_to_left(raw: str, position: int, config: MaskConfig) -> EditResult:
    """Fill slots from the last one backward.

    Characters are placed starting at the final slot; the literal run that
    follows each filled slot is placed between it and the text already built.
    One extra boundary step after the last character adds the literal in
    front of the leftmost filled slot. Overflow is trimmed from the front and
    the caret moves left by the trimmed amount.

    Examples:
        >>> clock = MaskConfig(template="##:##", direction="rtl")
        >>> format_right_to_left("930", 3, clock)
        EditResult(text='9:30', position=4)
    """
    template = config.parsed
    if template.is_empty:
        return EditResult(raw, position)

    literals = template.literals
    slots = template.slot_count
    count = len(raw)
    start = position

    # collected right to left
    parts = []
    for step in range(count + 1):
        literal_index = slots - step
        if literal_index >= 0:
            literal = literals[literal_index]
            parts.append(literal)
            if start > count - step:
                position += len(literal)
        if step < count:
            parts.append(raw[count - 1 - step])

    body = "".join(reversed(parts))
    overflow = len(body) - template.length
    if overflow > 0:
        logger.debug(f"Dropping {overflow} overflow characters at the front")
        body = body[overflow:]
        position -= overflow

    return EditResult(body + config.right_affix, _clamp(position, len(body)))


def format_text(raw: str, position: int, config: MaskConfig) -> EditResult:
    """Format ``raw`` with the configured template in the configured direction."""
    if config.direction == FillDirection.RIGHT_TO_LEFT:
        return format_right_to_left(raw, position, config)
    return format_left_to_right(raw, position, config)
