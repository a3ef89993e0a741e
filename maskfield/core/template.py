"""Template parsing into literal runs and placeholder slots."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple

from .exceptions import create_validation_error

DEFAULT_REPLACEMENT_CHAR = "#"


class SegmentKind(Enum):
    """Kind of a template segment."""

    LITERAL = "literal"
    SLOT = "slot"


@dataclass(frozen=True)
class Segment:
    """One piece of a parsed template.

    A literal segment carries the fixed characters it shows; a slot segment
    carries the replacement character and accepts one user character.
    """

    kind: SegmentKind
    text: str

    @property
    def is_slot(self) -> bool:
        return self.kind == SegmentKind.SLOT


@dataclass(frozen=True)
class Template:
    """
    A format template split on its replacement character.

    ``literals`` always holds ``slot_count + 1`` runs for a non-empty template:
    ``literals[i]`` is the fixed text immediately before slot ``i`` and the
    last entry is the text after the final slot. Runs may be empty between
    adjacent slots.

    Examples:
        >>> phone = Template.parse("(###) ###-####")
        >>> phone.slot_count
        10
        >>> phone.literals[:4]
        ('(', '', '', ') ')
    """

    pattern: str
    replacement_char: str = DEFAULT_REPLACEMENT_CHAR
    literals: Tuple[str, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.replacement_char, str) or len(self.replacement_char) != 1:
            raise create_validation_error(
                "replacement_char must be a single character string",
                field_name="replacement_char",
                expected="a single character",
                actual=self.replacement_char,
            )
        literals: Tuple[str, ...] = ()
        if self.pattern:
            literals = tuple(self.pattern.split(self.replacement_char))
        object.__setattr__(self, "literals", literals)

    @classmethod
    def parse(cls, pattern: str, replacement_char: str = DEFAULT_REPLACEMENT_CHAR) -> "Template":
        """Parse ``pattern`` into literal runs around ``replacement_char`` slots."""
        return cls(pattern=pattern or "", replacement_char=replacement_char)

    @property
    def is_empty(self) -> bool:
        return not self.pattern

    @property
    def slot_count(self) -> int:
        """Number of raw characters the template can hold."""
        if not self.literals:
            return 0
        return len(self.literals) - 1

    @property
    def length(self) -> int:
        """Length of a completely filled rendering, without affixes."""
        return len(self.pattern)

    @property
    def segments(self) -> Tuple[Segment, ...]:
        """Ordered non-empty literal runs and slots."""
        parts = []
        for index, literal in enumerate(self.literals):
            if literal:
                parts.append(Segment(SegmentKind.LITERAL, literal))
            if index < self.slot_count:
                parts.append(Segment(SegmentKind.SLOT, self.replacement_char))
        return tuple(parts)

    def literal_before(self, slot: int) -> str:
        """Literal run preceding ``slot``; empty when out of range."""
        if 0 <= slot < len(self.literals):
            return self.literals[slot]
        return ""
