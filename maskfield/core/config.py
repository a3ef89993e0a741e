"""Mask configuration record shared by every transform."""

import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, FrozenSet, Iterable, Optional, Union

from .exceptions import ConfigurationError, create_validation_error
from .template import DEFAULT_REPLACEMENT_CHAR, Template

logger = logging.getLogger(__name__)

AllowedChars = Optional[FrozenSet[str]]


class FillDirection(Enum):
    """Order in which raw characters fill template slots."""

    LEFT_TO_RIGHT = "left_to_right"
    RIGHT_TO_LEFT = "right_to_left"

    @classmethod
    def coerce(cls, value: Union["FillDirection", str]) -> "FillDirection":
        """Accept an enum member or its value, case-insensitively ("ltr"/"rtl" too)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            cleaned = value.strip().lower().replace("-", "_")
            aliases = {"ltr": cls.LEFT_TO_RIGHT, "rtl": cls.RIGHT_TO_LEFT}
            if cleaned in aliases:
                return aliases[cleaned]
            try:
                return cls(cleaned)
            except ValueError:
                pass
        valid = [d.value for d in cls]
        raise ConfigurationError(
            f"Invalid fill direction '{value}'. Valid directions: {valid}",
            field_name="direction",
            actual_value=value,
        )


def normalize_allowed_chars(value: Union[None, str, Iterable[str]]) -> AllowedChars:
    """Turn a user-facing allowed-character value into a frozen set or ``None``.

    ``None``, ``"all"`` and the empty string all mean "every character is
    accepted". Any other string is read as the set of its characters.
    """
    if value is None:
        return None
    if isinstance(value, str):
        if value == "" or value == "all":
            return None
        return frozenset(value)
    chars = frozenset(value)
    for char in chars:
        if not isinstance(char, str) or len(char) != 1:
            raise create_validation_error(
                "allowed_chars must contain single characters",
                field_name="allowed_chars",
                expected="an iterable of single characters",
                actual=char,
            )
    return chars or None


@dataclass(frozen=True)
class MaskConfig:
    """
    Formatting configuration owned by the host field.

    The record is immutable: a host that changes any property builds a new
    config (see :meth:`evolve`) and explicitly re-runs the transforms.

    Attributes:
        template: Template string with ``replacement_char`` marking slots; empty disables formatting
        replacement_char: Placeholder character inside ``template``
        allowed_chars: Characters a user may enter, ``None`` for all characters
        direction: Slot fill order
        left_affix: Fixed text shown before the value
        right_affix: Fixed text shown after the value

    Examples:
        >>> phone = MaskConfig(template="(###) ###-####", allowed_chars="0123456789")
        >>> phone.parsed.slot_count
        10

        >>> clock = MaskConfig(template="##:##", direction="rtl")
        >>> clock.direction
        <FillDirection.RIGHT_TO_LEFT: 'right_to_left'>
    """

    template: str = ""
    replacement_char: str = DEFAULT_REPLACEMENT_CHAR
    allowed_chars: Any = None
    direction: Any = FillDirection.LEFT_TO_RIGHT
    left_affix: str = ""
    right_affix: str = ""
    parsed: Template = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate and normalize fields after initialization."""
        for name in ("template", "left_affix", "right_affix"):
            value = getattr(self, name)
            if value is None:
                object.__setattr__(self, name, "")
            elif not isinstance(value, str):
                raise create_validation_error(
                    f"{name} must be a string", field_name=name, expected=str, actual=value
                )

        object.__setattr__(self, "direction", FillDirection.coerce(self.direction))
        object.__setattr__(self, "allowed_chars", normalize_allowed_chars(self.allowed_chars))
        object.__setattr__(self, "parsed", Template.parse(self.template, self.replacement_char))

        logger.debug(
            f"MaskConfig initialized: template={self.template!r}, "
            f"slots={self.parsed.slot_count}, direction={self.direction.value}"
        )

    @property
    def has_template(self) -> bool:
        return not self.parsed.is_empty

    @property
    def accepts_all_chars(self) -> bool:
        return self.allowed_chars is None

    def evolve(self, **changes: Any) -> "MaskConfig":
        """Return a copy with ``changes`` applied."""
        return replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary for serialization."""
        return {
            "template": self.template,
            "replacement_char": self.replacement_char,
            "allowed_chars": (
                None if self.allowed_chars is None else "".join(sorted(self.allowed_chars))
            ),
            "direction": self.direction.value,
            "left_affix": self.left_affix,
            "right_affix": self.right_affix,
        }


DEFAULT_CONFIG = MaskConfig()
