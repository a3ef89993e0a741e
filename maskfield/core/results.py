"""Result records returned by the transforms."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Union

from .exceptions import TemplateMismatchError


@dataclass(frozen=True)
class EditResult:
    """Transformed text together with the translated caret position.

    Unpacks like a pair so call sites can write ``text, caret = ...``.
    """

    text: str
    position: int

    def __iter__(self) -> Iterator[Union[str, int]]:
        yield self.text
        yield self.position


class MatchStatus(Enum):
    """Outcome of strict extraction."""

    MATCH = "match"
    NO_MATCH = "no_match"


@dataclass(frozen=True)
class ExtractionResult:
    """Outcome of strict template matching.

    ``raw`` is only set when the input is exactly the rendering of that raw
    value under the template.
    """

    status: MatchStatus
    raw: Optional[str] = None
    text: str = ""
    template: str = ""

    @property
    def is_match(self) -> bool:
        return self.status == MatchStatus.MATCH

    def unwrap(self) -> str:
        """Return the raw value or raise :class:`TemplateMismatchError`."""
        if self.is_match and self.raw is not None:
            return self.raw
        error = TemplateMismatchError(
            f"Text {self.text!r} does not match template {self.template!r}",
            template=self.template,
            text=self.text,
        )
        error.add_recovery_suggestion("Use the loose unformat or the allowed-character filter")
        raise error
