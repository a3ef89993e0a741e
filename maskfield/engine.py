"""MaskEngine - host-facing API for masked text fields."""

import logging
from pathlib import Path
from typing import Any, Optional, Union

from maskfield.core.config import MaskConfig
from maskfield.core.presets import get_preset
from maskfield.core.profile_loader import ProfileLoader
from maskfield.core.results import EditResult, ExtractionResult
from maskfield.masking.affixes import strip_affixes
from maskfield.masking.filters import filter_allowed, simple_unformat
from maskfield.masking.formatter import format_text
from maskfield.unmasking.extractor import (
    unformat,
    unformat_raw,
    unformat_strict,
    unformat_with_position,
    unformat_with_suffix,
)

logger = logging.getLogger(__name__)


class MaskEngine:
    """Formatting operations bound to one field configuration.

    The host text field owns the display text and the caret. On every edit it
    hands both to :meth:`process_edit` and applies the returned text and caret
    in one step. When the field's formatting properties change the host calls
    :meth:`reconfigure` to rewrite the live text under the new configuration.

    Examples:
        # Phone field with a country prefix
        engine = MaskEngine(MaskConfig(
            template="(###) ###-####",
            allowed_chars="0123456789",
            left_affix="+1 ",
        ))
        text, caret = engine.process_edit("+1 5551", 7)
        # text == "+1 (555) 1", caret == 10

        # Built-in presets
        clock = MaskEngine.from_preset("time_hhmm")
    """

    def __init__(self, config: Optional[MaskConfig] = None, **options: Any):
        """Initialize the engine.

        Args:
            config: Field configuration; built from ``options`` when omitted
            **options: MaskConfig fields, used only without ``config``
        """
        if config is None:
            config = MaskConfig(**options)
        elif options:
            config = config.evolve(**options)
        self._config = config

    @classmethod
    def from_preset(cls, name: str, **overrides: Any) -> "MaskEngine":
        """Create an engine from a built-in preset."""
        return cls(get_preset(name), **overrides)

    @classmethod
    def from_profile(cls, path: Union[str, Path], name: str) -> "MaskEngine":
        """Create an engine from a named profile in a YAML/JSON file."""
        return cls(ProfileLoader().load_profile(path, name))

    @property
    def config(self) -> MaskConfig:
        return self._config

    # Core transforms

    def strip_affixes(self, text: str, position: int = 0) -> EditResult:
        return strip_affixes(text, position, self._config)

    def filter_allowed(self, text: str, position: int = 0) -> EditResult:
        return filter_allowed(text, position, self._config)

    def simple_unformat(self, text: str, position: int = 0) -> EditResult:
        return simple_unformat(text, position, self._config)

    def format(self, raw: str, position: int = 0) -> EditResult:
        return format_text(raw, position, self._config)

    def unformat(self, masked: str) -> str:
        return unformat(masked, self._config)

    def unformat_with_suffix(self, masked: str) -> str:
        return unformat_with_suffix(masked, self._config)

    def unformat_raw(self, masked: str) -> str:
        return unformat_raw(masked, self._config)

    def unformat_strict(self, masked: str) -> ExtractionResult:
        return unformat_strict(masked, self._config)

    def unformat_with_position(self, text: str, position: int = 0) -> EditResult:
        return unformat_with_position(text, position, self._config)

    # Host field flows

    def process_edit(self, display_text: str, position: int) -> EditResult:
        """Rebuild the display text after the user edited it.

        Affixes are stripped, the entered characters recovered and the
        template literals re-inserted; the left affix is put back in front
        and the caret follows the same logical character throughout.

        Args:
            display_text: Field text right after the edit
            position: Caret offset into ``display_text``

        Returns:
            EditResult with the new display text and caret offset
        """
        config = self._config
        text, caret = strip_affixes(display_text, position, config)
        if config.has_template and config.accepts_all_chars:
            # no character class to filter by; locate the literals instead
            text, caret = unformat_with_position(text, caret, config)
        else:
            text, caret = filter_allowed(text, caret, config)
        if config.has_template:
            text, caret = format_text(text, caret, config)
        else:
            caret = min(caret, len(text))
            text = text + config.right_affix

        result = EditResult(config.left_affix + text, caret + len(config.left_affix))
        logger.debug(
            f"Edit {display_text!r}@{position} -> {result.text!r}@{result.position}"
        )
        return result

    def entered_text(self, display_text: str) -> str:
        """Editable part of the display text, affixes removed."""
        return strip_affixes(display_text, 0, self._config).text

    def render(self, entered_text: str) -> EditResult:
        """Display text for a value assigned by the program, caret at its end."""
        config = self._config
        text = config.left_affix + entered_text + config.right_affix
        return self.process_edit(text, len(config.left_affix) + len(entered_text))

    def extract_value(self, display_text: str) -> str:
        """The logical value behind the display text.

        Fields that restrict their characters are unformatted by character
        class. Otherwise the template literals are located in the fill
        direction, the same way :meth:`process_edit` reads the text.
        """
        config = self._config
        stripped = strip_affixes(display_text, 0, config).text
        if config.accepts_all_chars:
            return unformat_with_position(stripped, 0, config).text
        return filter_allowed(stripped, 0, config).text

    def placeholder(self, placeholder_text: str = "") -> str:
        """Placeholder wrapped in the affixes."""
        return self._config.left_affix + placeholder_text + self._config.right_affix

    def end_editing(self, display_text: str) -> str:
        """Text to keep once editing finishes: nothing if no value was entered."""
        if not self.entered_text(display_text):
            return ""
        return display_text

    def reconfigure(
        self, display_text: str, config: MaskConfig
    ) -> tuple["MaskEngine", EditResult]:
        """Rewrite the live display text for a new configuration.

        The value is read under the current configuration and rendered again
        under ``config``.

        Returns:
            Tuple of (engine for ``config``, EditResult for the new text)
        """
        value = self.extract_value(display_text)
        engine = MaskEngine(config)
        logger.debug(f"Reconfiguring field with value {value!r}")
        return engine, engine.render(value)

    def __repr__(self) -> str:
        return f"MaskEngine({self._config!r})"
