"""Tests for MaskConfig and FillDirection."""

import pytest

from maskfield.core.config import (
    DEFAULT_CONFIG,
    FillDirection,
    MaskConfig,
    normalize_allowed_chars,
)
from maskfield.core.exceptions import ConfigurationError, ValidationError


class TestFillDirection:
    """Test the FillDirection enum."""

    def test_enum_values(self) -> None:
        assert FillDirection.LEFT_TO_RIGHT.value == "left_to_right"
        assert FillDirection.RIGHT_TO_LEFT.value == "right_to_left"

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("ltr", FillDirection.LEFT_TO_RIGHT),
            ("RTL", FillDirection.RIGHT_TO_LEFT),
            ("right-to-left", FillDirection.RIGHT_TO_LEFT),
            ("left_to_right", FillDirection.LEFT_TO_RIGHT),
            (FillDirection.RIGHT_TO_LEFT, FillDirection.RIGHT_TO_LEFT),
        ],
    )
    def test_coerce(self, value, expected) -> None:
        assert FillDirection.coerce(value) == expected

    def test_coerce_invalid(self) -> None:
        with pytest.raises(ConfigurationError, match="Invalid fill direction"):
            FillDirection.coerce("diagonal")


class TestMaskConfig:
    """Test the MaskConfig dataclass."""

    def test_defaults(self) -> None:
        """Defaults disable formatting and accept every character."""
        config = MaskConfig()
        assert config.template == ""
        assert config.replacement_char == "#"
        assert config.allowed_chars is None
        assert config.direction == FillDirection.LEFT_TO_RIGHT
        assert config.left_affix == ""
        assert config.right_affix == ""
        assert not config.has_template
        assert config.accepts_all_chars
        assert DEFAULT_CONFIG == config

    def test_parsed_template(self) -> None:
        config = MaskConfig(template="**/**", replacement_char="*")
        assert config.parsed.slot_count == 4
        assert config.parsed.literals == ("", "", "/", "", "")

    def test_allowed_chars_from_string(self) -> None:
        config = MaskConfig(template="###", allowed_chars="0123456789")
        assert config.allowed_chars == frozenset("0123456789")
        assert not config.accepts_all_chars

    def test_direction_from_string(self) -> None:
        assert MaskConfig(direction="rtl").direction == FillDirection.RIGHT_TO_LEFT

    def test_none_affixes_become_empty(self) -> None:
        config = MaskConfig(left_affix=None, right_affix=None, template=None)  # type: ignore
        assert config.left_affix == ""
        assert config.right_affix == ""
        assert config.template == ""

    def test_invalid_affix_type(self) -> None:
        with pytest.raises(ConfigurationError, match="left_affix must be a string"):
            MaskConfig(left_affix=5)  # type: ignore

    def test_invalid_replacement_char(self) -> None:
        with pytest.raises(ValidationError):
            MaskConfig(template="##", replacement_char="##")

    def test_frozen_immutability(self) -> None:
        config = MaskConfig(template="##")
        with pytest.raises(Exception):  # FrozenInstanceError
            config.template = "###"  # type: ignore

    def test_evolve(self) -> None:
        """evolve returns a new config with the template re-parsed."""
        config = MaskConfig(template="##", allowed_chars="01")
        changed = config.evolve(template="###", right_affix="!")
        assert changed.parsed.slot_count == 3
        assert changed.right_affix == "!"
        assert changed.allowed_chars == frozenset("01")
        assert config.template == "##"

    def test_to_dict(self) -> None:
        config = MaskConfig(template="##:##", allowed_chars="10", direction="rtl")
        assert config.to_dict() == {
            "template": "##:##",
            "replacement_char": "#",
            "allowed_chars": "01",
            "direction": "right_to_left",
            "left_affix": "",
            "right_affix": "",
        }

    def test_equality_ignores_parsed_field(self) -> None:
        assert MaskConfig(template="##") == MaskConfig(template="##")


class TestNormalizeAllowedChars:
    """Test allowed-character normalization."""

    @pytest.mark.parametrize("value", [None, "", "all", set(), []])
    def test_all_characters(self, value) -> None:
        assert normalize_allowed_chars(value) is None

    def test_iterable(self) -> None:
        assert normalize_allowed_chars(["a", "b"]) == frozenset("ab")

    def test_multi_character_entries_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="single characters"):
            normalize_allowed_chars(["ab"])
