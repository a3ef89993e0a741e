"""Tests for profile file loading."""

import json
from pathlib import Path

import pytest

from maskfield.core.config import FillDirection
from maskfield.core.exceptions import ConfigurationError, ProfileError
from maskfield.core.profile_loader import ProfileConfig, ProfileLoader, load_profiles


class TestProfileConfig:
    """Test the pydantic profile model."""

    def test_plain_profile(self) -> None:
        config = ProfileConfig(template="##/##", allowed_chars="0123456789").to_mask_config()
        assert config.template == "##/##"
        assert config.allowed_chars == frozenset("0123456789")

    def test_preset_with_overrides(self) -> None:
        config = ProfileConfig(preset="time_hhmm", right_affix=" h").to_mask_config()
        assert config.template == "##:##"
        assert config.direction == FillDirection.RIGHT_TO_LEFT
        assert config.right_affix == " h"

    def test_unknown_preset(self) -> None:
        with pytest.raises(ValueError, match="Unknown preset"):
            ProfileConfig(preset="nope")

    def test_invalid_direction(self) -> None:
        with pytest.raises(ValueError, match="Invalid fill direction"):
            ProfileConfig(direction="upward")

    def test_replacement_char_length(self) -> None:
        with pytest.raises(ValueError):
            ProfileConfig(replacement_char="##")

    def test_allowed_all(self) -> None:
        config = ProfileConfig(template="###", allowed_chars="all").to_mask_config()
        assert config.accepts_all_chars


class TestProfileLoader:
    """Test loading whole files."""

    def test_load_yaml(self, profiles_file: Path) -> None:
        configs = ProfileLoader().load_profiles(profiles_file)
        assert set(configs) == {"us_phone", "clock", "card_rtl"}
        assert configs["us_phone"].left_affix == "+1 "
        assert configs["clock"].direction == FillDirection.RIGHT_TO_LEFT
        assert configs["card_rtl"].template == "#### #### #### ####"
        assert configs["card_rtl"].direction == FillDirection.RIGHT_TO_LEFT
        assert configs["card_rtl"].right_affix == " *"

    def test_load_json(self, tmp_path: Path) -> None:
        path = tmp_path / "fields.json"
        path.write_text(json.dumps({"profiles": {"zip": {"preset": "postal_code_us"}}}))
        configs = load_profiles(path)
        assert configs["zip"].template == "#####-####"

    def test_load_single_profile(self, profiles_file: Path) -> None:
        config = ProfileLoader().load_profile(profiles_file, "clock")
        assert config.template == "##:##"

    def test_missing_profile_lists_available(self, profiles_file: Path) -> None:
        with pytest.raises(ProfileError) as excinfo:
            ProfileLoader().load_profile(profiles_file, "missing")
        assert excinfo.value.context["profile_name"] == "missing"
        assert "clock" in excinfo.value.recovery_suggestions[0]

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ProfileError, match="not found") as excinfo:
            load_profiles(tmp_path / "absent.yaml")
        assert excinfo.value.component == "profiles"

    def test_unsupported_format(self, tmp_path: Path) -> None:
        path = tmp_path / "fields.toml"
        path.write_text("profiles = {}")
        with pytest.raises(ProfileError, match="Unsupported"):
            load_profiles(path)

    def test_malformed_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.yaml"
        path.write_text("profiles: [unclosed")
        with pytest.raises(ProfileError, match="Could not parse"):
            load_profiles(path)

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ProfileError, match="mapping"):
            load_profiles(path)

    def test_schema_violation(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("profiles:\n  clock:\n    direction: sideways\n")
        with pytest.raises(ProfileError, match="validation failed"):
            load_profiles(path)

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yml"
        path.write_text("")
        assert load_profiles(path) == {}

    def test_profile_error_is_configuration_error(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError):
            load_profiles(tmp_path / "absent.yaml")
