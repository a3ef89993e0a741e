"""Shared fixtures for maskfield tests."""

from collections.abc import Generator
from pathlib import Path

import pytest

from maskfield import FillDirection, MaskConfig, MaskEngine

DIGITS = "0123456789"


@pytest.fixture
def phone_config() -> MaskConfig:
    """US phone template, any character accepted."""
    return MaskConfig(template="(###) ###-####")


@pytest.fixture
def digit_phone_config() -> MaskConfig:
    """US phone template restricted to digits."""
    return MaskConfig(template="(###) ###-####", allowed_chars=DIGITS)


@pytest.fixture
def prefixed_phone_config() -> MaskConfig:
    """Digit phone template behind a country-code prefix."""
    return MaskConfig(template="(###) ###-####", allowed_chars=DIGITS, left_affix="+1 ")


@pytest.fixture
def clock_config() -> MaskConfig:
    """Right-to-left HH:MM template."""
    return MaskConfig(
        template="##:##",
        allowed_chars=DIGITS,
        direction=FillDirection.RIGHT_TO_LEFT,
    )


@pytest.fixture
def money_config() -> MaskConfig:
    """Template with a trailing literal and a unit suffix."""
    return MaskConfig(template="$ ###.##", allowed_chars=DIGITS, right_affix=" USD")


@pytest.fixture
def phone_engine(prefixed_phone_config: MaskConfig) -> MaskEngine:
    """Engine for the prefixed phone field."""
    return MaskEngine(prefixed_phone_config)


@pytest.fixture
def profiles_file(tmp_path: Path) -> Path:
    """A profiles YAML file with a custom profile and a preset-based one."""
    path = tmp_path / "fields.yaml"
    path.write_text(
        """
version: "1.0"
profiles:
  us_phone:
    template: "(###) ###-####"
    allowed_chars: "0123456789"
    left_affix: "+1 "
  clock:
    preset: time_hhmm
  card_rtl:
    preset: credit_card
    direction: rtl
    right_affix: " *"
""",
        encoding="utf-8",
    )
    return path


@pytest.fixture(autouse=True)
def isolate_logging() -> Generator[None, None, None]:
    """Remove handlers the CLI installs on the package logger."""
    import logging

    package_logger = logging.getLogger("maskfield")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    yield
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)
