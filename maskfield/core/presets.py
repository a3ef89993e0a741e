"""Predefined mask configurations for common input fields."""

from typing import Dict

from .config import FillDirection, MaskConfig
from .exceptions import ConfigurationError

DIGITS = "0123456789"

US_PHONE = MaskConfig(template="(###) ###-####", allowed_chars=DIGITS)

CREDIT_CARD = MaskConfig(template="#### #### #### ####", allowed_chars=DIGITS)

DATE_DMY = MaskConfig(template="##.##.####", allowed_chars=DIGITS)

DATE_ISO = MaskConfig(template="####-##-##", allowed_chars=DIGITS)

# Digits enter from the right, like a microwave clock
TIME_HHMM = MaskConfig(
    template="##:##",
    allowed_chars=DIGITS,
    direction=FillDirection.RIGHT_TO_LEFT,
)

IBAN_DE = MaskConfig(
    template="DE## #### #### #### #### ##",
    allowed_chars=DIGITS,
)

POSTAL_CODE_US = MaskConfig(template="#####-####", allowed_chars=DIGITS)

PRESETS: Dict[str, MaskConfig] = {
    "us_phone": US_PHONE,
    "credit_card": CREDIT_CARD,
    "date_dmy": DATE_DMY,
    "date_iso": DATE_ISO,
    "time_hhmm": TIME_HHMM,
    "iban_de": IBAN_DE,
    "postal_code_us": POSTAL_CODE_US,
}


def get_preset(name: str) -> MaskConfig:
    """Look up a built-in configuration by name."""
    key = name.strip().lower()
    if key not in PRESETS:
        error = ConfigurationError(
            f"Unknown preset '{name}'",
            config_section="preset",
            actual_value=name,
        )
        error.add_recovery_suggestion(f"Use one of: {', '.join(sorted(PRESETS))}")
        raise error
    return PRESETS[key]
