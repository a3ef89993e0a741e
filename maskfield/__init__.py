"""maskfield: masked text formatting for interactive text inputs.

Turns a raw entered value into its decorated display form using a template of
literal characters and placeholder slots, recovers the raw value from the
display form, and keeps the caret on the same logical character across every
rewrite.
"""

__version__ = "0.1.0"

from .core import (
    DEFAULT_CONFIG,
    PRESETS,
    ConfigurationError,
    EditResult,
    ExtractionResult,
    FillDirection,
    MaskConfig,
    MaskFieldError,
    MatchStatus,
    ProfileError,
    ProfileLoader,
    Segment,
    SegmentKind,
    Template,
    TemplateMismatchError,
    ValidationError,
    get_preset,
    load_profiles,
)
from .engine import MaskEngine
from .masking import (
    filter_allowed,
    format_left_to_right,
    format_right_to_left,
    format_text,
    simple_unformat,
    strip_affixes,
)
from .unmasking import (
    unformat,
    unformat_raw,
    unformat_strict,
    unformat_with_position,
    unformat_with_suffix,
)

__all__ = [
    "__version__",
    # Configuration
    "MaskConfig",
    "FillDirection",
    "DEFAULT_CONFIG",
    "Template",
    "Segment",
    "SegmentKind",
    "PRESETS",
    "get_preset",
    "ProfileLoader",
    "load_profiles",
    # Results
    "EditResult",
    "ExtractionResult",
    "MatchStatus",
    # Errors
    "MaskFieldError",
    "ValidationError",
    "ConfigurationError",
    "ProfileError",
    "TemplateMismatchError",
    # Transforms
    "strip_affixes",
    "filter_allowed",
    "simple_unformat",
    "format_text",
    "format_left_to_right",
    "format_right_to_left",
    "unformat",
    "unformat_raw",
    "unformat_with_suffix",
    "unformat_strict",
    "unformat_with_position",
    # Engine
    "MaskEngine",
]
