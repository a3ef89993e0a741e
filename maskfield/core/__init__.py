"""Core types for maskfield: configuration, templates, results and errors."""

from .config import DEFAULT_CONFIG, FillDirection, MaskConfig, normalize_allowed_chars
from .exceptions import (
    ConfigurationError,
    MaskFieldError,
    ProfileError,
    TemplateMismatchError,
    ValidationError,
)
from .presets import PRESETS, get_preset
from .profile_loader import ProfileLoader, load_profiles
from .results import EditResult, ExtractionResult, MatchStatus
from .template import DEFAULT_REPLACEMENT_CHAR, Segment, SegmentKind, Template

__all__ = [
    "DEFAULT_CONFIG",
    "DEFAULT_REPLACEMENT_CHAR",
    "FillDirection",
    "MaskConfig",
    "normalize_allowed_chars",
    "Template",
    "Segment",
    "SegmentKind",
    "EditResult",
    "ExtractionResult",
    "MatchStatus",
    "PRESETS",
    "get_preset",
    "ProfileLoader",
    "load_profiles",
    "MaskFieldError",
    "ValidationError",
    "ConfigurationError",
    "ProfileError",
    "TemplateMismatchError",
]
