"""Forward path: affix stripping, character filtering and formatting."""

from .affixes import strip_affixes
from .filters import filter_allowed, simple_unformat
from .formatter import format_left_to_right, format_right_to_left, format_text

__all__ = [
    "strip_affixes",
    "filter_allowed",
    "simple_unformat",
    "format_text",
    "format_left_to_right",
    "format_right_to_left",
]
