from .extractor import (
    unformat,
    unformat_raw,
    unformat_strict,
    unformat_with_position,
    unformat_with_suffix,
)

__all__ = [
    "unformat",
    "unformat_raw",
    "unformat_strict",
    "unformat_with_position",
    "unformat_with_suffix",
]
