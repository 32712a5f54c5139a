"""Utility modules for cfn-autonames.

This package contains the string helpers used by the naming converters.
"""

from .string_utils import kebab_case, replace_chars, split_words, strip_suffix

__all__ = [
    "kebab_case",
    "replace_chars",
    "split_words",
    "strip_suffix",
]
