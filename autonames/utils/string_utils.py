"""String manipulation utilities for cfn-autonames.

This module provides the case conversion and character substitution helpers
used to turn CloudFormation logical ids into resource names.
"""

import re
from typing import List

# Lower case letter or digit followed by an upper case letter: "dataStore"
_LOWER_UPPER = re.compile(r"([a-z0-9])([A-Z])")
# Acronym followed by a capitalised word: "HTTPApi" -> "HTTP Api"
_ACRONYM_WORD = re.compile(r"([A-Z])([A-Z][a-z])")
# Anything that is not a letter or digit separates words
_SEPARATORS = re.compile(r"[^A-Za-z0-9]+")


def split_words(text: str) -> List[str]:
    """Split an identifier into its words.

    Word boundaries are case transitions and runs of non-alphanumeric
    characters. Digits stay attached to the letters before them.

    Args:
        text: Identifier in PascalCase, camelCase, snake_case or mixed form

    Returns:
        List of words in their original casing
    """
    if not text:
        return []
    spaced = _LOWER_UPPER.sub(r"\1 \2", text)
    spaced = _ACRONYM_WORD.sub(r"\1 \2", spaced)
    return [word for word in _SEPARATORS.split(spaced) if word]


def kebab_case(text: str) -> str:
    """Convert an identifier to lower case hyphen delimited form.

    Args:
        text: Identifier to convert

    Returns:
        Kebab case string, e.g. "ProcessOrder" -> "process-order"
    """
    return "-".join(word.lower() for word in split_words(text))


def strip_suffix(text: str, suffix: str) -> str:
    """Remove suffix from text when text ends with exactly that suffix.

    Args:
        text: Source text
        suffix: Literal suffix to remove

    Returns:
        Text without the suffix, or the original text
    """
    if suffix and text.endswith(suffix):
        return text[: -len(suffix)]
    return text


def replace_chars(text: str, chars: str, replacement: str) -> str:
    """Replace every occurrence of each character in chars.

    Args:
        text: Source text
        chars: Characters to replace
        replacement: Replacement string

    Returns:
        Text with all listed characters replaced
    """
    for char in chars:
        text = text.replace(char, replacement)
    return text
