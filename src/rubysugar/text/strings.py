"""
Pure text utilities - no external dependencies beyond logging.

Functions for removing patterns, normalizing whitespace, squeezing
repeated characters and truncating strings.
"""

__all__ = [
    "remove",
    "squish",
    "squeeze",
    "truncate",
]

import re
from typing import Optional, Pattern, Union

from loguru import logger

from rubysugar.config import CONFIG

# Compiled regexes for whitespace normalization
_LEADING_WHITESPACE = re.compile(r"\A\s+")
_TRAILING_WHITESPACE = re.compile(r"\s+\Z")
_WHITESPACE_RUN = re.compile(r"\s+")


def _compile(pattern: Union[str, Pattern[str]]) -> Pattern[str]:
    if isinstance(pattern, re.Pattern):
        return pattern
    if isinstance(pattern, str):
        return re.compile(pattern)
    raise TypeError(
        f"pattern must be a str or compiled regex, not {type(pattern).__name__}"
    )


def remove(text: str, *patterns: Union[str, Pattern[str]]) -> str:
    """
    Return a copy of text with all occurrences of the patterns removed.

    Patterns are applied one after the other, so a later pattern sees the
    result of the earlier ones. String patterns are treated as regular
    expressions.

    Args:
        text: Text to clean
        *patterns: Strings or compiled regexes to remove

    Returns:
        Text with every match replaced by the empty string

    Raises:
        TypeError: If a pattern is neither a string nor a compiled regex

    Example:
        >>> remove("foo bar test", " test")
        'foo bar'
        >>> remove("foo bar test", " test", "bar")
        'foo '
        >>> remove("a1b22c333", r"\\d+")
        'abc'
    """
    result = text
    for pattern in patterns:
        result = _compile(pattern).sub("", result)
    return result


def squish(text: str) -> str:
    """
    Strip both ends of text, then collapse interior whitespace runs.

    Example:
        >>> squish("  foo   bar \\n   \\t   boo")
        'foo bar boo'
        >>> squish("")
        ''
    """
    result = _LEADING_WHITESPACE.sub("", text)
    result = _TRAILING_WHITESPACE.sub("", result)
    return _WHITESPACE_RUN.sub(" ", result)


def squeeze(text: str, charset: Optional[str] = None) -> str:
    """
    Replace runs of the same character with a single character.

    Args:
        text: Text to squeeze
        charset: If given, only runs of these characters are collapsed

    Returns:
        Squeezed text

    Example:
        >>> squeeze("yellow moon")
        'yelow mon'
        >>> squeeze("  now   is  the", " ")
        ' now is the'
    """
    result = []
    for char in text:
        if result and result[-1] == char and (charset is None or char in charset):
            continue
        result.append(char)
    return "".join(result)


def truncate(text: str, max_length: int, omission: Optional[str] = None) -> str:
    """
    Truncate text after max_length, ending it with omission.

    Text no longer than max_length, or no longer than the omission itself,
    is returned unchanged. Otherwise the first
    ``max_length - len(omission) - 1`` characters are kept, so the result
    never exceeds max_length; an omission longer than max_length is itself
    cut to max_length.

    Args:
        text: Text to truncate
        max_length: Maximum length including omission
        omission: Marker appended when truncating (defaults to "...")

    Returns:
        Truncated text with omission, or original if short enough

    Example:
        >>> truncate("Hello World", 8)
        'Hell...'
        >>> truncate("Once upon a time in a world far far away", 17, "[...]")
        'Once upon a[...]'
    """
    if omission is None:
        omission = CONFIG["default_omission"]
    if len(text) <= len(omission) or len(text) <= max_length:
        return text
    keep = max(max_length - len(omission) - 1, 0)
    logger.debug(f"Truncating {len(text)} characters to {keep} + {omission!r}")
    return (text[:keep] + omission)[: max(max_length, 0)]
