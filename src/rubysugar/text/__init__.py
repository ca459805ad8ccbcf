"""
Text utilities subpackage.

Pure functions for pattern removal, whitespace squishing, character
squeezing and truncation, plus the ``RString`` method wrapper.
"""

from rubysugar.text.strings import (
    remove,
    squish,
    squeeze,
    truncate,
)

from rubysugar.text.rstring import RString

__all__ = [
    # strings
    "remove",
    "squish",
    "squeeze",
    "truncate",
    # rstring
    "RString",
]
