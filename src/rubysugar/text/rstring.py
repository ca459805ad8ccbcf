"""
Mutable string wrapper exposing the text helpers as methods.

Python strings are immutable, so the in-place variants (``squished``,
``squeezed``) live on a ``UserString`` subclass that swaps its ``data``.
"""

__all__ = ["RString"]

from collections import UserString
from typing import Optional, Pattern, Union

from rubysugar.text.strings import remove, squeeze, squish, truncate


class RString(UserString):
    """
    String with Ruby-style cleanup methods.

    Non-destructive methods return a new ``RString``; the ``-ed`` methods
    update the receiver and return it.

    Example:
        >>> s = RString("  foo   bar ")
        >>> s.squish()
        'foo bar'
        >>> s.squished() is s
        True
    """

    def remove(self, *patterns: Union[str, Pattern[str]]) -> "RString":
        return self.__class__(remove(self.data, *patterns))

    def squish(self) -> "RString":
        return self.__class__(squish(self.data))

    def squished(self) -> "RString":
        """Squish in place."""
        self.data = squish(self.data)
        return self

    def squeeze(self, charset: Optional[str] = None) -> "RString":
        return self.__class__(squeeze(self.data, charset))

    def squeezed(self, charset: Optional[str] = None) -> "RString":
        """Squeeze in place."""
        self.data = squeeze(self.data, charset)
        return self

    def truncate(self, max_length: int, omission: Optional[str] = None) -> "RString":
        return self.__class__(truncate(self.data, max_length, omission))
