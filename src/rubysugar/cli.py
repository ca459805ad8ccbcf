"""
Command line interface for the rubysugar helpers.

    rubysugar squish "  foo   bar "
    rubysugar squeeze "aaabccc" --charset=a
    rubysugar remove "foo bar test" " test"
    rubysugar truncate "Hello World" 8
    rubysugar to_i 1 0 1 --base=2

Add ``--verbose`` to any command for debug logging on stderr.
"""

import sys
from typing import Optional

import fire
from loguru import logger

from rubysugar.config import CONFIG
from rubysugar.containers.arrays import to_i
from rubysugar.text import strings


def configure_logging(verbose: bool = False) -> None:
    """Enable rubysugar logs on stderr at the configured level."""
    level = CONFIG["verbose_log_level"] if verbose else CONFIG["log_level"]
    logger.remove()
    logger.add(sys.stderr, level=level, format=CONFIG["log_format"])
    logger.enable("rubysugar")


class Commands:
    """Ruby-style string and sequence helpers."""

    def __init__(self, verbose: bool = False):
        configure_logging(verbose)

    def squish(self, text: str) -> str:
        """Strip text and collapse whitespace runs."""
        return strings.squish(str(text))

    def squeeze(self, text: str, charset: Optional[str] = None) -> str:
        """Collapse runs of repeated characters."""
        return strings.squeeze(str(text), charset)

    def remove(self, text: str, *patterns: str) -> str:
        """Remove every match of the given regex patterns."""
        return strings.remove(str(text), *(str(pattern) for pattern in patterns))

    def truncate(self, text: str, max_length: int, omission: Optional[str] = None) -> str:
        """Truncate text to max_length, ending it with omission."""
        return strings.truncate(str(text), int(max_length), omission)

    def to_i(self, *digits: int, base: Optional[int] = None) -> int:
        """Combine digits, least significant first, into an integer."""
        if base is None:
            base = CONFIG["default_base"]
        logger.debug(f"Converting {len(digits)} digits in base {base}")
        return to_i(digits, base)


def main():
    fire.Fire(Commands, name="rubysugar")


if __name__ == "__main__":
    main()
