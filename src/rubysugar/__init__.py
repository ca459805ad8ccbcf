"""
rubysugar - Ruby-inspired convenience helpers for built-in types.

This package is organized into focused subpackages:

- text/        String cleanup (no heavy dependencies)
               - strings: remove, squish, squeeze, truncate
               - rstring: RString (method wrapper with in-place variants)

- containers/  Sequence and mapping helpers (no heavy dependencies)
               - arrays: to_i, Array
               - hashes: merge, merged, clear, delete, Hash

- df/          DataFrame column helpers (requires polars)
               - transforms: squish_column, squeeze_column,
                 remove_patterns, truncate_column

- config       Library defaults (CONFIG)
- cli          ``rubysugar`` command line (python-fire)

Usage:
    from rubysugar.text import squish, truncate, RString
    from rubysugar.containers import merge, to_i, Hash
    from rubysugar.df import squish_column

Logging goes through loguru and is disabled on import; call
``logger.enable("rubysugar")`` to see it.
"""

__version__ = "0.0.1"

from loguru import logger

logger.disable("rubysugar")

# Convenience imports from text
from rubysugar.text import (
    remove,
    squish,
    squeeze,
    truncate,
    RString,
)

# Convenience imports from containers
from rubysugar.containers import (
    to_i,
    Array,
    merge,
    merged,
    clear,
    delete,
    Hash,
)

__all__ = [
    "__version__",
    # text.strings
    "remove",
    "squish",
    "squeeze",
    "truncate",
    # text.rstring
    "RString",
    # containers.arrays
    "to_i",
    "Array",
    # containers.hashes
    "merge",
    "merged",
    "clear",
    "delete",
    "Hash",
]
