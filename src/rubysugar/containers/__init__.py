"""
Container utilities subpackage.

Helpers over sequences (``to_i``) and mappings (``merge`` and friends),
plus the ``Array`` and ``Hash`` method wrappers.
"""

from rubysugar.containers.arrays import (
    to_i,
    Array,
)

from rubysugar.containers.hashes import (
    merge,
    merged,
    clear,
    delete,
    Hash,
)

__all__ = [
    # arrays
    "to_i",
    "Array",
    # hashes
    "merge",
    "merged",
    "clear",
    "delete",
    "Hash",
]
