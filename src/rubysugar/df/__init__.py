"""
DataFrame utilities subpackage - requires polars.

Column-wise string cleanup for DataFrames.
"""

from rubysugar.df.transforms import (
    squish_column,
    squeeze_column,
    remove_patterns,
    truncate_column,
)

__all__ = [
    "squish_column",
    "squeeze_column",
    "remove_patterns",
    "truncate_column",
]
