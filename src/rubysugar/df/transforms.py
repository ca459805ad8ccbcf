"""
DataFrame string column transformations - requires polars.

Column-wise versions of the text helpers. Columns that do not exist are
ignored and the frame is returned unchanged. Nulls stay null.
"""

__all__ = [
    "squish_column",
    "squeeze_column",
    "remove_patterns",
    "truncate_column",
]

from typing import List, Optional, Pattern, Union

import polars as pl

from rubysugar.config import CONFIG
from rubysugar.text.strings import remove, squeeze, squish


def squish_column(
    df: pl.DataFrame,
    column: str,
    output_column: Optional[str] = None,
) -> pl.DataFrame:
    """
    Strip and collapse whitespace in a string column.

    Values go through ``squish`` so the whitespace class is Python's ``\\s``,
    which is wider than the polars regex one.

    Args:
        df: Input DataFrame
        column: String column to squish
        output_column: Name for the result (defaults to column)

    Returns:
        DataFrame with squished column

    Example:
        >>> df = pl.DataFrame({"name": ["  foo   bar "]})
        >>> squish_column(df, "name")["name"].to_list()
        ['foo bar']
    """
    if column not in df.columns:
        return df

    return df.with_columns(
        pl.col(column)
        .map_elements(squish, return_dtype=pl.String)
        .alias(output_column or column)
    )


def squeeze_column(
    df: pl.DataFrame,
    column: str,
    charset: Optional[str] = None,
    output_column: Optional[str] = None,
) -> pl.DataFrame:
    """
    Collapse runs of repeated characters in a string column.

    The polars regex engine has no backreferences, so this maps
    ``squeeze`` over the values.
    """
    if column not in df.columns:
        return df

    return df.with_columns(
        pl.col(column)
        .map_elements(lambda value: squeeze(value, charset), return_dtype=pl.String)
        .alias(output_column or column)
    )


def remove_patterns(
    df: pl.DataFrame,
    column: str,
    patterns: List[Union[str, Pattern[str]]],
    output_column: Optional[str] = None,
) -> pl.DataFrame:
    """
    Remove every match of the patterns from a string column.

    Patterns are applied in order with Python's ``re``, so compiled regexes
    keep their flags.

    Args:
        df: Input DataFrame
        column: String column to clean
        patterns: Regexes (strings or compiled) to remove
        output_column: Name for the result (defaults to column)

    Returns:
        DataFrame with cleaned column
    """
    if column not in df.columns:
        return df

    return df.with_columns(
        pl.col(column)
        .map_elements(lambda value: remove(value, *patterns), return_dtype=pl.String)
        .alias(output_column or column)
    )


def truncate_column(
    df: pl.DataFrame,
    column: str,
    max_length: int,
    omission: Optional[str] = None,
    output_column: Optional[str] = None,
) -> pl.DataFrame:
    """
    Truncate a string column, same rules as ``truncate``.

    Example:
        >>> df = pl.DataFrame({"title": ["Hello World", "Hi"]})
        >>> truncate_column(df, "title", 8)["title"].to_list()
        ['Hell...', 'Hi']
    """
    if column not in df.columns:
        return df
    if omission is None:
        omission = CONFIG["default_omission"]

    keep = max(max_length - len(omission) - 1, 0)
    length = pl.col(column).str.len_chars()
    return df.with_columns(
        pl.when((length <= len(omission)) | (length <= max_length))
        .then(pl.col(column))
        .otherwise(
            pl.concat_str([pl.col(column).str.slice(0, keep), pl.lit(omission)])
            .str.slice(0, max(max_length, 0))
        )
        .alias(output_column or column)
    )
