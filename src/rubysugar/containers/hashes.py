"""
Mapping utilities.

Merging two mappings with an optional conflict resolver, plus in-place
clearing and non-raising deletion.
"""

__all__ = [
    "merge",
    "merged",
    "clear",
    "delete",
    "Hash",
]

from typing import Callable, Dict, MutableMapping, Mapping, Optional, TypeVar

from loguru import logger

K = TypeVar("K")
V = TypeVar("V")

Resolver = Callable[[K, V, V], V]


def _merge_into(
    target: MutableMapping[K, V],
    other: Mapping[K, V],
    resolver: Optional[Resolver] = None,
) -> int:
    conflicts = 0
    for key, value in other.items():
        if resolver is not None and key in target:
            target[key] = resolver(key, target[key], value)
            conflicts += 1
        else:
            target[key] = value
    return conflicts


def merge(
    mapping: Mapping[K, V],
    other: Mapping[K, V],
    resolver: Optional[Resolver] = None,
) -> Dict[K, V]:
    """
    Return a new dict containing the contents of mapping and other.

    For keys present in both, the value from other wins unless a resolver
    is given, in which case ``resolver(key, mapping_value, other_value)``
    decides. Neither input is modified.

    Args:
        mapping: Base mapping
        other: Mapping whose entries are added on top
        resolver: Optional function deciding values of duplicate keys

    Returns:
        New dict with the merged entries

    Example:
        >>> h1 = {"a": 100, "b": 200}
        >>> h2 = {"b": 254, "c": 300}
        >>> merge(h1, h2)
        {'a': 100, 'b': 254, 'c': 300}
        >>> merge(h1, h2, lambda key, old, new: new - old)
        {'a': 100, 'b': 54, 'c': 300}
    """
    result = dict(mapping)
    conflicts = _merge_into(result, other, resolver)
    if conflicts:
        logger.debug(f"merge resolved {conflicts} duplicate keys")
    return result


def merged(
    mapping: MutableMapping[K, V],
    other: Mapping[K, V],
    resolver: Optional[Resolver] = None,
) -> MutableMapping[K, V]:
    """
    Merge other into mapping in place and return mapping.

    Same rules as ``merge``.
    """
    conflicts = _merge_into(mapping, other, resolver)
    if conflicts:
        logger.debug(f"merged resolved {conflicts} duplicate keys")
    return mapping


def clear(mapping: MutableMapping[K, V]) -> MutableMapping[K, V]:
    """Remove all entries from mapping and return it."""
    mapping.clear()
    return mapping


def delete(mapping: MutableMapping[K, V], key: K) -> Optional[V]:
    """Remove key from mapping, returning its value or None if absent."""
    return mapping.pop(key, None)


class Hash(dict):
    """
    Dict with Ruby-style merge and deletion helpers.

    Example:
        >>> h = Hash(a=1)
        >>> h.merged({"b": 2}) is h
        True
        >>> h.delete("missing") is None
        True
    """

    def merge(self, other: Mapping, resolver: Optional[Resolver] = None) -> "Hash":
        return self.__class__(merge(self, other, resolver))

    def merged(self, other: Mapping, resolver: Optional[Resolver] = None) -> "Hash":
        merged(self, other, resolver)
        return self

    def clear(self) -> "Hash":
        super().clear()
        return self

    def delete(self, key):
        return delete(self, key)
