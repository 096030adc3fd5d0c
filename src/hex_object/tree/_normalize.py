"""
Expansion of dotted keys into nested mappings.

    >>> doc = {"a.key": {"is.deep": 42}}
    >>> normalize(doc)
    >>> doc
    {'a': {'key': {'is': {'deep': 42}}}}
"""

from __future__ import annotations

import collections.abc as _abc
import logging as _logging
import typing as _typing

import hex_object.tree._paths as _paths
import hex_object.tree._types as _types

_logger = _logging.getLogger(__name__)


def normalize(
    root: _abc.MutableMapping[str, _typing.Any],
    *,
    strict: bool | None = None,
) -> None:
    """
    Recursively rewrite every dotted key in root into nested mappings, in place.

    Children are normalized before their parent key is spread, and keys
    are visited in insertion order. When two dotted keys share a prefix
    the second one extends the mapping the first created, so
    ``{"b.c": 1, "b.d": 2}`` becomes ``{"b": {"c": 1, "d": 2}}``.

    Args:
        root: The tree to rewrite.
        strict: Override Settings.strict_roots for this call.

    Raises:
        InvalidRootError: If strict and root is not a Mapping.
    """
    _paths.check_root(root, "normalize", strict)
    _normalize_mapping(root)


def _normalize_mapping(node: _abc.MutableMapping[str, _typing.Any]) -> None:
    # Snapshot: spreading a key adds and removes keys on node
    for key in list(node):
        value = node[key]
        if isinstance(value, _abc.MutableMapping):
            _normalize_mapping(value)
        if isinstance(key, str) and _types.SEPARATOR in key:
            _logger.debug("Spreading dotted key %r", key)
            _paths.set(node, key, value, strict=False)
            del node[key]
