"""
Node classification for hex_object trees.

A tree is a recursive union of three node kinds:
- Mapping: string-keyed associative node (dict and other Mappings)
- Sequence: ordered list node (list, tuple, ...) but never str/bytes
- Scalar: anything else, including None

Every type check in the path, normalize and merge code goes through
classify() or one of the is_* helpers below.
"""

from __future__ import annotations

import collections.abc as _abc
import enum as _enum
import typing as _typing

# Path alias for split dotted paths
# Example: ("server", "http", "port") represents "server.http.port"
Path: _typing.TypeAlias = tuple[str, ...]

SEPARATOR = "."

# Strings and byte strings are Sequences to the abc machinery but leaves here
_STRING_TYPES = (str, bytes, bytearray)


class NodeKind(_enum.Enum):
    """The three shapes a tree node can take."""

    MAPPING = "mapping"
    SEQUENCE = "sequence"
    SCALAR = "scalar"


def classify(value: _typing.Any) -> NodeKind:
    """
    Classify a value as a Mapping, Sequence or Scalar node.

    Example:
        >>> classify({"a": 1})
        <NodeKind.MAPPING: 'mapping'>
        >>> classify([1, 2])
        <NodeKind.SEQUENCE: 'sequence'>
        >>> classify("text")
        <NodeKind.SCALAR: 'scalar'>
    """
    if isinstance(value, _abc.Mapping):
        return NodeKind.MAPPING
    if isinstance(value, _abc.Sequence) and not isinstance(value, _STRING_TYPES):
        return NodeKind.SEQUENCE
    return NodeKind.SCALAR


def is_mapping(value: _typing.Any) -> bool:
    """Check if a value is a Mapping node."""
    return classify(value) is NodeKind.MAPPING


def is_sequence(value: _typing.Any) -> bool:
    """Check if a value is a Sequence node."""
    return classify(value) is NodeKind.SEQUENCE


def is_traversable(value: _typing.Any) -> bool:
    """Check if a value is a Mapping or a Sequence."""
    return classify(value) is not NodeKind.SCALAR


def as_list(value: _typing.Any) -> list[_typing.Any]:
    """
    Coerce a value into a new list.

    Sequences contribute their items; anything else becomes a
    one-element list.
    """
    if is_sequence(value):
        return list(value)
    return [value]


def split_path(path: str) -> Path:
    """Split a dotted path into its key segments."""
    return tuple(path.split(SEPARATOR))
