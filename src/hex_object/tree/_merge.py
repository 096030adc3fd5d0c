"""
Deep merge ("augment") with array-concatenation semantics.

augment() combines configuration from several sources, giving preference
to values defined to the right. Unlike a plain deep merge, sequences are
concatenated rather than replaced, so two sources that both enable
plugins under the same key keep both lists:

    >>> augment({"plugins": ["a"], "port": 8000}, {"plugins": ["b"], "port": 9000})
    {'plugins': ['a', 'b'], 'port': 9000}

Merge rules, applied recursively per key of the right-hand operand:
- sequence on either side -> concatenation, left first; a non-sequence
  side counts as a one-element sequence
- mapping + mapping -> recursive merge into the left mapping
- anything else (scalars, None, absent on the left) -> right value wins

Ownership: the first argument is mutated and returned. Branches of later
arguments that are installed whole (not merged over) are shared by
reference unless copying is enabled, either per call with ``copy=True``
or globally through Settings.augment_copy.
"""

from __future__ import annotations

import collections.abc as _abc
import copy as _copy
import logging as _logging
import typing as _typing

import hex_object.config as config
import hex_object.errors as errors
import hex_object.tree._types as _types

_logger = _logging.getLogger(__name__)


def augment(
    first: _abc.MutableMapping[str, _typing.Any],
    *others: _abc.Mapping[str, _typing.Any],
    copy: bool | None = None,
) -> _abc.MutableMapping[str, _typing.Any]:
    """
    Merge others into first, left to right, and return first.

    Every operand is checked before anything is merged, so a rejected
    call leaves first untouched. Scalar and None entries in others have
    no keys and merge as no-ops.

    Args:
        first: The mapping to merge into. Mutated in place.
        *others: Mappings merged over first in order; later ones win.
        copy: Deep-copy installed branches instead of sharing them.
            None falls back to Settings.augment_copy.

    Returns:
        first, after merging.

    Raises:
        IncompatibleMergeError: If any operand is a bare sequence.
        InvalidRootError: If first is a scalar.
    """
    if copy is None:
        copy = config.get_settings().augment_copy

    _check_operand(first)
    for other in others:
        if _types.is_sequence(other):
            raise errors.IncompatibleMergeError()

    result: _typing.Any = first
    for other in others:
        if not _types.is_mapping(other):
            _logger.debug("Skipping %s operand", type(other).__name__)
            continue
        result = _augment2(result, other, copy)
    return _typing.cast(_abc.MutableMapping[str, _typing.Any], result)


def _check_operand(operand: _typing.Any) -> None:
    """Reject a first operand that is not a mapping."""
    kind = _types.classify(operand)
    if kind is _types.NodeKind.SEQUENCE:
        raise errors.IncompatibleMergeError()
    if kind is _types.NodeKind.SCALAR:
        raise errors.InvalidRootError(operand, "augment")


def _install(value: _typing.Any, copy: bool) -> _typing.Any:
    """Return value as it should be stored in the merge result."""
    return _copy.deepcopy(value) if copy else value


def _augment2(a: _typing.Any, b: _typing.Any, copy: bool) -> _typing.Any:
    """
    Merge b into a and return the result.

    Returns a new list when either side is a sequence, otherwise a
    (mutated).
    """
    if _types.is_sequence(a) or _types.is_sequence(b):
        left = _types.as_list(a)
        right = _types.as_list(_install(b, copy))
        _logger.debug("Concatenating %d + %d items", len(left), len(right))
        return left + right

    for key, value in b.items():
        # None is a scalar, so an explicit None always overwrites
        if _types.is_traversable(a.get(key)) and _types.is_traversable(value):
            a[key] = _augment2(a[key], value, copy)
        else:
            a[key] = _install(value, copy)
    return a
