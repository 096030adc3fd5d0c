"""
Dotted-path access for nested mapping trees.

A dotted path such as ``"server.http.port"`` names a sequence of nested
key lookups. get() resolves one without touching the tree; set(), push()
and concat() create any missing intermediate mappings on the way down
and differ only in what they do at the final key.

Example:
    >>> cfg = {}
    >>> set(cfg, "server.http.port", 8000)
    >>> cfg
    {'server': {'http': {'port': 8000}}}
    >>> get(cfg, "server.http.port")
    8000
    >>> push(cfg, "plugins", "auth")
    >>> cfg["plugins"]
    ['auth']
"""

from __future__ import annotations

import collections.abc as _abc
import logging as _logging
import typing as _typing

import hex_object.config as config
import hex_object.errors as errors
import hex_object.tree._types as _types

_logger = _logging.getLogger(__name__)

# Terminal setter: receives the mapping that owns the final key, and the key
Setter: _typing.TypeAlias = _typing.Callable[[_abc.MutableMapping[str, _typing.Any], str], None]


class _MissingType:
    """Sentinel type marking an argument as not supplied."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "<MISSING>"


MISSING: _typing.Any = _MissingType()


def check_root(root: _typing.Any, operation: str, strict: bool | None) -> None:
    """
    Reject non-mapping roots when strict roots are in effect.

    Args:
        root: The tree handed to the operation.
        operation: Operation name, used in the error message.
        strict: Per-call override; None falls back to Settings.strict_roots.

    Raises:
        InvalidRootError: If strict and root is not a Mapping.
    """
    if strict is None:
        strict = config.get_settings().strict_roots
    if strict and not _types.is_mapping(root):
        raise errors.InvalidRootError(root, operation)


def _resolve(root: _typing.Any, keys: _types.Path) -> _typing.Any:
    """Walk keys through nested mappings, returning MISSING if resolution stops short."""
    current = root
    for key in keys:
        if not _types.is_mapping(current) or key not in current:
            return MISSING
        current = current[key]
    return current


def get(
    root: _typing.Any,
    path: str | None = None,
    default: _typing.Any = MISSING,
) -> _typing.Any:
    """
    Get a given (possibly deep) key from the tree.

    If path is empty or None, the root itself is returned.

    Args:
        root: The tree to read from. Never modified.
        path: Dotted path, e.g. "a.b.c".
        default: Returned when the path is unset. None is a valid default.

    Returns:
        The resolved value, which may be any node kind (including None
        when the key is present and holds None).

    Raises:
        PathUnsetError: If the path is unset and no default was supplied.
    """
    if not path:
        return root
    value = _resolve(root, _types.split_path(path))
    if value is MISSING:
        if default is MISSING:
            raise errors.PathUnsetError(path)
        return default
    return value


def has(root: _typing.Any, path: str) -> bool:
    """Check whether get(root, path) would resolve without a default."""
    if not path:
        return True
    return _resolve(root, _types.split_path(path)) is not MISSING


def get_or_call(
    root: _typing.Any,
    path: str,
    factory: _typing.Callable[[], _typing.Any],
) -> _typing.Any:
    """
    Like get(), but compute the fallback lazily.

    factory is only called when the path is unset. Its result is
    returned but not stored in the tree.
    """
    if not path:
        return root
    value = _resolve(root, _types.split_path(path))
    if value is MISSING:
        return factory()
    return value


def set(
    root: _abc.MutableMapping[str, _typing.Any],
    path: str,
    value: _typing.Any = None,
    setter: Setter | None = None,
    *,
    strict: bool | None = None,
) -> None:
    """
    Set a given (possibly deep) key in the tree.

    Every segment before the last must hold a mapping; any that does not
    (absent, None, a scalar or a sequence) is replaced with a new empty
    dict before descending.

    Args:
        root: The tree to modify in place.
        path: Dotted path, e.g. "a.b.c".
        value: Value stored at the final key by the default setter.
        setter: Optional callback ``setter(target, key)`` that inserts the
            value itself. Used by push() and concat().
        strict: Override Settings.strict_roots for this call.

    Raises:
        InvalidRootError: If strict and root is not a Mapping.
    """
    check_root(root, "set", strict)

    if setter is None:

        def _assign(target: _abc.MutableMapping[str, _typing.Any], key: str) -> None:
            target[key] = value

        setter = _assign

    keys = _types.split_path(path)
    target = root
    for key in keys[:-1]:
        if not _types.is_mapping(target.get(key)):
            _logger.debug("Creating mapping for %r while setting %r", key, path)
            target[key] = {}
        target = target[key]

    setter(target, keys[-1])


def _target_list(
    target: _abc.MutableMapping[str, _typing.Any],
    key: str,
) -> list[_typing.Any]:
    """
    Return the list stored at target[key], creating or promoting as needed.

    Absent or None starts a new empty list. A list is returned as-is.
    Any other sequence is copied into a list, and any other value is
    promoted into a one-element list.
    """
    current = target.get(key)
    if current is None:
        return []
    if isinstance(current, list):
        return current
    if _types.is_sequence(current):
        return list(current)
    _logger.debug("Promoting %s at %r into a list", type(current).__name__, key)
    return [current]


def push(
    root: _abc.MutableMapping[str, _typing.Any],
    path: str,
    value: _typing.Any,
    *,
    strict: bool | None = None,
) -> None:
    """
    Like set(), but appends value to a list at path.

    A sequence value is appended as a single nested element.

    Example:
        >>> ex = {"a": [1], "b": 1, "c": [1]}
        >>> push(ex, "a", 2)
        >>> push(ex, "b", 2)
        >>> push(ex, "c", [2])
        >>> ex
        {'a': [1, 2], 'b': [1, 2], 'c': [1, [2]]}
    """

    def _append(target: _abc.MutableMapping[str, _typing.Any], key: str) -> None:
        items = _target_list(target, key)
        items.append(value)
        target[key] = items

    check_root(root, "push", strict)
    set(root, path, None, _append, strict=False)


def concat(
    root: _abc.MutableMapping[str, _typing.Any],
    path: str,
    value: _typing.Any,
    *,
    strict: bool | None = None,
) -> None:
    """
    Like push(), but flattens one level of a sequence value.

    Example:
        >>> ex = {"a": [1], "b": 1, "c": [1]}
        >>> concat(ex, "a", 2)
        >>> concat(ex, "b", 2)
        >>> concat(ex, "c", [2])
        >>> ex
        {'a': [1, 2], 'b': [1, 2], 'c': [1, 2]}
    """
    values = _types.as_list(value)

    def _extend(target: _abc.MutableMapping[str, _typing.Any], key: str) -> None:
        target[key] = _target_list(target, key) + values

    check_root(root, "concat", strict)
    set(root, path, None, _extend, strict=False)
