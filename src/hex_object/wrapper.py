"""
Chainable wrapper over the tree operations.

Wraps one root mapping and exposes the tree operations as methods.
Mutating methods return the wrapper so calls can be chained; get(),
has() and get_or_call() return values.

Example:
    >>> wrap({}).set("a", 1).set("deep.value", 42).push("b", "b").get()
    {'a': 1, 'deep': {'value': 42}, 'b': ['b']}
"""

from __future__ import annotations

import collections.abc as _abc
import typing as _typing

import hex_object.tree as tree


class HexObject:
    """
    A builder holding one root mapping by reference.

    The wrapped root is not copied: mutations made through the wrapper
    are visible to anyone else holding the root, and vice versa.
    """

    __slots__ = ("_root",)

    def __init__(self, root: _abc.MutableMapping[str, _typing.Any]) -> None:
        self._root = root

    @property
    def root(self) -> _abc.MutableMapping[str, _typing.Any]:
        """The wrapped tree."""
        return self._root

    def __repr__(self) -> str:
        return f"HexObject({self._root!r})"

    def get(self, path: str | None = None, default: _typing.Any = tree.MISSING) -> _typing.Any:
        """Resolve path in the wrapped tree; with no path, return the tree itself."""
        return tree.get(self._root, path, default)

    def has(self, path: str) -> bool:
        return tree.has(self._root, path)

    def get_or_call(self, path: str, factory: _typing.Callable[[], _typing.Any]) -> _typing.Any:
        return tree.get_or_call(self._root, path, factory)

    def set(
        self,
        path: str,
        value: _typing.Any = None,
        setter: tree.Setter | None = None,
        *,
        strict: bool | None = None,
    ) -> HexObject:
        tree.set(self._root, path, value, setter, strict=strict)
        return self

    def push(self, path: str, value: _typing.Any, *, strict: bool | None = None) -> HexObject:
        tree.push(self._root, path, value, strict=strict)
        return self

    def concat(self, path: str, value: _typing.Any, *, strict: bool | None = None) -> HexObject:
        tree.concat(self._root, path, value, strict=strict)
        return self

    def normalize(self, *, strict: bool | None = None) -> HexObject:
        tree.normalize(self._root, strict=strict)
        return self

    def augment(
        self,
        *others: _abc.Mapping[str, _typing.Any],
        copy: bool | None = None,
    ) -> HexObject:
        """Merge others into the wrapped tree (see hex_object.tree.augment)."""
        self._root = tree.augment(self._root, *others, copy=copy)
        return self


def wrap(root: _abc.MutableMapping[str, _typing.Any]) -> HexObject:
    """Wrap an existing tree for chaining."""
    return HexObject(root)


def empty() -> HexObject:
    """Wrap a new empty tree."""
    return HexObject({})
