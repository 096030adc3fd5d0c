"""
Shared fixtures for tree engine tests.
"""

import typing as _typing

import pytest as _pytest


@_pytest.fixture
def nested_doc() -> dict[str, _typing.Any]:
    """Small already-normalized document."""
    return {"a": {"b": 42}, "c": True}


@_pytest.fixture
def dotted_doc() -> dict[str, _typing.Any]:
    """Document mixing flat dotted keys with nested ones."""
    return {
        "a": 1,
        "b.c.d": 2,
        "e": {"f.g": 3},
        "b.h": 2.5,
    }
