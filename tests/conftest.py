"""
Shared pytest fixtures for hex_object tests.

This file is automatically loaded by pytest. Fixtures defined here are
available to all test files without explicit imports.
"""

import contextlib as _contextlib
import os as _os
import typing as _typing
import unittest.mock as _mock

import pytest as _pytest

import hex_object.config as config

# Environment keys that should be cleared for isolated tests
ENV_KEYS_TO_CLEAR = [
    "HEX_OBJECT_STRICT_ROOTS",
    "HEX_OBJECT_AUGMENT_COPY",
    "HEX_OBJECT_ENV_FILE",
]


@_pytest.fixture
def clean_env() -> dict[str, str]:
    """
    Return environment dict with hex_object keys removed.

    Use with mock.patch.dict to isolate tests from the actual environment.
    """
    return {k: v for k, v in _os.environ.items() if k not in ENV_KEYS_TO_CLEAR}


@_pytest.fixture(autouse=True)
def isolated_settings(clean_env: dict[str, str]) -> _typing.Iterator[None]:
    """
    Run every test against default settings.

    Clears HEX_OBJECT_* variables and the cached Settings before and
    after each test.
    """
    with _mock.patch.dict(_os.environ, clean_env, clear=True):
        config.reset_settings()
        yield
    config.reset_settings()


@_pytest.fixture
def settings_env(clean_env: dict[str, str]) -> _typing.Callable[..., _typing.Any]:
    """
    Return a helper that patches HEX_OBJECT_* variables for one test.

    Usage:
        def test_something(settings_env):
            with settings_env(HEX_OBJECT_STRICT_ROOTS="true"):
                ...
    """

    @_contextlib.contextmanager
    def _patch(**env: str) -> _typing.Iterator[None]:
        with _mock.patch.dict(_os.environ, {**clean_env, **env}, clear=True):
            config.reset_settings()
            yield
        config.reset_settings()

    return _patch
