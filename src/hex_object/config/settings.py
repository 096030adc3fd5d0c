"""
Settings configuration using pydantic-settings.

Loads configuration from:
1. Constructor arguments (highest precedence)
2. Environment variables with HEX_OBJECT_ prefix
3. .env file named by HEX_OBJECT_ENV_FILE (if set and present)

Examples:
  HEX_OBJECT_STRICT_ROOTS=true
  HEX_OBJECT_AUGMENT_COPY=1
"""

import os as _os
import pathlib as _pathlib
import typing as _typing

import pydantic as _pydantic
import pydantic_settings as _pydantic_settings

ENV_PREFIX = "HEX_OBJECT_"


def _get_env_file() -> str | None:
    """Determine which .env file to load.

    Only an explicit HEX_OBJECT_ENV_FILE is honoured. Returns None when it is
    unset or points at a missing file.
    """
    if env_file := _os.environ.get(f"{ENV_PREFIX}ENV_FILE"):
        if _pathlib.Path(env_file).exists():
            return env_file
    return None


class Settings(_pydantic_settings.BaseSettings):
    """
    hex_object runtime settings.

    All settings can be overridden via environment variables with the
    HEX_OBJECT_ prefix. Every operation that reads a setting also takes a
    keyword argument that wins over it for a single call.
    """

    model_config = _pydantic_settings.SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=_get_env_file(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    strict_roots: bool = _pydantic.Field(
        default=False,
        description="Raise InvalidRootError when set/push/concat/normalize get a non-mapping root",
    )

    augment_copy: bool = _pydantic.Field(
        default=False,
        description="Deep-copy branches that augment installs from later operands",
    )

    @classmethod
    def construct_without_dotenv(cls, **kwargs: _typing.Any) -> "Settings":
        """Create Settings from environment variables only, without loading .env file.

        Useful for test isolation.
        """
        return cls(_env_file=None, **kwargs)  # type: ignore[call-arg]


_settings: Settings | None = None


def get_settings() -> Settings:
    """Return the process-wide Settings, building it on first use."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached Settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None
