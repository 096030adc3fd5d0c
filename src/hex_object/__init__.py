"""
hex_object - dotted-path access and deep merge for nested configuration.

Reads and writes nested mappings with "a.b.c" style paths, expands
dotted keys into nested structure, and merges configuration from several
sources with array concatenation instead of overwrite.
"""

import importlib.metadata as _metadata

# Version is defined in pyproject.toml - read it and parse into tuple (primary representation)
_raw_version = _metadata.version("hex-object")
__version_info__: tuple[int, int, int] = tuple(int(x) for x in _raw_version.split(".")[:3])  # type: ignore[assignment]
__version__: str = ".".join(str(x) for x in __version_info__)
__author__ = "hex-object Contributors"

from hex_object.config import Settings, get_settings, reset_settings  # noqa: E402
from hex_object.errors import (  # noqa: E402
    HexObjectError,
    IncompatibleMergeError,
    InvalidRootError,
    PathUnsetError,
)
from hex_object.tree import (  # noqa: E402
    NodeKind,
    augment,
    classify,
    concat,
    get,
    get_or_call,
    has,
    normalize,
    push,
    set,
)
from hex_object.wrapper import HexObject, empty, wrap  # noqa: E402

__all__ = [
    "__version__",
    "__version_info__",
    "HexObject",
    "HexObjectError",
    "IncompatibleMergeError",
    "InvalidRootError",
    "NodeKind",
    "PathUnsetError",
    "Settings",
    "augment",
    "classify",
    "concat",
    "empty",
    "get",
    "get_or_call",
    "get_settings",
    "has",
    "normalize",
    "push",
    "reset_settings",
    "set",
    "wrap",
]
