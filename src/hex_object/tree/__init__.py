"""
Tree engine: dotted paths, normalization and deep merge.

This package operates on nested mapping-of-string-to-value trees such as
parsed configuration documents. All mutating operations work in place on
the root they are given.

Example:
    >>> import hex_object.tree as tree
    >>> cfg = {"server.port": 8000}
    >>> tree.normalize(cfg)
    >>> tree.get(cfg, "server.port")
    8000
    >>> tree.augment(cfg, {"server": {"port": 9000}})
    {'server': {'port': 9000}}
"""

from hex_object.tree._merge import augment
from hex_object.tree._normalize import normalize
from hex_object.tree._paths import (
    MISSING,
    Setter,
    concat,
    get,
    get_or_call,
    has,
    push,
    set,
)
from hex_object.tree._types import (
    SEPARATOR,
    NodeKind,
    Path,
    as_list,
    classify,
    is_mapping,
    is_sequence,
    is_traversable,
    split_path,
)

__all__ = [
    "MISSING",
    "SEPARATOR",
    "NodeKind",
    "Path",
    "Setter",
    "as_list",
    "augment",
    "classify",
    "concat",
    "get",
    "get_or_call",
    "has",
    "is_mapping",
    "is_sequence",
    "is_traversable",
    "normalize",
    "push",
    "set",
    "split_path",
]
