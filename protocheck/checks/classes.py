"""Class comparison and the graph-attribute check.

The graph check short-circuits internally: attribute names are compared only
when the attribute counts agree, and the ``version`` attribute only when the
names agree.
"""

from __future__ import annotations

from typing import Any, List, Tuple

import numpy as np

from protocheck.models.descriptor import GraphInfo, ValueDescriptor
from protocheck.models.report import Diagnostic, ErrorCode


VERSION_ATTR = "version"


def _join_names(names: Tuple[Any, ...]) -> str:
    return ", ".join(str(n) for n in names)


def same_version(a: Any, b: Any) -> bool:
    """Equality that always yields one bool (arrays compare element-wise)."""
    if isinstance(a, np.ndarray) or isinstance(b, np.ndarray):
        return bool(np.array_equal(a, b))
    try:
        return bool(a == b)
    except (TypeError, ValueError):
        return str(a) == str(b)


def check_class(
    x: ValueDescriptor,
    like: ValueDescriptor,
    name: str,
    *,
    keyword: bool = False,
) -> List[Diagnostic]:
    # A keyword stands for textual values held in any container.
    if keyword and x.is_textual:
        return []
    if x.class_name == like.class_name:
        return []
    return [Diagnostic.make(
        ErrorCode.CLASS_MISMATCH, name,
        f'class error: argument has class "{x.class_name}" '
        f'but function expects class "{like.class_name}".',
    )]


def check_graph(x: ValueDescriptor, like: ValueDescriptor, name: str) -> List[Diagnostic]:
    """Compare graph-level attributes; only applies to graph prototypes."""
    if not like.is_graph:
        return []

    gl = like.graph
    gx = x.graph if x.graph is not None else GraphInfo()

    if len(gx.attrs) != len(gl.attrs):
        return [Diagnostic.make(
            ErrorCode.GRAPH_ATTRIBUTE_COUNT_MISMATCH, name,
            f"graph attribute error: argument has {len(gx.attrs)} attributes "
            f"but function expects {len(gl.attrs)}.",
        )]
    if not gl.attrs:
        return []

    if gx.names != gl.names:
        return [Diagnostic.make(
            ErrorCode.GRAPH_ATTRIBUTE_NAME_MISMATCH, name,
            f"graph attribute name error: argument has names ({_join_names(gx.names)}) "
            f"but function expects ({_join_names(gl.names)}).",
        )]

    if VERSION_ATTR in gl.attrs and not same_version(
        gx.attrs[VERSION_ATTR], gl.attrs[VERSION_ATTR]
    ):
        return [Diagnostic.make(
            ErrorCode.GRAPH_VERSION_MISMATCH, name,
            f'graph version error: argument has version "{gx.attrs[VERSION_ATTR]}" '
            f'but function expects "{gl.attrs[VERSION_ATTR]}".',
        )]
    return []
