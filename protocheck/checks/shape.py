"""Size checks (only run when the caller asks for them).

Rules
-----
- Flat prototype (no shape): the value must be flat too, and of equal length.
- Multi-dimensional prototype: the value's shape must be identical,
  element by element.  No broadcasting.
- Graph prototype and graph value: node and edge counts must match
  (replaces the length rule).
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from protocheck.models.descriptor import ValueDescriptor
from protocheck.models.report import Diagnostic, ErrorCode


NO_SHAPE = "no shape"


def format_shape(shape: Optional[Tuple[int, ...]]) -> str:
    if shape is None:
        return NO_SHAPE
    return ", ".join(str(d) for d in shape)


def _check_graph_size(x: ValueDescriptor, like: ValueDescriptor, name: str) -> List[Diagnostic]:
    gx, gl = x.graph, like.graph
    if (gx.n_nodes, gx.n_edges) == (gl.n_nodes, gl.n_edges):
        return []
    return [Diagnostic.make(
        ErrorCode.GRAPH_SIZE_MISMATCH, name,
        f"graph size error: argument has {gx.n_nodes} nodes and {gx.n_edges} edges "
        f"but function expects {gl.n_nodes} nodes and {gl.n_edges} edges.",
    )]


def check_size(x: ValueDescriptor, like: ValueDescriptor, name: str) -> List[Diagnostic]:
    if like.is_flat:
        if not x.is_flat:
            return [Diagnostic.make(
                ErrorCode.DIMENSION_MISMATCH, name,
                f"dimension error: argument has dim ({format_shape(x.shape)}) "
                f"but function expects 1D object.",
            )]
        if x.is_graph and like.is_graph:
            return _check_graph_size(x, like, name)
        if x.length != like.length:
            return [Diagnostic.make(
                ErrorCode.LENGTH_MISMATCH, name,
                f"length error: argument has length {x.length} "
                f"but function expects length {like.length}.",
            )]
        return []

    if x.shape != like.shape:
        return [Diagnostic.make(
            ErrorCode.DIMENSION_MISMATCH, name,
            f"dimension error: argument has dim ({format_shape(x.shape)}) "
            f"but function expects dim ({format_shape(like.shape)}).",
        )]
    return []
