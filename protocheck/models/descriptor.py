"""Value descriptor -- the tagged-variant view of an argument or prototype.

Every comparison performed by the check phases works on a
:class:`ValueDescriptor` rather than on the raw object.  :func:`describe`
is the only place that inspects Python / numpy / pandas / networkx types.

Variants
--------
SCALAR
    A single value (``5``, ``"a"``, ``None``, a 0-d array).
VECTOR
    A flat container: list, tuple, set, mapping, 1-d array, Series.
ARRAY
    A container with a shape of two or more dimensions (ndarray, DataFrame).
GRAPH
    A networkx graph with graph-level attributes.
"""

from __future__ import annotations

import numbers
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, Optional, Tuple

import networkx as nx
import numpy as np
import pandas as pd

from protocheck.models.keyword import Keyword


class Variant(Enum):
    SCALAR = "scalar"
    VECTOR = "vector"
    ARRAY = "array"
    GRAPH = "graph"


class Kind(Enum):
    """Storage kind of a value; carries its (mode, type) pair."""

    NULL = ("NULL", "NULL")
    LOGICAL = ("logical", "logical")
    INTEGER = ("numeric", "integer")
    DOUBLE = ("numeric", "double")
    COMPLEX = ("complex", "complex")
    CHARACTER = ("character", "character")
    RAW = ("raw", "raw")
    LIST = ("list", "list")
    OBJECT = ("object", "object")

    @property
    def mode(self) -> str:
        return self.value[0]

    @property
    def type(self) -> str:
        return self.value[1]


# Promotion order for flat containers of atomic scalars (lowest first).
_ATOMIC_ORDER: Tuple[Kind, ...] = (
    Kind.LOGICAL,
    Kind.INTEGER,
    Kind.DOUBLE,
    Kind.COMPLEX,
    Kind.CHARACTER,
)

_DTYPE_KINDS: Dict[str, Kind] = {
    "b": Kind.LOGICAL,
    "i": Kind.INTEGER,
    "u": Kind.INTEGER,
    "f": Kind.DOUBLE,
    "c": Kind.COMPLEX,
    "U": Kind.CHARACTER,
    "S": Kind.RAW,
}


@dataclass(frozen=True)
class GraphInfo:
    """Graph-level attributes and size of a networkx graph."""

    attrs: Dict[str, Any] = field(default_factory=dict)
    n_nodes: int = 0
    n_edges: int = 0

    @property
    def names(self) -> Tuple[Any, ...]:
        """Attribute keys, sorted by text then type name (``1`` and ``"1"`` stay distinct)."""
        return tuple(sorted(self.attrs, key=lambda k: (str(k), type(k).__name__)))


@dataclass(frozen=True)
class ValueDescriptor:
    variant: Variant
    kind: Kind
    length: int
    class_name: str
    shape: Optional[Tuple[int, ...]] = None
    graph: Optional[GraphInfo] = None

    @property
    def mode(self) -> str:
        return self.kind.mode

    @property
    def type(self) -> str:
        return self.kind.type

    @property
    def is_flat(self) -> bool:
        return self.shape is None

    @property
    def is_graph(self) -> bool:
        return self.variant is Variant.GRAPH

    @property
    def is_textual(self) -> bool:
        return self.kind is Kind.CHARACTER and self.length > 0


def class_name_of(obj: Any) -> str:
    """Return ``qualname`` prefixed by the top-level package (builtins stay bare)."""
    cls = type(obj)
    module = (cls.__module__ or "").split(".")[0]
    if module in ("builtins", ""):
        return cls.__qualname__
    return f"{module}.{cls.__qualname__}"


def scalar_kind(obj: Any) -> Optional[Kind]:
    """Kind of an atomic scalar, or None if ``obj`` is not one."""
    # bool before Integral: bool is a subclass of int
    if isinstance(obj, (bool, np.bool_)):
        return Kind.LOGICAL
    if isinstance(obj, (str, os.PathLike)):
        return Kind.CHARACTER
    if isinstance(obj, (bytes, bytearray)):
        return Kind.RAW
    if isinstance(obj, np.generic):
        return _DTYPE_KINDS.get(obj.dtype.kind, Kind.OBJECT)
    if isinstance(obj, numbers.Integral):
        return Kind.INTEGER
    if isinstance(obj, numbers.Real):
        return Kind.DOUBLE
    if isinstance(obj, numbers.Complex):
        return Kind.COMPLEX
    return None


def promote_kinds(items: Iterable[Any]) -> Kind:
    """Common kind of a flat collection of scalars.

    Empty collections and collections holding anything other than
    logical/integer/double/complex/character scalars are ``LIST``.
    """
    rank = -1
    for item in items:
        k = scalar_kind(item)
        if k not in _ATOMIC_ORDER:
            return Kind.LIST
        rank = max(rank, _ATOMIC_ORDER.index(k))
    if rank < 0:
        return Kind.LIST
    return _ATOMIC_ORDER[rank]


def _dtype_kind(dtype: Any, values: Any) -> Kind:
    code = getattr(dtype, "kind", "O")
    if code == "O":
        return promote_kinds(values)
    return _DTYPE_KINDS.get(code, Kind.OBJECT)


def _describe_ndarray(arr: np.ndarray, class_name: str) -> ValueDescriptor:
    kind = _dtype_kind(arr.dtype, arr.ravel().tolist() if arr.dtype.kind == "O" else ())
    size = int(arr.size)
    if arr.ndim == 0:
        return ValueDescriptor(Variant.SCALAR, kind, 1, class_name)
    if arr.ndim == 1:
        return ValueDescriptor(Variant.VECTOR, kind, size, class_name)
    shape = tuple(int(d) for d in arr.shape)
    return ValueDescriptor(Variant.ARRAY, kind, size, class_name, shape=shape)


def _describe_graph(g: nx.Graph, class_name: str) -> ValueDescriptor:
    info = GraphInfo(
        attrs=dict(g.graph),
        n_nodes=int(g.number_of_nodes()),
        n_edges=int(g.number_of_edges()),
    )
    return ValueDescriptor(Variant.GRAPH, Kind.LIST, info.n_nodes, class_name, graph=info)


def describe(value: Any) -> ValueDescriptor:
    """Classify ``value`` into a :class:`ValueDescriptor`.

    Keyword prototypes describe as a character scalar of class ``str``.
    """
    if isinstance(value, Keyword):
        return ValueDescriptor(Variant.SCALAR, Kind.CHARACTER, 1, "str")

    cls_name = class_name_of(value)

    if value is None:
        return ValueDescriptor(Variant.SCALAR, Kind.NULL, 0, cls_name)

    if isinstance(value, nx.Graph):
        return _describe_graph(value, cls_name)

    if isinstance(value, pd.DataFrame):
        shape = tuple(int(d) for d in value.shape)
        return ValueDescriptor(Variant.ARRAY, Kind.LIST, int(value.shape[1]), cls_name, shape=shape)

    if isinstance(value, pd.Series):
        kind = _dtype_kind(value.dtype, value.tolist())
        return ValueDescriptor(Variant.VECTOR, kind, int(len(value)), cls_name)

    if isinstance(value, np.ndarray):
        return _describe_ndarray(value, cls_name)

    kind = scalar_kind(value)
    if kind is not None:
        return ValueDescriptor(Variant.SCALAR, kind, 1, cls_name)

    if isinstance(value, Mapping):
        return ValueDescriptor(Variant.VECTOR, Kind.LIST, len(value), cls_name)

    if isinstance(value, (list, tuple, set, frozenset)):
        return ValueDescriptor(Variant.VECTOR, promote_kinds(value), len(value), cls_name)

    try:
        length = len(value)
    except TypeError:
        length = 1
    return ValueDescriptor(Variant.SCALAR, Kind.OBJECT, int(length), cls_name)
