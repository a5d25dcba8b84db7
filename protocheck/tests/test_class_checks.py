"""Tests for the class phase and the graph-attribute check."""

from __future__ import annotations

import networkx as nx
import numpy as np

from protocheck.checks.classes import check_graph, same_version
from protocheck.checks.engine import validate
from protocheck.checks.types import check_mode_type
from protocheck.models.descriptor import describe
from protocheck.models.report import ErrorCode


def _egg(**attrs) -> nx.Graph:
    g = nx.Graph(**attrs)
    g.add_edge("a", "b")
    return g


# -----------------------------------------------------------------------
# Mode / type / class
# -----------------------------------------------------------------------


def test_mode_and_type_fire_together() -> None:
    out = check_mode_type(describe("a"), describe(1.0), "x")
    assert [d.code for d in out] == [ErrorCode.MODE_MISMATCH, ErrorCode.TYPE_MISMATCH]
    assert out[0].message == (
        'validate> "x" mode error: argument has mode "character" but function expects mode "numeric".'
    )
    assert out[1].message == (
        'validate> "x" type error: argument has type "character" but function expects type "double".'
    )


def test_type_only() -> None:
    out = check_mode_type(describe(5), describe(5.0), "x")
    assert [d.code for d in out] == [ErrorCode.TYPE_MISMATCH]


def test_class_mismatch_message() -> None:
    report = validate((1.0, 2.0), [1.0, 2.0], name="v")
    assert list(report) == [
        'validate> "v" class error: argument has class "tuple" but function expects class "list".'
    ]


def test_directed_graph_is_a_different_class() -> None:
    report = validate(nx.DiGraph(), nx.Graph(), name="g")
    assert report.codes == (ErrorCode.CLASS_MISMATCH,)


# -----------------------------------------------------------------------
# Graph attributes
# -----------------------------------------------------------------------


def test_graph_matching_attributes() -> None:
    like = _egg(version="1.0", name="egg")
    assert validate(_egg(version="1.0", name="other"), like, name="EGG").ok


def test_graph_version_mismatch() -> None:
    like = _egg(version="1.0", name="egg")
    report = validate(_egg(version="0.9", name="egg"), like, name="EGG")
    assert list(report) == [
        'validate> "EGG" graph version error: argument has version "0.9" but function expects "1.0".'
    ]


def test_graph_count_mismatch_skips_deeper_checks() -> None:
    like = _egg(version="1.0", name="egg")
    report = validate(_egg(version="0.1"), like, name="EGG")
    assert list(report) == [
        'validate> "EGG" graph attribute error: argument has 1 attributes but function expects 2.'
    ]


def test_graph_name_mismatch_skips_version_check() -> None:
    like = _egg(version="1.0", name="egg")
    report = validate(_egg(version="0.1", title="egg"), like, name="EGG")
    assert list(report) == [
        'validate> "EGG" graph attribute name error: argument has names (title, version) '
        "but function expects (name, version)."
    ]


def test_graph_names_order_insensitive() -> None:
    like = nx.Graph()
    like.graph["b"] = 1
    like.graph["a"] = 2
    value = nx.Graph()
    value.graph["a"] = 3
    value.graph["b"] = 4
    assert check_graph(describe(value), describe(like), "g") == []


def test_graph_without_version_attribute() -> None:
    like = _egg(name="egg")
    assert validate(_egg(name="different"), like).ok


def test_graph_without_attributes() -> None:
    assert validate(nx.Graph(), nx.Graph()).ok


def test_non_graph_value_against_graph_prototype() -> None:
    like = _egg(version="1.0", name="egg")
    report = validate([1, 2], like, name="EGG")
    assert report.codes == (
        ErrorCode.MODE_MISMATCH,
        ErrorCode.TYPE_MISMATCH,
        ErrorCode.CLASS_MISMATCH,
        ErrorCode.GRAPH_ATTRIBUTE_COUNT_MISMATCH,
    )
    assert report[-1].endswith("argument has 0 attributes but function expects 2.")


def test_graph_check_only_for_graph_prototypes() -> None:
    assert check_graph(describe(_egg(version="1.0")), describe([1]), "g") == []


def test_array_versions_compare_element_wise() -> None:
    like = _egg(version=np.array([1, 2]))
    assert validate(_egg(version=np.array([1, 2])), like, name="EGG").ok
    report = validate(_egg(version=np.array([1, 3])), like, name="EGG")
    assert report.codes == (ErrorCode.GRAPH_VERSION_MISMATCH,)


def test_same_version() -> None:
    assert same_version("1.0", "1.0")
    assert not same_version("1.0", "1.1")
    assert not same_version(np.array([1, 2]), "1.2")
    assert same_version(np.array(["a"]), np.array(["a"]))


def test_integer_and_string_attribute_keys_differ() -> None:
    like = nx.Graph()
    like.graph["1"] = "x"
    value = nx.Graph()
    value.graph[1] = "x"
    report = validate(value, like, name="g")
    assert list(report) == [
        'validate> "g" graph attribute name error: argument has names (1) '
        "but function expects (1)."
    ]
