"""End-to-end tests for validate(): phase ordering and documented scenarios."""

from __future__ import annotations

from pathlib import Path

import networkx as nx
import numpy as np
import pandas as pd
import pytest

from protocheck import Keyword, validate
from protocheck.models.report import ErrorCode, Report


@pytest.mark.parametrize(
    "value, like",
    [
        (5, 1),
        (2.5, 0.0),
        ("abc", ""),
        (True, False),
        (None, None),
        ([1.0, 2.0], [0.0, 0.0]),
        (np.arange(6.0).reshape(2, 3), np.zeros((2, 3))),
        (pd.Series([1, 2]), pd.Series([0, 0])),
        (pd.DataFrame({"a": [1]}), pd.DataFrame({"a": [0]})),
        (nx.Graph(version="1"), nx.Graph(version="1")),
    ],
)
def test_conforming_pairs_give_empty_report(value, like) -> None:
    report = validate(value, like, check_size=True, name="x")
    assert isinstance(report, Report)
    assert report.ok
    assert not report
    assert list(report) == []


def test_integer_against_double() -> None:
    report = validate(5, like=5.0, name="n")
    assert report.filter(ErrorCode.TYPE_MISMATCH)[0].message == (
        'validate> "n" type error: argument has type "integer" but function expects type "double".'
    )
    assert len(report.filter(ErrorCode.TYPE_MISMATCH)) == 1
    assert report.filter(ErrorCode.MODE_MISMATCH) == ()


def test_character_against_numeric_with_size() -> None:
    report = validate(["a", "b"], like=[1.0, 1.0, 1.0], check_size=True, name="limits")
    assert report.codes == (
        ErrorCode.MODE_MISMATCH,
        ErrorCode.TYPE_MISMATCH,
        ErrorCode.LENGTH_MISMATCH,
    )


def test_character_against_numeric_same_length() -> None:
    report = validate(["a", "b"], like=[1.0, 1.0], check_size=True, name="limits")
    assert ErrorCode.MODE_MISMATCH in report.codes
    assert ErrorCode.LENGTH_MISMATCH not in report.codes


def test_missing_directory_scenario(tmp_path: Path) -> None:
    missing = tmp_path / "does_not_exist"
    report = validate(str(missing), Keyword.DIR, name="out_dir")
    assert report.codes == (ErrorCode.DIRECTORY_NOT_FOUND,)
    assert str(missing) in report[0]
    assert '"out_dir"' in report[0]


def test_phases_do_not_short_circuit(tmp_path: Path) -> None:
    # keyword, size and class diagnostics all present in phase order
    missing = str(tmp_path / "x")
    report = validate((missing, missing), Keyword.FILE_E, check_size=True, name="files")
    assert report.codes == (
        ErrorCode.FILE_NOT_FOUND,
        ErrorCode.FILE_NOT_FOUND,
        ErrorCode.LENGTH_MISMATCH,
    )


def test_every_phase_fires() -> None:
    like = nx.Graph(version="1.0")
    report = validate(np.zeros((2, 2), dtype=int), like, check_size=True, name="g")
    assert report.codes == (
        ErrorCode.MODE_MISMATCH,
        ErrorCode.TYPE_MISMATCH,
        ErrorCode.DIMENSION_MISMATCH,
        ErrorCode.CLASS_MISMATCH,
        ErrorCode.GRAPH_ATTRIBUTE_COUNT_MISMATCH,
    )


def test_prototype_is_not_mutated() -> None:
    like = nx.Graph(version="1.0")
    like.add_edge(1, 2)
    validate(nx.Graph(version="2.0"), like, check_size=True)
    assert like.graph == {"version": "1.0"}
    assert like.number_of_edges() == 1


def test_reports_are_fresh_per_call() -> None:
    first = validate("a", 1.0, name="x")
    second = validate(1.0, 1.0, name="x")
    assert len(first) == 3
    assert second.ok


def test_default_name() -> None:
    report = validate("a", 1)
    assert report[0].startswith('validate> "argument" ')
