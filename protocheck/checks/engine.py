"""Validation engine: run every check phase and collect a Report.

Phases run in a fixed order and never short-circuit each other:

1. keyword checks   (only for Keyword prototypes and textual values)
2. mode / type
3. size             (only when ``check_size`` is True)
4. class, then the graph-attribute check for graph prototypes

Examples::

    report = validate(run_id, like="", name="run_id")
    report = validate(limits, like=[1.0, 1.0], check_size=True, name="limits")
    report = validate(out_dir, like=Keyword.DIR, name="out_dir")
    report = validate(egg, like=egg_prototype, name="egg")
"""

from __future__ import annotations

from typing import Any, List

from protocheck.checks.classes import check_class, check_graph
from protocheck.checks.keywords import check_keyword
from protocheck.checks.shape import check_size as _check_size
from protocheck.checks.types import check_mode_type
from protocheck.models.descriptor import describe
from protocheck.models.keyword import Keyword
from protocheck.models.report import Diagnostic, Report


def validate(
    value: Any,
    like: Any,
    check_size: bool = False,
    *,
    name: str = "argument",
) -> Report:
    """Compare ``value`` against the prototype ``like``.

    Parameters
    ----------
    value : any
        The argument under test.
    like : any or Keyword
        Prototype the value is compared to, or a :class:`Keyword` selecting a
        semantic check.  Never mutated.
    check_size : bool
        If True, also compare length (flat prototypes), shape (multi-dimensional
        prototypes) or node/edge counts (graph prototypes).
    name : str
        Parameter name quoted in every diagnostic.

    Returns
    -------
    Report
        Empty if the value conforms; otherwise one diagnostic per failure.
    """
    x = describe(value)
    proto = describe(like)
    keyword = isinstance(like, Keyword)

    diagnostics: List[Diagnostic] = []
    diagnostics += check_keyword(value, x, like, name)
    diagnostics += check_mode_type(x, proto, name)
    if check_size:
        diagnostics += _check_size(x, proto, name)
    diagnostics += check_class(x, proto, name, keyword=keyword)
    diagnostics += check_graph(x, proto, name)

    return Report(tuple(diagnostics))
