"""Check phases of the validation engine.

Each phase takes value/prototype descriptors and returns a list of
:class:`~protocheck.models.report.Diagnostic`; :func:`validate` runs them in
order and wraps the result in a Report.
"""

from .engine import validate
from .keywords import is_valid_uuid

__all__ = [
    "is_valid_uuid",
    "validate",
]
