"""protocheck -- prototype-based argument validation for scientific Python code.

A function checks its arguments by comparing each one to a *prototype*:
a value of the expected mode, type, class and (optionally) size.  Every
mismatch is collected into a :class:`~protocheck.models.report.Report`
instead of raising on the first one, so a caller can report all problems
at once.

This package provides tools for:
- Comparing mode/type (numeric vs character, integer vs double, ...)
- Comparing length or shape of vectors, numpy arrays and pandas frames
- Comparing class, and graph-level attributes of networkx graphs
- Keyword checks: existing directory, existing/writable file, valid UUID
- Appending reports to a process-wide log file

Key principles:
- The engine never raises on a mismatch; an empty report means "valid"
- Prototypes are read-only templates
- No state is kept between calls

Main subpackages:
- checks: The validation engine and its check phases
- models: Value descriptors, keywords, reports and settings
- reporting: Log-file output
"""

from .checks import validate
from .models import (
    ErrorCode,
    Keyword,
    Report,
    ValidationSettings,
    configure,
    describe,
    get_settings,
    reset_settings,
)
from .reporting import append_to_log

__all__ = [
    "ErrorCode",
    "Keyword",
    "Report",
    "ValidationSettings",
    "append_to_log",
    "configure",
    "describe",
    "get_settings",
    "reset_settings",
    "validate",
]
