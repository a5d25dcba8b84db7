from .descriptor import GraphInfo, Kind, ValueDescriptor, Variant, describe
from .keyword import Keyword
from .report import Diagnostic, ErrorCode, Report
from .settings import ValidationSettings, configure, get_settings, reset_settings

__all__ = [
    "Diagnostic",
    "ErrorCode",
    "GraphInfo",
    "Keyword",
    "Kind",
    "Report",
    "ValidationSettings",
    "ValueDescriptor",
    "Variant",
    "configure",
    "describe",
    "get_settings",
    "reset_settings",
]
