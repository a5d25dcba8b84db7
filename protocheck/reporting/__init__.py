from .log_file import append_to_log, format_log_text

__all__ = [
    "append_to_log",
    "format_log_text",
]
