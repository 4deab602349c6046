from votewait.utils.formatters import (
    console,
    format_amount,
    format_days,
    format_hash,
    progress_marker,
    save_json_output,
)

__all__ = [
    "console",
    "format_amount",
    "format_days",
    "format_hash",
    "progress_marker",
    "save_json_output",
]
