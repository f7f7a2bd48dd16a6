from .config import settings, set_settings, reset_settings, setting
from .logs import get_logger
from .text import strip_accents, only_digits, has_digit, to_bool, replace_chain
from .dates import (
    DATE_FORMATS, ISO_FORMAT, DASH_FORMAT, BR_FORMAT,
    get_date_format, to_strftime, parse_date, format_date, diff_years, today,
)

__all__ = [
    "settings", "set_settings", "reset_settings", "setting",
    "get_logger",
    "strip_accents", "only_digits", "has_digit", "to_bool", "replace_chain",
    "DATE_FORMATS", "ISO_FORMAT", "DASH_FORMAT", "BR_FORMAT",
    "get_date_format", "to_strftime", "parse_date", "format_date", "diff_years", "today",
]
