from __future__ import annotations
import re
from datetime import date, datetime
from typing import Optional, Tuple

import pandas as pd
from dateutil.relativedelta import relativedelta

from .logs import get_logger

log = get_logger()

ISO_FORMAT = "YYYY-MM-DD"
DASH_FORMAT = "DD-MM-YYYY"
BR_FORMAT = "DD/MM/YYYY"

# ordem de verificação importa só para legibilidade: os separadores já
# tornam os padrões mutuamente exclusivos
_LAYOUTS: Tuple[Tuple[str, "re.Pattern[str]"], ...] = (
    (ISO_FORMAT, re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")),
    (DASH_FORMAT, re.compile(r"[0-9]{2}-[0-9]{2}-[0-9]{4}")),
    (BR_FORMAT, re.compile(r"[0-9]{2}/[0-9]{2}/[0-9]{4}")),
)

DATE_FORMATS = tuple(fmt for fmt, _ in _LAYOUTS)

# tokens no estilo moment -> diretivas strftime (YYYY antes de YY)
_TOKENS = (
    ("YYYY", "%Y"), ("YY", "%y"),
    ("MM", "%m"), ("DD", "%d"),
    ("HH", "%H"), ("mm", "%M"), ("ss", "%S"),
)

def get_date_format(text) -> Optional[str]:
    """
    Obtém o formato da data pelo formato léxico, ou None se não identificar.
    Não valida o calendário: '12/21/2000' -> 'DD/MM/YYYY'.
    """
    if not isinstance(text, str) or len(text.strip()) != 10:
        return None
    for fmt, rx in _LAYOUTS:
        if rx.fullmatch(text):
            return fmt
    return None

def to_strftime(pattern: str) -> str:
    out = pattern
    for token, directive in _TOKENS:
        out = out.replace(token, directive)
    return out

def parse_date(text, pattern: str) -> Optional[pd.Timestamp]:
    """Parse estrito; None para tipos errados, formato divergente ou data inexistente."""
    if not isinstance(text, str):
        return None
    ts = pd.to_datetime(text, format=to_strftime(pattern), errors="coerce")
    if pd.isna(ts):
        log.debug("data inválida para o formato %s: %r", pattern, text)
        return None
    return ts

def format_date(value: date, pattern: str) -> str:
    return value.strftime(to_strftime(pattern))

def diff_years(start: date, end: date) -> int:
    """Anos completos entre start e end (negativo se end < start)."""
    if isinstance(start, datetime):
        start = start.date()
    if isinstance(end, datetime):
        end = end.date()
    return relativedelta(end, start).years

def today() -> date:
    return datetime.now().date()
