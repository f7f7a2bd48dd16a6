from __future__ import annotations
import re
import unicodedata
from functools import reduce
from typing import Iterable, Optional, Tuple

# (padrão, substituição, count); count=0 substitui todas as ocorrências
Step = Tuple[str, str, int]

def strip_accents(s: str) -> str:
    if s is None:
        return ""
    return "".join(ch for ch in unicodedata.normalize("NFKD", str(s)) if not unicodedata.combining(ch))

def only_digits(s: Optional[str]) -> str:
    return re.sub(r"[^0-9]", "", s or "")

def has_digit(s) -> bool:
    return isinstance(s, str) and re.search(r"[0-9]", s) is not None

def to_bool(v) -> Optional[bool]:
    if v is None: return None
    if isinstance(v, bool): return v
    s = strip_accents(str(v)).strip().lower()
    if s in {"1","true","t","sim","yes","y","on"}: return True
    if s in {"0","false","f","nao","no","n","off",""}: return False
    return None

def replace_chain(text: str, steps: Iterable[Step]) -> str:
    """
    Aplica, da esquerda para a direita, uma sequência de substituições regex.
    Ex.: replace_chain("12345", [(r"(\\d{3})(\\d)", r"\\1.\\2", 1)]) -> "123.45"
    """
    return reduce(
        lambda acc, step: re.sub(step[0], step[1], acc, count=step[2], flags=re.ASCII),
        steps,
        text,
    )
