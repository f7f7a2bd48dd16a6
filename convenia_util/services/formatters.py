from __future__ import annotations
from datetime import date
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from types import MappingProxyType
from typing import Any, Optional

from convenia_util.models.type_tag import TypeTag
from convenia_util.services.validators import is_type
from convenia_util.utils.config import setting
from convenia_util.utils.dates import (
    BR_FORMAT, ISO_FORMAT, diff_years, format_date, get_date_format, parse_date, today,
)
from convenia_util.utils.logs import get_logger
from convenia_util.utils.text import has_digit, replace_chain

log = get_logger()

_CPF_STEPS = (
    (r"\D", "", 0),
    (r"(\d{3})(\d)", r"\1.\2", 1),
    (r"(\d{3})(\d)", r"\1.\2", 1),
    (r"(\d{3})(\d{1,2})$", r"\1-\2", 1),
)

# dígito verificador do RG pode ser letra
_RG_STEPS = (
    (r"[^\dABX]", "", 0),
    (r"(\d{2})(\d)", r"\1.\2", 1),
    (r"(\d{3})(\d)", r"\1.\2", 1),
    (r"(\d{3})([\dABX])$", r"\1-\2", 1),
)

_MONEY_STEPS = (
    (r"\.", ",", 1),
    (r"(\d)(?=(\d{3})+(?!\d))", r"\1.", 0),
)

_CENTS = Decimal("0.01")

def to_cpf(cpf: Any) -> Optional[str]:
    """
    Transforma um valor para a formatação de CPF.
    ('00000000000') -> '000.000.000-00'
    ('12345678') -> '123.456.78'
    ('Abacaxi') -> None
    """
    if not has_digit(cpf):
        return None
    return replace_chain(cpf, _CPF_STEPS)

def to_rg(rg: Any) -> Optional[str]:
    """
    Transforma um valor para a formatação de RG.
    ('000000000') -> '00.000.000-0'
    ('12345678X') -> '12.345.678-X'
    """
    if not has_digit(rg):
        return None
    return replace_chain(rg, _RG_STEPS)

def _to_decimal(number: Any) -> Optional[Decimal]:
    if is_type(number, TypeTag.NUMBER):
        raw = str(number)
    elif is_type(number, TypeTag.STRING) and number.strip():
        raw = number.strip()
    else:
        return None
    try:
        value = Decimal(raw)
    except (InvalidOperation, ValueError):
        return None
    return value if value.is_finite() else None

def to_money(number: Any) -> Optional[str]:
    """
    Formata um valor como moeda (BRL).
    ('1200') -> 'R$ 1.200,00'
    (15.50) -> 'R$ 15,50'
    ('Abacaxi') -> None
    """
    value = _to_decimal(number)
    try:
        rounded = None if value is None else value.quantize(_CENTS, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        # expoente grande demais para a precisão do contexto
        rounded = None
    if rounded is None:
        log.debug("valor monetário inválido: %r", number)
        return None
    return "R$ " + replace_chain(f"{rounded:f}", _MONEY_STEPS)

def to_date(text: Any, to_database: bool = False) -> Optional[str]:
    """
    Formata uma data 'YYYY-MM-DD', 'DD-MM-YYYY' ou 'DD/MM/YYYY' em 'DD/MM/YYYY'.
    Com to_database=True o resultado fica em 'YYYY-MM-DD'.
    ('21-12-2006') -> '21/12/2006'
    ('21/12/2006', True) -> '2006-12-21'
    ('2006/12/21') -> None
    """
    source = get_date_format(text)
    if source is None:
        return None
    parsed = parse_date(text, source)
    if parsed is None:
        return None
    return format_date(parsed, ISO_FORMAT if to_database else BR_FORMAT)

def to_years(text: Any, now: Optional[date] = None) -> Optional[int]:
    """
    Quantidade de anos completos desde a data até hoje (ou `now`).
    ('21-12-2006', now=2016-12-22) -> 10
    ('Abacaxi') -> None
    """
    formatted = to_date(text)
    if formatted is None:
        return None
    born = parse_date(formatted, BR_FORMAT)
    return diff_years(born, now or today())

def to_empty(value: Any, char: Optional[str] = None) -> Any:
    """
    Troca valores vazios (None, '', 0, coleções vazias) pelo caractere
    configurado (EMPTY_CHAR, padrão '-').
    """
    if char is None:
        char = setting("EMPTY_CHAR")
    return value or char


FORMAT = MappingProxyType({
    "to_cpf": to_cpf,
    "to_rg": to_rg,
    "to_money": to_money,
    "to_years": to_years,
    "to_date": to_date,
    "to_empty": to_empty,
})
