from __future__ import annotations
from types import MappingProxyType
from typing import Any, Optional

from convenia_util.models.type_tag import TypeTag, type_tag
from convenia_util.utils.dates import get_date_format, parse_date
from convenia_util.utils.text import only_digits

def is_type(value: Any, tag: TypeTag | str) -> bool:
    """
    Valida se a etiqueta de tipo do valor é a especificada.
    (12, 'Number') -> True
    ({'name': 'Lucas'}, 'Object') -> True
    ([2, 3], 'Set') -> False
    """
    return type_tag(value) == tag

def _check_digit(digits: str, size: int) -> int:
    total = sum(int(d) * ((size + 1) - i) for i, d in enumerate(digits[:size]))
    rest = 11 - (total % 11)
    return 0 if rest > 9 else rest

def is_cpf(cpf: Any) -> bool:
    """
    Valida CPF pelos dois dígitos verificadores (módulo 11).
    Aceita com/sem máscara; apenas str.
    """
    if not is_type(cpf, TypeTag.STRING):
        return False

    n = only_digits(cpf)
    if not n.isdigit() or n == "00000000000" or len(n) != 11:
        return False

    # 1º e 2º DV
    for pos in (9, 10):
        if _check_digit(n, pos) != int(n[pos]):
            return False
    return True

def is_date(text: Any, format: Optional[str] = None) -> bool:
    """
    Valida se é uma data no formato especificado ou, quando omitido, em um
    dos formatos 'DD/MM/YYYY', 'DD-MM-YYYY' e 'YYYY-MM-DD'.
    ('31/02/2006') -> False
    ('21/12/2006', 'YYYY-MM-DD') -> False
    """
    resolved = format or get_date_format(text)
    if not resolved:
        return False
    return parse_date(text, resolved) is not None


VALIDATE = MappingProxyType({
    "is_type": is_type,
    "is_cpf": is_cpf,
    "is_date": is_date,
})
