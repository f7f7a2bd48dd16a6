from __future__ import annotations
import numbers
import re
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any


class TypeTag(str, Enum):
    STRING = "String"
    NUMBER = "Number"
    BOOLEAN = "Boolean"
    NULL = "Null"
    ARRAY = "Array"
    OBJECT = "Object"
    SET = "Set"
    FUNCTION = "Function"
    DATE = "Date"
    REGEXP = "RegExp"
    ERROR = "Error"


def type_tag(value: Any) -> TypeTag:
    """
    Obtém a etiqueta de tipo do valor.
    bool é verificado antes de número, já que bool é subclasse de int.
    """
    if value is None:
        return TypeTag.NULL
    if isinstance(value, str):
        return TypeTag.STRING
    if isinstance(value, bool):
        return TypeTag.BOOLEAN
    if isinstance(value, (numbers.Real, Decimal)):
        return TypeTag.NUMBER
    if isinstance(value, (list, tuple)):
        return TypeTag.ARRAY
    if isinstance(value, (set, frozenset)):
        return TypeTag.SET
    if isinstance(value, date):
        return TypeTag.DATE
    if isinstance(value, re.Pattern):
        return TypeTag.REGEXP
    if isinstance(value, BaseException):
        return TypeTag.ERROR
    if callable(value):
        return TypeTag.FUNCTION
    return TypeTag.OBJECT
