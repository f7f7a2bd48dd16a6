from .validators import VALIDATE, is_type, is_cpf, is_date
from .formatters import FORMAT, to_cpf, to_rg, to_money, to_years, to_date, to_empty

__all__ = [
    "VALIDATE", "is_type", "is_cpf", "is_date",
    "FORMAT", "to_cpf", "to_rg", "to_money", "to_years", "to_date", "to_empty",
]
