from .components.jinja_env import install, build_env
from .models import PluginOptions, TypeTag, type_tag
from .services.formatters import FORMAT, to_cpf, to_rg, to_money, to_years, to_date, to_empty
from .services.validators import VALIDATE, is_type, is_cpf, is_date
from .utils.dates import get_date_format

# nomes curtos, como usados nos templates
format = FORMAT
validate = VALIDATE

__all__ = [
    "install", "build_env",
    "PluginOptions", "TypeTag", "type_tag",
    "format", "validate", "FORMAT", "VALIDATE",
    "is_type", "is_cpf", "is_date",
    "to_cpf", "to_rg", "to_money", "to_years", "to_date", "to_empty",
    "get_date_format",
]
