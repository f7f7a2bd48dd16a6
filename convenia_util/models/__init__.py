from .type_tag import TypeTag, type_tag
from .options import PluginOptions

__all__ = [
    "TypeTag",
    "type_tag",
    "PluginOptions",
]
