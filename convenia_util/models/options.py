from __future__ import annotations
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from convenia_util.utils.config import settings
from convenia_util.utils.text import to_bool


class PluginOptions(BaseModel):
    """
    Opções de integração com o ambiente de renderização.
    Cada chave é independente e desligada por padrão.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    formatters: bool = Field(False, description="Expõe o namespace 'format' nos templates")
    format_filters: bool = Field(False, description="Registra cada formatador como filtro")
    validators: bool = Field(False, description="Expõe o namespace 'validate' nos templates")

    @field_validator("formatters", "format_filters", "validators", mode="before")
    @classmethod
    def _coerce_bool(cls, v: Any):
        if v is None:
            return False
        b = to_bool(v)
        return v if b is None else b

    @classmethod
    def from_settings(cls) -> "PluginOptions":
        s = settings()
        return cls(
            formatters=s["FORMATTERS"],
            format_filters=s["FORMAT_FILTERS"],
            validators=s["VALIDATORS"],
        )

    def enabled(self) -> list[str]:
        return [name for name, on in self.model_dump().items() if on]
