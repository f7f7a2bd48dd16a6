from __future__ import annotations
from collections.abc import Mapping, MutableMapping
from typing import Any, TypeVar

from jinja2 import Environment, StrictUndefined

from convenia_util.models.options import PluginOptions
from convenia_util.services.formatters import FORMAT
from convenia_util.services.validators import VALIDATE
from convenia_util.utils.logs import get_logger

log = get_logger()

E = TypeVar("E")

def _resolve_options(options: PluginOptions | Mapping[str, Any] | None, flags: dict) -> PluginOptions:
    if isinstance(options, PluginOptions):
        return options
    if options is not None:
        return PluginOptions.model_validate(dict(options))
    if flags:
        return PluginOptions.model_validate(flags)
    return PluginOptions.from_settings()

def install(env: E, options: PluginOptions | Mapping[str, Any] | None = None, **flags: Any) -> E:
    """
    Disponibiliza formatadores/validadores no ambiente de templates.
    - formatters: env.globals['format']
    - format_filters: um filtro por formatador (ex.: {{ cpf|to_cpf }})
    - validators: env.globals['validate']
    Sem options nem flags, usa a configuração (CONVENIA_FORMATTERS etc.).
    """
    env_globals = getattr(env, "globals", None)
    env_filters = getattr(env, "filters", None)
    if not isinstance(env_globals, MutableMapping) or not isinstance(env_filters, MutableMapping):
        raise TypeError(f"Ambiente sem 'globals'/'filters' mutáveis: {type(env).__name__}")

    opts = _resolve_options(options, flags)

    if opts.formatters:
        env_globals["format"] = FORMAT
        log.info("namespace 'format' disponível nos templates")

    if opts.format_filters:
        env_filters.update(FORMAT)
        log.info("filtros registrados: %s", ", ".join(FORMAT))

    if opts.validators:
        env_globals["validate"] = VALIDATE
        log.info("namespace 'validate' disponível nos templates")

    return env

def build_env(options: PluginOptions | Mapping[str, Any] | None = None, **env_kwargs: Any) -> Environment:
    kwargs = {"undefined": StrictUndefined, "autoescape": False, **env_kwargs}
    env = Environment(**kwargs)
    return install(env, options if options is not None else PluginOptions(
        formatters=True, format_filters=True, validators=True,
    ))
