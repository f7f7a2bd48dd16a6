from __future__ import annotations
import os
from functools import lru_cache
from typing import Dict

ENV_PREFIX = "CONVENIA_"

_DEFAULTS: Dict[str, str] = {
    # Formatação
    "EMPTY_CHAR": "-",
    # Logging
    "LOG_LEVEL": "WARNING",
    # Integração (install)
    "FORMATTERS": "0",
    "FORMAT_FILTERS": "0",
    "VALIDATORS": "0",
}

# armazenamento interno para overrides em tempo de execução
_runtime_overrides: Dict[str, str] = {}

@lru_cache(maxsize=1)
def settings() -> Dict[str, str]:
    """
    Retorna um dicionário com as configurações efetivas:
    - ENV tem prioridade (prefixo CONVENIA_, p.ex. CONVENIA_EMPTY_CHAR)
    - overrides definidos via set_settings()
    - defaults do projeto
    """
    merged: Dict[str, str] = {}
    for k, default in _DEFAULTS.items():
        env_val = os.environ.get(ENV_PREFIX + k)
        if env_val is not None:
            merged[k] = env_val
        elif k in _runtime_overrides:
            merged[k] = _runtime_overrides[k]
        else:
            merged[k] = default
    return dict(merged)

def set_settings(overrides: Dict[str, object]) -> None:
    """
    Define overrides em tempo de execução (útil em testes).
    Invalida o cache de settings().
    """
    unknown = set(overrides or {}) - set(_DEFAULTS)
    if unknown:
        raise KeyError(f"Configuração desconhecida: {', '.join(sorted(unknown))}")
    _runtime_overrides.update({k: str(v) for k, v in (overrides or {}).items()})
    settings.cache_clear()  # type: ignore[attr-defined]

def reset_settings() -> None:
    _runtime_overrides.clear()
    settings.cache_clear()  # type: ignore[attr-defined]

def setting(key: str) -> str:
    """Atalho: settings()[key] com KeyError amigável."""
    s = settings()
    if key not in s:
        raise KeyError(f"Configuração '{key}' não existe. Chaves válidas: {', '.join(sorted(s.keys()))}")
    return s[key]
