from __future__ import annotations
import os
import types
from datetime import datetime

import pytest

from convenia_util.utils.config import ENV_PREFIX, reset_settings

# ---------- ISOLAMENTO DE CONFIGURAÇÃO ----------

@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """
    Remove variáveis CONVENIA_* do ambiente e overrides de outros testes.
    """
    for k in list(os.environ):
        if k.startswith(ENV_PREFIX):
            monkeypatch.delenv(k, raising=False)
    reset_settings()
    yield
    reset_settings()

# ---------- DATAS ----------

@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2016, 12, 22, 12, 0)

@pytest.fixture
def valid_cpfs() -> list[str]:
    # CPFs de teste amplamente usados
    return ["529.982.247-25", "111.444.777-35", "52998224725"]

# ---------- UTIL: MOCK STREAMLIT PARA TESTES DE COMPONENTES ----------

@pytest.fixture
def mock_streamlit(monkeypatch):
    """
    Troca o 'st' usado pelos componentes por um namespace mínimo que
    registra as chamadas. `st.typed` define o que o text_input devolve.
    """
    import convenia_util.components.fields as fields

    calls = []
    st = types.SimpleNamespace(typed="", calls=calls)

    def _text_input(label, value="", key=None):
        calls.append(("text_input", label))
        return st.typed
    st.text_input = _text_input
    st.caption = lambda text: calls.append(("caption", text))
    st.error = lambda text: calls.append(("error", text))

    monkeypatch.setattr(fields, "st", st)
    return st
