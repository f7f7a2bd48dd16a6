import streamlit as st

from convenia_util.services.formatters import to_cpf, to_date, to_rg
from convenia_util.services.validators import is_cpf, is_date
from convenia_util.utils.text import has_digit

# kind -> (formatador, validador, mensagem de erro)
KINDS = {
    "cpf": (to_cpf, is_cpf, "CPF inválido"),
    "rg": (to_rg, has_digit, "RG inválido"),
    "date": (to_date, is_date, "Data inválida (use DD/MM/AAAA)"),
}

def document_input(label: str, kind: str = "cpf", value: str = "", key: str | None = None):
    """
    Campo de texto com máscara/validação de documento ou data.
    Retorna (valor_formatado | None, valido: bool)
    """
    if kind not in KINDS:
        raise ValueError(f"Tipo de campo desconhecido: {kind!r}. Use: {', '.join(KINDS)}")
    fmt, check, message = KINDS[kind]

    raw = (st.text_input(label, value=value, key=key) or "").strip()
    if not raw:
        return None, False

    formatted = fmt(raw)
    valid = bool(check(raw))
    if formatted:
        st.caption(formatted)
    if not valid:
        st.error(message)
    return formatted, valid
