"""
Extração de caracteres significativos de documentos.
Funções puras: nunca falham, quem valida o tamanho é o pipeline do documento.
"""
import re
from typing import Optional

_NON_DIGITS = re.compile(r"[^0-9]")
_NON_ALPHANUMERICS = re.compile(r"[^0-9A-Za-z]")


def only_digits(value: Optional[str]) -> str:
    """
    Remove tudo que não for dígito, preservando a ordem.
    Exemplo: '123.456.789-09' -> '12345678909'
    """
    return _NON_DIGITS.sub("", value or "")


def only_alphanumerics(value: Optional[str]) -> str:
    """
    Mantém dígitos e letras (em maiúsculas). Usado pelo CNPJ alfanumérico.
    Exemplo: '12.abc.345/01de-35' -> '12ABC34501DE35'
    """
    return _NON_ALPHANUMERICS.sub("", value or "").upper()


def has_digits(value: str) -> bool:
    return any("0" <= c <= "9" for c in value)
