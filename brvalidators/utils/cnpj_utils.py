"""
Módulo utilitário para validação e formatação de CNPJ.

Aceita o CNPJ numérico e o alfanumérico (letras A-Z nas 12 posições da base,
dígitos verificadores sempre numéricos). As letras entram no cálculo pelo valor
ASCII - 48, então as mesmas tabelas de pesos servem aos dois formatos.
"""
import re
from typing import Optional

from brvalidators.utils.checksum import DocumentFormat
from brvalidators.utils.digits import only_alphanumerics
from brvalidators.utils.errors import DocumentValidationError

FIRST_DIGIT_WEIGHTS = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
SECOND_DIGIT_WEIGHTS = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)

MAIN_BRANCH = "0001"


def _numeric_check_digits(raw: str, value: str) -> Optional[str]:
    if not value[-2:].isdigit():
        return "dígitos verificadores devem ser numéricos"
    return None


CNPJ_FORMAT = DocumentFormat(
    name="CNPJ",
    lengths=(14,),
    extract=only_alphanumerics,
    weight_tables=(FIRST_DIGIT_WEIGHTS, SECOND_DIGIT_WEIGHTS),
    reject_repeated=True,
    rule=_numeric_check_digits,
)

_CNPJ_SHAPE = re.compile(r"[0-9A-Z]{2}\.?[0-9A-Z]{3}\.?[0-9A-Z]{3}/?[0-9A-Z]{4}-?\d{2}", re.IGNORECASE)


class CNPJUtils:
    @staticmethod
    def normalize_cnpj(cnpj: str) -> str:
        """
        Remove pontuação do CNPJ, mantendo dígitos e letras em maiúsculas.
        Exemplo: '11.222.333/0001-81' -> '11222333000181'
        """
        return only_alphanumerics(cnpj)

    @staticmethod
    def validate_cnpj(cnpj: str) -> str:
        """
        Valida CNPJ usando o algoritmo da Receita Federal.

        Verifica:
        - Tamanho (14 caracteres após remover a pontuação)
        - Dígitos verificadores numéricos
        - Rejeita CNPJs com todos os caracteres iguais
        - Dígitos verificadores

        Args:
            cnpj: CNPJ para validação (com ou sem formatação)

        Returns:
            CNPJ normalizado

        Raises:
            DocumentValidationError: no primeiro critério que falhar
        """
        return CNPJ_FORMAT.validate(cnpj)

    @staticmethod
    def is_valid_cnpj(cnpj: str) -> bool:
        try:
            CNPJUtils.validate_cnpj(cnpj)
        except DocumentValidationError:
            return False
        return True

    @staticmethod
    def format_cnpj(cnpj: str) -> str:
        """
        Formata CNPJ no padrão XX.XXX.XXX/XXXX-XX.
        Entradas sem 14 caracteres voltam sem alteração.
        """
        value = only_alphanumerics(cnpj)
        if len(value) != 14:
            return cnpj
        return f"{value[:2]}.{value[2:5]}.{value[5:8]}/{value[8:12]}-{value[12:]}"

    @staticmethod
    def mask_cnpj(cnpj: str) -> str:
        """Mantém raiz inicial, final da filial e dígitos: '11.***.***/**01-81'."""
        value = only_alphanumerics(cnpj)
        if len(value) != 14:
            return cnpj
        return f"{value[:2]}.***.***/**{value[10:12]}-{value[12:]}"

    @staticmethod
    def is_cnpj_format(cnpj: str) -> bool:
        return bool(_CNPJ_SHAPE.fullmatch(cnpj or ""))

    @staticmethod
    def extract_base(cnpj: str) -> Optional[str]:
        """Raiz do CNPJ (8 primeiros caracteres), comum a matriz e filiais."""
        value = only_alphanumerics(cnpj)
        return value[:8] if len(value) == 14 else None

    @staticmethod
    def extract_branch(cnpj: str) -> Optional[str]:
        """Ordem do estabelecimento (posições 9 a 12)."""
        value = only_alphanumerics(cnpj)
        return value[8:12] if len(value) == 14 else None

    @staticmethod
    def is_main_branch(cnpj: str) -> bool:
        return CNPJUtils.extract_branch(cnpj) == MAIN_BRANCH
