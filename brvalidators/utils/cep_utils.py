"""
Validação e formatação de CEP (8 dígitos, sem dígito verificador).
"""
import re
from typing import Optional

from brvalidators.utils.checksum import DocumentFormat
from brvalidators.utils.digits import only_digits
from brvalidators.utils.errors import DocumentValidationError

# Primeiro dígito do CEP -> região postal
REGION_NAMES = {
    0: "Grande São Paulo",
    1: "Interior de São Paulo",
    2: "Rio de Janeiro e Espírito Santo",
    3: "Minas Gerais",
    4: "Bahia e Sergipe",
    5: "Pernambuco, Alagoas, Paraíba e Rio Grande do Norte",
    6: "Ceará, Piauí, Maranhão, Pará, Amazonas, Acre, Amapá e Roraima",
    7: "Distrito Federal, Goiás, Tocantins, Mato Grosso, Mato Grosso do Sul e Rondônia",
    8: "Paraná e Santa Catarina",
    9: "Rio Grande do Sul",
}


def _not_all_zeros(raw: str, value: str) -> Optional[str]:
    if value == "00000000":
        return "CEP 00000000 não existe"
    return None


CEP_FORMAT = DocumentFormat(name="CEP", lengths=(8,), rule=_not_all_zeros)

_CEP_SHAPE = re.compile(r"\d{5}-?\d{3}")


class CEPUtils:
    @staticmethod
    def normalize_cep(cep: str) -> str:
        return only_digits(cep)

    @staticmethod
    def validate_cep(cep: str) -> str:
        """
        Valida o CEP e devolve os 8 dígitos.
        Levanta DocumentValidationError para tamanho errado ou CEP zerado.
        """
        return CEP_FORMAT.validate(cep)

    @staticmethod
    def is_valid_cep(cep: str) -> bool:
        try:
            CEPUtils.validate_cep(cep)
        except DocumentValidationError:
            return False
        return True

    @staticmethod
    def format_cep(cep: str) -> str:
        digits = only_digits(cep)
        if len(digits) != 8:
            return cep
        return f"{digits[:5]}-{digits[5:]}"

    @staticmethod
    def is_cep_format(cep: str) -> bool:
        return bool(_CEP_SHAPE.fullmatch(cep or ""))

    @staticmethod
    def region(cep: str) -> Optional[int]:
        digits = only_digits(cep)
        return int(digits[0]) if digits else None

    @staticmethod
    def region_name(cep: str) -> Optional[str]:
        region = CEPUtils.region(cep)
        return None if region is None else REGION_NAMES[region]

    @staticmethod
    def subregion(cep: str) -> Optional[str]:
        digits = only_digits(cep)
        return digits[:2] if len(digits) >= 2 else None

    @staticmethod
    def sector(cep: str) -> Optional[str]:
        digits = only_digits(cep)
        return digits[:5] if len(digits) >= 5 else None
