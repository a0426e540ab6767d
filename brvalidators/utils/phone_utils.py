"""
Validação de telefones brasileiros (fixo com 10 dígitos, celular com 11).

As regras do plano de numeração ficam como dados de configuração neste módulo:
DDDs em uso, prefixo do celular e primeiros dígitos aceitos para fixo (Anatel).
"""
from typing import Optional

from brvalidators.utils.checksum import DocumentFormat
from brvalidators.utils.digits import only_digits
from brvalidators.utils.errors import DocumentValidationError

COUNTRY_CODE = "55"
MOBILE_PREFIX = "9"
LANDLINE_PREFIXES = ("2", "3", "4", "5")

DDD_STATES = {
    "11": "São Paulo (Capital e Grande SP)",
    "12": "São Paulo (Vale do Paraíba)",
    "13": "São Paulo (Baixada Santista)",
    "14": "São Paulo (Bauru)",
    "15": "São Paulo (Sorocaba)",
    "16": "São Paulo (Ribeirão Preto)",
    "17": "São Paulo (São José do Rio Preto)",
    "18": "São Paulo (Presidente Prudente)",
    "19": "São Paulo (Campinas)",
    "21": "Rio de Janeiro (Capital e Região)",
    "22": "Rio de Janeiro (Interior)",
    "24": "Rio de Janeiro (Petrópolis)",
    "27": "Espírito Santo",
    "28": "Espírito Santo",
    "31": "Minas Gerais (BH e Região)",
    "32": "Minas Gerais",
    "33": "Minas Gerais",
    "34": "Minas Gerais",
    "35": "Minas Gerais",
    "37": "Minas Gerais",
    "38": "Minas Gerais",
    "41": "Paraná (Curitiba e Região)",
    "42": "Paraná",
    "43": "Paraná",
    "44": "Paraná",
    "45": "Paraná",
    "46": "Paraná",
    "47": "Santa Catarina",
    "48": "Santa Catarina",
    "49": "Santa Catarina",
    "51": "Rio Grande do Sul (Porto Alegre)",
    "53": "Rio Grande do Sul",
    "54": "Rio Grande do Sul",
    "55": "Rio Grande do Sul",
    "61": "Distrito Federal",
    "62": "Goiás (Goiânia)",
    "63": "Tocantins",
    "64": "Goiás",
    "65": "Mato Grosso",
    "66": "Mato Grosso",
    "67": "Mato Grosso do Sul",
    "68": "Acre",
    "69": "Rondônia",
    "71": "Bahia (Salvador)",
    "73": "Bahia",
    "74": "Bahia",
    "75": "Bahia",
    "77": "Bahia",
    "79": "Sergipe",
    "81": "Pernambuco (Recife)",
    "82": "Alagoas",
    "83": "Paraíba",
    "84": "Rio Grande do Norte",
    "85": "Ceará",
    "86": "Piauí",
    "87": "Pernambuco",
    "88": "Ceará",
    "89": "Piauí",
    "91": "Pará",
    "92": "Amazonas",
    "93": "Pará",
    "94": "Pará",
    "95": "Roraima",
    "96": "Amapá",
    "97": "Amazonas",
    "98": "Maranhão",
    "99": "Maranhão",
}

VALID_DDDS = frozenset(DDD_STATES)


def national_number(phone: str) -> str:
    """
    Dígitos do telefone sem o código do país.
    '+55' é sempre removido; '55' sem '+' só quando sobram mais de 11 dígitos.
    """
    digits = only_digits(phone)
    if (phone or "").strip().startswith("+"):
        return digits[len(COUNTRY_CODE):] if digits.startswith(COUNTRY_CODE) else digits
    if digits.startswith(COUNTRY_CODE) and len(digits) > 11:
        return digits[len(COUNTRY_CODE):]
    return digits


def _numbering_plan(raw: str, number: str) -> Optional[str]:
    if raw.strip().startswith("+") and not only_digits(raw).startswith(COUNTRY_CODE):
        return f"código de país deve ser +{COUNTRY_CODE}"
    ddd, subscriber = number[:2], number[2:]
    if ddd not in VALID_DDDS:
        return f"DDD {ddd} inválido"
    if len(number) == 11 and not subscriber.startswith(MOBILE_PREFIX):
        return f"celular deve começar com {MOBILE_PREFIX}"
    if len(number) == 10 and not subscriber.startswith(LANDLINE_PREFIXES):
        return "telefone fixo deve começar com 2, 3, 4 ou 5"
    return None


PHONE_FORMAT = DocumentFormat(
    name="Telefone",
    lengths=(10, 11),
    extract=national_number,
    rule=_numbering_plan,
)


class PhoneUtils:
    @staticmethod
    def normalize_phone(phone: str) -> str:
        return national_number(phone)

    @staticmethod
    def validate_phone(phone: str) -> str:
        """
        Valida o telefone e devolve o número nacional (DDD + assinante).
        Parâmetros:
            phone (str): telefone em qualquer formato, com ou sem +55
        Retorno:
            str: 10 dígitos (fixo) ou 11 dígitos (celular)
        """
        return PHONE_FORMAT.validate(phone)

    @staticmethod
    def is_valid_phone(phone: str) -> bool:
        try:
            PhoneUtils.validate_phone(phone)
        except DocumentValidationError:
            return False
        return True

    @staticmethod
    def to_e164(phone: str) -> str:
        """Valida e devolve no formato E.164: '+5511987654321'."""
        return f"+{COUNTRY_CODE}{PhoneUtils.validate_phone(phone)}"

    @staticmethod
    def format_phone(phone: str) -> str:
        """
        '(11) 98765-4321' ou '(11) 3456-7890'; com '+55 ' na frente se a entrada trazia o país.
        Entradas que não têm 10 ou 11 dígitos voltam sem alteração.
        """
        number = national_number(phone)
        prefix = f"+{COUNTRY_CODE} " if len(only_digits(phone)) > len(number) else ""
        if len(number) == 11:
            return f"{prefix}({number[:2]}) {number[2:7]}-{number[7:]}"
        if len(number) == 10:
            return f"{prefix}({number[:2]}) {number[2:6]}-{number[6:]}"
        return phone

    @staticmethod
    def mask_phone(phone: str) -> str:
        number = national_number(phone)
        if len(number) == 11:
            return f"({number[:2]}) *****-{number[7:]}"
        if len(number) == 10:
            return f"({number[:2]}) ****-{number[6:]}"
        return phone

    @staticmethod
    def is_mobile(phone: str) -> bool:
        number = national_number(phone)
        return len(number) == 11 and number[2:].startswith(MOBILE_PREFIX)

    @staticmethod
    def is_landline(phone: str) -> bool:
        return len(national_number(phone)) == 10

    @staticmethod
    def extract_ddd(phone: str) -> Optional[str]:
        number = national_number(phone)
        return number[:2] if len(number) >= 2 else None

    @staticmethod
    def state_for_ddd(ddd: str) -> Optional[str]:
        return DDD_STATES.get(ddd)
