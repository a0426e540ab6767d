"""
Chaves PIX: detecção do tipo pelo formato e validação pelo validador do tipo.

Ordem de detecção: CPF -> CNPJ -> telefone -> e-mail -> chave aleatória.
O primeiro formato que casar decide o tipo; a chave é então validada com as
regras daquele tipo (dígitos verificadores, plano de numeração, etc.).
"""
import logging
import re
from enum import Enum
from typing import Callable, Dict, Optional, Tuple

from brvalidators.utils.cnpj_utils import CNPJUtils
from brvalidators.utils.cpf_utils import CPFUtils
from brvalidators.utils.digits import only_alphanumerics, only_digits
from brvalidators.utils.errors import DocumentValidationError, ErrorKind
from brvalidators.utils.phone_utils import COUNTRY_CODE, PhoneUtils, national_number

logger = logging.getLogger(__name__)

PIX_KEY = "Chave PIX"
EMAIL_MAX_LENGTH = 77

_PHONE_SHAPE = re.compile(r"\+55\d{10,11}|\d{10,11}")
_EMAIL = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
_RANDOM_KEY_SHAPE = re.compile(r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}", re.IGNORECASE)
_UUID_V4 = re.compile(r"[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}")


class PixKeyType(str, Enum):
    CPF = "CPF"
    CNPJ = "CNPJ"
    PHONE = "PHONE"
    EMAIL = "EMAIL"
    RANDOM = "RANDOM"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    PixKeyType.CPF: "CPF",
    PixKeyType.CNPJ: "CNPJ",
    PixKeyType.PHONE: "Telefone",
    PixKeyType.EMAIL: "E-mail",
    PixKeyType.RANDOM: "Chave aleatória",
}


def _is_email_shape(key: str) -> bool:
    return "@" in key


# Ordem importa: 11 dígitos soltos são sempre CPF, nunca telefone
_SHAPES = (
    (PixKeyType.CPF, CPFUtils.is_cpf_format),
    (PixKeyType.CNPJ, CNPJUtils.is_cnpj_format),
    (PixKeyType.PHONE, lambda key: bool(_PHONE_SHAPE.fullmatch(key))),
    (PixKeyType.EMAIL, _is_email_shape),
    (PixKeyType.RANDOM, lambda key: bool(_RANDOM_KEY_SHAPE.fullmatch(key))),
)


class PixUtils:
    @staticmethod
    def detect_type(key: str) -> Optional[PixKeyType]:
        """
        Identifica o tipo da chave só pelo formato, sem validar.
        Retorno:
            PixKeyType ou None se nenhum formato casar
        """
        key = (key or "").strip()
        for key_type, matches in _SHAPES:
            if matches(key):
                return key_type
        return None

    @staticmethod
    def validate_email(email: str) -> str:
        email = (email or "").strip()
        if len(email) > EMAIL_MAX_LENGTH:
            raise DocumentValidationError(
                ErrorKind.INVALID_FORMAT, PIX_KEY, f"e-mail com mais de {EMAIL_MAX_LENGTH} caracteres"
            )
        if not _EMAIL.fullmatch(email):
            raise DocumentValidationError(ErrorKind.INVALID_FORMAT, PIX_KEY, "e-mail mal formado")
        return email.lower()

    @staticmethod
    def validate_random_key(key: str) -> str:
        key = (key or "").strip().lower()
        if not _RANDOM_KEY_SHAPE.fullmatch(key):
            raise DocumentValidationError(ErrorKind.INVALID_FORMAT, PIX_KEY, "chave aleatória mal formada")
        if not _UUID_V4.fullmatch(key):
            raise DocumentValidationError(ErrorKind.INVALID_FORMAT, PIX_KEY, "chave aleatória deve ser um UUID versão 4")
        return key

    @staticmethod
    def validate_with_type(key: str) -> Tuple[PixKeyType, str]:
        """
        Detecta o tipo e valida a chave.
        Parâmetros:
            key (str): chave PIX em qualquer formato aceito
        Retorno:
            (PixKeyType, str): tipo e chave canônica
            (CPF/CNPJ só dígitos, telefone em E.164, e-mail e UUID em minúsculas)
        Levanta:
            DocumentValidationError: UNRECOGNIZED_PIX_KEY_FORMAT ou o erro do validador do tipo
        """
        key = (key or "").strip()
        key_type = PixUtils.detect_type(key)
        if key_type is None:
            logger.debug("Chave PIX sem formato reconhecido")
            raise DocumentValidationError(ErrorKind.UNRECOGNIZED_PIX_KEY_FORMAT, PIX_KEY, "formato não reconhecido")
        return key_type, _VALIDATORS[key_type](key)

    @staticmethod
    def validate_pix_key(key: str) -> str:
        return PixUtils.validate_with_type(key)[1]

    @staticmethod
    def is_valid_pix_key(key: str) -> bool:
        try:
            PixUtils.validate_with_type(key)
        except DocumentValidationError:
            return False
        return True

    @staticmethod
    def normalize(key: str) -> str:
        """Normaliza sem validar; chaves sem tipo reconhecido voltam só sem espaços nas pontas."""
        key = (key or "").strip()
        key_type = PixUtils.detect_type(key)
        if key_type is PixKeyType.CPF:
            return only_digits(key)
        if key_type is PixKeyType.CNPJ:
            return only_alphanumerics(key)
        if key_type is PixKeyType.PHONE:
            return f"+{COUNTRY_CODE}{national_number(key)}"
        if key_type in (PixKeyType.EMAIL, PixKeyType.RANDOM):
            return key.lower()
        return key

    @staticmethod
    def mask(key: str) -> str:
        """Versão da chave segura para logs."""
        key = (key or "").strip()
        key_type = PixUtils.detect_type(key)
        if key_type is PixKeyType.CPF:
            return CPFUtils.mask_cpf(key)
        if key_type is PixKeyType.CNPJ:
            return CNPJUtils.mask_cnpj(key)
        if key_type is PixKeyType.PHONE:
            return f"+{COUNTRY_CODE} {PhoneUtils.mask_phone(national_number(key))}"
        if key_type is PixKeyType.EMAIL:
            local, _, domain = key.partition("@")
            return f"{local[0]}***@{domain}" if len(local) > 1 else f"***@{domain}"
        if key_type is PixKeyType.RANDOM:
            return f"{key[:4]}****-****-****-****-****"
        return key


_VALIDATORS: Dict[PixKeyType, Callable[[str], str]] = {
    PixKeyType.CPF: CPFUtils.validate_cpf,
    PixKeyType.CNPJ: CNPJUtils.validate_cnpj,
    PixKeyType.PHONE: PhoneUtils.to_e164,
    PixKeyType.EMAIL: PixUtils.validate_email,
    PixKeyType.RANDOM: PixUtils.validate_random_key,
}
