"""
Valores canônicos de documentos já validados.

Cada classe guarda só a forma canônica (sem pontuação) e é imutável. A construção
passa sempre pelo validador: `Cpf.parse('123.456.789-09')` aceita qualquer
pontuação, `Cpf('12345678909')` exige a forma canônica. Igualdade, hash e
ordenação usam apenas o valor canônico.
"""
from dataclasses import dataclass
from typing import Optional, Union

from brvalidators.utils.cep_utils import CEPUtils
from brvalidators.utils.cnpj_utils import CNPJUtils
from brvalidators.utils.cpf_utils import CPFUtils
from brvalidators.utils.errors import DocumentValidationError, ErrorKind
from brvalidators.utils.phone_utils import COUNTRY_CODE, PhoneUtils
from brvalidators.utils.pix_utils import PIX_KEY, PixKeyType, PixUtils


def _ensure_canonical(document_type: str, value: str, canonical: str) -> None:
    if value != canonical:
        raise DocumentValidationError(
            ErrorKind.INVALID_FORMAT, document_type, "valor fora da forma canônica; use parse()"
        )


@dataclass(frozen=True, order=True)
class Cpf:
    digits: str

    def __post_init__(self) -> None:
        _ensure_canonical("CPF", self.digits, CPFUtils.validate_cpf(self.digits))

    @classmethod
    def parse(cls, raw: str) -> "Cpf":
        return cls(CPFUtils.validate_cpf(raw))

    @property
    def formatted(self) -> str:
        return CPFUtils.format_cpf(self.digits)

    @property
    def masked(self) -> str:
        return CPFUtils.mask_cpf(self.digits)

    def __str__(self) -> str:
        return self.formatted

    def __repr__(self) -> str:
        # CPF completo não vai para logs
        return f"Cpf('{self.masked}')"


@dataclass(frozen=True, order=True)
class Cnpj:
    """CNPJ validado. `digits` pode conter letras maiúsculas no CNPJ alfanumérico."""
    digits: str

    def __post_init__(self) -> None:
        _ensure_canonical("CNPJ", self.digits, CNPJUtils.validate_cnpj(self.digits))

    @classmethod
    def parse(cls, raw: str) -> "Cnpj":
        return cls(CNPJUtils.validate_cnpj(raw))

    @property
    def formatted(self) -> str:
        return CNPJUtils.format_cnpj(self.digits)

    @property
    def masked(self) -> str:
        return CNPJUtils.mask_cnpj(self.digits)

    @property
    def base(self) -> str:
        return self.digits[:8]

    @property
    def branch(self) -> str:
        return self.digits[8:12]

    @property
    def is_main_branch(self) -> bool:
        return CNPJUtils.is_main_branch(self.digits)

    def __str__(self) -> str:
        return self.formatted


@dataclass(frozen=True, order=True)
class Cep:
    digits: str

    def __post_init__(self) -> None:
        _ensure_canonical("CEP", self.digits, CEPUtils.validate_cep(self.digits))

    @classmethod
    def parse(cls, raw: str) -> "Cep":
        return cls(CEPUtils.validate_cep(raw))

    @property
    def formatted(self) -> str:
        return CEPUtils.format_cep(self.digits)

    @property
    def masked(self) -> str:
        return self.formatted

    @property
    def region(self) -> int:
        return int(self.digits[0])

    @property
    def region_name(self) -> str:
        return CEPUtils.region_name(self.digits)

    @property
    def subregion(self) -> str:
        return self.digits[:2]

    @property
    def sector(self) -> str:
        return self.digits[:5]

    def __str__(self) -> str:
        return self.formatted


@dataclass(frozen=True, order=True)
class Phone:
    """Telefone validado; `digits` é o número nacional (DDD + assinante), sem +55."""
    digits: str

    def __post_init__(self) -> None:
        _ensure_canonical("Telefone", self.digits, PhoneUtils.validate_phone(self.digits))

    @classmethod
    def parse(cls, raw: str) -> "Phone":
        return cls(PhoneUtils.validate_phone(raw))

    @property
    def formatted(self) -> str:
        return PhoneUtils.format_phone(self.digits)

    @property
    def masked(self) -> str:
        return PhoneUtils.mask_phone(self.digits)

    @property
    def e164(self) -> str:
        return f"+{COUNTRY_CODE}{self.digits}"

    @property
    def ddd(self) -> str:
        return self.digits[:2]

    @property
    def state(self) -> Optional[str]:
        return PhoneUtils.state_for_ddd(self.ddd)

    @property
    def is_mobile(self) -> bool:
        return len(self.digits) == 11

    @property
    def is_landline(self) -> bool:
        return len(self.digits) == 10

    def __str__(self) -> str:
        return self.formatted


@dataclass(frozen=True, order=True)
class EmailKey:
    address: str

    def __post_init__(self) -> None:
        _ensure_canonical(PIX_KEY, self.address, PixUtils.validate_email(self.address))

    @property
    def formatted(self) -> str:
        return self.address

    def __str__(self) -> str:
        return self.address


@dataclass(frozen=True, order=True)
class RandomKey:
    value: str

    def __post_init__(self) -> None:
        _ensure_canonical(PIX_KEY, self.value, PixUtils.validate_random_key(self.value))

    @property
    def formatted(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


PixDocument = Union[Cpf, Cnpj, Phone, EmailKey, RandomKey]


@dataclass(frozen=True, order=True)
class PixKey:
    """
    Chave PIX validada: tipo + chave canônica.
    `document` devolve o valor tipado correspondente (Cpf, Cnpj, Phone, EmailKey ou RandomKey).
    """
    key_type: PixKeyType
    key: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "key_type", PixKeyType(self.key_type))
        key_type, canonical = PixUtils.validate_with_type(self.key)
        if key_type is not self.key_type:
            raise DocumentValidationError(
                ErrorKind.INVALID_FORMAT, PIX_KEY, f"chave do tipo {key_type.label}, não {self.key_type.label}"
            )
        _ensure_canonical(PIX_KEY, self.key, canonical)

    @classmethod
    def parse(cls, raw: str) -> "PixKey":
        key_type, canonical = PixUtils.validate_with_type(raw)
        return cls(key_type, canonical)

    @property
    def document(self) -> PixDocument:
        if self.key_type is PixKeyType.CPF:
            return Cpf(self.key)
        if self.key_type is PixKeyType.CNPJ:
            return Cnpj(self.key)
        if self.key_type is PixKeyType.PHONE:
            return Phone(self.key[len(COUNTRY_CODE) + 1:])
        if self.key_type is PixKeyType.EMAIL:
            return EmailKey(self.key)
        return RandomKey(self.key)

    @property
    def formatted(self) -> str:
        if self.key_type is PixKeyType.PHONE:
            return PhoneUtils.format_phone(self.key)
        return self.document.formatted

    @property
    def masked(self) -> str:
        return PixUtils.mask(self.key)

    def __str__(self) -> str:
        return self.key
