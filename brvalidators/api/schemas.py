"""
Adaptadores pydantic para os documentos validados.
Os tipos CpfField, CnpjField, ... validam com o mesmo parse() do núcleo,
serializam para a forma canônica e publicam um JSON schema de string.
"""
from enum import Enum
from typing import Annotated, Any, Callable, Optional

from pydantic import BaseModel, ConfigDict, PlainSerializer, PlainValidator, WithJsonSchema

from brvalidators.utils.documents import Cep, Cnpj, Cpf, Phone, PixKey


class DocumentType(str, Enum):
    cpf = "cpf"
    cnpj = "cnpj"
    cep = "cep"
    phone = "phone"
    pix = "pix"


def _parser(document_cls) -> Callable[[Any], Any]:
    def parse(value: Any):
        if isinstance(value, document_cls):
            return value
        if not isinstance(value, str):
            raise ValueError(f"{document_cls.__name__} deve ser informado como texto")
        # DocumentValidationError é ValueError: vira erro de campo no pydantic
        return document_cls.parse(value)
    return parse


def _string_schema(pattern: Optional[str], example: str) -> WithJsonSchema:
    schema = {"type": "string", "examples": [example]}
    if pattern:
        schema["pattern"] = pattern
    return WithJsonSchema(schema)


CpfField = Annotated[
    Cpf,
    PlainValidator(_parser(Cpf)),
    PlainSerializer(lambda cpf: cpf.digits, return_type=str),
    _string_schema(r"^\d{3}\.?\d{3}\.?\d{3}-?\d{2}$", "123.456.789-09"),
]

CnpjField = Annotated[
    Cnpj,
    PlainValidator(_parser(Cnpj)),
    PlainSerializer(lambda cnpj: cnpj.digits, return_type=str),
    _string_schema(r"^[0-9A-Z]{2}\.?[0-9A-Z]{3}\.?[0-9A-Z]{3}/?[0-9A-Z]{4}-?\d{2}$", "11.222.333/0001-81"),
]

CepField = Annotated[
    Cep,
    PlainValidator(_parser(Cep)),
    PlainSerializer(lambda cep: cep.digits, return_type=str),
    _string_schema(r"^\d{5}-?\d{3}$", "01001-000"),
]

PhoneField = Annotated[
    Phone,
    PlainValidator(_parser(Phone)),
    PlainSerializer(lambda phone: phone.digits, return_type=str),
    _string_schema(None, "(11) 98765-4321"),
]

PixKeyField = Annotated[
    PixKey,
    PlainValidator(_parser(PixKey)),
    PlainSerializer(lambda pix: pix.key, return_type=str),
    _string_schema(None, "+5511987654321"),
]


class DocumentBundle(BaseModel):
    """Conjunto opcional de documentos para normalização em lote."""
    model_config = ConfigDict(extra="forbid")

    cpf: Optional[CpfField] = None
    cnpj: Optional[CnpjField] = None
    cep: Optional[CepField] = None
    phone: Optional[PhoneField] = None
    pix: Optional[PixKeyField] = None
