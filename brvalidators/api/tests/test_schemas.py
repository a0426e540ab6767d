import pytest
from pydantic import TypeAdapter, ValidationError

from brvalidators.api.schemas import CepField, CpfField, DocumentBundle, PhoneField, PixKeyField
from brvalidators.utils.documents import Cpf, Phone


def test_cpf_field_parses_and_serializes_canonical():
    adapter = TypeAdapter(CpfField)
    cpf = adapter.validate_python("123.456.789-09")
    assert cpf == Cpf("12345678909")
    assert adapter.dump_python(cpf) == "12345678909"
    assert adapter.validate_python(cpf) is cpf


def test_cpf_field_rejects_invalid_values():
    adapter = TypeAdapter(CpfField)
    with pytest.raises(ValidationError, match="CPF inválido"):
        adapter.validate_python("123.456.789-00")
    with pytest.raises(ValidationError):
        adapter.validate_python(12345678909)


def test_field_json_schema_is_string():
    schema = TypeAdapter(CepField).json_schema()
    assert schema["type"] == "string"
    assert schema["examples"] == ["01001-000"]
    assert "pattern" in schema


def test_phone_and_pix_fields():
    assert TypeAdapter(PhoneField).validate_python("(11) 98765-4321") == Phone("11987654321")
    assert TypeAdapter(PixKeyField).dump_python(TypeAdapter(PixKeyField).validate_python("+5511987654321")) == "+5511987654321"


def test_document_bundle_dump():
    bundle = DocumentBundle.model_validate({"cnpj": "11.222.333/0001-81", "phone": "+55 11 98765-4321"})
    assert bundle.model_dump(exclude_none=True) == {"cnpj": "11222333000181", "phone": "11987654321"}
    assert bundle.model_dump_json(exclude_none=True) == '{"cnpj":"11222333000181","phone":"11987654321"}'
