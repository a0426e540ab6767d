import pytest

from brvalidators.utils.errors import DocumentValidationError, ErrorKind
from brvalidators.utils.pix_utils import PixKeyType, PixUtils

RANDOM_KEY = "f47ac10b-58cc-4372-a567-0e02b2c3d479"


@pytest.mark.parametrize(
    "key, key_type",
    [
        ("12345678909", PixKeyType.CPF),
        ("123.456.789-09", PixKeyType.CPF),
        ("11222333000181", PixKeyType.CNPJ),
        ("12.abc.345/01de-35", PixKeyType.CNPJ),
        ("+5511987654321", PixKeyType.PHONE),
        ("1134567890", PixKeyType.PHONE),
        ("user@example.com", PixKeyType.EMAIL),
        (RANDOM_KEY, PixKeyType.RANDOM),
        ("invalido", None),
    ],
)
def test_detect_type(key, key_type):
    assert PixUtils.detect_type(key) is key_type


def test_cpf_key_resolves_as_cpf():
    assert PixUtils.validate_with_type("12345678909") == (PixKeyType.CPF, "12345678909")
    assert PixUtils.validate_with_type(" 123.456.789-09 ") == (PixKeyType.CPF, "12345678909")


def test_cpf_key_uses_cpf_rules():
    with pytest.raises(DocumentValidationError) as exc:
        PixUtils.validate_with_type("111.111.111-11")
    assert exc.value.kind is ErrorKind.ALL_SAME_DIGIT
    assert exc.value.document_type == "CPF"


def test_bare_eleven_digits_are_never_a_phone():
    # mesmo sendo um celular válido, o formato de CPF vem primeiro
    assert PixUtils.detect_type("11987654321") is PixKeyType.CPF
    with pytest.raises(DocumentValidationError) as exc:
        PixUtils.validate_with_type("11987654321")
    assert exc.value.kind is ErrorKind.CHECKSUM_MISMATCH


def test_cnpj_key():
    assert PixUtils.validate_with_type("11.222.333/0001-81") == (PixKeyType.CNPJ, "11222333000181")
    assert PixUtils.validate_with_type("12.abc.345/01de-35") == (PixKeyType.CNPJ, "12ABC34501DE35")


def test_phone_key_is_e164():
    assert PixUtils.validate_with_type("+5511987654321") == (PixKeyType.PHONE, "+5511987654321")
    assert PixUtils.validate_with_type("1134567890") == (PixKeyType.PHONE, "+551134567890")


def test_email_key():
    assert PixUtils.validate_with_type("User@Example.COM") == (PixKeyType.EMAIL, "user@example.com")
    assert PixUtils.is_valid_pix_key("test.user+tag@domain.co.uk")


@pytest.mark.parametrize("key", ["invalid@", "a@b", "x" * 70 + "@example.com"])
def test_invalid_email_key(key):
    with pytest.raises(DocumentValidationError) as exc:
        PixUtils.validate_with_type(key)
    assert exc.value.kind is ErrorKind.INVALID_FORMAT


def test_random_key():
    assert PixUtils.validate_with_type(RANDOM_KEY.upper()) == (PixKeyType.RANDOM, RANDOM_KEY)


def test_random_key_must_be_uuid_v4():
    with pytest.raises(DocumentValidationError) as exc:
        PixUtils.validate_with_type("123e4567-e89b-12d3-a456-426614174000")
    assert exc.value.kind is ErrorKind.INVALID_FORMAT


@pytest.mark.parametrize("key", ["not-a-uuid", "", "+1 555 0100"])
def test_unrecognized_key(key):
    with pytest.raises(DocumentValidationError) as exc:
        PixUtils.validate_with_type(key)
    assert exc.value.kind is ErrorKind.UNRECOGNIZED_PIX_KEY_FORMAT
    assert not PixUtils.is_valid_pix_key(key)


def test_normalize():
    assert PixUtils.normalize("123.456.789-09") == "12345678909"
    assert PixUtils.normalize("11.222.333/0001-81") == "11222333000181"
    assert PixUtils.normalize("User@Example.COM") == "user@example.com"
    assert PixUtils.normalize(" qualquer coisa ") == "qualquer coisa"


def test_mask():
    assert PixUtils.mask("12345678909") == "123.***.***-09"
    assert PixUtils.mask("user@example.com") == "u***@example.com"
    assert PixUtils.mask("+5511987654321") == "+55 (11) *****-4321"
    assert PixUtils.mask("123e4567-e89b-12d3-a456-426614174000") == "123e****-****-****-****-****"


def test_labels():
    assert PixKeyType.EMAIL.label == "E-mail"
    assert PixKeyType.RANDOM.label == "Chave aleatória"


def test_validate_pix_key_returns_canonical_key():
    assert PixUtils.validate_pix_key(" 123.456.789-09 ") == "12345678909"
    assert PixUtils.validate_pix_key("12.abc.345/01de-35") == "12ABC34501DE35"
    with pytest.raises(DocumentValidationError) as exc:
        PixUtils.validate_pix_key("invalido")
    assert exc.value.kind is ErrorKind.UNRECOGNIZED_PIX_KEY_FORMAT


def test_pix_error_message_is_feminine():
    with pytest.raises(DocumentValidationError) as exc:
        PixUtils.validate_with_type("invalido")
    assert str(exc.value) == "Chave PIX inválida: formato não reconhecido"
    assert exc.value.to_dict()["message"] == "Chave PIX inválida: formato não reconhecido"
