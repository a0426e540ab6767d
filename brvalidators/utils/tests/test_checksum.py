import pytest

from brvalidators.utils.checksum import DocumentFormat, char_value, check_digit, check_digits
from brvalidators.utils.cpf_utils import CPF_FORMAT
from brvalidators.utils.digits import has_digits, only_alphanumerics, only_digits
from brvalidators.utils.errors import DocumentValidationError, ErrorKind


def test_only_digits_keeps_order_and_drops_punctuation():
    assert only_digits("  123.456.789-09  ") == "12345678909"
    assert only_digits("abc") == ""
    assert only_digits(None) == ""


def test_only_digits_drops_non_ascii_digits():
    # dígitos arábico-índicos e devanágari não são 0-9
    assert only_digits("١٢٣٤٥٦٧٨٩٠٩") == ""
    assert only_digits("१२३-45") == "45"
    assert not has_digits("٠٠٠٠٠٠٠٠")
    assert has_digits("CEP 0")


def test_non_ascii_digits_are_not_a_document():
    with pytest.raises(DocumentValidationError) as exc:
        CPF_FORMAT.validate("١٢٣٤٥٦٧٨٩٠٩")
    assert exc.value.kind is ErrorKind.EMPTY_OR_NON_NUMERIC_INPUT


def test_only_alphanumerics_uppercases_letters():
    assert only_alphanumerics("12.abc.345/01de-35") == "12ABC34501DE35"


def test_char_value_follows_ascii_minus_48():
    assert char_value("0") == 0
    assert char_value("7") == 7
    assert char_value("A") == 17
    assert char_value("Z") == 42


def test_check_digit_folds_remainders_zero_and_one():
    # 1..9 com pesos 10..2 soma 210, resto 1 -> dígito 0
    assert check_digit([1, 2, 3, 4, 5, 6, 7, 8, 9], CPF_FORMAT.weight_tables[0]) == 0
    # resto 0 -> dígito 0
    assert check_digit([0, 0, 0], (3, 2, 1)) == 0


def test_check_digits_feeds_first_digit_into_second():
    assert check_digits([1, 2, 3, 4, 5, 6, 7, 8, 9], CPF_FORMAT.weight_tables) == [0, 9]


def test_check_digit_with_short_sequence_is_internal_error():
    with pytest.raises(RuntimeError):
        check_digit([1, 2], (3, 2, 1))


def test_gates_run_in_order():
    fmt = DocumentFormat(
        name="Teste",
        lengths=(3,),
        reject_repeated=True,
        rule=lambda raw, value: "proibido" if value == "999" else None,
    )
    with pytest.raises(DocumentValidationError) as exc:
        fmt.validate("")
    assert exc.value.kind is ErrorKind.EMPTY_OR_NON_NUMERIC_INPUT

    with pytest.raises(DocumentValidationError) as exc:
        fmt.validate("1234")
    assert exc.value.kind is ErrorKind.INVALID_LENGTH

    # a regra de formato roda antes da checagem de sequência repetida
    with pytest.raises(DocumentValidationError) as exc:
        fmt.validate("9-9-9")
    assert exc.value.kind is ErrorKind.INVALID_FORMAT

    with pytest.raises(DocumentValidationError) as exc:
        fmt.validate("111")
    assert exc.value.kind is ErrorKind.ALL_SAME_DIGIT

    assert fmt.validate("1.2.3") == "123"
    assert fmt.is_valid("123")
    assert not fmt.is_valid("12")


def test_invalid_length_error_serialization():
    with pytest.raises(DocumentValidationError) as exc:
        CPF_FORMAT.validate("1234567890")
    assert exc.value.to_dict() == {
        "code": "INVALID_LENGTH",
        "document_type": "CPF",
        "message": "CPF inválido: esperado 11 caracteres, recebido 10",
        "expected": [11],
        "actual": 10,
    }


def test_validation_error_is_value_error():
    with pytest.raises(ValueError, match="CPF inválido"):
        CPF_FORMAT.validate("111.111.111-11")
