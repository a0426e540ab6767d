"""
Erros de validação de documentos brasileiros.
Todo gate do pipeline levanta DocumentValidationError com um ErrorKind específico.
"""
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class ErrorKind(str, Enum):
    EMPTY_OR_NON_NUMERIC_INPUT = "EMPTY_OR_NON_NUMERIC_INPUT"
    INVALID_LENGTH = "INVALID_LENGTH"
    INVALID_FORMAT = "INVALID_FORMAT"
    ALL_SAME_DIGIT = "ALL_SAME_DIGIT"
    CHECKSUM_MISMATCH = "CHECKSUM_MISMATCH"
    UNRECOGNIZED_PIX_KEY_FORMAT = "UNRECOGNIZED_PIX_KEY_FORMAT"


# Tipos de documento de gênero feminino ("Chave PIX inválida")
FEMININE_DOCUMENT_TYPES = frozenset({"Chave PIX"})


class DocumentValidationError(ValueError):
    """
    Falha de validação de um documento.
    Herda de ValueError para que os adaptadores pydantic convertam em erro de campo.
    Atributos:
        kind (ErrorKind): gate que falhou
        document_type (str): 'CPF', 'CNPJ', 'CEP', 'Telefone' ou 'Chave PIX'
        message (str): motivo, sem o prefixo do documento
        expected (tuple, opcional): tamanhos aceitos, quando kind == INVALID_LENGTH
        actual (int, opcional): tamanho recebido, quando kind == INVALID_LENGTH
    """

    def __init__(
        self,
        kind: ErrorKind,
        document_type: str,
        message: str,
        expected: Optional[Tuple[int, ...]] = None,
        actual: Optional[int] = None,
    ) -> None:
        adjective = "inválida" if document_type in FEMININE_DOCUMENT_TYPES else "inválido"
        super().__init__(f"{document_type} {adjective}: {message}")
        self.kind = kind
        self.document_type = document_type
        self.message = message
        self.expected = expected
        self.actual = actual

    @property
    def code(self) -> str:
        return self.kind.value

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "code": self.code,
            "document_type": self.document_type,
            "message": str(self),
        }
        if self.kind is ErrorKind.INVALID_LENGTH:
            data["expected"] = list(self.expected or ())
            data["actual"] = self.actual
        return data

    @classmethod
    def invalid_length(cls, document_type: str, expected: Tuple[int, ...], actual: int) -> "DocumentValidationError":
        expected_text = " ou ".join(str(n) for n in expected)
        return cls(
            ErrorKind.INVALID_LENGTH,
            document_type,
            f"esperado {expected_text} caracteres, recebido {actual}",
            expected=tuple(expected),
            actual=actual,
        )
