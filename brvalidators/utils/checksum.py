"""
Pipeline compartilhado de validação de documentos.
Ordem dos gates: extração -> tamanho -> regra de formato -> sequência repetida -> dígitos verificadores.
Cada documento (CPF, CNPJ, CEP, telefone) é só uma configuração de DocumentFormat.
"""
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from brvalidators.utils.digits import has_digits, only_digits
from brvalidators.utils.errors import DocumentValidationError, ErrorKind

logger = logging.getLogger(__name__)

Weights = Tuple[int, ...]


def char_value(char: str) -> int:
    """
    Valor de um caractere no cálculo do dígito verificador.
    '0'..'9' -> 0..9 e 'A'..'Z' -> 17..42 (tabela ASCII - 48, usada pelo CNPJ alfanumérico).
    """
    return ord(char) - 48


def check_digit(values: Sequence[int], weights: Weights) -> int:
    """
    Calcula um dígito verificador por módulo 11.
    Parâmetros:
        values: valores dos caracteres base (ao menos len(weights))
        weights: pesos aplicados posição a posição
    Retorno:
        int: 0 quando o resto é 0 ou 1, senão 11 - resto
    """
    if len(values) < len(weights):
        # O gate de tamanho roda antes; chegar aqui é erro de programação
        raise RuntimeError(f"{len(values)} valores para uma tabela de {len(weights)} pesos")
    remainder = sum(v * w for v, w in zip(values, weights)) % 11
    return 0 if remainder < 2 else 11 - remainder


def check_digits(values: Sequence[int], weight_tables: Sequence[Weights]) -> List[int]:
    """
    Calcula os dígitos verificadores em sequência: cada dígito calculado entra na base do próximo.
    """
    base = list(values)
    digits: List[int] = []
    for weights in weight_tables:
        digit = check_digit(base, weights)
        digits.append(digit)
        base.append(digit)
    return digits


@dataclass(frozen=True)
class DocumentFormat:
    """
    Configuração de um documento para o pipeline de validação.
    Atributos:
        name: nome do documento nas mensagens de erro
        lengths: tamanhos aceitos após a extração
        extract: extrator de caracteres significativos
        weight_tables: tabelas de pesos, uma por dígito verificador
        reject_repeated: rejeita sequências com todos os caracteres iguais
        rule: regra estrutural extra; recebe (entrada, valor extraído) e devolve a mensagem de erro ou None
    """
    name: str
    lengths: Tuple[int, ...]
    extract: Callable[[str], str] = only_digits
    weight_tables: Tuple[Weights, ...] = ()
    reject_repeated: bool = False
    rule: Optional[Callable[[str, str], Optional[str]]] = None

    def validate(self, raw: Optional[str]) -> str:
        """
        Executa todos os gates e devolve o valor canônico.
        Levanta DocumentValidationError no primeiro gate que falhar.
        """
        raw = raw or ""
        value = self.extract(raw)

        if not has_digits(value):
            logger.debug(f"{self.name}: entrada sem dígitos")
            raise DocumentValidationError(ErrorKind.EMPTY_OR_NON_NUMERIC_INPUT, self.name, "nenhum dígito informado")

        if len(value) not in self.lengths:
            logger.debug(f"{self.name}: tamanho inválido ({len(value)})")
            raise DocumentValidationError.invalid_length(self.name, self.lengths, len(value))

        if self.rule is not None:
            problem = self.rule(raw, value)
            if problem:
                logger.debug(f"{self.name}: formato inválido ({problem})")
                raise DocumentValidationError(ErrorKind.INVALID_FORMAT, self.name, problem)

        if self.reject_repeated and value == value[0] * len(value):
            logger.debug(f"{self.name}: sequência repetida")
            raise DocumentValidationError(ErrorKind.ALL_SAME_DIGIT, self.name, "sequência de dígitos repetidos")

        if self.weight_tables:
            size = len(self.weight_tables)
            expected = check_digits([char_value(c) for c in value[:-size]], self.weight_tables)
            supplied = [int(c) for c in value[-size:]]
            if expected != supplied:
                logger.debug(f"{self.name}: dígitos verificadores não conferem")
                raise DocumentValidationError(ErrorKind.CHECKSUM_MISMATCH, self.name, "dígitos verificadores inválidos")

        return value

    def is_valid(self, raw: Optional[str]) -> bool:
        try:
            self.validate(raw)
        except DocumentValidationError:
            return False
        return True
