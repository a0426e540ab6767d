"""
Módulo utilitário para validação e normalização de CPF.
Funções reutilizáveis e testáveis, com nomes claros e comentários críticos.
"""
import re

from brvalidators.utils.checksum import DocumentFormat
from brvalidators.utils.digits import only_digits
from brvalidators.utils.errors import DocumentValidationError

# Pesos 10..2 para o primeiro dígito e 11..2 para o segundo
CPF_FORMAT = DocumentFormat(
    name="CPF",
    lengths=(11,),
    weight_tables=(tuple(range(10, 1, -1)), tuple(range(11, 1, -1))),
    reject_repeated=True,
)

_CPF_SHAPE = re.compile(r"\d{3}\.?\d{3}\.?\d{3}-?\d{2}")


class CPFUtils:
    @staticmethod
    def normalize_cpf(cpf: str) -> str:
        """
        Remove caracteres não numéricos do CPF.
        Parâmetros:
            cpf (str): CPF em qualquer formato
        Retorno:
            str: CPF apenas com dígitos
        Exemplo: '123.456.789-09' -> '12345678909'
        """
        return only_digits(cpf)

    @staticmethod
    def validate_cpf(cpf: str) -> str:
        """
        Valida CPF pelo algoritmo dos dígitos verificadores.
        Parâmetros:
            cpf (str): CPF em qualquer formato
        Retorno:
            str: CPF normalizado (11 dígitos)
        Levanta:
            DocumentValidationError: tamanho, sequência repetida ou dígitos verificadores inválidos
        """
        return CPF_FORMAT.validate(cpf)

    @staticmethod
    def is_valid_cpf(cpf: str) -> bool:
        """
        Versão booleana de validate_cpf.
        Parâmetros:
            cpf (str): CPF em qualquer formato
        Retorno:
            bool: True se válido, False caso contrário
        """
        try:
            CPFUtils.validate_cpf(cpf)
        except DocumentValidationError:
            return False
        return True

    @staticmethod
    def format_cpf(cpf: str) -> str:
        """
        Formata no padrão ###.###.###-##. Entradas sem 11 dígitos voltam sem alteração.
        """
        digits = only_digits(cpf)
        if len(digits) != 11:
            return cpf
        return f"{digits[:3]}.{digits[3:6]}.{digits[6:9]}-{digits[9:]}"

    @staticmethod
    def mask_cpf(cpf: str) -> str:
        """Oculta o miolo do CPF para logs: '123.***.***-09'."""
        digits = only_digits(cpf)
        if len(digits) != 11:
            return cpf
        return f"{digits[:3]}.***.***-{digits[9:]}"

    @staticmethod
    def is_cpf_format(cpf: str) -> bool:
        return bool(_CPF_SHAPE.fullmatch(cpf or ""))
