"""
Serviço de validação: encapsula o despacho por tipo de documento, os logs e o mapeamento para HTTP.
Facilita testes, manutenção e reuso.
"""
from typing import Any, Callable, Dict, Optional
import logging

from fastapi import HTTPException

from brvalidators.api.schemas import DocumentBundle
from brvalidators.utils.documents import Cep, Cnpj, Cpf, Phone, PixKey
from brvalidators.utils.errors import DocumentValidationError
from brvalidators.utils.pix_utils import PixUtils

PARSERS: Dict[str, Callable[[str], Any]] = {
    "cpf": Cpf.parse,
    "cnpj": Cnpj.parse,
    "cep": Cep.parse,
    "phone": Phone.parse,
    "pix": PixKey.parse,
}


class DocumentValidationService:
    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Inicializa o serviço de validação.
        Parâmetros:
            logger (logging.Logger, opcional): Logger para logs
        """
        if logger is None:
            logger = logging.getLogger("validation_service")
            logger.setLevel(logging.INFO)
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
            if not logger.hasHandlers():
                logger.addHandler(handler)
        self.logger = logger

    def validate_document(self, document_type: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        Valida um documento do tipo informado.
        Parâmetros:
            document_type (str): cpf, cnpj, cep, phone ou pix
            payload (dict): {"value": "<documento>"}
        Retorno:
            dict: valor canônico, formatado e mascarado
        """
        parse = PARSERS.get(document_type)
        if parse is None:
            self.logger.warning(f"Tipo de documento não suportado: {document_type}")
            raise HTTPException(status_code=400, detail=f"Tipo de documento não suportado: {document_type}")

        value = payload.get("value")
        if value is None:
            self.logger.warning(f"Payload sem value: document_type={document_type}")
            raise HTTPException(status_code=400, detail="Campo obrigatório: value")
        if not isinstance(value, str):
            self.logger.warning(f"value não é texto: document_type={document_type}, tipo={type(value).__name__}")
            raise HTTPException(status_code=400, detail="value deve ser texto")

        try:
            document = parse(value)
        except DocumentValidationError as exc:
            self.logger.warning(f"Documento rejeitado: document_type={document_type}, code={exc.code}")
            raise HTTPException(status_code=422, detail=exc.to_dict())

        result = {
            "document_type": document_type,
            "valid": True,
            "value": document.key if isinstance(document, PixKey) else document.digits,
            "formatted": document.formatted,
            "masked": document.masked,
        }
        if isinstance(document, PixKey):
            result["pix_key_type"] = document.key_type.value
        self.logger.info(f"Documento válido: document_type={document_type}, masked={document.masked}")
        return result

    def detect_pix_key(self, key: str) -> Dict[str, Any]:
        """
        Identifica o tipo de uma chave PIX sem validá-la.
        Retorno:
            dict: key_type e label, ambos None quando nenhum formato casa
        """
        key_type = PixUtils.detect_type(key)
        self.logger.info(f"Detecção de chave PIX: key_type={key_type.value if key_type else None}")
        return {
            "key_type": key_type.value if key_type else None,
            "label": key_type.label if key_type else None,
        }

    def normalize_bundle(self, bundle: DocumentBundle) -> Dict[str, Any]:
        """
        Devolve a forma canônica de cada documento já validado pelo modelo pydantic.
        """
        result = bundle.model_dump(exclude_none=True)
        self.logger.info(f"Lote normalizado: campos={sorted(result)}")
        return result
