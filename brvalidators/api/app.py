
from typing import Dict, Any
from fastapi import FastAPI, Depends, Path, Query
import logging
import uvicorn
import os
from brvalidators.auth.basic import basic_auth
from brvalidators.api.schemas import DocumentBundle, DocumentType
from brvalidators.api.services.validation_service import DocumentValidationService

API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "3000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

logger = logging.getLogger(__name__)

app = FastAPI(title="Brazilian Validators API", version="1.0.0")

validation_service = DocumentValidationService()


@app.get("/")
async def root(_: str = Depends(basic_auth)) -> dict:
    """
    Endpoint de status da API.
    Parâmetros:
        _: autenticação básica
    Retorno:
        dict: status da API
    """
    logger.info("Endpoint / chamado, status=ok")
    return {"status": "ok"}


# Endpoints de documentos (prefixo /api/v1)

#########
@app.post("/api/v1/documents/normalize")
async def normalize_documents(bundle: DocumentBundle, _: str = Depends(basic_auth)) -> Dict[str, Any]:
    """
    Normaliza vários documentos de uma vez.
    Campos inválidos são rejeitados pelo próprio modelo (422 do FastAPI).
    Parâmetros:
        bundle (DocumentBundle): cpf, cnpj, cep, phone e pix, todos opcionais
        _: autenticação básica
    Retorno:
        dict: forma canônica de cada campo informado
    """
    return validation_service.normalize_bundle(bundle)


#########
@app.post("/api/v1/documents/{document_type}/validate")
async def validate_document(
    payload: Dict[str, Any],
    document_type: DocumentType = Path(..., description="Tipo do documento"),
    _: str = Depends(basic_auth),
) -> Dict[str, Any]:
    """
    Valida um documento e devolve suas formas canônica, formatada e mascarada.
    Parâmetros:
        payload (dict): {"value": "<documento>"}
        document_type (DocumentType): cpf, cnpj, cep, phone ou pix
        _: autenticação básica
    Retorno:
        dict: resultado da validação (422 com code/document_type/message se inválido)
    """
    logger.info(f"Validação solicitada: document_type={document_type.value}")
    return validation_service.validate_document(document_type.value, payload)


#########
@app.get("/api/v1/pix/detect")
async def detect_pix_key(key: str = Query(..., description="Chave PIX"), _: str = Depends(basic_auth)) -> Dict[str, Any]:
    """
    Identifica o tipo de uma chave PIX pelo formato.
    Parâmetros:
        key (str): chave PIX
        _: autenticação básica
    Retorno:
        dict: key_type (CPF, CNPJ, PHONE, EMAIL, RANDOM ou null) e label
    """
    return validation_service.detect_pix_key(key)


######### ------------------------------ #########

if __name__ == "__main__":
    """
    Inicializa o servidor Uvicorn para rodar a API.
    """
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s %(message)s")
    logger.info(f"Starting Uvicorn server on {API_HOST}:{API_PORT}")
    uvicorn.run(app, host=API_HOST, port=API_PORT)
