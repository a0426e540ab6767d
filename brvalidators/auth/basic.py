from typing import Dict
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials
import logging
import os
import secrets
from pathlib import Path

logger = logging.getLogger(__name__)

CREDENTIALS_FILE_ENV = "BASIC_AUTH_CREDENTIALS_FILE"
DEFAULT_CREDENTIALS_FILE = str(Path(__file__).resolve().parent.parent / "credentials" / "basic_auth.txt")

security = HTTPBasic(realm="brvalidators")
_credentials_cache: Dict[str, str] = {}
_cache_file_path: str = ""


def _load_credentials(file_path: str) -> None:
	"""Carrega o arquivo usuario:senha (um por linha, # comenta). Recarrega só quando o caminho muda."""
	global _credentials_cache, _cache_file_path
	if file_path == _cache_file_path and _credentials_cache:
		return
	_credentials_cache = {}
	_cache_file_path = file_path
	try:
		with open(file_path, "r", encoding="utf-8") as f:
			for line in f:
				line = line.strip()
				if not line or line.startswith("#") or ":" not in line:
					continue
				username, password = line.split(":", 1)
				_credentials_cache[username] = password
	except FileNotFoundError:
		logger.warning(f"Arquivo de credenciais não encontrado: {file_path}; todo acesso será negado")
		_credentials_cache = {}


async def basic_auth(credentials: HTTPBasicCredentials = Depends(security)) -> str:
	"""
	Dependência FastAPI de autenticação HTTP Basic.
	Retorno:
		str: usuário autenticado
	"""
	_load_credentials(os.getenv(CREDENTIALS_FILE_ENV, DEFAULT_CREDENTIALS_FILE))
	expected = _credentials_cache.get(credentials.username)
	if expected is None or not secrets.compare_digest(expected.encode("utf-8"), credentials.password.encode("utf-8")):
		logger.warning(f"Credenciais inválidas para usuario={credentials.username}")
		raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Credenciais inválidas", headers={"WWW-Authenticate": "Basic"})
	return credentials.username
