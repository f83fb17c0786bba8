"""Normalização de respostas HTTP em ``Ok``/``Fail``.

Regras:
- 2xx: corpo JSON decodificado; corpo não-JSON é repassado como texto bruto
- Fora de 2xx: mensagem extraída de ``message`` e depois ``error``; sem JSON,
  usa o texto bruto ou "Unknown error"; o status sempre entra na mensagem
- Falha de transporte: ``Fail`` do tipo NETWORK_ERROR

Nunca levanta exceção.
"""

from __future__ import annotations

import json
from typing import Any

from tightknit.app.domain.results import Fail, FailureKind, Ok, Result

UNKNOWN_ERROR_MESSAGE = "Unknown error"
ERROR_MESSAGE_FIELDS = ("message", "error")


def normalize_response(status_code: int, body: str | bytes | None) -> Result:
    """Converte status + corpo da resposta em ``Result``.

    Args:
        status_code: Status HTTP numérico.
        body: Corpo bruto da resposta.

    Returns:
        ``Ok`` para 2xx, ``Fail(API_ERROR)`` nos demais casos.
    """
    text = _decode_body(body)

    if 200 <= status_code < 300:
        parsed = _parse_json(text)
        return Ok(parsed if parsed is not None else text)

    message = f"API Error ({status_code}): {extract_error_message(text)}"
    return Fail(FailureKind.API_ERROR, message, status_code=status_code)


def normalize_transport_error(exc: BaseException) -> Fail:
    """Converte falha de transporte em ``Fail(NETWORK_ERROR)``."""
    description = str(exc) or type(exc).__name__
    return Fail(FailureKind.NETWORK_ERROR, f"Network Error: {description}", cause=description)


def extract_error_message(text: str) -> str:
    """Extrai mensagem legível de um corpo de erro.

    Args:
        text: Corpo da resposta já decodificado.

    Returns:
        Campo ``message`` ou ``error`` do JSON, o texto bruto, ou
        "Unknown error" quando o corpo está vazio.
    """
    parsed = _parse_json(text)
    if isinstance(parsed, dict):
        for field in ERROR_MESSAGE_FIELDS:
            value = parsed.get(field)
            if value:
                return value if isinstance(value, str) else json.dumps(value)
        return UNKNOWN_ERROR_MESSAGE
    return text if text.strip() else UNKNOWN_ERROR_MESSAGE


def _parse_json(text: str) -> Any | None:
    if not text.strip():
        return None
    try:
        return json.loads(text)
    except (json.JSONDecodeError, ValueError, RecursionError):
        return None


def _decode_body(body: str | bytes | None) -> str:
    if body is None:
        return ""
    if isinstance(body, bytes):
        return body.decode("utf-8", errors="replace")
    return body


__all__ = [
    "UNKNOWN_ERROR_MESSAGE",
    "extract_error_message",
    "normalize_response",
    "normalize_transport_error",
]
