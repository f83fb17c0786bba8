"""Exceções de domínio do cliente Tightknit.

Nenhuma delas é capturada ou retentada internamente: todas chegam ao
chamador imediato com mensagem descritiva.
"""

from __future__ import annotations


class TightknitError(RuntimeError):
    """Base para todas as falhas do cliente Tightknit."""


class ConfigurationError(TightknitError):
    """Configuração inválida detectada na construção do cliente."""


class ApiError(TightknitError):
    """Resposta fora da faixa 2xx devolvida pela API."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class NetworkError(TightknitError):
    """Falha de transporte (conexão recusada, timeout, DNS, etc.)."""

    def __init__(self, message: str, cause: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause
