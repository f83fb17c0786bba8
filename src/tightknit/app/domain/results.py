"""Resultados tipados das chamadas à API Tightknit.

Toda operação de rede devolve ``Ok`` ou ``Fail``; o chamador trata os dois
casos explicitamente ou usa ``unwrap`` para converter falhas em exceções.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeAlias

from tightknit.utils.errors import ApiError, NetworkError


class FailureKind(str, Enum):
    """Classificação de falhas de chamadas à API."""

    API_ERROR = "api_error"
    NETWORK_ERROR = "network_error"


@dataclass(frozen=True, slots=True)
class Ok:
    """Resposta 2xx com corpo já decodificado (ou texto bruto)."""

    value: Any

    @property
    def success(self) -> bool:
        return True

    @property
    def data(self) -> Any:
        """Campo ``data`` do envelope, quando o corpo é um dict."""
        if isinstance(self.value, dict):
            return self.value.get("data")
        return None

    @property
    def records(self) -> list[Any]:
        """Lista ``data.records`` de respostas paginadas (vazia se ausente)."""
        data = self.data
        records = data.get("records") if isinstance(data, dict) else None
        return list(records) if isinstance(records, list) else []

    @property
    def total(self) -> int:
        data = self.data
        total = data.get("total") if isinstance(data, dict) else None
        return total if isinstance(total, int) else len(self.records)


@dataclass(frozen=True, slots=True)
class Fail:
    """Falha de API (status fora de 2xx) ou de transporte."""

    kind: FailureKind
    message: str
    status_code: int | None = None
    cause: str | None = None

    @property
    def success(self) -> bool:
        return False

    def to_exception(self) -> ApiError | NetworkError:
        """Converte a falha na exceção correspondente."""
        if self.kind is FailureKind.NETWORK_ERROR:
            return NetworkError(self.message, cause=self.cause or "")
        return ApiError(self.message, status_code=self.status_code)


Result: TypeAlias = Ok | Fail


def unwrap(result: Result) -> Any:
    """Retorna o valor de ``Ok`` ou levanta a exceção equivalente a ``Fail``.

    Raises:
        ApiError: Se a API respondeu fora da faixa 2xx.
        NetworkError: Se o transporte falhou.
    """
    if isinstance(result, Ok):
        return result.value
    raise result.to_exception()


__all__ = ["Fail", "FailureKind", "Ok", "Result", "unwrap"]
