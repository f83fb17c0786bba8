"""Cliente HTTP base (adapter de transporte) para a API Tightknit."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    base_url: str
    timeout_seconds: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


class HttpError(Exception):
    """Falha de transporte sem dados sensíveis (token, corpo)."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class HttpClient:
    """Cliente HTTP simples sobre ``httpx.AsyncClient``.

    Não faz retry nem backoff: cada chamada é uma única tentativa.
    Qualquer status HTTP é devolvido ao chamador; qualquer
    ``httpx.RequestError`` ou URL inválida vira ``HttpError``.
    """

    def __init__(
        self,
        config: HttpClientConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config
        self._transport = transport

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        merged_headers = {**self._config.default_headers, **(headers or {})}
        try:
            async with httpx.AsyncClient(
                base_url=self._config.base_url,
                verify=self._config.verify_ssl,
                transport=self._transport,
            ) as client:
                return await client.request(
                    method,
                    path,
                    params=params,
                    json=json,
                    headers=merged_headers,
                    timeout=self._config.timeout_seconds,
                )
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            logger.warning(
                "http_transport_error",
                extra={"method": method, "path": path, "error_type": type(exc).__name__},
            )
            raise HttpError(str(exc) or type(exc).__name__) from exc
