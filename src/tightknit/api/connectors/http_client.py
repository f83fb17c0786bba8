"""Cliente HTTP especializado para a API Tightknit.

Estende o HttpClient genérico com comportamentos específicos:
- Header Authorization Bearer e negociação JSON
- Validação dos settings antes de qualquer chamada
- Normalização de toda resposta em ``Ok``/``Fail``
- Logging estruturado sem token nem corpo de resposta
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from tightknit.api.connectors.api_logging import log_api_failure, log_success
from tightknit.api.connectors.http_base import HttpClient, HttpClientConfig, HttpError
from tightknit.api.normalizers.response import (
    normalize_response,
    normalize_transport_error,
)
from tightknit.app.domain.results import Fail
from tightknit.utils.errors import ConfigurationError

if TYPE_CHECKING:
    import httpx

    from tightknit.app.domain.results import Result
    from tightknit.config.settings import TightknitSettings

logger: logging.Logger = logging.getLogger(__name__)


class TightknitHttpClient(HttpClient):
    """Cliente HTTP para a API admin da Tightknit.

    Cada verbo devolve ``Result``: nenhum erro de API ou de rede é levantado
    como exceção. Apenas settings inválidos falham na construção.
    """

    def __init__(
        self,
        settings: TightknitSettings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Inicializa cliente Tightknit.

        Args:
            settings: Configuração explícita (api_key obrigatória)
            transport: Transport httpx alternativo (ex: MockTransport em testes)

        Raises:
            ConfigurationError: Se ``settings.validate()`` reporta erros.
        """
        errors = settings.validate()
        if errors:
            logger.error("tightknit_settings_invalid", extra={"errors": errors})
            raise ConfigurationError(f"Configuração Tightknit inválida: {'; '.join(errors)}")
        api_key = (settings.api_key or "").strip()

        config = HttpClientConfig(
            base_url=settings.api_base_url,
            timeout_seconds=settings.request_timeout_seconds,
            default_headers=_build_headers(api_key, settings.user_agent),
            verify_ssl=settings.verify_ssl,
        )
        super().__init__(config, transport=transport)
        self.base_url = settings.api_base_url

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Result:
        return await self._send("GET", path, params=params or {})

    async def post(self, path: str, data: dict[str, Any] | None = None) -> Result:
        return await self._send("POST", path, json=data or {})

    async def put(self, path: str, data: dict[str, Any] | None = None) -> Result:
        return await self._send("PUT", path, json=data or {})

    async def delete(self, path: str) -> Result:
        return await self._send("DELETE", path)

    async def _send(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> Result:
        """Executa a chamada e normaliza resposta ou falha de transporte."""
        try:
            response = await self.request(method, path, params=params, json=json)
        except HttpError as exc:
            failure = normalize_transport_error(exc)
            log_api_failure(failure, method, path)
            return failure

        result = normalize_response(response.status_code, response.content)
        if isinstance(result, Fail):
            log_api_failure(result, method, path)
        else:
            log_success(method, path, response.status_code)
        return result


def _build_headers(api_key: str, user_agent: str) -> dict[str, str]:
    return {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
        "Accept": "application/json",
        "User-Agent": user_agent,
    }
