"""Ponto de entrada do cliente Tightknit.

Exemplo:
    settings = TightknitSettings(api_key="...")
    client = TightknitClient(settings)
    result = await client.calendar_events.list(time_filter="upcoming")
    if isinstance(result, Ok):
        for event in result.records:
            print(client.calendar_events.format(event).title)
"""

from __future__ import annotations

from functools import cached_property
from typing import TYPE_CHECKING, Any

from tightknit.api.connectors.http_client import TightknitHttpClient
from tightknit.api.resources import CalendarEvents, Feeds
from tightknit.config.settings import TightknitSettings, load_tightknit_settings_from_env

if TYPE_CHECKING:
    import httpx

    from tightknit.app.domain.results import Result


class TightknitClient:
    """Fachada com acesso aos recursos e aos verbos HTTP da API."""

    def __init__(
        self,
        settings: TightknitSettings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Inicializa o cliente.

        Raises:
            ConfigurationError: Se ``settings.api_key`` está ausente ou vazia.
        """
        self.settings = settings
        self._http = TightknitHttpClient(settings, transport=transport)

    @cached_property
    def calendar_events(self) -> CalendarEvents:
        return CalendarEvents(self._http)

    @cached_property
    def feeds(self) -> Feeds:
        return Feeds(self._http)

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Result:
        return await self._http.get(path, params)

    async def post(self, path: str, data: dict[str, Any] | None = None) -> Result:
        return await self._http.post(path, data)

    async def put(self, path: str, data: dict[str, Any] | None = None) -> Result:
        return await self._http.put(path, data)

    async def delete(self, path: str) -> Result:
        return await self._http.delete(path)


def create_tightknit_client(
    settings: TightknitSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> TightknitClient:
    """Factory de conveniência para criar cliente com config padrão.

    Args:
        settings: TightknitSettings opcional. Se None, carrega do ambiente
            no momento da chamada.
        transport: Transport httpx alternativo.

    Returns:
        Cliente configurado.
    """
    return TightknitClient(settings or load_tightknit_settings_from_env(), transport=transport)


__all__ = ["TightknitClient", "create_tightknit_client"]
