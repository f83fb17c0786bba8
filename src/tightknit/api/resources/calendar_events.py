"""Recurso de eventos de calendário.

Responsabilidades:
- Listagem paginada com filtros de status e período
- Agregação best-effort de eventos futuros e passados (``all``)
- CRUD direto em ``calendar_events[/id]``
- Projeção de exibição via ``format``
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from tightknit.app.domain.results import Fail, Ok
from tightknit.app.services.event_formatter import format_event
from tightknit.config.logging import log_fallback

if TYPE_CHECKING:
    from tightknit.app.domain.formatted_event import FormattedEvent
    from tightknit.app.domain.results import Result
    from tightknit.app.protocols import ApiRequesterProtocol

logger = logging.getLogger(__name__)

RESOURCE_PATH = "calendar_events"
DEFAULT_PAGE = 0
DEFAULT_PER_PAGE = 10
DEFAULT_STATUS = "published"
TIME_FILTER_UPCOMING = "upcoming"
TIME_FILTER_PAST = "past"


class CalendarEvents:
    """Operações sobre ``calendar_events``."""

    def __init__(self, client: ApiRequesterProtocol) -> None:
        self._client = client

    async def list(
        self,
        page: int = DEFAULT_PAGE,
        per_page: int = DEFAULT_PER_PAGE,
        status: str = DEFAULT_STATUS,
        time_filter: str | None = None,
    ) -> Result:
        """Lista eventos paginados.

        Args:
            page: Página (começa em 0)
            per_page: Registros por página
            status: Status dos eventos ('published', 'draft', 'cancelled')
            time_filter: 'upcoming' ou 'past'. Omitido da query quando None,
                mantendo o default implícito da API.

        Returns:
            ``Ok`` com envelope ``{success, data: {records, total}}`` ou ``Fail``.
        """
        params: dict[str, Any] = {"page": page, "per_page": per_page, "status": status}
        if time_filter is not None:
            params["time_filter"] = time_filter
        return await self._client.get(RESOURCE_PATH, params)

    async def all(
        self,
        page: int = DEFAULT_PAGE,
        per_page: int = DEFAULT_PER_PAGE,
        status: str = DEFAULT_STATUS,
    ) -> Result:
        """Combina eventos futuros e passados em uma única listagem.

        As chamadas são sequenciais (upcoming, depois past). Com as duas bem
        sucedidas, os registros são concatenados nessa ordem. Se apenas uma
        falhar, o resultado da outra é devolvido e a falha é descartada. Se as
        duas falharem, prevalece a falha de upcoming.
        """
        upcoming = await self.list(page, per_page, status, time_filter=TIME_FILTER_UPCOMING)
        past = await self.list(page, per_page, status, time_filter=TIME_FILTER_PAST)

        if isinstance(upcoming, Ok) and isinstance(past, Ok):
            records = upcoming.records + past.records
            return Ok({"success": True, "data": {"records": records, "total": len(records)}})

        if isinstance(upcoming, Ok):
            _log_dropped_failure(past, TIME_FILTER_PAST)
            return upcoming
        if isinstance(past, Ok):
            _log_dropped_failure(upcoming, TIME_FILTER_UPCOMING)
            return past
        return upcoming

    async def get(self, event_id: str) -> Result:
        return await self._client.get(f"{RESOURCE_PATH}/{event_id}")

    async def create(self, event_data: dict[str, Any]) -> Result:
        """Cria evento (title, description, start_date, end_date, location_type, ...)."""
        return await self._client.post(RESOURCE_PATH, event_data)

    async def update(self, event_id: str, event_data: dict[str, Any]) -> Result:
        return await self._client.put(f"{RESOURCE_PATH}/{event_id}", event_data)

    async def delete(self, event_id: str) -> Result:
        return await self._client.delete(f"{RESOURCE_PATH}/{event_id}")

    def format(self, event: dict[str, Any], *, escape: bool = False) -> FormattedEvent:
        """Projeção de exibição de um registro de evento."""
        return format_event(event, escape=escape)


def _log_dropped_failure(failure: Fail, time_filter: str) -> None:
    log_fallback(
        logger,
        "calendar_events_all",
        reason=f"{time_filter}_failed",
        status_code=failure.status_code,
    )
