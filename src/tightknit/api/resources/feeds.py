"""Recurso de feeds: listagem de feeds e posts da comunidade."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from tightknit.app.domain.results import Result
    from tightknit.app.protocols import ApiRequesterProtocol

DEFAULT_PAGE = 0
DEFAULT_PER_PAGE = 10


class Feeds:
    """Operações sobre ``feeds`` e ``feeds/{id}/posts``."""

    def __init__(self, client: ApiRequesterProtocol) -> None:
        self._client = client

    async def list(self, page: int = DEFAULT_PAGE, per_page: int = DEFAULT_PER_PAGE) -> Result:
        """Lista os feeds da comunidade (paginado)."""
        return await self._client.get("feeds", _pagination(page, per_page))

    async def get(self, feed_id: str) -> Result:
        return await self._client.get(f"feeds/{feed_id}")

    async def posts(
        self,
        feed_id: str,
        page: int = DEFAULT_PAGE,
        per_page: int = DEFAULT_PER_PAGE,
    ) -> Result:
        """Lista os posts de um feed (paginado)."""
        return await self._client.get(f"feeds/{feed_id}/posts", _pagination(page, per_page))


def _pagination(page: int, per_page: int) -> dict[str, Any]:
    return {"page": page, "per_page": per_page}
