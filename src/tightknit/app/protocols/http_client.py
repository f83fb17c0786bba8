"""Protocolos HTTP usados pelos recursos.

Evita dependência direta dos recursos no cliente concreto da camada api.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from tightknit.app.domain.results import Result


class ApiRequesterProtocol(Protocol):
    """Contrato mínimo para emitir chamadas à API Tightknit."""

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Result: ...

    async def post(self, path: str, data: dict[str, Any] | None = None) -> Result: ...

    async def put(self, path: str, data: dict[str, Any] | None = None) -> Result: ...

    async def delete(self, path: str) -> Result: ...
