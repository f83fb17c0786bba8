"""Testes do recurso Feeds."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from tightknit.api.resources.feeds import Feeds
from tightknit.app.domain.results import Ok


@pytest.fixture
def client() -> MagicMock:
    mock = MagicMock()
    mock.get = AsyncMock(return_value=Ok({"success": True, "data": {"records": []}}))
    return mock


@pytest.mark.asyncio
async def test_list_default_pagination(client: MagicMock) -> None:
    await Feeds(client).list()
    client.get.assert_awaited_once_with("feeds", {"page": 0, "per_page": 10})


@pytest.mark.asyncio
async def test_get(client: MagicMock) -> None:
    await Feeds(client).get("feed_1")
    client.get.assert_awaited_once_with("feeds/feed_1")


@pytest.mark.asyncio
async def test_posts_with_pagination(client: MagicMock) -> None:
    result = await Feeds(client).posts("feed_1", page=1, per_page=25)

    client.get.assert_awaited_once_with("feeds/feed_1/posts", {"page": 1, "per_page": 25})
    assert result.success is True
