"""Testes da fachada TightknitClient."""

from __future__ import annotations

import httpx
import pytest

import tightknit
from tightknit import (
    ConfigurationError,
    Ok,
    TightknitClient,
    TightknitSettings,
    create_tightknit_client,
)
from tightknit.api.resources import CalendarEvents, Feeds


def test_package_metadata() -> None:
    assert tightknit.__version__
    assert tightknit.BASE_URL == "https://api.tightknit.dev/admin/v0/"


def test_construction_without_key_raises() -> None:
    with pytest.raises(ConfigurationError):
        TightknitClient(TightknitSettings())


def test_resources_are_memoized() -> None:
    client = TightknitClient(TightknitSettings(api_key="test_api_key"))
    assert isinstance(client.calendar_events, CalendarEvents)
    assert isinstance(client.feeds, Feeds)
    assert client.calendar_events is client.calendar_events


def test_factory_reads_env_at_call_time(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TIGHTKNIT_API_KEY", raising=False)
    with pytest.raises(ConfigurationError):
        create_tightknit_client()

    monkeypatch.setenv("TIGHTKNIT_API_KEY", "env-key")
    assert create_tightknit_client().settings.api_key == "env-key"


def test_factory_prefers_explicit_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TIGHTKNIT_API_KEY", raising=False)
    client = create_tightknit_client(TightknitSettings(api_key="explicit"))
    assert client.settings.api_key == "explicit"


@pytest.mark.asyncio
async def test_end_to_end_all_events() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        time_filter = request.url.params["time_filter"]
        return httpx.Response(
            200,
            json={"success": True, "data": {"records": [{"id": time_filter}], "total": 1}},
        )

    client = TightknitClient(
        TightknitSettings(api_key="test_api_key"),
        transport=httpx.MockTransport(handler),
    )

    result = await client.calendar_events.all()

    assert isinstance(result, Ok)
    assert [record["id"] for record in result.records] == ["upcoming", "past"]
    assert result.total == 2


@pytest.mark.asyncio
async def test_generic_verbs_delegate() -> None:
    client = TightknitClient(
        TightknitSettings(api_key="test_api_key"),
        transport=httpx.MockTransport(lambda request: httpx.Response(200, json={"ok": True})),
    )

    assert await client.get("feeds") == Ok({"ok": True})
    assert await client.post("calendar_events", {"title": "x"}) == Ok({"ok": True})
    assert await client.put("calendar_events/1", {"title": "y"}) == Ok({"ok": True})
    assert await client.delete("calendar_events/1") == Ok({"ok": True})
