"""Mapeia registros brutos de evento para ``FormattedEvent``."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from tightknit.app.domain.formatted_event import FormattedEvent, PersonProjection
from tightknit.app.domain.rich_text import parse_document
from tightknit.app.services.html_formatter import extract_plain_text, render

DEFAULT_IMAGE_URL = (
    "https://images.unsplash.com/photo-1591115765373-5207764f72e4"
    "?q=80&w=2940&auto=format&fit=crop"
)
DEFAULT_TICKETS_URL = "#"
DEFAULT_STATUS = "upcoming"
VIRTUAL_LOCATION_TYPE = "virtual"
VIRTUAL_LOCATION_LABEL = "Virtual Event"


def format_event(event: dict[str, Any], *, escape: bool = False) -> FormattedEvent:
    """Monta a projeção de exibição de um evento da API.

    Descrição em texto puro e HTML são calculadas de forma independente a
    partir de ``description_slack_blocks``. ``description_html`` não escapa
    texto nem URLs vindos da API, a menos que ``escape=True``.
    """
    raw_blocks = event.get("description_slack_blocks")
    document = parse_document(raw_blocks)

    description = extract_plain_text(document)
    if not description:
        description = _optional_str(event.get("description")) or ""

    return FormattedEvent(
        id=event.get("id"),
        title=_optional_str(event.get("title")),
        description=description,
        description_html=render(document, escape=escape),
        description_slack_blocks=raw_blocks,
        date=format_display_date(event.get("start_date")),
        location=_resolve_location(event),
        image_url=_optional_str(event.get("cover_image_url")) or DEFAULT_IMAGE_URL,
        tickets_url=_optional_str(event.get("link")) or DEFAULT_TICKETS_URL,
        status=_optional_str(event.get("status")) or DEFAULT_STATUS,
        start_time=_optional_str(event.get("start_date")),
        end_time=_optional_str(event.get("end_date")),
        hosts=_map_people(event.get("hosts")),
        speakers=_map_people(event.get("speakers")),
    )


def format_display_date(value: Any) -> str | None:
    """Formata timestamp ISO-8601 como YYYY-MM-DD no offset original."""
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        return None
    return parsed.strftime("%Y-%m-%d")


def map_person(person: dict[str, Any]) -> PersonProjection:
    name = _optional_str(person.get("preferred_name"))
    if not name:
        first = _optional_str(person.get("first_name")) or ""
        last = _optional_str(person.get("last_name")) or ""
        name = f"{first} {last}".strip()
    return PersonProjection(name=name, image=_optional_str(person.get("slack_image_72")))


def _map_people(value: Any) -> list[PersonProjection]:
    if not isinstance(value, list):
        return []
    return [map_person(person) for person in value if isinstance(person, dict)]


def _resolve_location(event: dict[str, Any]) -> str | None:
    location = _optional_str(event.get("location"))
    if location:
        return location
    if event.get("location_type") == VIRTUAL_LOCATION_TYPE:
        return VIRTUAL_LOCATION_LABEL
    return None


def _optional_str(value: Any) -> str | None:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


__all__ = ["format_display_date", "format_event", "map_person"]
