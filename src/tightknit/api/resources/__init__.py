"""Recursos da API Tightknit (métodos finos sobre o cliente HTTP)."""

from .calendar_events import CalendarEvents
from .feeds import Feeds

__all__ = ["CalendarEvents", "Feeds"]
