"""Serviços de aplicação.

Funções puras de formatação (sem IO direto).
Chamadas de rede ficam em tightknit.api.
"""

from tightknit.app.services.event_formatter import format_event
from tightknit.app.services.html_formatter import (
    extract_plain_text,
    process_text_element,
    render,
)

__all__ = [
    "extract_plain_text",
    "format_event",
    "process_text_element",
    "render",
]
