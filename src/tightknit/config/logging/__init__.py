"""Configuração de logging estruturado.

A biblioteca nunca configura logging no import. Aplicações e scripts que
embutem o cliente chamam ``configure_logging`` na inicialização.

Uso:
    from tightknit.config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="tightknit")

    logger = get_logger(__name__)
    logger.info("calendar_events_listed", extra={"total": 12})

Logs nunca incluem a API key nem corpos de resposta.
"""

from tightknit.config.logging.config import configure_logging, get_logger, log_fallback
from tightknit.config.logging.filters import CorrelationIdFilter
from tightknit.config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "log_fallback",
]
