"""Configuração centralizada de logging.

Configura logging JSON estruturado com campos fixos (correlation_id,
service, level, logger, message) e nível configurável.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tightknit.config.logging.filters import CorrelationIdFilter
from tightknit.config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "tightknit"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Configura logging JSON estruturado no root logger.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função opcional que retorna o correlation_id
            do contexto atual (ex: de ContextVar da aplicação hospedeira).

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substituir handlers existentes para evitar duplicação
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo especificado."""
    return logging.getLogger(name)


def log_fallback(
    logger: logging.Logger,
    component: str,
    reason: str | None = None,
    status_code: int | None = None,
) -> None:
    """Log observável de fallback aplicado.

    Usado quando uma falha é descartada em favor de um resultado parcial
    (ex: agregação de eventos com uma das chamadas falhando).

    Args:
        logger: Logger instance.
        component: Nome do componente (ex: "calendar_events_all").
        reason: Razão do fallback (ex: "past_failed").
        status_code: Status HTTP da falha descartada, quando houver.
    """
    extra: dict[str, object] = {
        "fallback_used": True,
        "component": component,
    }
    if reason:
        extra["reason"] = reason
    if status_code is not None:
        extra["status_code"] = status_code

    logger.info(
        "Fallback applied for %s",
        component,
        extra=extra,
    )
