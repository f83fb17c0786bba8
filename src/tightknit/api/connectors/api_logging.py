"""Helpers de logging para chamadas à API Tightknit (sem token nem corpo)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tightknit.app.domain.results import Fail

logger = logging.getLogger(__name__)


def log_api_failure(failure: Fail, method: str, path: str) -> None:
    """Loga falha de API ou de transporte."""
    logger.warning(
        "tightknit_request_failed",
        extra={
            "method": method,
            "path": path,
            "failure_kind": failure.kind.value,
            "status_code": failure.status_code,
        },
    )


def log_success(method: str, path: str, status_code: int) -> None:
    logger.debug(
        "tightknit_request_succeeded",
        extra={
            "method": method,
            "path": path,
            "status_code": status_code,
        },
    )
