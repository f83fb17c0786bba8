"""Agregador de settings do cliente Tightknit."""

from __future__ import annotations

from tightknit.config.settings.tightknit import (
    DEFAULT_USER_AGENT,
    TIGHTKNIT_API_BASE_URL,
    TightknitSettings,
    load_tightknit_settings_from_env,
)

__all__ = [
    "DEFAULT_USER_AGENT",
    "TIGHTKNIT_API_BASE_URL",
    "TightknitSettings",
    "load_tightknit_settings_from_env",
]
