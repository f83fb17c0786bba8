"""Settings do cliente Tightknit.

Objeto explícito passado na construção do cliente; não há singleton global.
Leitura de variáveis de ambiente só acontece quando o chamador pede.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

# Endpoint de produção da API admin
TIGHTKNIT_API_BASE_URL: str = "https://api.tightknit.dev/admin/v0/"
DEFAULT_USER_AGENT: str = "tightknit-python"


@dataclass(frozen=True)
class TightknitSettings:
    """Configurações de acesso à API Tightknit.

    Attributes:
        api_key: Bearer token da comunidade (obrigatório, sem default)
        api_base_url: URL base da API admin
        request_timeout_seconds: Timeout para requisições HTTP
        verify_ssl: Valida certificados TLS
        user_agent: Valor do header User-Agent
    """

    api_key: str | None = None
    api_base_url: str = TIGHTKNIT_API_BASE_URL
    request_timeout_seconds: float = 30.0
    verify_ssl: bool = True
    user_agent: str = DEFAULT_USER_AGENT

    def validate(self) -> list[str]:
        """Valida configurações mínimas.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.api_key or not self.api_key.strip():
            errors.append("TIGHTKNIT_API_KEY não configurado")

        if not self.api_base_url or not self.api_base_url.strip():
            errors.append("TIGHTKNIT_API_BASE_URL não pode ser vazio")

        if self.request_timeout_seconds <= 0:
            errors.append("TIGHTKNIT_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _read_optional_env(key: str) -> str | None:
    """Retorna valor opcional da env sem propagar string vazia."""
    raw_value = os.getenv(key)
    if raw_value is None:
        return None
    stripped_value = raw_value.strip()
    return stripped_value or None


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


def load_tightknit_settings_from_env() -> TightknitSettings:
    """Carrega TightknitSettings a partir de variáveis de ambiente.

    Chamado explicitamente pelo código de borda (scripts, bootstrap da
    aplicação hospedeira); o core nunca lê a env por conta própria.
    """
    return TightknitSettings(
        api_key=_read_optional_env("TIGHTKNIT_API_KEY"),
        api_base_url=_read_optional_env("TIGHTKNIT_API_BASE_URL") or TIGHTKNIT_API_BASE_URL,
        request_timeout_seconds=float(os.getenv("TIGHTKNIT_REQUEST_TIMEOUT_SECONDS", "30")),
        verify_ssl=_parse_bool(os.getenv("TIGHTKNIT_VERIFY_SSL", "true")),
        user_agent=_read_optional_env("TIGHTKNIT_USER_AGENT") or DEFAULT_USER_AGENT,
    )


__all__ = [
    "DEFAULT_USER_AGENT",
    "TIGHTKNIT_API_BASE_URL",
    "TightknitSettings",
    "load_tightknit_settings_from_env",
]
