"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    ApiError,
    ConfigurationError,
    NetworkError,
    TightknitError,
)

__all__ = [
    "ApiError",
    "ConfigurationError",
    "NetworkError",
    "TightknitError",
]
