"""Protocolos e contratos do core da aplicação."""

from .http_client import ApiRequesterProtocol

__all__ = ["ApiRequesterProtocol"]
