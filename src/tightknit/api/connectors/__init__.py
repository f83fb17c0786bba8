"""Conector Tightknit - único ponto de IO do cliente.

Responsabilidades:
- Transporte HTTP com bearer token e JSON
- Normalização de respostas e falhas de rede
"""

from .http_base import HttpClient, HttpClientConfig, HttpError
from .http_client import TightknitHttpClient

__all__ = [
    "HttpClient",
    "HttpClientConfig",
    "HttpError",
    "TightknitHttpClient",
]
