"""Normalizers de respostas da API."""

from .response import extract_error_message, normalize_response, normalize_transport_error

__all__ = ["extract_error_message", "normalize_response", "normalize_transport_error"]
