"""Camada de borda: transporte HTTP, normalização e recursos da API."""
