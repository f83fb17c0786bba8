"""Configuração do cliente Tightknit (settings e logging)."""
