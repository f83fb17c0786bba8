"""Utilitários compartilhados do cliente Tightknit."""
