"""Camada de aplicação: domínio tipado e serviços puros (sem IO)."""
