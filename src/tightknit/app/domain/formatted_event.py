"""Projeção de evento pronta para exibição.

Construída sob demanda a partir do registro bruto da API; não é persistida
nem cacheada.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class PersonProjection(BaseModel):
    """Nome e avatar de um host ou palestrante."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str = Field(default="", description="Nome preferido ou nome completo.")
    image: str | None = Field(default=None, description="URL do avatar (slack_image_72).")


class FormattedEvent(BaseModel):
    """Evento de calendário normalizado para camadas de apresentação."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: str | int | None = Field(default=None, description="Identificador do evento na API.")
    title: str | None = Field(default=None, description="Titulo do evento.")
    description: str = Field(default="", description="Descricao em texto puro.")
    description_html: str = Field(default="", description="Descricao renderizada em HTML.")
    description_slack_blocks: Any = Field(
        default=None,
        description="Blocos rich_text originais, sem alteracao.",
    )
    date: str | None = Field(default=None, description="Data de inicio (YYYY-MM-DD).")
    location: str | None = Field(default=None, description="Local ou marcador de evento virtual.")
    image_url: str = Field(..., description="Imagem de capa ou placeholder.")
    tickets_url: str = Field(default="#", description="Link de inscricao.")
    status: str = Field(default="upcoming", description="Status do evento.")
    start_time: str | None = Field(default=None, description="Timestamp bruto de inicio.")
    end_time: str | None = Field(default=None, description="Timestamp bruto de fim.")
    hosts: list[PersonProjection] = Field(default_factory=list)
    speakers: list[PersonProjection] = Field(default_factory=list)


__all__ = ["FormattedEvent", "PersonProjection"]
