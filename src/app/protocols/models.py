"""Modelos compartilhados entre normalizers, connectors e rotas."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ProjectRecord(BaseModel):
    """Projeto normalizado; transiente, criado a cada chamada."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="ID do projeto no OpenProject.")
    identifier: str | None = Field(default=None, description="Slug curto do projeto.")
    name: str | None = Field(default=None, description="Nome de exibição.")
    description: str | None = Field(default=None, description="Descrição em texto plano.")
    raw: dict[str, Any] = Field(
        default_factory=dict,
        description="Payload original do OpenProject, sem alterações.",
    )
