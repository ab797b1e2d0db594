"""
Schémas Pydantic pour les missions d'écriture.
"""

import uuid
from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

Genre = Literal["시", "수필", "일기", "논설문", "설명문"]


class MissionCreate(BaseModel):
    """Corps de requête de création d'une mission. Valeurs par défaut identiques au formulaire enseignant."""
    title: str
    guide: str
    genre: Genre = "수필"
    min_chars: int = Field(default=100, ge=1)
    min_paragraphs: int = Field(default=2, ge=0)
    base_reward: int = Field(default=100, ge=0)
    bonus_threshold: int = Field(default=100, ge=0)
    bonus_reward: int = Field(default=10, ge=0)

    @field_validator("title", "guide")
    @classmethod
    def not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Le titre et la consigne sont obligatoires.")
        return v.strip()


class MissionResponse(BaseModel):
    id: uuid.UUID
    class_id: uuid.UUID
    title: str
    guide: str
    genre: str
    min_chars: int
    min_paragraphs: int
    base_reward: int
    bonus_threshold: int
    bonus_reward: int
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
