"""
Schémas Pydantic pour les classes.
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, field_validator


class ClassCreate(BaseModel):
    name: str
    teacher_id: uuid.UUID

    @field_validator("name")
    @classmethod
    def name_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Le nom de la classe ne peut pas être vide.")
        return v.strip()


class ClassResponse(BaseModel):
    id: uuid.UUID
    name: str
    invite_code: str
    teacher_id: uuid.UUID
    nb_students: int
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
