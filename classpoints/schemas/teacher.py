"""
Schémas Pydantic pour le profil enseignant.
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, field_validator


class TeacherCreate(BaseModel):
    email: EmailStr
    display_name: str

    @field_validator("display_name")
    @classmethod
    def not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Le nom affiché ne peut pas être vide.")
        return v.strip()


class TeacherResponse(BaseModel):
    id: uuid.UUID
    email: str
    display_name: str
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
