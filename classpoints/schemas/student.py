"""
Schémas Pydantic pour les élèves.
"""

import uuid
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, field_validator

from classpoints.schemas.mission import MissionResponse


class StudentCreate(BaseModel):
    """Schéma de création d'un élève dans une classe (POST /classes/{id}/students)."""
    name: str

    @field_validator("name")
    @classmethod
    def not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Le nom de l'élève ne peut pas être vide.")
        return v.strip()


class StudentResponse(BaseModel):
    """Schéma de réponse pour un élève, code de connexion inclus (vue enseignant)."""
    id: uuid.UUID
    class_id: uuid.UUID
    name: str
    login_code: str
    total_points: int
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class StudentLogin(BaseModel):
    """Corps de requête de connexion élève (POST /auth/student-login)."""
    code: str

    @field_validator("code")
    @classmethod
    def normalize(cls, v: str) -> str:
        return v.strip().upper()


class StudentSession(BaseModel):
    """Données de session renvoyées à l'élève connecté."""
    id: uuid.UUID
    name: str
    login_code: str
    class_id: uuid.UUID
    class_name: Optional[str]
    total_points: int


class StudentDashboard(BaseModel):
    """Solde de l'élève et missions de sa classe."""
    student_id: uuid.UUID
    name: str
    total_points: int
    missions: List[MissionResponse]
