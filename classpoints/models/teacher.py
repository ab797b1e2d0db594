"""
Modèle SQLAlchemy pour les enseignants.
Profil minimal : l'authentification est déléguée au fournisseur d'identité.
"""

import uuid
from sqlalchemy import Column, DateTime, String, Uuid, func

from classpoints.database import Base


class Teacher(Base):
    __tablename__ = "teachers"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    email = Column(String(255), unique=True, nullable=False)
    display_name = Column(String(100), nullable=False)
    created_at = Column(DateTime, server_default=func.now())
