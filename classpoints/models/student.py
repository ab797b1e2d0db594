"""
Modèle SQLAlchemy pour la table students.
total_points est le solde courant : il ne bouge que via le registre des points
et doit toujours égaler la somme des point_logs de l'élève.
"""

import uuid
from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Uuid, func
from sqlalchemy.orm import relationship, validates

from classpoints.database import Base


class Student(Base):
    __tablename__ = "students"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    class_id = Column(Uuid(as_uuid=True), ForeignKey("classes.id", ondelete="CASCADE"), nullable=False)
    name = Column(String(100), nullable=False)
    login_code = Column(String(16), unique=True, nullable=False)  # Unicité globale (login non scopé)
    total_points = Column(Integer, nullable=False, default=0, server_default="0")  # Peut être négatif
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    school_class = relationship("SchoolClass", back_populates="students")
    point_logs = relationship(
        "PointLog", back_populates="student",
        cascade="all, delete-orphan", passive_deletes=True,
    )

    @validates("name")
    def validate_name(self, key, value):
        if value is None or not value.strip():
            raise ValueError("Le nom de l'élève ne peut pas être vide.")
        return value.strip()
