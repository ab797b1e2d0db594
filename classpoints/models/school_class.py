"""
Modèle SQLAlchemy pour les classes.
Nommé school_class pour éviter le conflit avec le mot-clé Python 'class'.
"""

import uuid
from sqlalchemy import Column, DateTime, ForeignKey, String, Uuid, func
from sqlalchemy.orm import relationship

from classpoints.database import Base


class SchoolClass(Base):
    __tablename__ = "classes"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(100), nullable=False)
    invite_code = Column(String(16), unique=True, nullable=False)  # Code d'invitation (A-Z0-9)
    teacher_id = Column(Uuid(as_uuid=True), ForeignKey("teachers.id", ondelete="CASCADE"), nullable=False)
    created_at = Column(DateTime, server_default=func.now())

    students = relationship(
        "Student", back_populates="school_class",
        cascade="all, delete-orphan", passive_deletes=True,
    )
    missions = relationship("WritingMission", cascade="all, delete-orphan", passive_deletes=True)
