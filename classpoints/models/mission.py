"""
Modèle SQLAlchemy pour les missions d'écriture publiées par l'enseignant.
"""

import uuid
from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, Uuid, func

from classpoints.database import Base


class WritingMission(Base):
    __tablename__ = "writing_missions"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    class_id = Column(Uuid(as_uuid=True), ForeignKey("classes.id", ondelete="CASCADE"), nullable=False)
    title = Column(String(200), nullable=False)
    guide = Column(Text, nullable=False)
    genre = Column(String(20), nullable=False, default="수필")  # 시, 수필, 일기, 논설문, 설명문
    min_chars = Column(Integer, nullable=False, default=100)
    min_paragraphs = Column(Integer, nullable=False, default=2)
    base_reward = Column(Integer, nullable=False, default=100)
    bonus_threshold = Column(Integer, nullable=False, default=100)  # Caractères au-delà du minimum
    bonus_reward = Column(Integer, nullable=False, default=10)
    created_at = Column(DateTime, server_default=func.now())
