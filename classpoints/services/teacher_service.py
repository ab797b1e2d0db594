"""
Service métier pour les profils enseignants.
"""

import logging
import uuid

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from classpoints.models.teacher import Teacher
from classpoints.schemas.teacher import TeacherCreate
from classpoints.services.errors import TeacherNotFoundError

logger = logging.getLogger(__name__)


def create_teacher(db: Session, data: TeacherCreate) -> Teacher:
    """
    Crée le profil d'un enseignant.
    Lève une ValueError si l'email est déjà utilisé.
    """
    teacher = Teacher(email=data.email, display_name=data.display_name)
    db.add(teacher)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ValueError(f"Un enseignant avec l'email '{data.email}' existe déjà.")
    db.refresh(teacher)
    logger.info("Profil enseignant %s créé", teacher.id)
    return teacher


def get_teacher(db: Session, teacher_id: uuid.UUID) -> Teacher:
    teacher = db.get(Teacher, teacher_id)
    if teacher is None:
        raise TeacherNotFoundError("Enseignant introuvable.")
    return teacher
