"""
Service métier pour la gestion des classes d'un enseignant.
"""

import uuid
import logging
from typing import List, Optional

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from classpoints.config import settings
from classpoints.models.mission import WritingMission
from classpoints.models.point_log import PointLog
from classpoints.models.school_class import SchoolClass
from classpoints.models.student import Student
from classpoints.models.teacher import Teacher
from classpoints.schemas.school_class import ClassCreate, ClassResponse
from classpoints.services.code_service import generate_unique_code, normalize_code
from classpoints.services.errors import (
    CascadeDeleteError,
    CodeGenerationError,
    TeacherNotFoundError,
)

logger = logging.getLogger(__name__)


def create_class(db: Session, data: ClassCreate) -> ClassResponse:
    """
    Crée une classe pour un enseignant avec un code d'invitation unique.
    Lève TeacherNotFoundError si l'enseignant n'existe pas.
    Un code pris entre la vérification et le commit relance un tirage.
    """
    if db.get(Teacher, data.teacher_id) is None:
        raise TeacherNotFoundError("Enseignant introuvable.")

    for attempt in range(1, settings.CODE_GENERATION_MAX_ATTEMPTS + 1):
        invite_code = generate_unique_code(db, SchoolClass.invite_code, settings.INVITE_CODE_LENGTH)
        school_class = SchoolClass(name=data.name, invite_code=invite_code, teacher_id=data.teacher_id)
        db.add(school_class)
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            logger.warning("Code d'invitation %s pris à l'insertion (tentative %d)", invite_code, attempt)
            continue
        db.refresh(school_class)

        logger.info("Classe %s créée (code %s)", school_class.id, invite_code)
        return _to_response(db, school_class)

    raise CodeGenerationError(
        f"Aucun code d'invitation libre après {settings.CODE_GENERATION_MAX_ATTEMPTS} tentatives."
    )


def get_classes_for_teacher(db: Session, teacher_id: uuid.UUID) -> List[ClassResponse]:
    """Retourne les classes d'un enseignant, triées par nom."""
    classes = db.execute(
        select(SchoolClass)
        .where(SchoolClass.teacher_id == teacher_id)
        .order_by(SchoolClass.name)
    ).scalars().all()
    return [_to_response(db, c) for c in classes]


def get_class(db: Session, class_id: uuid.UUID) -> Optional[ClassResponse]:
    """Retourne une classe par son ID, ou None si inexistante."""
    school_class = db.get(SchoolClass, class_id)
    if school_class is None:
        return None
    return _to_response(db, school_class)


def get_class_by_invite_code(db: Session, code: str) -> Optional[ClassResponse]:
    """Recherche une classe par son code d'invitation (insensible à la casse)."""
    school_class = db.execute(
        select(SchoolClass).where(SchoolClass.invite_code == normalize_code(code))
    ).scalar()
    if school_class is None:
        return None
    return _to_response(db, school_class)


def delete_class(db: Session, class_id: uuid.UUID) -> bool:
    """
    Supprime une classe avec ses élèves, leurs journaux de points et ses missions.
    Retourne True si supprimé, False si introuvable.

    Chaque table est vidée explicitement dans la même transaction, enfants d'abord :
    la cascade ne dépend pas du support ON DELETE CASCADE du moteur (SQLite).
    """
    school_class = db.get(SchoolClass, class_id)
    if school_class is None:
        return False

    student_ids = select(Student.id).where(Student.class_id == class_id)
    try:
        for statement in (
            delete(PointLog).where(PointLog.student_id.in_(student_ids)),
            delete(Student).where(Student.class_id == class_id),
            delete(WritingMission).where(WritingMission.class_id == class_id),
            delete(SchoolClass).where(SchoolClass.id == class_id),
        ):
            db.execute(statement.execution_options(synchronize_session=False))
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        raise CascadeDeleteError(f"Suppression de la classe {class_id} impossible : {exc}") from exc

    logger.info("Classe %s supprimée", class_id)
    return True


def _to_response(db: Session, school_class: SchoolClass) -> ClassResponse:
    """Construit le schéma de réponse avec le nombre d'élèves."""
    nb_students = db.execute(
        select(func.count())
        .select_from(Student)
        .where(Student.class_id == school_class.id)
    ).scalar() or 0

    return ClassResponse(
        id=school_class.id,
        name=school_class.name,
        invite_code=school_class.invite_code,
        teacher_id=school_class.teacher_id,
        nb_students=nb_students,
        created_at=school_class.created_at,
    )
