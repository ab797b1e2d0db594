"""
Service métier pour les élèves : inscription, liste, suppression, connexion par code.
"""

import logging
import uuid
from typing import List

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from classpoints.config import settings
from classpoints.models.mission import WritingMission
from classpoints.models.point_log import PointLog
from classpoints.models.school_class import SchoolClass
from classpoints.models.student import Student
from classpoints.schemas.mission import MissionResponse
from classpoints.schemas.student import StudentDashboard, StudentSession
from classpoints.services.code_service import generate_unique_code, normalize_code
from classpoints.services.errors import (
    CascadeDeleteError,
    ClassNotFoundError,
    CodeGenerationError,
    StudentNotFoundError,
)

logger = logging.getLogger(__name__)


def add_student(db: Session, class_id: uuid.UUID, name: str) -> Student:
    """
    Inscrit un élève dans une classe avec un code de connexion unique.
    Solde initial à 0, aucun historique.
    Un code pris entre la vérification et le commit relance un tirage.
    """
    if db.get(SchoolClass, class_id) is None:
        raise ClassNotFoundError("Classe introuvable.")

    for attempt in range(1, settings.CODE_GENERATION_MAX_ATTEMPTS + 1):
        code = generate_unique_code(db, Student.login_code, settings.LOGIN_CODE_LENGTH)
        student = Student(class_id=class_id, name=name, login_code=code, total_points=0)
        db.add(student)
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            logger.warning("Code de connexion %s pris à l'insertion (tentative %d)", code, attempt)
            continue
        db.refresh(student)

        logger.info("Élève %s inscrit dans la classe %s", student.id, class_id)
        return student

    raise CodeGenerationError(
        f"Aucun code de connexion libre après {settings.CODE_GENERATION_MAX_ATTEMPTS} tentatives."
    )


def list_students(db: Session, class_id: uuid.UUID) -> List[Student]:
    """Retourne les élèves d'une classe triés par nom."""
    if db.get(SchoolClass, class_id) is None:
        raise ClassNotFoundError("Classe introuvable.")
    return list(db.execute(
        select(Student).where(Student.class_id == class_id).order_by(Student.name)
    ).scalars().all())


def get_student(db: Session, student_id: uuid.UUID) -> Student:
    student = db.get(Student, student_id)
    if student is None:
        raise StudentNotFoundError(f"Élève {student_id} introuvable.")
    return student


def remove_student(db: Session, student_id: uuid.UUID) -> None:
    """
    Supprime un élève et tout son journal de points dans une seule transaction.
    Les point_logs sont supprimés explicitement : la cascade ne dépend pas
    du support ON DELETE CASCADE du moteur.
    """
    student = get_student(db, student_id)

    try:
        deleted_logs = db.execute(
            delete(PointLog).where(PointLog.student_id == student_id)
        ).rowcount
        db.delete(student)
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        raise CascadeDeleteError(f"Suppression de l'élève {student_id} impossible : {exc}") from exc

    logger.info("Élève %s supprimé (%d entrées de journal)", student_id, deleted_logs or 0)


def login_with_code(db: Session, code: str) -> StudentSession:
    """
    Connexion élève : recherche globale par code (insensible à la casse).
    Un code de longueur différente de LOGIN_CODE_LENGTH est refusé sans requête.
    """
    code = normalize_code(code)
    if len(code) != settings.LOGIN_CODE_LENGTH:
        raise StudentNotFoundError(
            f"Le code de connexion doit contenir {settings.LOGIN_CODE_LENGTH} caractères."
        )

    row = db.execute(
        select(Student, SchoolClass.name)
        .join(SchoolClass, SchoolClass.id == Student.class_id)
        .where(Student.login_code == code)
    ).first()
    if row is None:
        raise StudentNotFoundError("Aucun élève ne correspond à ce code.")

    student, class_name = row
    return StudentSession(
        id=student.id,
        name=student.name,
        login_code=student.login_code,
        class_id=student.class_id,
        class_name=class_name,
        total_points=student.total_points,
    )


def get_dashboard(db: Session, student_id: uuid.UUID) -> StudentDashboard:
    """Solde courant de l'élève et missions de sa classe, plus récentes d'abord."""
    student = get_student(db, student_id)
    missions = db.execute(
        select(WritingMission)
        .where(WritingMission.class_id == student.class_id)
        .order_by(WritingMission.created_at.desc())
    ).scalars().all()

    return StudentDashboard(
        student_id=student.id,
        name=student.name,
        total_points=student.total_points,
        missions=[MissionResponse.model_validate(m) for m in missions],
    )
