"""
Router pour les profils enseignants.
"""

import uuid
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from classpoints.database import get_db
from classpoints.schemas.school_class import ClassResponse
from classpoints.schemas.teacher import TeacherCreate, TeacherResponse
from classpoints.services import class_service, teacher_service
from classpoints.services.errors import TeacherNotFoundError

router = APIRouter(prefix="/api/v1/teachers", tags=["Enseignants"])


@router.post("", response_model=TeacherResponse, status_code=201, summary="Créer un profil enseignant")
def create_teacher(data: TeacherCreate, db: Session = Depends(get_db)):
    try:
        return teacher_service.create_teacher(db, data)
    except ValueError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.get("/{teacher_id}", response_model=TeacherResponse, summary="Détail d'un enseignant")
def get_teacher(teacher_id: uuid.UUID, db: Session = Depends(get_db)):
    try:
        return teacher_service.get_teacher(db, teacher_id)
    except TeacherNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/{teacher_id}/classes", response_model=List[ClassResponse], summary="Classes d'un enseignant")
def list_teacher_classes(teacher_id: uuid.UUID, db: Session = Depends(get_db)):
    """Retourne les classes de l'enseignant avec leur nombre d'élèves."""
    return class_service.get_classes_for_teacher(db, teacher_id)
