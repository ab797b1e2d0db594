"""
Router pour la gestion des classes et de leurs élèves.
"""

import uuid
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from classpoints.database import get_db
from classpoints.schemas.school_class import ClassCreate, ClassResponse
from classpoints.schemas.student import StudentCreate, StudentResponse
from classpoints.services import class_service, student_service
from classpoints.services.errors import (
    CascadeDeleteError,
    ClassNotFoundError,
    CodeGenerationError,
    TeacherNotFoundError,
)

router = APIRouter(prefix="/api/v1/classes", tags=["Classes"])


@router.post("", response_model=ClassResponse, status_code=201, summary="Créer une classe")
def create_class(data: ClassCreate, db: Session = Depends(get_db)):
    """Crée une classe pour l'enseignant, avec un code d'invitation généré."""
    try:
        return class_service.create_class(db, data)
    except TeacherNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except CodeGenerationError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.get("/invite/{code}", response_model=ClassResponse, summary="Rechercher une classe par code d'invitation")
def get_class_by_invite_code(code: str, db: Session = Depends(get_db)):
    school_class = class_service.get_class_by_invite_code(db, code)
    if school_class is None:
        raise HTTPException(status_code=404, detail="Code d'invitation inconnu.")
    return school_class


@router.get("/{class_id}", response_model=ClassResponse, summary="Détail d'une classe")
def get_class(class_id: uuid.UUID, db: Session = Depends(get_db)):
    school_class = class_service.get_class(db, class_id)
    if school_class is None:
        raise HTTPException(status_code=404, detail="Classe introuvable.")
    return school_class


@router.delete("/{class_id}", status_code=204, summary="Supprimer une classe")
def delete_class(class_id: uuid.UUID, db: Session = Depends(get_db)):
    """Supprime la classe, ses élèves, leurs journaux de points et ses missions."""
    try:
        success = class_service.delete_class(db, class_id)
    except CascadeDeleteError as e:
        raise HTTPException(status_code=500, detail=str(e))
    if not success:
        raise HTTPException(status_code=404, detail="Classe introuvable.")


# --- Élèves de la classe ---

@router.get("/{class_id}/students", response_model=List[StudentResponse], summary="Lister les élèves")
def list_students(class_id: uuid.UUID, db: Session = Depends(get_db)):
    """Retourne les élèves de la classe triés par nom, avec leur solde."""
    try:
        return student_service.list_students(db, class_id)
    except ClassNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/{class_id}/students", response_model=StudentResponse, status_code=201, summary="Inscrire un élève")
def add_student(class_id: uuid.UUID, data: StudentCreate, db: Session = Depends(get_db)):
    """Inscrit un élève : code de connexion à 8 caractères généré, solde à 0."""
    try:
        return student_service.add_student(db, class_id, data.name)
    except ClassNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except CodeGenerationError as e:
        raise HTTPException(status_code=409, detail=str(e))
