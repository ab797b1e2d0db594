"""
Router de connexion élève par code.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from classpoints.database import get_db
from classpoints.schemas.student import StudentLogin, StudentSession
from classpoints.services import student_service
from classpoints.services.errors import StudentNotFoundError

router = APIRouter(prefix="/api/v1/auth", tags=["Connexion"])


@router.post("/student-login", response_model=StudentSession, summary="Connexion élève par code")
def student_login(data: StudentLogin, db: Session = Depends(get_db)):
    """Retourne la session de l'élève dont le code correspond (recherche globale)."""
    try:
        return student_service.login_with_code(db, data.code)
    except StudentNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
