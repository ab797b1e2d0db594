"""
Router pour les élèves : suppression, solde, historique, réconciliation, tableau de bord.
"""

import uuid
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from classpoints.database import get_db
from classpoints.schemas.point_log import BalanceResponse, PointLogResponse, ReconciliationReport
from classpoints.schemas.student import StudentDashboard
from classpoints.services import ledger_service, student_service
from classpoints.services.errors import (
    CascadeDeleteError,
    ConcurrencyConflictError,
    PersistenceError,
    StudentNotFoundError,
)

router = APIRouter(prefix="/api/v1/students", tags=["Élèves"])


@router.delete("/{student_id}", status_code=204, summary="Supprimer un élève")
def delete_student(student_id: uuid.UUID, db: Session = Depends(get_db)):
    """Supprime définitivement un élève. Son journal de points est supprimé avec lui."""
    try:
        student_service.remove_student(db, student_id)
    except StudentNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except CascadeDeleteError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/{student_id}/points", response_model=BalanceResponse, summary="Solde de points")
def get_balance(student_id: uuid.UUID, db: Session = Depends(get_db)):
    try:
        balance = ledger_service.get_balance(db, student_id)
    except StudentNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return BalanceResponse(student_id=student_id, total_points=balance)


@router.get("/{student_id}/history", response_model=List[PointLogResponse], summary="Historique des points")
def get_history(student_id: uuid.UUID, db: Session = Depends(get_db)):
    """Retourne le journal des points de l'élève, du plus récent au plus ancien."""
    try:
        return ledger_service.get_history(db, student_id)
    except StudentNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/{student_id}/reconcile", response_model=ReconciliationReport, summary="Réconcilier le solde")
def reconcile(student_id: uuid.UUID, db: Session = Depends(get_db)):
    """Recalcule le solde depuis le journal et corrige total_points en cas d'écart."""
    try:
        return ledger_service.reconcile_balance(db, student_id)
    except StudentNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ConcurrencyConflictError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except PersistenceError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/{student_id}/dashboard", response_model=StudentDashboard, summary="Tableau de bord élève")
def get_dashboard(student_id: uuid.UUID, db: Session = Depends(get_db)):
    try:
        return student_service.get_dashboard(db, student_id)
    except StudentNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
