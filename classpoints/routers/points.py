"""
Router pour les ajustements de points par lot.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from classpoints.database import get_db
from classpoints.schemas.point_log import AdjustmentResult, PointAdjustmentCreate
from classpoints.services import ledger_service

router = APIRouter(prefix="/api/v1/points", tags=["Points"])


@router.post("/adjust", response_model=AdjustmentResult, summary="Donner ou retirer des points")
def adjust_points(data: PointAdjustmentCreate, db: Session = Depends(get_db)):
    """
    Applique un delta signé à un ou plusieurs élèves avec une raison.

    Le lot est partiellement réussissable : la réponse est toujours 200 une fois
    la requête validée, avec un résultat par élève (`outcomes`) et un résumé
    « N/M élèves mis à jour ».
    """
    try:
        return ledger_service.adjust_points(db, data.student_ids, data.amount, data.reason)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
