"""
Router pour les missions d'écriture.
"""

import uuid
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from classpoints.database import get_db
from classpoints.schemas.mission import MissionCreate, MissionResponse
from classpoints.services import mission_service
from classpoints.services.errors import ClassNotFoundError, MissionNotFoundError

router = APIRouter(prefix="/api/v1", tags=["Missions"])


@router.post(
    "/classes/{class_id}/missions",
    response_model=MissionResponse,
    status_code=201,
    summary="Publier une mission d'écriture",
)
def create_mission(class_id: uuid.UUID, data: MissionCreate, db: Session = Depends(get_db)):
    try:
        return mission_service.create_mission(db, class_id, data)
    except ClassNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/classes/{class_id}/missions", response_model=List[MissionResponse], summary="Lister les missions")
def list_missions(class_id: uuid.UUID, db: Session = Depends(get_db)):
    """Retourne les missions de la classe, plus récentes d'abord."""
    return mission_service.list_missions(db, class_id)


@router.delete("/missions/{mission_id}", status_code=204, summary="Supprimer une mission")
def delete_mission(mission_id: uuid.UUID, db: Session = Depends(get_db)):
    try:
        mission_service.delete_mission(db, mission_id)
    except MissionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
