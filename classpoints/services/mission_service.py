"""
Service métier pour les missions d'écriture d'une classe.
"""

import logging
import uuid
from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session

from classpoints.models.mission import WritingMission
from classpoints.models.school_class import SchoolClass
from classpoints.schemas.mission import MissionCreate
from classpoints.services.errors import ClassNotFoundError, MissionNotFoundError

logger = logging.getLogger(__name__)


def create_mission(db: Session, class_id: uuid.UUID, data: MissionCreate) -> WritingMission:
    if db.get(SchoolClass, class_id) is None:
        raise ClassNotFoundError("Classe introuvable.")

    mission = WritingMission(class_id=class_id, **data.model_dump())
    db.add(mission)
    db.commit()
    db.refresh(mission)

    logger.info("Mission « %s » publiée pour la classe %s", mission.title, class_id)
    return mission


def list_missions(db: Session, class_id: uuid.UUID) -> List[WritingMission]:
    """Missions de la classe, plus récentes d'abord."""
    return list(db.execute(
        select(WritingMission)
        .where(WritingMission.class_id == class_id)
        .order_by(WritingMission.created_at.desc())
    ).scalars().all())


def delete_mission(db: Session, mission_id: uuid.UUID) -> None:
    mission = db.get(WritingMission, mission_id)
    if mission is None:
        raise MissionNotFoundError("Mission introuvable.")
    db.delete(mission)
    db.commit()
    logger.info("Mission %s supprimée", mission_id)
