"""
Tests unitaires pour le service des missions d'écriture.
"""

import uuid
from unittest.mock import MagicMock

import pytest
from pydantic import ValidationError

from classpoints.schemas.mission import MissionCreate
from classpoints.services.errors import ClassNotFoundError, MissionNotFoundError
from classpoints.services.mission_service import create_mission, delete_mission, list_missions


def make_mission_data(**kwargs) -> MissionCreate:
    defaults = {"title": "나의 꿈", "guide": "장래 희망을 써 보세요."}
    defaults.update(kwargs)
    return MissionCreate(**defaults)


# --- Validation des schémas ---

def test_mission_valeurs_par_defaut():
    m = make_mission_data()
    assert m.genre == "수필"
    assert (m.min_chars, m.min_paragraphs) == (100, 2)
    assert (m.base_reward, m.bonus_threshold, m.bonus_reward) == (100, 100, 10)


def test_mission_titre_vide_rejete():
    with pytest.raises(ValidationError):
        make_mission_data(title="  ")


def test_mission_genre_inconnu_rejete():
    with pytest.raises(ValidationError):
        make_mission_data(genre="소설")


def test_mission_recompense_negative_rejetee():
    with pytest.raises(ValidationError):
        make_mission_data(base_reward=-1)


# --- create / list / delete ---

def test_create_mission_succes(db, school_class):
    mission = create_mission(db, school_class.id, make_mission_data(genre="시", min_chars=50))
    assert mission.id is not None
    assert mission.genre == "시"
    assert mission.min_chars == 50
    assert mission.class_id == school_class.id


def test_create_mission_classe_inexistante():
    db = MagicMock()
    db.get.return_value = None
    with pytest.raises(ClassNotFoundError):
        create_mission(db, uuid.uuid4(), make_mission_data())
    db.add.assert_not_called()


def test_list_missions(db, school_class):
    create_mission(db, school_class.id, make_mission_data(title="봄"))
    create_mission(db, school_class.id, make_mission_data(title="여름"))
    titles = {m.title for m in list_missions(db, school_class.id)}
    assert titles == {"봄", "여름"}
    assert list_missions(db, uuid.uuid4()) == []


def test_delete_mission(db, school_class):
    mission = create_mission(db, school_class.id, make_mission_data())
    delete_mission(db, mission.id)
    assert list_missions(db, school_class.id) == []


def test_delete_mission_inexistante():
    db = MagicMock()
    db.get.return_value = None
    with pytest.raises(MissionNotFoundError):
        delete_mission(db, uuid.uuid4())
    db.commit.assert_not_called()
