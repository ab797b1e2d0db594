"""
Configuration partagée pour tous les tests.
- `client` : override de get_db par un MagicMock (aucune connexion réelle)
- `db` : vraie base SQLite (fichier temporaire) pour les invariants du registre
"""

import os

# Pas de scheduler en arrière-plan pendant les tests API
os.environ.setdefault("RECONCILE_ENABLED", "false")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from unittest.mock import MagicMock  # noqa: E402

import classpoints.models  # noqa: E402,F401
from classpoints.database import Base, get_db  # noqa: E402
from classpoints.main import app  # noqa: E402
from classpoints.models.school_class import SchoolClass  # noqa: E402
from classpoints.models.teacher import Teacher  # noqa: E402


@pytest.fixture
def client():
    """Client HTTP de test avec la BDD mockée."""
    mock_db = MagicMock()
    app.dependency_overrides[get_db] = lambda: mock_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def session_factory(tmp_path):
    """Fabrique de sessions sur une base SQLite fraîche (une par test)."""
    engine = create_engine(
        f"sqlite:///{tmp_path / 'classpoints.db'}",
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def school_class(db):
    """Enseignant + classe persistés, prêts à recevoir des élèves."""
    teacher = Teacher(email="teacher@school.kr", display_name="김선생")
    db.add(teacher)
    db.flush()
    school_class = SchoolClass(name="5학년 2반", invite_code="AB12CD", teacher_id=teacher.id)
    db.add(school_class)
    db.commit()
    return school_class
