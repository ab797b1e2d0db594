"""
Tests d'intégration API pour les classes, les élèves d'une classe et les enseignants.
"""

import uuid
from datetime import datetime
from types import SimpleNamespace
from unittest.mock import patch

from classpoints.schemas.school_class import ClassResponse
from classpoints.services.errors import (
    CascadeDeleteError,
    ClassNotFoundError,
    CodeGenerationError,
    TeacherNotFoundError,
)


# --- Helpers ---

def make_class_response(**kwargs) -> ClassResponse:
    return ClassResponse(
        id=kwargs.get("id", uuid.uuid4()),
        name=kwargs.get("name", "5학년 2반"),
        invite_code=kwargs.get("invite_code", "AB12CD"),
        teacher_id=kwargs.get("teacher_id", uuid.uuid4()),
        nb_students=kwargs.get("nb_students", 0),
        created_at=datetime(2026, 3, 1),
    )


def make_student(**kwargs):
    return SimpleNamespace(
        id=kwargs.get("id", uuid.uuid4()),
        class_id=kwargs.get("class_id", uuid.uuid4()),
        name=kwargs.get("name", "지민"),
        login_code=kwargs.get("login_code", "K7Q2M9XA"),
        total_points=kwargs.get("total_points", 0),
        created_at=datetime(2026, 3, 1),
    )


# ============================================================
# Classes
# ============================================================

def test_create_class_succes(client):
    teacher_id = uuid.uuid4()
    with patch(
        "classpoints.routers.classes.class_service.create_class",
        return_value=make_class_response(teacher_id=teacher_id),
    ):
        response = client.post("/api/v1/classes", json={"name": "5학년 2반", "teacher_id": str(teacher_id)})
    assert response.status_code == 201
    assert response.json()["invite_code"] == "AB12CD"


def test_create_class_nom_vide_422(client):
    response = client.post("/api/v1/classes", json={"name": "  ", "teacher_id": str(uuid.uuid4())})
    assert response.status_code == 422


def test_create_class_enseignant_inexistant_404(client):
    with patch(
        "classpoints.routers.classes.class_service.create_class",
        side_effect=TeacherNotFoundError("Enseignant introuvable."),
    ):
        response = client.post("/api/v1/classes", json={"name": "5학년 2반", "teacher_id": str(uuid.uuid4())})
    assert response.status_code == 404


def test_create_class_collision_code_409(client):
    with patch(
        "classpoints.routers.classes.class_service.create_class",
        side_effect=CodeGenerationError("collision"),
    ):
        response = client.post("/api/v1/classes", json={"name": "5학년 2반", "teacher_id": str(uuid.uuid4())})
    assert response.status_code == 409


def test_get_class_introuvable(client):
    with patch("classpoints.routers.classes.class_service.get_class", return_value=None):
        response = client.get(f"/api/v1/classes/{uuid.uuid4()}")
    assert response.status_code == 404


def test_get_class_by_invite_code(client):
    with patch(
        "classpoints.routers.classes.class_service.get_class_by_invite_code",
        return_value=make_class_response(nb_students=12),
    ):
        response = client.get("/api/v1/classes/invite/ab12cd")
    assert response.status_code == 200
    assert response.json()["nb_students"] == 12


def test_delete_class(client):
    with patch("classpoints.routers.classes.class_service.delete_class", return_value=True):
        assert client.delete(f"/api/v1/classes/{uuid.uuid4()}").status_code == 204
    with patch("classpoints.routers.classes.class_service.delete_class", return_value=False):
        assert client.delete(f"/api/v1/classes/{uuid.uuid4()}").status_code == 404
    with patch(
        "classpoints.routers.classes.class_service.delete_class",
        side_effect=CascadeDeleteError("échec"),
    ):
        assert client.delete(f"/api/v1/classes/{uuid.uuid4()}").status_code == 500


# ============================================================
# Élèves d'une classe
# ============================================================

def test_add_student_succes(client):
    class_id = uuid.uuid4()
    student = make_student(class_id=class_id)
    with patch("classpoints.routers.classes.student_service.add_student", return_value=student) as mock_add:
        response = client.post(f"/api/v1/classes/{class_id}/students", json={"name": " 지민 "})

    assert response.status_code == 201
    data = response.json()
    assert data["login_code"] == "K7Q2M9XA"
    assert data["total_points"] == 0
    mock_add.assert_called_once()
    assert mock_add.call_args[0][1:] == (class_id, "지민")


def test_add_student_nom_vide_422(client):
    response = client.post(f"/api/v1/classes/{uuid.uuid4()}/students", json={"name": "   "})
    assert response.status_code == 422


def test_add_student_classe_inexistante_404(client):
    with patch(
        "classpoints.routers.classes.student_service.add_student",
        side_effect=ClassNotFoundError("Classe introuvable."),
    ):
        response = client.post(f"/api/v1/classes/{uuid.uuid4()}/students", json={"name": "지민"})
    assert response.status_code == 404


def test_list_students(client):
    class_id = uuid.uuid4()
    students = [make_student(name="서준", class_id=class_id), make_student(name="지민", class_id=class_id)]
    with patch("classpoints.routers.classes.student_service.list_students", return_value=students):
        response = client.get(f"/api/v1/classes/{class_id}/students")
    assert response.status_code == 200
    assert [s["name"] for s in response.json()] == ["서준", "지민"]


# ============================================================
# Enseignants
# ============================================================

def test_create_teacher_email_invalide_422(client):
    response = client.post("/api/v1/teachers", json={"email": "pas-un-email", "display_name": "김선생"})
    assert response.status_code == 422


def test_create_teacher_doublon_409(client):
    with patch(
        "classpoints.routers.teachers.teacher_service.create_teacher",
        side_effect=ValueError("Un enseignant avec l'email 'a@b.kr' existe déjà."),
    ):
        response = client.post("/api/v1/teachers", json={"email": "a@school.kr", "display_name": "김선생"})
    assert response.status_code == 409


def test_get_teacher_introuvable(client):
    with patch(
        "classpoints.routers.teachers.teacher_service.get_teacher",
        side_effect=TeacherNotFoundError("Enseignant introuvable."),
    ):
        response = client.get(f"/api/v1/teachers/{uuid.uuid4()}")
    assert response.status_code == 404


def test_list_teacher_classes(client):
    teacher_id = uuid.uuid4()
    with patch(
        "classpoints.routers.teachers.class_service.get_classes_for_teacher",
        return_value=[make_class_response(teacher_id=teacher_id)],
    ):
        response = client.get(f"/api/v1/teachers/{teacher_id}/classes")
    assert response.status_code == 200
    assert len(response.json()) == 1
