# Importe tous les modèles pour enregistrer leurs tables dans Base.metadata
# avant que SQLAlchemy tente de résoudre les clés étrangères inter-modèles.
# Sans cet import, classes.teacher_id → teachers.id échoue avec
# NoReferencedTableError si teacher.py n'est pas chargé avant school_class.py.

from classpoints.models.teacher import Teacher  # noqa: F401  — doit précéder school_class
from classpoints.models.school_class import SchoolClass  # noqa: F401
from classpoints.models.student import Student  # noqa: F401
from classpoints.models.point_log import PointLog  # noqa: F401
from classpoints.models.mission import WritingMission  # noqa: F401
