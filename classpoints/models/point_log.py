"""
Modèle SQLAlchemy pour le journal des points (append-only).

- Une entrée par ajustement et par élève, jamais modifiée ensuite
- amount signé : positif = crédit, négatif = débit, jamais zéro
- Supprimée uniquement en cascade avec son élève
"""

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Index, Integer, Text, Uuid, func
from sqlalchemy.orm import relationship, validates

from classpoints.database import Base


class PointLog(Base):
    __tablename__ = "point_logs"

    # Entier auto-incrémenté : départage les entrées créées dans la même seconde
    id = Column(Integer, primary_key=True, autoincrement=True)
    student_id = Column(Uuid(as_uuid=True), ForeignKey("students.id", ondelete="CASCADE"), nullable=False)
    amount = Column(Integer, nullable=False)
    reason = Column(Text, nullable=False)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    student = relationship("Student", back_populates="point_logs")

    __table_args__ = (
        CheckConstraint("amount <> 0", name="ck_point_logs_amount_nonzero"),
        Index("ix_point_logs_student_created", "student_id", "created_at"),
    )

    @validates("amount")
    def validate_amount(self, key, value):
        if not isinstance(value, int) or isinstance(value, bool) or value == 0:
            raise ValueError("Le montant doit être un entier non nul.")
        return value

    @validates("reason")
    def validate_reason(self, key, value):
        if value is None or not value.strip():
            raise ValueError("La raison ne peut pas être vide.")
        return value.strip()
