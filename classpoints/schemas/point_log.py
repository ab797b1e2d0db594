"""
Schémas Pydantic pour le registre des points (ajustements, soldes, historique).
"""

import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, field_validator


class PointAdjustmentCreate(BaseModel):
    """
    Corps de requête POST /points/adjust.
    amount est un delta signé (l'interface choisit donner/retirer et envoie le signe).
    """
    student_ids: List[uuid.UUID]
    amount: int
    reason: str

    @field_validator("student_ids")
    @classmethod
    def targets_not_empty(cls, v: List[uuid.UUID]) -> List[uuid.UUID]:
        if not v:
            raise ValueError("La liste d'élèves ne peut pas être vide.")
        return v

    @field_validator("amount")
    @classmethod
    def amount_not_zero(cls, v: int) -> int:
        if v == 0:
            raise ValueError("Le montant doit être non nul.")
        return v

    @field_validator("reason")
    @classmethod
    def reason_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("La raison ne peut pas être vide.")
        return v.strip()


class AdjustmentOutcome(BaseModel):
    """Résultat de l'ajustement pour un élève du lot."""
    student_id: uuid.UUID
    success: bool
    error_kind: Optional[str] = None
    detail: Optional[str] = None
    new_balance: Optional[int] = None  # Solde relu en base, jamais calculé localement


class AdjustmentResult(BaseModel):
    """Rapport d'un ajustement par lot : un résultat par élève ciblé."""
    amount: int
    reason: str
    total: int
    succeeded: int
    failed: int
    summary: str
    outcomes: List[AdjustmentOutcome]


class PointLogResponse(BaseModel):
    id: int
    student_id: uuid.UUID
    amount: int
    reason: str
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class BalanceResponse(BaseModel):
    student_id: uuid.UUID
    total_points: int


class ReconciliationReport(BaseModel):
    """Comparaison solde stocké ↔ somme du journal, avec correction éventuelle."""
    student_id: uuid.UUID
    stored_balance: int
    log_total: int
    corrected: bool
