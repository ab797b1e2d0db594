"""
Service du registre des points : ajustements, soldes, historique, réconciliation.

Invariant : pour chaque élève, students.total_points == SUM(point_logs.amount).

Stratégie par élève :
- Incrément atomique en base (UPDATE ... SET total_points = total_points + :delta),
  jamais de lecture-modification-écriture sur une copie locale → pas de mise à jour
  perdue entre deux enseignants qui notent le même élève en même temps
- Insertion du point_log dans la MÊME transaction que l'incrément
- Échec de l'une des deux écritures → rollback des deux
- Dans un lot, chaque élève a sa propre transaction : un échec n'annule pas les autres
"""

import logging
import uuid
from typing import Iterable, List

from sqlalchemy import func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from classpoints.config import settings
from classpoints.models.point_log import PointLog
from classpoints.models.student import Student
from classpoints.schemas.point_log import (
    AdjustmentOutcome,
    AdjustmentResult,
    ReconciliationReport,
)
from classpoints.services.errors import (
    ConcurrencyConflictError,
    EmptyTargetsError,
    InvalidAmountError,
    InvalidReasonError,
    LedgerError,
    PersistenceError,
    StudentNotFoundError,
)

logger = logging.getLogger(__name__)


def adjust_points(
    db: Session,
    student_ids: Iterable[uuid.UUID],
    amount: int,
    reason: str,
) -> AdjustmentResult:
    """
    Applique `amount` (delta signé) à chaque élève ciblé et journalise la raison.

    Les validations (raison vide, montant nul, liste vide) sont faites avant tout
    accès à la base. Ensuite chaque élève est traité indépendamment : les erreurs
    StudentNotFoundError / PersistenceError sont reportées dans son résultat
    sans interrompre le reste du lot.
    """
    if reason is None or not reason.strip():
        raise InvalidReasonError("La raison ne peut pas être vide.")
    if isinstance(amount, bool) or not isinstance(amount, int) or amount == 0:
        raise InvalidAmountError("Le montant doit être un entier non nul.")

    # Dédoublonnage en conservant l'ordre : un même élève ne reçoit le delta qu'une fois
    targets = list(dict.fromkeys(student_ids or []))
    if not targets:
        raise EmptyTargetsError("La liste d'élèves ne peut pas être vide.")

    reason = reason.strip()
    outcomes: List[AdjustmentOutcome] = []

    for student_id in targets:
        try:
            new_balance = _apply_adjustment(db, student_id, amount, reason)
        except LedgerError as exc:
            logger.warning(
                "Ajustement %+d refusé pour l'élève %s : %s (%s)",
                amount, student_id, exc.kind, exc,
            )
            outcomes.append(AdjustmentOutcome(
                student_id=student_id,
                success=False,
                error_kind=exc.kind,
                detail=str(exc),
            ))
            continue

        outcomes.append(AdjustmentOutcome(
            student_id=student_id,
            success=True,
            new_balance=new_balance,
        ))

    succeeded = sum(1 for o in outcomes if o.success)
    logger.info(
        "Ajustement %+d « %s » : %d/%d élèves mis à jour",
        amount, reason, succeeded, len(outcomes),
    )

    return AdjustmentResult(
        amount=amount,
        reason=reason,
        total=len(outcomes),
        succeeded=succeeded,
        failed=len(outcomes) - succeeded,
        summary=f"{succeeded}/{len(outcomes)} élèves mis à jour",
        outcomes=outcomes,
    )


def _apply_adjustment(db: Session, student_id: uuid.UUID, amount: int, reason: str) -> int:
    """
    Incrément atomique + écriture du journal, commités ensemble.
    Retourne le nouveau solde tel que renvoyé par la base.
    """
    try:
        new_balance = db.execute(
            update(Student)
            .where(Student.id == student_id)
            .values(total_points=Student.total_points + amount)
            .returning(Student.total_points)
        ).scalar()

        if new_balance is None:
            db.rollback()
            raise StudentNotFoundError(f"Élève {student_id} introuvable.")

        db.add(PointLog(student_id=student_id, amount=amount, reason=reason))
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        raise PersistenceError(f"Écriture impossible pour l'élève {student_id} : {exc}") from exc

    return new_balance


def get_balance(db: Session, student_id: uuid.UUID) -> int:
    """Solde stocké, relu en base (pas de copie en mémoire)."""
    balance = db.execute(
        select(Student.total_points).where(Student.id == student_id)
    ).scalar()
    if balance is None:
        raise StudentNotFoundError(f"Élève {student_id} introuvable.")
    return balance


def get_history(db: Session, student_id: uuid.UUID) -> List[PointLog]:
    """Historique complet de l'élève, du plus récent au plus ancien."""
    _ensure_student_exists(db, student_id)
    return list(db.execute(
        select(PointLog)
        .where(PointLog.student_id == student_id)
        .order_by(PointLog.created_at.desc(), PointLog.id.desc())
    ).scalars().all())


def compute_log_total(db: Session, student_id: uuid.UUID) -> int:
    """Somme des montants journalisés pour l'élève (0 si aucun)."""
    total = db.execute(
        select(func.coalesce(func.sum(PointLog.amount), 0))
        .where(PointLog.student_id == student_id)
    ).scalar()
    return int(total or 0)


def reconcile_balance(db: Session, student_id: uuid.UUID) -> ReconciliationReport:
    """
    Recalcule le solde depuis le journal et corrige total_points si besoin.

    La correction est conditionnelle (WHERE total_points = valeur lue) : si une
    écriture concurrente passe entre la lecture et la correction, on relit et on
    recommence, au plus LEDGER_MAX_RETRIES fois.
    """
    for attempt in range(1, settings.LEDGER_MAX_RETRIES + 1):
        stored = get_balance(db, student_id)
        log_total = compute_log_total(db, student_id)

        if stored == log_total:
            # Ferme la transaction de lecture ouverte par les deux SELECT
            db.rollback()
            return ReconciliationReport(
                student_id=student_id,
                stored_balance=stored,
                log_total=log_total,
                corrected=False,
            )

        try:
            result = db.execute(
                update(Student)
                .where(Student.id == student_id, Student.total_points == stored)
                .values(total_points=log_total)
                .execution_options(synchronize_session=False)
            )
            db.commit()
        except SQLAlchemyError as exc:
            db.rollback()
            raise PersistenceError(f"Réconciliation impossible pour l'élève {student_id} : {exc}") from exc

        if result.rowcount == 1:
            logger.warning(
                "Solde corrigé pour l'élève %s : %d → %d (somme du journal)",
                student_id, stored, log_total,
            )
            return ReconciliationReport(
                student_id=student_id,
                stored_balance=stored,
                log_total=log_total,
                corrected=True,
            )

        logger.debug("Conflit de réconciliation pour l'élève %s (tentative %d)", student_id, attempt)

    raise ConcurrencyConflictError(
        f"Solde de l'élève {student_id} modifié en continu, réconciliation abandonnée "
        f"après {settings.LEDGER_MAX_RETRIES} tentatives."
    )


def reconcile_all(db: Session) -> List[ReconciliationReport]:
    """Réconcilie tous les élèves. Un échec isolé est journalisé sans bloquer les autres."""
    student_ids = db.execute(select(Student.id)).scalars().all()
    reports: List[ReconciliationReport] = []

    for student_id in student_ids:
        try:
            reports.append(reconcile_balance(db, student_id))
        except StudentNotFoundError:
            # Supprimé entre le listing et la réconciliation
            continue
        except LedgerError as exc:
            logger.warning("Réconciliation échouée pour l'élève %s : %s", student_id, exc)

    corrected = sum(1 for r in reports if r.corrected)
    logger.info("Réconciliation : %d élèves vérifiés, %d soldes corrigés", len(reports), corrected)
    return reports


def _ensure_student_exists(db: Session, student_id: uuid.UUID) -> None:
    exists = db.execute(select(Student.id).where(Student.id == student_id)).scalar()
    if exists is None:
        raise StudentNotFoundError(f"Élève {student_id} introuvable.")
