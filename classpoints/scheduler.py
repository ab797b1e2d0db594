"""
Planificateur APScheduler pour la réconciliation périodique des soldes.

Le job recalcule, pour chaque élève, la somme de son journal de points et
corrige total_points en cas d'écart (écriture partielle, script externe, etc.).
"""

import logging

from apscheduler.schedulers.background import BackgroundScheduler

from classpoints.config import settings
from classpoints.database import SessionLocal

logger = logging.getLogger(__name__)

scheduler = BackgroundScheduler()


def _reconcile_balances_scheduled() -> None:
    """
    Tâche planifiée : réconcilie tous les soldes élèves avec leur journal.
    Import local pour éviter les imports circulaires.
    """
    from classpoints.services.ledger_service import reconcile_all

    db = SessionLocal()
    try:
        reports = reconcile_all(db)
        corrected = [r for r in reports if r.corrected]
        if corrected:
            logger.warning(
                "Réconciliation planifiée : %d solde(s) corrigé(s) sur %d",
                len(corrected), len(reports),
            )
    except Exception as exc:
        logger.error("Erreur lors de la réconciliation planifiée : %s", exc, exc_info=True)
    finally:
        db.close()


def start_scheduler() -> None:
    """Démarre le scheduler si la réconciliation est activée."""
    if not settings.RECONCILE_ENABLED:
        logger.info("Réconciliation planifiée désactivée (RECONCILE_ENABLED=false)")
        return
    if scheduler.running:
        return
    scheduler.add_job(
        _reconcile_balances_scheduled,
        trigger="interval",
        minutes=settings.RECONCILE_INTERVAL_MINUTES,
        id="reconcile_balances",
        replace_existing=True,
    )
    scheduler.start()
    logger.info(
        "Scheduler démarré : réconciliation des soldes toutes les %d min",
        settings.RECONCILE_INTERVAL_MINUTES,
    )


def stop_scheduler() -> None:
    """Arrête proprement le scheduler à l'arrêt de l'application."""
    if scheduler.running:
        scheduler.shutdown(wait=False)
        logger.info("Scheduler arrêté.")
