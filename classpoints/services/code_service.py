"""
Génération des codes de connexion élève et des codes d'invitation de classe.

Alphabet : A-Z0-9 (36 symboles), tirage uniforme via `secrets`.
L'unicité est globale : la connexion élève recherche le code sans filtre de classe.
"""

import logging
import secrets
import string

from sqlalchemy import select
from sqlalchemy.orm import Session

from classpoints.config import settings
from classpoints.services.errors import CodeGenerationError

logger = logging.getLogger(__name__)

CODE_ALPHABET = string.ascii_uppercase + string.digits


def generate_code(length: int) -> str:
    """Tire un code de `length` caractères dans CODE_ALPHABET."""
    return "".join(secrets.choice(CODE_ALPHABET) for _ in range(length))


def generate_unique_code(db: Session, column, length: int) -> str:
    """
    Génère un code absent de `column` (ex. Student.login_code).
    Relance le tirage en cas de collision, au plus CODE_GENERATION_MAX_ATTEMPTS fois.
    La contrainte UNIQUE en base reste le dernier rempart (course entre deux créations).
    """
    for attempt in range(1, settings.CODE_GENERATION_MAX_ATTEMPTS + 1):
        code = generate_code(length)
        taken = db.execute(select(column).where(column == code)).scalar()
        if taken is None:
            return code
        logger.debug("Collision de code %s (tentative %d)", code, attempt)

    raise CodeGenerationError(
        f"Aucun code libre trouvé après {settings.CODE_GENERATION_MAX_ATTEMPTS} tentatives."
    )


def normalize_code(code: str) -> str:
    return code.strip().upper()
