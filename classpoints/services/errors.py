"""
Erreurs métier du registre des points et des services associés.

Toutes dérivent de ValueError : les routers les attrapent comme les autres
erreurs de validation métier et les traduisent en HTTPException.
"""


class LedgerError(ValueError):
    """Racine des erreurs métier. `kind` est exposé tel quel dans les rapports de lot."""
    kind = "LEDGER_ERROR"


class InvalidReasonError(LedgerError):
    kind = "INVALID_REASON"


class InvalidAmountError(LedgerError):
    kind = "INVALID_AMOUNT"


class EmptyTargetsError(LedgerError):
    kind = "EMPTY_TARGETS"


class StudentNotFoundError(LedgerError):
    kind = "STUDENT_NOT_FOUND"


class PersistenceError(LedgerError):
    """Écriture refusée par la base (indisponibilité, contrainte, timeout)."""
    kind = "PERSISTENCE_FAILURE"


class ConcurrencyConflictError(LedgerError):
    """Mise à jour conditionnelle perdue face à une écriture concurrente, après retries."""
    kind = "CONCURRENCY_CONFLICT"


class CascadeDeleteError(LedgerError):
    kind = "CASCADE_DELETE_FAILURE"


class ClassNotFoundError(LedgerError):
    kind = "CLASS_NOT_FOUND"


class TeacherNotFoundError(LedgerError):
    kind = "TEACHER_NOT_FOUND"


class MissionNotFoundError(LedgerError):
    kind = "MISSION_NOT_FOUND"


class CodeGenerationError(LedgerError):
    """Impossible de trouver un code libre après le nombre maximal de tentatives."""
    kind = "CODE_GENERATION_FAILURE"
