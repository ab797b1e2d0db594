"""
Tests de la configuration par défaut (sans .env ni variables d'environnement).
"""

from sqlalchemy.engine import make_url

from classpoints.config import Settings


def test_url_par_defaut_utilise_psycopg2(monkeypatch):
    """Le pilote est explicite : il correspond à psycopg2-binary déclaré dans les dépendances."""
    monkeypatch.delenv("DATABASE_URL", raising=False)
    url = make_url(Settings(_env_file=None).DATABASE_URL)
    assert url.drivername == "postgresql+psycopg2"
    assert url.get_driver_name() == "psycopg2"


def test_url_surchargee_par_l_environnement(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite:///./classpoints.db")
    assert Settings(_env_file=None).DATABASE_URL == "sqlite:///./classpoints.db"


def test_valeurs_par_defaut(monkeypatch):
    for name in ("LOGIN_CODE_LENGTH", "INVITE_CODE_LENGTH", "CODE_GENERATION_MAX_ATTEMPTS"):
        monkeypatch.delenv(name, raising=False)
    defaults = Settings(_env_file=None)
    assert defaults.LOGIN_CODE_LENGTH == 8
    assert defaults.INVITE_CODE_LENGTH == 6
    assert defaults.CODE_GENERATION_MAX_ATTEMPTS == 10
