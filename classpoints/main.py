"""
Point d'entrée principal de l'API ClassPoints.
Démarrage : uvicorn classpoints.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import classpoints.models  # noqa: F401 : enregistre tous les modèles dans Base.metadata avant les routers
from classpoints.routers import auth, classes, missions, points, students, teachers
from classpoints.scheduler import start_scheduler, stop_scheduler

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Cycle de vie de l'application : démarre et arrête le scheduler APScheduler."""
    start_scheduler()
    yield
    stop_scheduler()


app = FastAPI(
    title="ClassPoints API",
    description="Points de classe et missions d'écriture : registre des points, élèves, classes",
    version="0.1.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
    lifespan=lifespan,
)

# Origines locales uniquement (front de dev servi sur un port quelconque)
app.add_middleware(
    CORSMiddleware,
    allow_origins=[],
    allow_origin_regex=r"https?://(localhost|127\.0\.0\.1)(:\d+)?",
    allow_credentials=False,
    allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Accept"],
)


app.include_router(teachers.router)
app.include_router(classes.router)
app.include_router(students.router)
app.include_router(points.router)
app.include_router(missions.router)
app.include_router(auth.router)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Toute erreur imprévue devient un 500 JSON générique, le détail reste dans les logs."""
    logger.error("Exception non gérée : %s", exc, exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "Une erreur interne est survenue."},
    )


@app.get("/api/health", tags=["Santé"])
def health_check():
    """Vérifie que l'API est opérationnelle."""
    return {"status": "ok", "service": "ClassPoints API", "version": "0.1.0"}
