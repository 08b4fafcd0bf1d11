#!/usr/bin/env python3
# frs_admin/api/main.py

import uvicorn
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from frs_admin.config.config import settings
from frs_admin.config.logger import logger
from frs_admin.api.v1.routes import health, models
from frs_admin.api.v1.exception_handlers import app_exception_handler, validation_exception_handler
from frs_admin.core.exceptions import AppException
from frs_admin.database.db import init_db, create_pool
from frs_admin.database.migrations import run_pending_migrations

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("🚀 Démarrage de l'application")
    await init_db()

    # Exécuter les migrations en attente
    logger.info("🔄 Vérification des migrations...")
    await run_pending_migrations()

    logger.info("🔗 Creating database connection pool...")
    app.state.db_pool = await create_pool()

    logger.info("✅ Startup complete")

    yield

    logger.info("🔗 Closing database connection pool...")
    await app.state.db_pool.close()
    logger.info("🛑 Arrêt de l'application")


def register_exception_handlers(app: FastAPI) -> None:
    """Branche les handlers globaux sur l'application."""
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)


# --- Création de l'app ---
app = FastAPI(title=settings.app_name, version=settings.app_version, debug=settings.debug, lifespan=lifespan)

# --- Handler d'exceptions globales ---
register_exception_handlers(app)

# --- Configuration CORS ---
allowed_origins = [
    "http://localhost:4200",  # Admin UI dev
    "http://127.0.0.1:4200",
]

# Ajouter l'URL du frontend en production si définie
if settings.frontend_url:
    allowed_origins.append(settings.frontend_url)

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "Accept"],
    expose_headers=["Content-Type"],
    max_age=3600,  # Cache preflight 1h
)

# --- Middleware de logging des requêtes (DEBUG uniquement) ---
if settings.debug:
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        logger.debug(f"{request.method} {request.url.path}")
        response = await call_next(request)
        return response

# --- Routes ---
app.include_router(models.router)
app.include_router(health.router)

# --- Lancement en mode script ---
if __name__ == "__main__":
    uvicorn.run("frs_admin.api.main:app", host=settings.host, port=settings.port, reload=settings.debug)
