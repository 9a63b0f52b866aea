from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from research_tracker.core.config import settings
from research_tracker.core.errors import register_exception_handlers
from research_tracker.core.logging import configure_logging, logger
from research_tracker.api.router import api_router
from research_tracker.db.session import engine
from research_tracker.db.base import Base
from research_tracker.db import models  # noqa: F401  registers tables on Base.metadata
from research_tracker.services.seed import seed_on_startup

def create_app() -> FastAPI:
    configure_logging(settings.ENV)
    app = FastAPI(title="Research Project Tracker", version="0.1.0")

    origins = [o.strip() for o in settings.CORS_ORIGINS.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins or ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    @app.get("/healthz")
    def healthz():
        return {"status": "ok"}

    @app.on_event("startup")
    def _startup():
        # dev convenience; other environments provision the schema themselves
        if settings.ENV == "dev":
            Base.metadata.create_all(bind=engine)
        if settings.SEED_DEFAULTS and settings.ENV == "dev":
            seed_on_startup()

    app.include_router(api_router)
    logger.info("app_started", env=settings.ENV)
    return app

app = create_app()
