import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import Settings, get_settings
from app.database import Base, create_db_engine, create_session_factory
from app import models  # noqa: F401  registers tables on Base.metadata
from app.routes import auth_routes, job_routes, message_routes, profile_routes
from app.utils.cloudinary_client import AvatarStorage
from app.utils.email import EmailSender
from app.utils.exceptions import AppError

logger = logging.getLogger(__name__)


def log_configuration(settings: Settings) -> None:
    """Summarise the loaded configuration without leaking secrets"""
    logger.info("Startup configuration:")
    logger.info("[BREVO] API key: %s", "OK" if settings.brevo_api_key else "MISSING")
    logger.info("[BREVO] Sender: %s", settings.brevo_sender_email)
    logger.info("[CLOUDINARY] Cloud name: %s", settings.cloudinary_cloud_name)
    logger.info("[DATABASE] Dialect: %s", settings.database_url.split(":", 1)[0])
    logger.info("[JWT] Secret: %s", "OK" if settings.jwt_secret else "MISSING")


async def app_error_handler(request: Request, exc: AppError):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


def create_app(
    settings: Optional[Settings] = None,
    email_sender: Optional[EmailSender] = None,
    avatar_storage: Optional[AvatarStorage] = None,
) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level)

    engine = create_db_engine(settings.database_url)
    Base.metadata.create_all(bind=engine)

    app = FastAPI(title="LoopMid Freelance Backend")
    app.state.settings = settings
    app.state.engine = engine
    app.state.SessionLocal = create_session_factory(engine)
    app.state.email_sender = email_sender or EmailSender(settings)
    app.state.avatar_storage = avatar_storage or AvatarStorage(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    @app.get("/")
    def root():
        return {"message": "API Freelance Marketplace Online"}

    app.include_router(auth_routes.router)
    app.include_router(profile_routes.router)
    app.include_router(job_routes.router)
    app.include_router(message_routes.router)

    log_configuration(settings)
    return app
