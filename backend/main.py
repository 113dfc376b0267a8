# backend/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from sqlalchemy import text

from config.settings import get_settings
# database connection
from database.session import Base, engine
# single gateway: site-management endpoint + admin auth under /gateway/*
from gateway.dependencies import get_session_service
from gateway.gateway_router import gateway_router
import models  # noqa: F401  (registers every table on Base.metadata)

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    settings = get_settings()
    logger.info(f"🚀 {settings.service_name} {settings.version} is starting…")

    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        logger.info("✅ Database connected")
    except Exception as e:
        logger.error(f"❌ Database connection failed: {e}")

    if settings.auto_create_tables:
        Base.metadata.create_all(bind=engine)
        logger.info("✅ Tables verified")

    if settings.admin_session_required and not (settings.admin_email and settings.admin_password):
        logger.warning("⚠️ ADMIN_EMAIL/ADMIN_PASSWORD not set - protected gateway actions will be refused")
    else:
        try:
            get_session_service().purge_expired()
        except Exception as e:
            logger.error(f"❌ Could not purge expired admin sessions: {e}")

    yield
    # Shutdown
    logger.info("🛑 Shutting down…")


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="ThriftySouq Site Management",
        description="Resource-dispatch gateway for the storefront back office",
        version=settings.version,
        lifespan=lifespan,
    )

    @app.get("/health")
    async def health():
        status = {
            "status": "healthy",
            "service": settings.service_name,
            "version": settings.version,
        }
        try:
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            status["database"] = "connected"
        except Exception as e:
            status["database"] = f"error: {e.__class__.__name__}"
            status["status"] = "degraded"
        return status

    @app.get("/")
    async def root():
        return {
            "message": "ThriftySouq Site Management API",
            "version": settings.version,
            "gateway_base": "/api/v1/gateway",
            "docs": "/docs",
            "endpoints": {
                "health": "/health",
                "site_management": "/api/v1/gateway/site-management",
                "auth": "/api/v1/gateway/auth/login",
            },
        }

    # ✅ single entry point - gateway
    app.include_router(gateway_router, prefix="/api/v1")

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=get_settings().debug,
        log_level=get_settings().log_level.lower(),
    )
