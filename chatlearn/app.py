"""
Chat Learning Service
Main application entry point

Learns a first-order Markov chain from every message the platform adapter
forwards and answers with seeded continuations.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from chatlearn.config import Settings, settings as default_settings
from chatlearn.services.engine import ChatEngine
from chatlearn.utils.logger import setup_logger

logger = setup_logger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Lifecycle manager for service initialization"""
        logger.info("[BOOT] Starting chat learning service...")
        logger.info(f"[BOOT] Data directory: {settings.data_path.resolve()}")
        try:
            app.state.chat_engine = ChatEngine.from_settings(settings).load()
            logger.info("[BOOT] Chat service ready!")
            yield
        except Exception as e:
            logger.error(f"[ERR] Failed to initialize: {e}", exc_info=True)
            raise
        finally:
            logger.info("[SHUTDOWN] Chat service stopped")

    app = FastAPI(
        title="Chat Learning Service",
        description="Markov chain chat responder with phrase redaction",
        version=settings.SERVICE_VERSION,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"[ERR] Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "ok": False,
                "error": {
                    "code": "CHAT_SERVICE_ERROR",
                    "message": "Internal server error occurred",
                    "details": {"type": type(exc).__name__},
                },
            },
        )

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {
            "ok": True,
            "data": {
                "status": "healthy",
                "service": settings.SERVICE_NAME,
                "version": settings.SERVICE_VERSION,
            },
        }

    from chatlearn.api.routers import chat_router

    app.include_router(chat_router.router, prefix="/chat")
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "chatlearn.app:app",
        host=default_settings.HOST,
        port=default_settings.PORT,
        reload=default_settings.DEBUG,
        log_level=default_settings.LOG_LEVEL.lower(),
    )
