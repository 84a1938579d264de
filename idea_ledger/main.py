"""Idea Ledger: Main FastAPI Application.

HTTP adapter over the idea store: employees submit ideas, peers vote,
reviewers decide, and each idea's status follows the latest review.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api import api_router
from .core import Settings, get_settings
from .schemas import ErrorResponse
from .services import IdeaLedger, UserDirectory

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    ledger: IdeaLedger | None = None,
    directory: UserDirectory | None = None,
) -> FastAPI:
    """Build the application.

    A ledger passed in is used as-is and left open at shutdown; otherwise
    one is opened from settings at startup and closed at shutdown.
    """
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan: startup and shutdown."""
        owned = None
        if getattr(app.state, "ledger", None) is None:
            owned = IdeaLedger.open(settings, directory)
            app.state.ledger = owned
        logger.info(
            f"Ledger ready: {len(app.state.ledger.ideas.current())} ideas, "
            f"storage available={app.state.ledger.store.available}"
        )
        yield
        if owned is not None:
            owned.close()
            app.state.ledger = None

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="""
    ## Idea Ledger API

    - **Ideas**: submit and browse ideas, newest first.
    - **Votes**: one vote per user per idea; repeat a vote to withdraw it.
    - **Reviews**: every review sets the idea's status; the latest one wins.
    - **Comments**: append-only discussion per idea.

    Authentication is handled upstream; this API trusts the user ids it is given.
    """,
        openapi_url=f"{settings.api_prefix}/openapi.json",
        docs_url=f"{settings.api_prefix}/docs",
        lifespan=lifespan,
    )
    app.state.ledger = ledger

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:4200", "http://localhost:3000"],
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        error = "not_found" if exc.status_code == status.HTTP_404_NOT_FOUND else "http_error"
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(error=error, message=str(exc.detail)).model_dump(),
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions."""
        logger.exception(f"Unhandled exception on {request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(
                error="internal_error",
                message=f"An unexpected error occurred: {str(exc)[:200]}",
            ).model_dump(),
        )

    @app.get("/health", tags=["health"])
    def health_check(request: Request):
        """Health check endpoint."""
        current = request.app.state.ledger
        return {
            "status": "healthy",
            "version": settings.app_version,
            "storage_available": bool(current and current.store.available),
        }

    app.include_router(api_router, prefix=settings.api_prefix)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "idea_ledger.main:app",
        host="0.0.0.0",
        port=8000,
        reload=get_settings().debug,
    )
