"""Main FastAPI application."""
from typing import Annotated

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from onlinetest.config import CORS_ALLOW_ORIGINS
from onlinetest.dependencies import get_session_service
from onlinetest.logging_setup import setup_console_logging
from onlinetest.routes import sessions
from onlinetest.services.cleanup_service import schedule_sessions_cleanup
from onlinetest.services.session_service import SessionService

setup_console_logging()

app = FastAPI(title="Online Test API")

# CORS middleware; cookies are forwarded to the content API
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_credentials="*" not in CORS_ALLOW_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Startup / shutdown events
@app.on_event("startup")
def startup_events() -> None:
    """Schedule eviction of stale sessions."""
    app.state.cleanup_stop = schedule_sessions_cleanup(get_session_service())


@app.on_event("shutdown")
def shutdown_events() -> None:
    """Stop cleanup and all running timers."""
    stop = getattr(app.state, "cleanup_stop", None)
    if stop is not None:
        stop.set()
    get_session_service().discard_all()


@app.get("/api/health")
def health(
    service: Annotated[SessionService, Depends(get_session_service)],
) -> dict[str, object]:
    """Liveness probe with the number of sessions held in memory."""
    return {"status": "ok", "sessions": len(service)}


# Include routers
app.include_router(sessions.router)
