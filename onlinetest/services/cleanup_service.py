"""Service for evicting stale sessions from memory."""
import logging
import threading
from datetime import timedelta

from onlinetest.config import SESSION_CLEANUP_INTERVAL_SECONDS, SESSION_RETENTION_MINUTES
from onlinetest.services.session_service import SessionService

logger = logging.getLogger(__name__)


def cleanup_stale_sessions(service: SessionService) -> int:
    """Drop sessions that finished (or never started) long ago."""
    if SESSION_RETENTION_MINUTES <= 0:
        return 0

    try:
        evicted = service.evict_stale(timedelta(minutes=SESSION_RETENTION_MINUTES))
    except Exception as e:
        logger.error(f"Failed to clean up sessions: {e}")
        return 0
    if evicted > 0:
        logger.info(f"Cleaned up {evicted} stale sessions")
    return evicted


def schedule_sessions_cleanup(service: SessionService) -> threading.Event:
    """Run cleanup periodically; set the returned event to stop it."""
    stop = threading.Event()

    def _worker() -> None:
        while not stop.wait(SESSION_CLEANUP_INTERVAL_SECONDS):
            cleanup_stale_sessions(service)

    thread = threading.Thread(
        target=_worker,
        name="sessions_cleanup",
        daemon=True,
    )
    thread.start()
    return stop
