"""Service provider dependencies."""
import threading

from onlinetest.services.api_client import ContentApiClient
from onlinetest.services.session_service import SessionService

_session_service: SessionService | None = None
_session_service_lock = threading.Lock()


def get_session_service() -> SessionService:
    """Process-wide session registry, created on first use."""
    global _session_service
    if _session_service is None:
        # sync routes run on a thread pool; only one registry may win
        with _session_service_lock:
            if _session_service is None:
                _session_service = SessionService(ContentApiClient())
    return _session_service
