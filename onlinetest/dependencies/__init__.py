"""FastAPI dependencies."""
from onlinetest.dependencies.credentials import get_forwarded_credentials
from onlinetest.dependencies.services import get_session_service

__all__ = ["get_forwarded_credentials", "get_session_service"]
