"""API route modules."""
from onlinetest.routes import sessions

__all__ = ["sessions"]
