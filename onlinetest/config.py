"""Application configuration and constants."""
import os


def _parse_int_env(name: str, default: int) -> int:
    """Parse integer from environment variable."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _parse_float_env(name: str, default: float) -> float:
    """Parse float from environment variable."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _uploads_base(api_base: str) -> str:
    """Uploads are served next to the API root, not under it."""
    base = api_base.rstrip("/")
    if base.endswith("/api"):
        base = base[: -len("/api")]
    return base


# Content API
API_BASE_URL = os.environ.get("API_BASE_URL", "http://localhost:5000/api").rstrip("/")
UPLOADS_BASE_URL = os.environ.get(
    "UPLOADS_BASE_URL", _uploads_base(API_BASE_URL)
).rstrip("/")
API_TIMEOUT_SECONDS = _parse_float_env("API_TIMEOUT_SECONDS", 10.0)

# Test sessions
TEST_DURATION_SECONDS = _parse_int_env("TEST_DURATION_SECONDS", 30 * 60)
TICK_INTERVAL_SECONDS = _parse_float_env("TICK_INTERVAL_SECONDS", 1.0)
SESSION_RETENTION_MINUTES = _parse_int_env("SESSION_RETENTION_MINUTES", 60)
SESSION_CLEANUP_INTERVAL_SECONDS = _parse_int_env(
    "SESSION_CLEANUP_INTERVAL_SECONDS", 5 * 60
)

# HTTP
CORS_ALLOW_ORIGINS = [
    origin.strip()
    for origin in os.environ.get("CORS_ALLOW_ORIGINS", "*").split(",")
    if origin.strip()
]
HOST = os.environ.get("HOST", "127.0.0.1")
PORT = _parse_int_env("PORT", 8000)

FETCH_ERROR_MESSAGE = "Failed to load questions. Please try again later."
