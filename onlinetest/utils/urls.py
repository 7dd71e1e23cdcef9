"""URL helpers for the content API."""
from urllib.parse import quote

from onlinetest.config import API_BASE_URL, UPLOADS_BASE_URL


def api_url(path: str, base: str | None = None) -> str:
    """Join an endpoint path onto the API base."""
    root = (base or API_BASE_URL).rstrip("/")
    return f"{root}/{path.lstrip('/')}"


def subtopic_questions_path(sub_topic_name: str) -> str:
    return f"/questions/subtopic/{quote(sub_topic_name, safe='')}"


def upload_url(path: str | None, base: str | None = None) -> str | None:
    """Absolute URL of an uploaded image, or None when there is no image."""
    if not path:
        return None
    root = (base or UPLOADS_BASE_URL).rstrip("/")
    return f"{root}/uploads/{path.lstrip('/')}"
