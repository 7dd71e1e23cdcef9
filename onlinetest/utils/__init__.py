"""Utility modules."""
from onlinetest.utils.time_utils import format_time, parse_iso_timestamp, utc_now
from onlinetest.utils.urls import api_url, subtopic_questions_path, upload_url
from onlinetest.utils.validation import validate_id

__all__ = [
    "api_url",
    "format_time",
    "parse_iso_timestamp",
    "subtopic_questions_path",
    "upload_url",
    "utc_now",
    "validate_id",
]
