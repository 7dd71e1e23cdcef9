"""Client for the content REST API the online test consumes."""
from __future__ import annotations

import logging
from http.cookiejar import DefaultCookiePolicy

import requests
from pydantic import TypeAdapter, ValidationError

from onlinetest.config import API_BASE_URL, API_TIMEOUT_SECONDS
from onlinetest.errors import FetchFailure, PersistenceFailure
from onlinetest.models import QuestionItem, Score, TestResultPayload
from onlinetest.utils.urls import api_url, subtopic_questions_path

log = logging.getLogger(__name__)

_QUESTION_LIST = TypeAdapter(list[QuestionItem])

PROFILE_PATH = "/student/profile"
SAVE_RESULT_PATH = "/student/save-test-result"


class ContentApiClient:
    """
    Thin wrapper over ``requests.Session`` for the three endpoints used here.

    The session is shared by all test takers, so its cookie jar accepts
    nothing; credentials travel only as explicit per-request headers.

    ``credentials`` passed to the student endpoints are request headers
    (``Authorization`` and/or ``Cookie``) captured from the test taker.
    """

    def __init__(
        self,
        base_url: str = API_BASE_URL,
        timeout: float = API_TIMEOUT_SECONDS,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        if isinstance(self.session, requests.Session):
            self.session.cookies.set_policy(DefaultCookiePolicy(allowed_domains=[]))
        self.session.headers.update({"Accept": "application/json"})

    def fetch_subtopic_questions(self, sub_topic_name: str) -> list[QuestionItem]:
        """Ordered question set for a subtopic. Raises FetchFailure."""
        url = api_url(subtopic_questions_path(sub_topic_name), self.base_url)
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as exc:
            raise FetchFailure(sub_topic_name, str(exc)) from exc
        except ValueError as exc:
            raise FetchFailure(sub_topic_name, "response is not JSON") from exc

        try:
            items = _QUESTION_LIST.validate_python(payload)
        except ValidationError as exc:
            raise FetchFailure(
                sub_topic_name, f"unexpected payload ({exc.error_count()} errors)"
            ) from exc

        log.info("Fetched %d questions for subtopic %s", len(items), sub_topic_name)
        return items

    def has_profile(self, credentials: dict[str, str]) -> bool:
        """Existence check for an authenticated student session."""
        if not credentials:
            return False
        try:
            response = self.session.get(
                api_url(PROFILE_PATH, self.base_url),
                headers=credentials,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            log.debug("Profile check failed: %s", exc)
            return False
        return response.status_code == 200

    def save_test_result(
        self,
        sub_topic_name: str,
        score: Score,
        credentials: dict[str, str],
    ) -> None:
        """Store a finished score on the student's profile. Raises PersistenceFailure."""
        body = TestResultPayload(subTopicName=sub_topic_name, score=score)
        try:
            response = self.session.post(
                api_url(SAVE_RESULT_PATH, self.base_url),
                json=body.model_dump(),
                headers=credentials,
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.RequestException as exc:
            raise PersistenceFailure(
                f"Could not save result for {sub_topic_name!r}: {exc}"
            ) from exc

    def close(self) -> None:
        self.session.close()
