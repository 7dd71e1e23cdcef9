from collections.abc import Callable

import pytest
from fastapi.testclient import TestClient

from onlinetest.app import app
from onlinetest.dependencies import get_session_service
from onlinetest.models import QuestionItem, Score
from onlinetest.services.session_service import SessionService


def build_item(
    question_id: str,
    answer: str,
    options: list[tuple[str, str]],
    image: str | None = None,
) -> QuestionItem:
    return QuestionItem.model_validate(
        {
            "question": {
                "_id": question_id,
                "question": f"<p>Question {question_id}</p>",
                "answer": answer,
                "question_image_url": image,
            },
            "options": [
                {"_id": option_id, "option_text": text, "option_type": "text"}
                for option_id, text in options
            ],
        }
    )


class FakeContentApi:
    """Stands in for ContentApiClient."""

    def __init__(self) -> None:
        self.items: list[QuestionItem] = []
        self.fetch_error: Exception | None = None
        self.profile = True
        self.profile_error: Exception | None = None
        self.save_error: Exception | None = None
        self.fetch_calls: list[str] = []
        self.saved: list[tuple[str, Score, dict[str, str]]] = []

    def fetch_subtopic_questions(self, sub_topic_name: str) -> list[QuestionItem]:
        self.fetch_calls.append(sub_topic_name)
        if self.fetch_error is not None:
            raise self.fetch_error
        return list(self.items)

    def has_profile(self, credentials: dict[str, str]) -> bool:
        if self.profile_error is not None:
            raise self.profile_error
        return self.profile and bool(credentials)

    def save_test_result(
        self, sub_topic_name: str, score: Score, credentials: dict[str, str]
    ) -> None:
        if self.save_error is not None:
            raise self.save_error
        self.saved.append((sub_topic_name, score, credentials))


def run_now(job: Callable[[], None], name: str) -> None:
    job()


@pytest.fixture
def make_item() -> Callable[..., QuestionItem]:
    return build_item


@pytest.fixture
def three_questions() -> list[QuestionItem]:
    return [
        build_item("q1", "Paris", [("q1a", "Paris"), ("q1b", "London")]),
        build_item("q2", "4", [("q2a", "3"), ("q2b", "4")]),
        build_item("q3", "H2O", [("q3a", "H2O"), ("q3b", "CO2")]),
    ]


@pytest.fixture
def fake_api() -> FakeContentApi:
    return FakeContentApi()


@pytest.fixture
def service(fake_api: FakeContentApi) -> SessionService:
    service = SessionService(fake_api, tick_interval=None, dispatch=run_now)
    yield service
    service.discard_all()


@pytest.fixture
def client(service: SessionService) -> TestClient:
    app.dependency_overrides[get_session_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()
