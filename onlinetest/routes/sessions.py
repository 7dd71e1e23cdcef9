"""Online test session endpoints."""
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from onlinetest.dependencies import get_forwarded_credentials, get_session_service
from onlinetest.errors import InvalidTransitionError
from onlinetest.models import (
    AnswerSelection,
    NavigateRequest,
    ReviewResponse,
    SessionStatus,
    SessionView,
)
from onlinetest.serialization import serialize_review, serialize_session
from onlinetest.services.online_test import OnlineTest
from onlinetest.services.session_service import SessionService
from onlinetest.utils import validate_id

router = APIRouter(prefix="/api/onlinetest", tags=["onlinetest"])

ServiceDep = Annotated[SessionService, Depends(get_session_service)]


def _load_session(service: SessionService, session_id: str) -> OnlineTest:
    return service.get(validate_id("sessionId", session_id))


@router.post("/{sub_topic_name}/sessions", response_model=SessionView, status_code=201)
def create_session(
    sub_topic_name: str,
    service: ServiceDep,
    credentials: Annotated[dict[str, str], Depends(get_forwarded_credentials)],
) -> SessionView:
    """Start a timed test for a subtopic.

    The response status is ``in_progress`` when questions were loaded,
    ``empty`` when the subtopic has none and ``error`` when the fetch
    failed (retry with ``/retry``).
    """
    sub_topic_name = validate_id("subTopicName", sub_topic_name)
    session = service.create_session(sub_topic_name, credentials)
    return serialize_session(session.snapshot())


@router.get("/sessions/{session_id}", response_model=SessionView)
def get_session(session_id: str, service: ServiceDep) -> SessionView:
    """Current state of a session, including the countdown."""
    session = _load_session(service, session_id)
    return serialize_session(session.snapshot())


@router.post("/sessions/{session_id}/retry", response_model=SessionView)
def retry_session(session_id: str, service: ServiceDep) -> SessionView:
    """Fetch the questions again after a failed load."""
    session = _load_session(service, session_id)
    if session.status is not SessionStatus.ERROR:
        raise HTTPException(status_code=409, detail="Only failed sessions can be retried")
    try:
        service.retry(session.id)
    except InvalidTransitionError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    return serialize_session(session.snapshot())


@router.put("/sessions/{session_id}/answers", response_model=SessionView)
def select_answer(
    session_id: str,
    payload: AnswerSelection,
    service: ServiceDep,
) -> SessionView:
    """Select (or change) the option for a question."""
    session = _load_session(service, session_id)
    try:
        recorded = session.select_answer(payload.questionId, payload.optionId)
    except KeyError:
        raise HTTPException(status_code=404, detail="Question or option not found")
    if not recorded:
        raise HTTPException(status_code=409, detail="Test is not in progress")
    return serialize_session(session.snapshot())


@router.post("/sessions/{session_id}/navigate", response_model=SessionView)
def navigate(
    session_id: str,
    payload: NavigateRequest,
    service: ServiceDep,
) -> SessionView:
    """Show the previous/next question, or jump to one by index."""
    session = _load_session(service, session_id)
    if payload.index is not None:
        session.jump(payload.index)
    else:
        session.navigate(1 if payload.direction == "next" else -1)
    return serialize_session(session.snapshot())


@router.post("/sessions/{session_id}/submit", response_model=SessionView)
def submit_session(session_id: str, service: ServiceDep) -> SessionView:
    """Finish the test now. Submitting an already finished test is a no-op."""
    session = _load_session(service, session_id)
    try:
        session.submit()
    except InvalidTransitionError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    return serialize_session(session.snapshot())


@router.get("/sessions/{session_id}/review", response_model=ReviewResponse)
def review_session(session_id: str, service: ServiceDep) -> ReviewResponse:
    """Per-question results with the correct options marked."""
    session = _load_session(service, session_id)
    snapshot = session.snapshot()
    if snapshot.status is not SessionStatus.FINISHED:
        raise HTTPException(status_code=409, detail="Test is not finished")
    return serialize_review(snapshot)


@router.delete("/sessions/{session_id}")
def discard_session(session_id: str, service: ServiceDep) -> dict[str, object]:
    """Drop a session when its page is left."""
    session_id = validate_id("sessionId", session_id)
    if not service.discard(session_id):
        raise HTTPException(status_code=404, detail="Session not found")
    return {"status": "discarded", "sessionId": session_id}
