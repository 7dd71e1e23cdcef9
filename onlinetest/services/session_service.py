"""Service layer holding the in-memory registry of online test sessions."""
from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from datetime import datetime, timedelta, timezone

from fastapi import HTTPException

from onlinetest.config import TEST_DURATION_SECONDS, TICK_INTERVAL_SECONDS
from onlinetest.errors import PersistenceFailure
from onlinetest.models import Score, SessionStatus
from onlinetest.services.api_client import ContentApiClient
from onlinetest.services.online_test import OnlineTest
from onlinetest.utils.time_utils import parse_iso_timestamp

logger = logging.getLogger(__name__)

Dispatcher = Callable[[Callable[[], None], str], None]


def run_in_background(job: Callable[[], None], name: str) -> None:
    """Fire-and-forget: run ``job`` on a daemon thread."""
    thread = threading.Thread(target=job, name=name, daemon=True)
    thread.start()


class SessionService:
    """
    Creates, looks up and discards sessions, and saves finished results.

    Args:
        client: Content API client used for questions and results
        duration_seconds: Countdown budget of new sessions
        tick_interval: Timer interval of new sessions (None: no timer)
        dispatch: Runs result-saving jobs without blocking the caller
    """

    def __init__(
        self,
        client: ContentApiClient,
        duration_seconds: int = TEST_DURATION_SECONDS,
        tick_interval: float | None = TICK_INTERVAL_SECONDS,
        dispatch: Dispatcher = run_in_background,
    ) -> None:
        self.client = client
        self.duration_seconds = duration_seconds
        self.tick_interval = tick_interval
        self._dispatch = dispatch
        self._sessions: dict[str, OnlineTest] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def create_session(
        self,
        sub_topic_name: str,
        credentials: dict[str, str] | None = None,
    ) -> OnlineTest:
        """Register a new session and load its questions."""
        session = OnlineTest(
            sub_topic_name,
            duration_seconds=self.duration_seconds,
            tick_interval=self.tick_interval,
            credentials=credentials,
            on_finish=self._on_session_finished,
        )
        with self._lock:
            self._sessions[session.id] = session
        logger.info("Created session %s for subtopic %s", session.id, sub_topic_name)

        session.load(self.client.fetch_subtopic_questions)
        return session

    def retry(self, session_id: str) -> OnlineTest:
        """Re-run the question fetch for a session in the error state."""
        session = self.get(session_id)
        session.load(self.client.fetch_subtopic_questions)
        return session

    def get(self, session_id: str) -> OnlineTest:
        with self._lock:
            session = self._sessions.get(session_id)
        if session is None:
            raise HTTPException(status_code=404, detail="Session not found")
        return session

    def discard(self, session_id: str) -> bool:
        with self._lock:
            session = self._sessions.pop(session_id, None)
        if session is None:
            return False
        session.discard()
        logger.info("Discarded session %s", session_id)
        return True

    def discard_all(self) -> None:
        with self._lock:
            sessions = list(self._sessions.values())
            self._sessions.clear()
        for session in sessions:
            session.discard()

    def evict_stale(self, max_age: timedelta, now: datetime | None = None) -> int:
        """Discard finished, empty or failed sessions untouched for ``max_age``."""
        cutoff = (now or datetime.now(timezone.utc)) - max_age
        with self._lock:
            candidates = list(self._sessions.values())

        evicted = 0
        for session in candidates:
            if session.status is SessionStatus.IN_PROGRESS:
                continue
            if session.status is SessionStatus.LOADING:
                continue
            updated = parse_iso_timestamp(session.updated_at)
            if updated is not None and updated < cutoff:
                if self.discard(session.id):
                    evicted += 1
        return evicted

    # -- result persistence --------------------------------------------------

    def _on_session_finished(self, session: OnlineTest, score: Score) -> None:
        credentials = dict(session.credentials)
        sub_topic_name = session.sub_topic_name

        def _job() -> None:
            self.save_result(sub_topic_name, score, credentials)

        self._dispatch(_job, f"save_result_{session.id[:8]}")

    def save_result(
        self,
        sub_topic_name: str,
        score: Score,
        credentials: dict[str, str],
    ) -> bool:
        """
        Single best-effort attempt to store a result on the student profile.

        Anonymous test takers are expected here routinely, so every failure
        is logged and dropped.
        """
        try:
            if not self.client.has_profile(credentials):
                logger.debug("No student session, result for %s not saved", sub_topic_name)
                return False
            self.client.save_test_result(sub_topic_name, score, credentials)
        except PersistenceFailure as exc:
            logger.info("%s", exc)
            return False
        except Exception:
            logger.exception("Unexpected error saving result for %s", sub_topic_name)
            return False
        logger.info("Saved result for %s: %d%%", sub_topic_name, score.percentage)
        return True
