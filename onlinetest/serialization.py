from __future__ import annotations

from onlinetest.models import (
    OptionView,
    QuestionItem,
    QuestionView,
    ReviewResponse,
    SessionStatus,
    SessionView,
)
from onlinetest.services.online_test import SessionSnapshot
from onlinetest.services.scoring import build_review, option_letter
from onlinetest.utils.time_utils import format_time
from onlinetest.utils.urls import upload_url


def serialize_question(
    item: QuestionItem, index: int, selected_option_id: str | None
) -> QuestionView:
    # no canonical answer here: it is only exposed through the review
    options = [
        OptionView(
            id=option.id,
            letter=option_letter(position),
            text=option.option_text,
            type=option.option_type,
            imageUrl=None if option.is_text else upload_url(option.path_url),
            selected=option.id == selected_option_id,
        )
        for position, option in enumerate(item.options)
    ]
    return QuestionView(
        id=item.question.id,
        index=index,
        html=item.question.question,
        imageUrl=upload_url(item.question.question_image_url),
        options=options,
        selectedOptionId=selected_option_id,
    )


def serialize_session(snapshot: SessionSnapshot) -> SessionView:
    total = len(snapshot.questions)
    index = snapshot.current_index

    question = None
    if snapshot.status is SessionStatus.IN_PROGRESS and total:
        item = snapshot.questions[index]
        question = serialize_question(item, index, snapshot.answers.get(item.question.id))

    progress = round((index + 1) / total * 100) if total else 0
    score = snapshot.score

    return SessionView(
        sessionId=snapshot.session_id,
        subTopicName=snapshot.sub_topic_name,
        status=snapshot.status,
        remainingSeconds=snapshot.remaining_seconds,
        timeLeft=format_time(snapshot.remaining_seconds),
        currentIndex=index,
        totalCount=total,
        answeredCount=sum(1 for value in snapshot.answers.values() if value),
        progressPercent=progress,
        isLastQuestion=total > 0 and index == total - 1,
        question=question,
        answers=snapshot.answers,
        score=score,
        skipped=score.skipped if score is not None else None,
        finishReason=snapshot.finish_reason,
        error=snapshot.error,
        createdAt=snapshot.created_at,
        finishedAt=snapshot.finished_at,
    )


def serialize_review(snapshot: SessionSnapshot) -> ReviewResponse:
    """Only meaningful for finished sessions; callers check the status."""
    if snapshot.score is None:
        raise ValueError("Session has no score yet")
    return ReviewResponse(
        sessionId=snapshot.session_id,
        subTopicName=snapshot.sub_topic_name,
        score=snapshot.score,
        skipped=snapshot.score.skipped,
        items=build_review(snapshot.questions, snapshot.answers),
    )
