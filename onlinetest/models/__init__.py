"""Pydantic models."""
from onlinetest.models.questions import Option, Question, QuestionItem
from onlinetest.models.sessions import (
    AnswerSelection,
    FinishReason,
    NavigateRequest,
    OptionView,
    QuestionView,
    ReviewItem,
    ReviewOption,
    ReviewResponse,
    Score,
    SessionStatus,
    SessionView,
    TestResultPayload,
)

__all__ = [
    "AnswerSelection",
    "FinishReason",
    "NavigateRequest",
    "Option",
    "OptionView",
    "Question",
    "QuestionItem",
    "QuestionView",
    "ReviewItem",
    "ReviewOption",
    "ReviewResponse",
    "Score",
    "SessionStatus",
    "SessionView",
    "TestResultPayload",
]
