"""Session-related Pydantic models and enums."""
import enum
from typing import Literal

from pydantic import BaseModel, Field, model_validator


class SessionStatus(str, enum.Enum):
    """Lifecycle state of a test session."""

    LOADING = "loading"
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"
    ERROR = "error"
    EMPTY = "empty"


class FinishReason(str, enum.Enum):
    """Which event finalized the session."""

    SUBMITTED = "submitted"
    EXPIRED = "expired"


class Score(BaseModel):
    """Result of a finished test."""

    correct: int = Field(0, ge=0)
    total: int = Field(0, ge=0)
    answered: int = Field(0, ge=0)
    percentage: int = Field(0, ge=0, le=100)

    @model_validator(mode="after")
    def _check_bounds(self) -> "Score":
        if not self.correct <= self.answered <= self.total:
            raise ValueError("score must satisfy correct <= answered <= total")
        return self

    @property
    def skipped(self) -> int:
        return self.total - self.answered


class TestResultPayload(BaseModel):
    """Body of the save-test-result request sent to the content API."""

    subTopicName: str = Field(..., min_length=1)
    score: Score


class AnswerSelection(BaseModel):
    """Model for selecting an option."""

    questionId: str = Field(..., min_length=1)
    optionId: str = Field(..., min_length=1)


class NavigateRequest(BaseModel):
    """Move by one question, or jump to an absolute index."""

    direction: Literal["next", "previous"] | None = None
    index: int | None = None

    @model_validator(mode="after")
    def _one_target(self) -> "NavigateRequest":
        if (self.direction is None) == (self.index is None):
            raise ValueError("Provide exactly one of direction or index")
        return self


class OptionView(BaseModel):
    id: str
    letter: str
    text: str
    type: str
    imageUrl: str | None = None
    selected: bool = False


class QuestionView(BaseModel):
    id: str
    index: int
    html: str
    imageUrl: str | None = None
    options: list[OptionView]
    selectedOptionId: str | None = None


class SessionView(BaseModel):
    """Model for the client-facing state of a session."""

    sessionId: str
    subTopicName: str
    status: SessionStatus
    remainingSeconds: int
    timeLeft: str
    currentIndex: int
    totalCount: int
    answeredCount: int
    progressPercent: int
    isLastQuestion: bool
    question: QuestionView | None = None
    answers: dict[str, str] = Field(default_factory=dict)
    score: Score | None = None
    skipped: int | None = None
    finishReason: FinishReason | None = None
    error: str | None = None
    createdAt: str
    finishedAt: str | None = None


class ReviewOption(BaseModel):
    id: str
    letter: str
    text: str
    type: str
    imageUrl: str | None = None
    isCorrect: bool
    isSelected: bool


class ReviewItem(BaseModel):
    questionId: str
    index: int
    html: str
    imageUrl: str | None = None
    isAnswered: bool
    isCorrect: bool
    selectedOptionId: str | None = None
    options: list[ReviewOption]


class ReviewResponse(BaseModel):
    """Model for the per-question breakdown of a finished session."""

    sessionId: str
    subTopicName: str
    score: Score
    skipped: int
    items: list[ReviewItem]
