"""Scoring and review of finished test sessions.

Answers are matched on the selected option's text, not its id, so the
canonical answer can be stored as free text independent of option order.
"""
from collections.abc import Mapping, Sequence

from onlinetest.models import Option, QuestionItem, ReviewItem, ReviewOption, Score
from onlinetest.utils.urls import upload_url


def _normalize(text: str) -> str:
    return text.strip().lower()


def answers_match(option_text: str | None, answer: str | None) -> bool:
    """Exact match first, then trimmed case-insensitive match."""
    if option_text is None or answer is None:
        return False
    if option_text == answer:
        return True
    return _normalize(option_text) == _normalize(answer)


def option_letter(index: int) -> str:
    """A, B, C... for option positions; falls back to the number past Z."""
    if 0 <= index < 26:
        return chr(ord("A") + index)
    return str(index + 1)


def percentage(correct: int, total: int) -> int:
    """round(correct / total * 100) with halves rounded up, 0 for empty tests."""
    if total <= 0:
        return 0
    # integer form of floor(x + 0.5), avoids float and banker's rounding
    return (correct * 200 + total) // (2 * total)


def selected_option(item: QuestionItem, answers: Mapping[str, str]) -> Option | None:
    option_id = answers.get(item.question.id)
    if not option_id:
        return None
    return item.find_option(option_id)


def is_correct_selection(item: QuestionItem, answers: Mapping[str, str]) -> bool:
    option = selected_option(item, answers)
    return option is not None and answers_match(option.option_text, item.question.answer)


def compute_score(
    questions: Sequence[QuestionItem], answers: Mapping[str, str]
) -> Score:
    """Score every question; unanswered ones are neither correct nor wrong."""
    correct = 0
    answered = 0
    for item in questions:
        if not answers.get(item.question.id):
            continue
        answered += 1
        if is_correct_selection(item, answers):
            correct += 1

    total = len(questions)
    return Score(
        correct=correct,
        total=total,
        answered=answered,
        percentage=percentage(correct, total),
    )


def build_review(
    questions: Sequence[QuestionItem], answers: Mapping[str, str]
) -> list[ReviewItem]:
    """Per-question breakdown shown once the test is finished."""
    items = []
    for index, item in enumerate(questions):
        selected_id = answers.get(item.question.id)
        options = [
            ReviewOption(
                id=option.id,
                letter=option_letter(position),
                text=option.option_text,
                type=option.option_type,
                imageUrl=upload_url(option.path_url),
                isCorrect=answers_match(option.option_text, item.question.answer),
                isSelected=option.id == selected_id,
            )
            for position, option in enumerate(item.options)
        ]
        items.append(
            ReviewItem(
                questionId=item.question.id,
                index=index,
                html=item.question.question,
                imageUrl=upload_url(item.question.question_image_url),
                isAnswered=bool(selected_id),
                isCorrect=is_correct_selection(item, answers),
                selectedOptionId=selected_id,
                options=options,
            )
        )
    return items
