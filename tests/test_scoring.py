import random

import pytest
from pydantic import ValidationError

from onlinetest.models import Score
from onlinetest.services import scoring


@pytest.mark.parametrize(
    ("correct", "total", "expected"),
    [(3, 4, 75), (0, 0, 0), (1, 3, 33), (2, 3, 67), (1, 8, 13), (5, 5, 100), (0, 7, 0)],
)
def test_percentage(correct: int, total: int, expected: int) -> None:
    assert scoring.percentage(correct, total) == expected


def test_answers_match_exact_then_case_insensitive() -> None:
    assert scoring.answers_match("Paris", "Paris")
    assert scoring.answers_match("paris", "PARIS")
    assert scoring.answers_match("  Paris ", "paris")
    assert not scoring.answers_match("Paris", "London")
    assert not scoring.answers_match(None, "Paris")
    assert not scoring.answers_match("Paris", None)


def test_scenario_one_right_one_wrong_one_skipped(three_questions) -> None:
    answers = {"q1": "q1a", "q2": "q2a"}
    score = scoring.compute_score(three_questions, answers)
    assert score == Score(correct=1, total=3, answered=2, percentage=33)
    assert score.skipped == 1


def test_no_answers_scores_zero(three_questions) -> None:
    score = scoring.compute_score(three_questions, {})
    assert score == Score(correct=0, total=3, answered=0, percentage=0)


def test_empty_question_set() -> None:
    assert scoring.compute_score([], {}) == Score(correct=0, total=0, answered=0, percentage=0)


def test_matching_uses_option_text_not_id(make_item) -> None:
    # option id equals the answer text, but its display text does not
    item = make_item("q1", "B", [("B", "A"), ("x", "B")])
    assert scoring.compute_score([item], {"q1": "B"}).correct == 0
    assert scoring.compute_score([item], {"q1": "x"}).correct == 1


def test_answer_for_missing_option_counts_as_answered_only(make_item) -> None:
    item = make_item("q1", "A", [("a", "A")])
    score = scoring.compute_score([item], {"q1": "gone"})
    assert score.answered == 1
    assert score.correct == 0


def test_score_bounds_hold_for_random_sessions(make_item) -> None:
    rng = random.Random(1234)
    for _ in range(200):
        items = []
        answers = {}
        for n in range(rng.randint(0, 8)):
            options = [(f"q{n}o{k}", rng.choice(["A", "b", "C ", "d"])) for k in range(4)]
            items.append(make_item(f"q{n}", rng.choice(["A", "B", "c", "D"]), options))
            if rng.random() < 0.7:
                answers[f"q{n}"] = rng.choice(options)[0]
        score = scoring.compute_score(items, answers)
        assert 0 <= score.correct <= score.answered <= score.total
        assert 0 <= score.percentage <= 100


def test_score_model_rejects_inconsistent_counts() -> None:
    with pytest.raises(ValidationError):
        Score(correct=2, total=3, answered=1, percentage=67)


def test_option_letter() -> None:
    assert scoring.option_letter(0) == "A"
    assert scoring.option_letter(3) == "D"
    assert scoring.option_letter(26) == "27"


def test_build_review_marks_options(three_questions) -> None:
    review = scoring.build_review(three_questions, {"q1": "q1a", "q2": "q2a"})

    assert [item.questionId for item in review] == ["q1", "q2", "q3"]
    first, second, third = review

    assert first.isAnswered and first.isCorrect
    assert [o.letter for o in first.options] == ["A", "B"]
    assert first.options[0].isCorrect and first.options[0].isSelected

    assert second.isAnswered and not second.isCorrect
    assert second.options[0].isSelected and not second.options[0].isCorrect
    assert second.options[1].isCorrect and not second.options[1].isSelected

    assert not third.isAnswered
    assert third.selectedOptionId is None
    assert not any(o.isSelected for o in third.options)
