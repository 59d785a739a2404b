import pytest

from peerlearn.errors import ValidationError
from peerlearn.rules import Behavior, aggregate, average_rating, validate_feedback
from tests.conftest import fb


def test_aggregate_empty():
    summary = aggregate([])
    assert summary.model_dump() == {
        "average_rating": 0,
        "total_feedback": 0,
        "good_count": 0,
        "neutral_count": 0,
        "bad_count": 0,
    }


def test_aggregate_counts_and_rounds():
    feedback = [fb(5, "Good"), fb(4, "Neutral"), fb(4, Behavior.BAD)]
    summary = aggregate(feedback)
    assert summary.average_rating == 4.33
    assert summary.total_feedback == 3
    assert (summary.good_count, summary.neutral_count, summary.bad_count) == (1, 1, 1)


def test_aggregate_does_not_mutate_input():
    feedback = [fb(3, "Good"), fb(5, "Bad")]
    before = [(f.rating, f.behavior) for f in feedback]
    aggregate(feedback)
    assert [(f.rating, f.behavior) for f in feedback] == before
    assert len(feedback) == 2


def test_average_rating():
    assert average_rating([]) == 0
    assert average_rating([fb(5), fb(4)]) == 4.5


def test_validate_feedback_accepts_valid_input():
    validate_feedback(5, "Good", "Base cases first")
    validate_feedback(1, Behavior.BAD, "Not much")


@pytest.mark.parametrize("rating", [0, 6, -1, 4.5, "5", None, True])
def test_validate_feedback_rejects_bad_ratings(rating):
    with pytest.raises(ValidationError):
        validate_feedback(rating, "Good", "something")


@pytest.mark.parametrize("learned", ["", "   ", None])
def test_validate_feedback_requires_learned_text(learned):
    with pytest.raises(ValidationError, match="learned"):
        validate_feedback(4, "Good", learned)


def test_validate_feedback_rejects_unknown_behavior():
    with pytest.raises(ValidationError, match="Behavior"):
        validate_feedback(4, "Excellent", "something")
