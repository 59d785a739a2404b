from __future__ import annotations

from typing import Any, Optional, Sequence

from ..errors import ValidationError
from .types import Behavior, FeedbackSummary

MIN_RATING = 1
MAX_RATING = 5


def validate_feedback(rating: Any, behavior: Any, learned: Optional[str]) -> None:
    """Raise ValidationError unless the feedback fields are acceptable."""
    # bool is an int subclass; a checkbox value is not a rating
    if isinstance(rating, bool) or not isinstance(rating, int):
        raise ValidationError(f"Rating must be a whole number, got {rating!r}")
    if not MIN_RATING <= rating <= MAX_RATING:
        raise ValidationError(f"Rating must be between {MIN_RATING} and {MAX_RATING}, got {rating}")
    try:
        Behavior(behavior)
    except ValueError:
        allowed = ", ".join(b.value for b in Behavior)
        raise ValidationError(f"Behavior must be one of {allowed}, got {behavior!r}") from None
    if learned is None or not learned.strip():
        raise ValidationError("Please tell us what you learned")


def average_rating(feedback_list: Sequence[Any]) -> float:
    """Mean rating rounded to two decimals, 0 for no feedback."""
    if not feedback_list:
        return 0
    return round(sum(f.rating for f in feedback_list) / len(feedback_list), 2)


def aggregate(feedback_list: Sequence[Any]) -> FeedbackSummary:
    if not feedback_list:
        return FeedbackSummary()

    def count(behavior: Behavior) -> int:
        return sum(1 for f in feedback_list if f.behavior == behavior)

    return FeedbackSummary(
        average_rating=average_rating(feedback_list),
        total_feedback=len(feedback_list),
        good_count=count(Behavior.GOOD),
        neutral_count=count(Behavior.NEUTRAL),
        bad_count=count(Behavior.BAD),
    )
