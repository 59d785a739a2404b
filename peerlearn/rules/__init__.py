# Pure scoring and lifecycle rules. Nothing in this package touches storage.
from .types import (
    Behavior,
    BadgeThreshold,
    CertificateEligibility,
    CertificateType,
    FeedbackSummary,
    PointsAward,
    SessionSnapshot,
    SessionStatus,
)
from .points import base_points, bonus_points, total_points, points_award
from .feedback import aggregate, average_rating, validate_feedback
from .eligibility import (
    BADGE_THRESHOLDS,
    awardable_badges,
    certificate_eligibility,
    choose_certificate_type,
)
from .lifecycle import add_attendee, complete_session, transition

__all__ = [
    "Behavior", "BadgeThreshold", "CertificateEligibility", "CertificateType",
    "FeedbackSummary", "PointsAward", "SessionSnapshot", "SessionStatus",
    "base_points", "bonus_points", "total_points", "points_award",
    "aggregate", "average_rating", "validate_feedback",
    "BADGE_THRESHOLDS", "awardable_badges", "certificate_eligibility", "choose_certificate_type",
    "add_attendee", "complete_session", "transition",
]
