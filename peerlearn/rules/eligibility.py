from __future__ import annotations

from typing import Any, Iterable, List, Optional, Sequence

from .feedback import aggregate
from .types import BadgeThreshold, CertificateEligibility, CertificateType, SessionStatus

OUTSTANDING_RATING = 4.5

BADGE_THRESHOLDS: tuple[BadgeThreshold, ...] = (
    BadgeThreshold(name="Beginner Helper", threshold_points=5),
    BadgeThreshold(name="Peer Mentor", threshold_points=20),
    BadgeThreshold(name="Super Helper", threshold_points=50),
    BadgeThreshold(name="Champion Mentor", threshold_points=100),
)


def awardable_badges(user_total_points: int, already_held_badge_names: Iterable[str] = ()) -> List[str]:
    """
    Names of every threshold badge the user has reached but does not hold yet,
    in threshold order. Several can be returned when one update crosses more
    than one threshold.
    """
    held = set(already_held_badge_names)
    return [
        badge.name
        for badge in BADGE_THRESHOLDS
        if badge.threshold_points <= user_total_points and badge.name not in held
    ]


def certificate_eligibility(session: Any, feedback_list: Sequence[Any]) -> CertificateEligibility:
    summary = aggregate(feedback_list)
    return CertificateEligibility(
        peer_mentor=session.status == SessionStatus.COMPLETED and len(session.attendees or ()) > 0,
        outstanding_helper=summary.average_rating >= OUTSTANDING_RATING and summary.good_count > summary.bad_count,
    )


def choose_certificate_type(eligibility: CertificateEligibility) -> Optional[CertificateType]:
    # A certificate is only issued for a completed session that had an audience
    if not eligibility.peer_mentor:
        return None
    if eligibility.outstanding_helper:
        return CertificateType.OUTSTANDING_HELPER
    return CertificateType.PEER_MENTOR
