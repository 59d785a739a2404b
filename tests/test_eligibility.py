from peerlearn.rules import (
    BADGE_THRESHOLDS,
    CertificateEligibility,
    CertificateType,
    SessionSnapshot,
    SessionStatus,
    awardable_badges,
    certificate_eligibility,
    choose_certificate_type,
)
from tests.conftest import fb


def test_threshold_table_order():
    assert [(b.name, b.threshold_points) for b in BADGE_THRESHOLDS] == [
        ("Beginner Helper", 5),
        ("Peer Mentor", 20),
        ("Super Helper", 50),
        ("Champion Mentor", 100),
    ]


def test_awardable_badges_first_threshold():
    assert awardable_badges(5, []) == ["Beginner Helper"]


def test_awardable_badges_is_idempotent():
    assert awardable_badges(5, ["Beginner Helper"]) == []


def test_awardable_badges_below_first_threshold():
    assert awardable_badges(4, []) == []


def test_awardable_badges_crosses_several_thresholds():
    first = awardable_badges(60, ["Beginner Helper"])
    assert first == ["Peer Mentor", "Super Helper"]
    assert awardable_badges(60, ["Beginner Helper", *first]) == []


def test_awardable_badges_all():
    assert awardable_badges(100, []) == [b.name for b in BADGE_THRESHOLDS]


def completed_session(attendees):
    return SessionSnapshot(id=1, title="t", status=SessionStatus.COMPLETED, attendees=list(range(attendees)), creator_id=99)


def test_certificate_both_eligible():
    feedback = [fb(5, "Good"), fb(5, "Good"), fb(5, "Good"), fb(5, "Neutral"), fb(4, "Neutral")]
    eligibility = certificate_eligibility(completed_session(3), feedback)
    assert eligibility == CertificateEligibility(peer_mentor=True, outstanding_helper=True)
    assert choose_certificate_type(eligibility) == CertificateType.OUTSTANDING_HELPER


def test_certificate_peer_mentor_only():
    eligibility = certificate_eligibility(completed_session(2), [fb(3, "Good")])
    assert eligibility == CertificateEligibility(peer_mentor=True, outstanding_helper=False)
    assert choose_certificate_type(eligibility) == CertificateType.PEER_MENTOR


def test_outstanding_helper_needs_more_good_than_bad():
    feedback = [fb(5, "Good"), fb(5, "Bad")]
    assert certificate_eligibility(completed_session(2), feedback).outstanding_helper is False


def test_no_certificate_without_attendees_or_completion():
    feedback = [fb(5, "Good")]
    empty = certificate_eligibility(completed_session(0), feedback)
    assert empty == CertificateEligibility(peer_mentor=False, outstanding_helper=True)
    assert choose_certificate_type(empty) is None

    scheduled = SessionSnapshot(id=2, status=SessionStatus.SCHEDULED, attendees=[1, 2])
    assert certificate_eligibility(scheduled, feedback).peer_mentor is False


def test_no_feedback_is_not_outstanding():
    assert certificate_eligibility(completed_session(1), []).outstanding_helper is False
