from .user import User
from .session import PeerSession, SessionAttendee
from .feedback import Feedback
from .point_ledger import PointLedger, user_total_points
from .badge import BadgeGrant
from .certificate import Certificate

__all__ = [
    "User",
    "PeerSession", "SessionAttendee",
    "Feedback",
    "PointLedger", "user_total_points",
    "BadgeGrant",
    "Certificate",
]
