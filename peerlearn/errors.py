"""Typed failures raised by the rules engine and the services built on it.

All of them are recoverable: callers decide how to present them. The HTTP
layer maps each class to a status code in ``peerlearn.main``.
"""


class PeerLearnError(Exception):
    """Base class for every domain failure."""


class ValidationError(PeerLearnError):
    """Input rejected: bad rating, missing feedback text, unknown value."""


class CapacityError(PeerLearnError):
    """The session has no free seats."""


class AlreadyJoinedError(PeerLearnError):
    """The user is already on the session roster."""


class InvalidStateTransition(PeerLearnError):
    """The requested status change would move a session backwards."""


class NotFoundError(PeerLearnError):
    """A referenced session or user does not exist."""
