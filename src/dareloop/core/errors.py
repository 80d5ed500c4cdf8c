"""Exceptions raised by the dare engine."""


class DareLoopError(Exception):
    """Base class for all engine errors."""


class InvalidStateError(DareLoopError):
    """Operation is not legal in the session's current phase."""


class RosterError(DareLoopError):
    """Roster size bound violated."""


class CapacityError(RosterError):
    """Roster is already at its maximum size."""


class MinimumRosterError(RosterError):
    """Removing a player would drop the roster below its minimum size."""


class ContentError(DareLoopError):
    """Content pool failure."""


class ContentUnavailableError(ContentError):
    """Requested pack is unknown to the content provider."""


class EntitlementError(ContentError):
    """Requested pack is premium and has not been unlocked."""


class PreconditionError(DareLoopError):
    """Standings requested with missing or inconsistent data."""
