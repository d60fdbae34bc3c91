"""Exception hierarchy for relateforge."""


class RelateForgeError(Exception):
    """Base class for all relateforge errors."""


class ValidationError(RelateForgeError, ValueError):
    """Raised when an input violates a precondition.

    Covers missing coordinate sequences, sequences with fewer than two points,
    coordinate arrays of the wrong shape and segment indexes that fall outside
    the segment string.
    """


class TopologyError(RelateForgeError):
    """Raised when a geometry cannot be decomposed into segment strings."""

    def __init__(self, message: str, geometry=None):
        super().__init__(message)
        self.geometry = geometry


__all__ = [
    'RelateForgeError',
    'ValidationError',
    'TopologyError',
]
