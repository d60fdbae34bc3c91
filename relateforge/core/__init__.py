"""Core types and utilities for relateforge.

This module provides the dimension enum, exceptions, configuration and the
coordinate sequence used throughout the library.
"""

from .types import (
    Dimension,
    RING_ID_NONE,
)

from .errors import (
    RelateForgeError,
    ValidationError,
    TopologyError,
)

from .config import (
    ConditioningConfig,
    DEFAULT_CONFIG,
)

from .coordinates import (
    CoordinateSequence,
    as_coordinate_sequence,
)

__all__ = [
    # Types
    'Dimension',
    'RING_ID_NONE',

    # Exceptions
    'RelateForgeError',
    'ValidationError',
    'TopologyError',

    # Configuration
    'ConditioningConfig',
    'DEFAULT_CONFIG',

    # Coordinates
    'CoordinateSequence',
    'as_coordinate_sequence',
]
