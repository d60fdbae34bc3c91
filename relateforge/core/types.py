"""Type definitions for relateforge.

This module defines the dimension enum attached to segment strings and node
sections, and the ring id sentinel used by linear components.
"""

from enum import IntEnum


class Dimension(IntEnum):
    """Topological dimension of an input component.

    Attributes:
        P: Puntal (points). Points never form segment strings but the code is
            kept so dimensions order the same way as in a DE-9IM matrix.
        L: Linear (lines and linear rings used as lines)
        A: Areal (polygon shells and holes)

    Examples:
        >>> from relateforge.core.types import Dimension
        >>> Dimension.L < Dimension.A
        True
    """
    P = 0
    L = 1
    A = 2


# Ring id carried by linear components, which do not belong to a polygon.
RING_ID_NONE = -1


__all__ = [
    'Dimension',
    'RING_ID_NONE',
]
