"""Orientation and repeated-point utilities for coordinate sequences.

These are the two geometric collaborators the segment strings rely on: the
counter-clockwise test (delegated to shapely/GEOS) and the consecutive
duplicate reducer (vectorized with numpy).
"""

import numpy as np
import shapely
from shapely.geometry import LineString

from .coordinates import CoordinateSequence


def is_ccw(coords: CoordinateSequence) -> bool:
    """Check whether a closed coordinate sequence runs counter-clockwise.

    Repeated points are tolerated. Sequences with fewer than 4 points enclose
    no area and are reported as not counter-clockwise.

    Args:
        coords: Closed coordinate sequence (first point equals last)

    Returns:
        True if the ring is oriented counter-clockwise

    Examples:
        >>> ring = CoordinateSequence([(0, 0), (10, 0), (10, 10), (0, 10), (0, 0)])
        >>> is_ccw(ring)
        True
    """
    if coords.size() < 4:
        return False
    return bool(shapely.is_ccw(LineString(coords.coords)))


def has_area(coords: CoordinateSequence) -> bool:
    """Check whether a closed sequence encloses non-zero area.

    Orientation is only meaningful for such rings: a collapsed or flat ring
    reads the same in both directions.
    """
    if coords.size() < 4:
        return False
    xy = coords.coords[:, :2]
    x, y = xy[:, 0], xy[:, 1]
    twice_area = np.dot(x[:-1], y[1:]) - np.dot(x[1:], y[:-1])
    return bool(twice_area != 0.0)


def remove_repeated_points(coords: CoordinateSequence) -> CoordinateSequence:
    """Return a new sequence with consecutive repeated points collapsed.

    The first point of every run of X,Y-equal points is kept, so the result
    is an order-preserving subsequence of the input. Z values of the kept
    points are preserved.

    Args:
        coords: Input coordinate sequence (not modified)

    Returns:
        New CoordinateSequence without consecutive duplicates

    Examples:
        >>> seq = CoordinateSequence([(0, 0), (0, 0), (5, 5), (5, 5)])
        >>> remove_repeated_points(seq).to_list()
        [(0.0, 0.0), (5.0, 5.0)]
    """
    array = coords.coords
    if len(array) < 2:
        return CoordinateSequence(array.copy())

    xy = array[:, :2]
    keep = np.ones(len(array), dtype=bool)
    keep[1:] = np.any(xy[1:] != xy[:-1], axis=1)
    return CoordinateSequence(array[keep].copy())


__all__ = [
    'is_ccw',
    'has_area',
    'remove_repeated_points',
]
