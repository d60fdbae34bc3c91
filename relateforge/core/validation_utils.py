"""Precondition checks shared by the segment string classes."""

from typing import Optional

from .coordinates import CoordinateSequence
from .errors import ValidationError


def check_min_points(coords: CoordinateSequence, min_points: int = 2) -> None:
    """Fail fast if ``coords`` has fewer than ``min_points`` points.

    Examples:
        >>> check_min_points(CoordinateSequence([(0, 0)]))
        Traceback (most recent call last):
        ...
        relateforge.core.errors.ValidationError: Segment string requires at least 2 points, got 1
    """
    if coords.size() < min_points:
        raise ValidationError(
            f"Segment string requires at least {min_points} points, got {coords.size()}"
        )


def check_segment_index(segment_index: Optional[int], num_points: int) -> int:
    """Validate a segment index against a string of ``num_points`` points.

    An unknown index (None) is accepted only for a single-segment string, where
    it can only mean segment 0.

    Returns:
        The resolved segment index
    """
    if segment_index is None:
        if num_points != 2:
            raise ValidationError(
                f"Segment index is required for a segment string of {num_points} points"
            )
        return 0

    if isinstance(segment_index, bool) or segment_index < 0 or segment_index > num_points - 2:
        raise ValidationError(
            f"Segment index {segment_index} out of range [0, {num_points - 2}]"
        )
    return int(segment_index)


__all__ = [
    'check_min_points',
    'check_segment_index',
]
