"""numpy-backed coordinate sequences.

A :class:`CoordinateSequence` wraps an ``(N, 2)`` or ``(N, 3)`` float array.
Point equality throughout relateforge is 2D: Z values are carried along but
never compared.
"""

from __future__ import annotations

from typing import Iterator, Sequence, Tuple, Union

import numpy as np
from shapely.geometry import Point

from .errors import ValidationError

Coordinate = Tuple[float, ...]
PointLike = Union[Point, Sequence[float], np.ndarray]


def as_xy(point: PointLike) -> Tuple[float, float]:
    """Return the X,Y values of a shapely Point, tuple or array."""
    if isinstance(point, Point):
        return point.x, point.y
    return float(point[0]), float(point[1])


class CoordinateSequence:
    """Ordered, index-addressable coordinates backed by a numpy array.

    Float64 ndarrays are wrapped without copying, so a sequence built from a
    caller's array shares its buffer. Only :meth:`reverse` writes to the
    buffer, and it is only ever called on clones.

    Examples:
        >>> seq = CoordinateSequence([(0, 0), (1, 0), (1, 1), (0, 0)])
        >>> seq.size()
        4
        >>> seq.is_closed()
        True
    """

    __slots__ = ("_coords",)

    def __init__(self, coords):
        array = np.asarray(coords, dtype=float)
        if array.ndim != 2 or array.shape[1] not in (2, 3):
            raise ValidationError(
                f"Expected an (N, 2) or (N, 3) coordinate array, got shape {array.shape}"
            )
        self._coords = array

    @property
    def coords(self) -> np.ndarray:
        """Read-only view of the underlying array."""
        view = self._coords.view()
        view.flags.writeable = False
        return view

    def size(self) -> int:
        return len(self._coords)

    def __len__(self) -> int:
        return len(self._coords)

    def __iter__(self) -> Iterator[Coordinate]:
        for i in range(len(self._coords)):
            yield self.get_coordinate(i)

    def get_coordinate(self, index: int) -> Coordinate:
        """Return coordinate ``index`` as a tuple of floats."""
        if index < 0 or index >= len(self._coords):
            raise ValidationError(
                f"Coordinate index {index} out of range for sequence of size {len(self._coords)}"
            )
        return tuple(float(v) for v in self._coords[index])

    def equals_2d(self, index: int, point: PointLike) -> bool:
        """Check whether coordinate ``index`` has the same X,Y as ``point``."""
        x, y = as_xy(point)
        row = self._coords[index]
        return bool(row[0] == x and row[1] == y)

    def is_closed(self) -> bool:
        if len(self._coords) == 0:
            return False
        return self.equals_2d(len(self._coords) - 1, self._coords[0])

    def has_repeated_points(self) -> bool:
        """Check for consecutive points that are equal in X,Y."""
        if len(self._coords) < 2:
            return False
        xy = self._coords[:, :2]
        return bool(np.any(np.all(xy[1:] == xy[:-1], axis=1)))

    def clone(self) -> "CoordinateSequence":
        return CoordinateSequence(self._coords.copy())

    def reverse(self) -> None:
        """Reverse the point order in place."""
        self._coords[:] = self._coords[::-1].copy()

    def to_list(self):
        return [self.get_coordinate(i) for i in range(len(self._coords))]

    def __repr__(self) -> str:
        return f"CoordinateSequence({self.to_list()!r})"


def as_coordinate_sequence(coords) -> CoordinateSequence:
    """Wrap ``coords`` in a :class:`CoordinateSequence` unless it already is one.

    Args:
        coords: CoordinateSequence, numpy array, list of tuples or shapely
            coordinate sequence

    Returns:
        CoordinateSequence sharing the input buffer where possible

    Raises:
        ValidationError: If ``coords`` is None or has the wrong shape
    """
    if coords is None:
        raise ValidationError("Coordinate sequence must not be None")
    if isinstance(coords, CoordinateSequence):
        return coords
    return CoordinateSequence(coords)


__all__ = [
    'Coordinate',
    'PointLike',
    'CoordinateSequence',
    'as_coordinate_sequence',
    'as_xy',
]
