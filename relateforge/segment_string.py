"""Base segment string abstraction.

A segment string is an ordered list of coordinates read as ``size() - 1``
consecutive segments. Segment ``i`` runs from coordinate ``i`` to
coordinate ``i + 1``.
"""

from __future__ import annotations

from typing import Any, Optional

from .core.coordinates import Coordinate, CoordinateSequence, as_coordinate_sequence


class SegmentString:
    """Sequence of contiguous line segments carrying an optional data object.

    Subclasses that swap their coordinate buffer override :attr:`coordinates`;
    every other method reads through it.
    """

    def __init__(self, coords, data: Optional[Any] = None):
        self._coords = as_coordinate_sequence(coords)
        self.data = data

    @property
    def coordinates(self) -> CoordinateSequence:
        return self._coords

    def size(self) -> int:
        return self.coordinates.size()

    def __len__(self) -> int:
        return self.size()

    @property
    def num_segments(self) -> int:
        return self.size() - 1

    def get_coordinate(self, index: int) -> Coordinate:
        return self.coordinates.get_coordinate(index)

    @property
    def is_closed(self) -> bool:
        return self.coordinates.is_closed()

    def prev_in_ring(self, index: int) -> Coordinate:
        """Return the vertex before ``index``, wrapping past the closing point.

        For a ring the first and last points coincide, so the predecessor of
        vertex 0 is the second-to-last vertex.
        """
        prev_index = index - 1
        if prev_index < 0:
            prev_index = self.size() - 2
        return self.get_coordinate(prev_index)

    def next_in_ring(self, index: int) -> Coordinate:
        """Return the vertex after ``index``, wrapping past the closing point.

        The successor of the last vertex of a ring is vertex 1.
        """
        next_index = index + 1
        if next_index > self.size() - 1:
            next_index = 1
        return self.get_coordinate(next_index)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.coordinates.to_list()!r})"


__all__ = [
    "SegmentString",
]
