"""Segment strings carrying topological provenance for relate evaluation.

A :class:`TopologicalSegmentString` represents one line or polygon ring of
one of the two input geometries. It knows which geometry it belongs to, its
dimension, its element and ring ids and (for rings) its parent polygon. It
answers the local questions the topology graph builder asks at each
intersection:

- what are the vertices before and after a point on a segment
  (:meth:`~TopologicalSegmentString.create_node_section`)
- which of two adjacent segments is responsible for a point at their shared
  vertex (:meth:`~TopologicalSegmentString.is_segment_owner_of_point`)

Before any of those queries a string may be conditioned once with
:meth:`~TopologicalSegmentString.orient_and_remove_repeated` or
:meth:`~TopologicalSegmentString.remove_repeated`. Conditioning never writes
to the caller's coordinates: when it changes anything it installs a derived
buffer which is used for all later reads.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from .core.config import ConditioningConfig, DEFAULT_CONFIG
from .core.coordinates import Coordinate, CoordinateSequence, PointLike, as_coordinate_sequence, as_xy
from .core.geometry_utils import has_area, is_ccw, remove_repeated_points
from .core.types import Dimension, RING_ID_NONE
from .core.validation_utils import check_min_points, check_segment_index
from .node_section import NodeSection, geometry_name
from .segment_string import SegmentString

logger = logging.getLogger(__name__)


class TopologicalSegmentString(SegmentString):
    """A line or ring of a relate input geometry.

    Use :func:`create_line` or :func:`create_ring` rather than instantiating
    directly.

    Attributes:
        is_a: True if the string belongs to geometry A, False for B
        dimension: ``Dimension.L`` for lines, ``Dimension.A`` for rings
        element_id: Index of the component within its geometry
        ring_id: Ring index within the polygon (0 is the shell),
            ``RING_ID_NONE`` for lines
        polygonal: Parent polygon of a ring, None for lines
        geometry: Opaque reference to the input geometry context
    """

    def __init__(
        self,
        coords,
        is_a: bool,
        dimension: Dimension,
        element_id: int,
        ring_id: int,
        polygonal: Optional[Any],
        geometry: Optional[Any],
    ):
        original = as_coordinate_sequence(coords)
        check_min_points(original)
        super().__init__(original, data=geometry)
        self._normalized: Optional[CoordinateSequence] = None
        self.is_a = is_a
        self.dimension = dimension
        self.element_id = element_id
        self.ring_id = ring_id
        self.polygonal = polygonal

    @classmethod
    def _create(
        cls,
        coords,
        is_a: bool,
        dimension: Dimension,
        element_id: int,
        ring_id: int,
        polygonal: Optional[Any],
        geometry: Optional[Any],
        orient: bool,
        config: Optional[ConditioningConfig] = None,
    ) -> "TopologicalSegmentString":
        seg_string = cls(coords, is_a, dimension, element_id, ring_id, polygonal, geometry)
        if orient:
            seg_string.condition(config)
        return seg_string

    # ------------------------------------------------------------------
    # Provenance accessors
    # ------------------------------------------------------------------

    @property
    def geometry(self) -> Optional[Any]:
        """The input geometry context this string was extracted from."""
        return self.data

    @property
    def is_area(self) -> bool:
        return self.dimension == Dimension.A

    @property
    def is_shell(self) -> bool:
        return self.is_area and self.ring_id == 0

    @property
    def coordinates(self) -> CoordinateSequence:
        """The active coordinate buffer.

        The conditioned copy once one has been installed, otherwise the
        original coordinates.
        """
        if self._normalized is not None:
            return self._normalized
        return self._coords

    @property
    def original_coordinates(self) -> CoordinateSequence:
        return self._coords

    @property
    def is_normalized(self) -> bool:
        """True if conditioning installed a derived buffer."""
        return self._normalized is not None

    # ------------------------------------------------------------------
    # Node sections and ownership
    # ------------------------------------------------------------------

    def create_node_section(self, segment_index: Optional[int], pt: PointLike) -> NodeSection:
        """Build the node section for intersection point ``pt`` on a segment.

        Args:
            segment_index: Index of the segment containing ``pt``. None is
                accepted for a 2-point string only.
            pt: Intersection point lying on the segment

        Returns:
            NodeSection carrying this string's provenance and the vertices
            before and after ``pt``
        """
        index = check_segment_index(segment_index, self.size())
        coords = self.coordinates
        node_pt = _as_coordinate(pt)
        is_node_at_vertex = coords.equals_2d(index, node_pt) or coords.equals_2d(index + 1, node_pt)
        prev = self._prev_vertex(index, node_pt)
        nxt = self._next_vertex(index, node_pt, segment_index is None)
        return NodeSection(
            is_a=self.is_a,
            dimension=self.dimension,
            element_id=self.element_id,
            ring_id=self.ring_id,
            polygonal=self.polygonal,
            is_node_at_vertex=is_node_at_vertex,
            prev_vertex=prev,
            node_pt=node_pt,
            next_vertex=nxt,
        )

    def prev_vertex(self, segment_index: Optional[int], pt: PointLike) -> Optional[Coordinate]:
        """Return the vertex topologically before ``pt``, or None at a line start."""
        index = check_segment_index(segment_index, self.size())
        return self._prev_vertex(index, pt)

    def next_vertex(self, segment_index: Optional[int], pt: PointLike) -> Optional[Coordinate]:
        """Return the vertex topologically after ``pt``, or None at a line end.

        A 2-point string queried with an unknown segment index (None) is
        treated as a loop: when ``pt`` is its end point the successor is
        vertex 0, whether or not the string is closed.
        """
        index = check_segment_index(segment_index, self.size())
        return self._next_vertex(index, pt, segment_index is None)

    def _prev_vertex(self, index: int, pt: PointLike) -> Optional[Coordinate]:
        coords = self.coordinates
        if not coords.equals_2d(index, pt):
            return coords.get_coordinate(index)

        # pt is at the segment start
        if index > 0:
            return coords.get_coordinate(index - 1)
        if self.is_closed:
            return self.prev_in_ring(index)
        return None

    def _next_vertex(self, index: int, pt: PointLike, index_unknown: bool = False) -> Optional[Coordinate]:
        coords = self.coordinates
        if not coords.equals_2d(index + 1, pt):
            return coords.get_coordinate(index + 1)

        # pt is at the segment end
        if index_unknown and self.size() == 2:
            return coords.get_coordinate(0)
        if index < self.size() - 2:
            return coords.get_coordinate(index + 2)
        if self.is_closed:
            return self.next_in_ring(index + 1)
        return None

    def is_segment_owner_of_point(self, segment_index: Optional[int], pt: PointLike) -> bool:
        """Decide whether a segment is responsible for an intersection point.

        A point on a vertex shared by two consecutive segments belongs to the
        segment that starts there. The final endpoint of a line has no
        following segment, so it belongs to the last segment.

        Args:
            segment_index: Index of the segment containing ``pt``
            pt: Intersection point lying on the segment

        Returns:
            True if this segment should process ``pt``
        """
        index = check_segment_index(segment_index, self.size())
        coords = self.coordinates
        if coords.equals_2d(index, pt):
            return True
        if coords.equals_2d(index + 1, pt):
            is_final_segment = index == self.size() - 2
            if self.is_closed or not is_final_segment:
                return False
            return True
        # interior point
        return True

    # ------------------------------------------------------------------
    # Conditioning
    # ------------------------------------------------------------------

    def orient_and_remove_repeated(self, orient_cw: bool) -> None:
        """Orient the string and drop consecutive repeated points.

        At most one derived buffer is allocated. If the string already has
        the requested orientation and no repeated points, nothing changes.
        Rings enclosing no area have no orientation and are never reversed.

        Args:
            orient_cw: True to orient the string clockwise, False for
                counter-clockwise
        """
        current = self.coordinates
        is_flipped = has_area(current) and orient_cw == is_ccw(current)
        has_repeated = current.has_repeated_points()
        if not is_flipped and not has_repeated:
            return

        if has_repeated:
            derived = remove_repeated_points(current)
            if is_flipped:
                derived.reverse()
        else:
            derived = current.clone()
            derived.reverse()

        logger.debug(
            "Conditioned %s%s element %s ring %s: flipped=%s repeated=%s size %s -> %s",
            geometry_name(self.is_a), int(self.dimension), self.element_id, self.ring_id,
            is_flipped, has_repeated, current.size(), derived.size(),
        )
        self._install(derived)

    def remove_repeated(self) -> None:
        """Drop consecutive repeated points, leaving orientation unchanged."""
        current = self.coordinates
        if not current.has_repeated_points():
            return
        derived = remove_repeated_points(current)
        logger.debug(
            "Removed repeated points from %s%s element %s: size %s -> %s",
            geometry_name(self.is_a), int(self.dimension), self.element_id,
            current.size(), derived.size(),
        )
        self._install(derived)

    def condition(self, config: Optional[ConditioningConfig] = None) -> None:
        """Apply the conditioning implied by ``config`` for this string's kind.

        Rings are oriented (shells per ``config.shell_clockwise``, holes the
        opposite way) and cleaned of repeated points. Lines only have repeated
        points removed, if ``config.remove_repeated_lines`` is set.
        """
        config = config or DEFAULT_CONFIG
        if self.is_area:
            self.orient_and_remove_repeated(config.ring_clockwise(self.ring_id))
        elif config.remove_repeated_lines:
            self.remove_repeated()

    def _install(self, derived: CoordinateSequence) -> None:
        check_min_points(derived)
        self._normalized = derived

    def __repr__(self) -> str:
        kind = "ring" if self.is_area else "line"
        return (
            f"TopologicalSegmentString({kind}, is_a={self.is_a}, element_id={self.element_id}, "
            f"ring_id={self.ring_id}, size={self.size()})"
        )


def _as_coordinate(pt: PointLike) -> Coordinate:
    if hasattr(pt, "coords") and not isinstance(pt, (tuple, list)):
        return tuple(float(v) for v in pt.coords[0])
    if len(pt) > 2:
        return tuple(float(v) for v in pt[:3])
    return as_xy(pt)


def create_line(
    coords,
    is_a: bool,
    element_id: int,
    geometry: Optional[Any] = None,
    orient: bool = False,
    config: Optional[ConditioningConfig] = None,
) -> TopologicalSegmentString:
    """Create a segment string for a linear component.

    Args:
        coords: Coordinates of the line (at least 2 points)
        is_a: True if the line belongs to geometry A
        element_id: Index of the line within its geometry
        geometry: Input geometry context, carried through unchanged
        orient: If True, condition the string immediately (see
            :meth:`TopologicalSegmentString.condition`)
        config: Conditioning settings, defaults to ``DEFAULT_CONFIG``

    Returns:
        Linear TopologicalSegmentString with no ring id and no parent polygon

    Raises:
        ValidationError: If ``coords`` is None or has fewer than 2 points

    Examples:
        >>> line = create_line([(0, 0), (5, 5), (10, 0)], True, 0)
        >>> line.dimension
        <Dimension.L: 1>
    """
    return TopologicalSegmentString._create(
        coords, is_a, Dimension.L, element_id, RING_ID_NONE, None, geometry, orient, config
    )


def create_ring(
    coords,
    is_a: bool,
    element_id: int,
    ring_id: int,
    polygonal: Optional[Any],
    geometry: Optional[Any] = None,
    orient: bool = False,
    config: Optional[ConditioningConfig] = None,
) -> TopologicalSegmentString:
    """Create a segment string for a polygon ring.

    Args:
        coords: Closed ring coordinates (at least 2 points)
        is_a: True if the ring belongs to geometry A
        element_id: Index of the polygon within its geometry
        ring_id: 0 for the shell, 1.. for holes
        polygonal: Parent polygon
        geometry: Input geometry context, carried through unchanged
        orient: If True, orient shells and holes per ``config`` and remove
            repeated points
        config: Conditioning settings, defaults to ``DEFAULT_CONFIG``

    Returns:
        Areal TopologicalSegmentString

    Raises:
        ValidationError: If ``coords`` is None or has fewer than 2 points
    """
    return TopologicalSegmentString._create(
        coords, is_a, Dimension.A, element_id, ring_id, polygonal, geometry, orient, config
    )


__all__ = [
    "TopologicalSegmentString",
    "create_line",
    "create_ring",
]
