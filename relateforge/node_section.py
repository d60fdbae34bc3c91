"""Node sections: local topology of one segment string at one node.

A node section records the incoming and outgoing edge of a segment string at
an intersection point, together with the provenance of that string. Node
sections at the same point are collected by the topology graph builder and
sorted with :meth:`NodeSection.compare_to`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from shapely.geometry import LineString

from .core.coordinates import Coordinate
from .core.types import Dimension, RING_ID_NONE


def geometry_name(is_a: bool) -> str:
    return "A" if is_a else "B"


def _compare_coordinates(c0: Optional[Coordinate], c1: Optional[Coordinate]) -> int:
    # None sorts below any coordinate
    if c0 is None:
        return 0 if c1 is None else -1
    if c1 is None:
        return 1
    for v0, v1 in zip(c0[:2], c1[:2]):
        if v0 < v1:
            return -1
        if v0 > v1:
            return 1
    return 0


def _compare_values(v0, v1) -> int:
    return (v0 > v1) - (v0 < v1)


def _edge_repr(p0: Optional[Coordinate], p1: Optional[Coordinate]) -> str:
    if p0 is None or p1 is None:
        return "null"
    return LineString([p0[:2], p1[:2]]).wkt


@dataclass(frozen=True)
class NodeSection:
    """Snapshot of a segment string at one node.

    Attributes:
        is_a: True if the section belongs to geometry A
        dimension: Dimension of the owning component
        element_id: Index of the component within its geometry
        ring_id: Ring index within the polygon, ``RING_ID_NONE`` for lines
        polygonal: Parent polygon for areal components, otherwise None
        is_node_at_vertex: True if the node coincides with a vertex of the string
        prev_vertex: Vertex preceding the node, None at the start of a line
        node_pt: The node point
        next_vertex: Vertex following the node, None at the end of a line
    """

    is_a: bool
    dimension: Dimension
    element_id: int
    ring_id: int
    polygonal: Optional[Any]
    is_node_at_vertex: bool
    prev_vertex: Optional[Coordinate]
    node_pt: Coordinate
    next_vertex: Optional[Coordinate]

    @property
    def is_area(self) -> bool:
        return self.dimension == Dimension.A

    @property
    def is_shell(self) -> bool:
        return self.is_area and self.ring_id == 0

    @property
    def is_proper(self) -> bool:
        """True if the node lies in the interior of a segment."""
        return not self.is_node_at_vertex

    def get_vertex(self, i: int) -> Optional[Coordinate]:
        """Return the previous vertex for ``i == 0``, otherwise the next vertex."""
        return self.prev_vertex if i == 0 else self.next_vertex

    def is_same_geometry(self, other: "NodeSection") -> bool:
        return self.is_a == other.is_a

    def is_same_polygon(self, other: "NodeSection") -> bool:
        return self.is_a == other.is_a and self.element_id == other.element_id

    @staticmethod
    def is_area_area(a: "NodeSection", b: "NodeSection") -> bool:
        return a.is_area and b.is_area

    @staticmethod
    def is_proper_pair(a: "NodeSection", b: "NodeSection") -> bool:
        return a.is_proper and b.is_proper

    def compare_to(self, other: "NodeSection") -> int:
        """Order sections at the same node.

        Geometry A sorts before B, then by dimension, element id and ring id,
        then by the previous and next vertices.
        """
        if self.is_a != other.is_a:
            return -1 if self.is_a else 1

        for mine, theirs in (
            (int(self.dimension), int(other.dimension)),
            (self.element_id, other.element_id),
            (self.ring_id, other.ring_id),
        ):
            comp = _compare_values(mine, theirs)
            if comp != 0:
                return comp

        comp = _compare_coordinates(self.prev_vertex, other.prev_vertex)
        if comp != 0:
            return comp
        return _compare_coordinates(self.next_vertex, other.next_vertex)

    def __lt__(self, other: "NodeSection") -> bool:
        if not isinstance(other, NodeSection):
            return NotImplemented
        return self.compare_to(other) < 0

    def __str__(self) -> str:
        at_vertex = "-V-" if self.is_node_at_vertex else "---"
        poly_id = f"[{self.element_id}:{self.ring_id}]" if self.ring_id != RING_ID_NONE else f"[{self.element_id}]"
        return (
            f"{geometry_name(self.is_a)}{int(self.dimension)}{poly_id}: "
            f"{_edge_repr(self.prev_vertex, self.node_pt)} {at_vertex} "
            f"{_edge_repr(self.node_pt, self.next_vertex)}"
        )


__all__ = [
    "NodeSection",
    "geometry_name",
]
