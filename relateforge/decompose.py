"""Build topological segment strings from shapely geometries.

Every linear component and polygon ring of a geometry becomes one
:class:`~relateforge.topological_segment_string.TopologicalSegmentString`.
Element ids number the atomic geometries in traversal order; ring 0 of a
polygon is its shell and rings 1.. are its holes.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from shapely.geometry import (
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)
from shapely.geometry.base import BaseGeometry

from .core.config import ConditioningConfig
from .core.errors import TopologyError
from .node_section import geometry_name
from .topological_segment_string import TopologicalSegmentString, create_line, create_ring

logger = logging.getLogger(__name__)


def extract_segment_strings(
    geometry: BaseGeometry,
    is_a: bool,
    context: Optional[Any] = None,
    orient: bool = True,
    config: Optional[ConditioningConfig] = None,
) -> List[TopologicalSegmentString]:
    """Decompose ``geometry`` into segment strings.

    Args:
        geometry: Input shapely geometry
        is_a: True if ``geometry`` is input A of the relate evaluation
        context: Geometry context attached to each string (defaults to
            ``geometry``)
        orient: Condition each string as it is created
        config: Conditioning settings

    Returns:
        List of segment strings in traversal order. Points and empty
        components produce none.

    Raises:
        TopologyError: If ``geometry`` is not a shapely geometry type handled here

    Examples:
        >>> poly = Polygon([(0, 0), (10, 0), (10, 10), (0, 10)], holes=[[(2, 2), (4, 2), (4, 4)]])
        >>> [ss.ring_id for ss in extract_segment_strings(poly, is_a=True)]
        [0, 1]
    """
    if context is None:
        context = geometry

    seg_strings: List[TopologicalSegmentString] = []
    _extract(geometry, is_a, context, orient, config, seg_strings, [0])
    logger.debug(
        "Extracted %s segment strings from %s %s",
        len(seg_strings), geometry_name(is_a), geometry.geom_type,
    )
    return seg_strings


def _extract(
    geometry: BaseGeometry,
    is_a: bool,
    context: Any,
    orient: bool,
    config: Optional[ConditioningConfig],
    out: List[TopologicalSegmentString],
    next_id: List[int],
) -> None:
    if isinstance(geometry, (MultiPolygon, MultiLineString, MultiPoint, GeometryCollection)):
        for part in geometry.geoms:
            _extract(part, is_a, context, orient, config, out, next_id)
        return

    if not isinstance(geometry, (Point, LineString, Polygon)):
        raise TopologyError(f"Unsupported geometry type: {type(geometry).__name__}", geometry)

    element_id = next_id[0]
    next_id[0] += 1

    if geometry.is_empty or isinstance(geometry, Point):
        return

    if isinstance(geometry, LineString):
        # LinearRing is a LineString subclass and is treated as a line
        out.append(create_line(geometry.coords, is_a, element_id, context, orient, config))
        return

    out.append(create_ring(geometry.exterior.coords, is_a, element_id, 0, geometry, context, orient, config))
    for ring_id, hole in enumerate(geometry.interiors, start=1):
        out.append(create_ring(hole.coords, is_a, element_id, ring_id, geometry, context, orient, config))


__all__ = [
    "extract_segment_strings",
]
