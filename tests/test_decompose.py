"""Tests for extracting segment strings from shapely geometries."""

import pytest
from shapely.geometry import (
    GeometryCollection,
    LinearRing,
    LineString,
    MultiLineString,
    MultiPolygon,
    Point,
    Polygon,
)

from relateforge import Dimension, RING_ID_NONE, TopologyError, extract_segment_strings
from relateforge.core.geometry_utils import is_ccw


def _square(x0, y0, size):
    return [(x0, y0), (x0 + size, y0), (x0 + size, y0 + size), (x0, y0 + size)]


class TestExtractSegmentStrings:
    """Tests for extract_segment_strings."""

    def test_line(self):
        line = LineString([(0, 0), (5, 5), (10, 0)])
        strings = extract_segment_strings(line, is_a=True)
        assert len(strings) == 1
        ss = strings[0]
        assert ss.dimension == Dimension.L
        assert ss.ring_id == RING_ID_NONE
        assert ss.element_id == 0
        assert ss.geometry is line

    def test_linear_ring_is_a_line(self):
        ring = LinearRing(_square(0, 0, 1))
        strings = extract_segment_strings(ring, is_a=False)
        assert strings[0].dimension == Dimension.L
        assert strings[0].is_closed
        assert strings[0].is_a is False

    def test_polygon_with_hole(self):
        poly = Polygon(_square(0, 0, 10), holes=[_square(2, 2, 2)])
        shell, hole = extract_segment_strings(poly, is_a=True)
        assert shell.ring_id == 0
        assert hole.ring_id == 1
        assert shell.polygonal is poly
        assert hole.polygonal is poly
        assert shell.dimension == Dimension.A

    def test_polygon_orientation(self):
        """Shells come out clockwise and holes counter-clockwise."""
        poly = Polygon(_square(0, 0, 10), holes=[list(reversed(_square(2, 2, 2)))])
        shell, hole = extract_segment_strings(poly, is_a=True)
        assert not is_ccw(shell.coordinates)
        assert is_ccw(hole.coordinates)

    def test_orient_disabled(self):
        poly = Polygon(_square(0, 0, 10))
        (shell,) = extract_segment_strings(poly, is_a=True, orient=False)
        assert not shell.is_normalized
        assert is_ccw(shell.coordinates)

    def test_multipolygon_element_ids(self):
        multi = MultiPolygon([Polygon(_square(0, 0, 1)), Polygon(_square(5, 5, 1))])
        strings = extract_segment_strings(multi, is_a=True)
        assert [ss.element_id for ss in strings] == [0, 1]
        assert strings[1].polygonal.equals(multi.geoms[1])

    def test_multilinestring(self):
        multi = MultiLineString([[(0, 0), (1, 1)], [(2, 2), (3, 3)]])
        strings = extract_segment_strings(multi, is_a=False)
        assert [ss.element_id for ss in strings] == [0, 1]
        assert all(not ss.is_a for ss in strings)

    def test_collection_skips_points(self):
        collection = GeometryCollection([Point(0, 0), LineString([(0, 0), (1, 0)])])
        strings = extract_segment_strings(collection, is_a=True)
        assert len(strings) == 1
        assert strings[0].element_id == 1

    def test_empty_geometry(self):
        assert extract_segment_strings(Polygon(), is_a=True) == []

    def test_context_passed_through(self):
        context = object()
        strings = extract_segment_strings(LineString([(0, 0), (1, 1)]), True, context=context)
        assert strings[0].geometry is context

    def test_unsupported_type(self):
        with pytest.raises(TopologyError):
            extract_segment_strings("POINT (0 0)", is_a=True)
