"""Relateforge - Segment strings and node sections for topological relate.

This library prepares the lines and polygon rings of two Shapely geometries
for DE-9IM relate evaluation: it conditions their coordinates and describes
the local topology at intersection points.
"""


# Segment strings
from .segment_string import SegmentString
from .topological_segment_string import (
    TopologicalSegmentString,
    create_line,
    create_ring,
)

# Node sections
from .node_section import NodeSection

# Geometry decomposition
from .decompose import extract_segment_strings

# Core types
from .core import (
    Dimension,
    RING_ID_NONE,
    ConditioningConfig,
    CoordinateSequence,
)

# Core exceptions
from .core import (
    RelateForgeError,
    ValidationError,
    TopologyError,
)

__all__ = [

    # Segment strings
    'SegmentString',
    'TopologicalSegmentString',
    'create_line',
    'create_ring',

    # Node sections
    'NodeSection',

    # Geometry decomposition
    'extract_segment_strings',

    # Core types
    'Dimension',
    'RING_ID_NONE',
    'ConditioningConfig',
    'CoordinateSequence',

    # Core exceptions
    'RelateForgeError',
    'ValidationError',
    'TopologyError',
]
