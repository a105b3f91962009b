"""Facility routing model."""

from .graph import (
    Edge,
    FacilityGraph,
    sample_facility_graph,
    format_distance,
    format_distance_table,
    SAMPLE_EDGES,
    SAMPLE_NODES,
    UNREACHABLE,
)

__all__ = [
    'Edge',
    'FacilityGraph',
    'sample_facility_graph',
    'format_distance',
    'format_distance_table',
    'SAMPLE_EDGES',
    'SAMPLE_NODES',
    'UNREACHABLE',
]
