"""Segment types, tolerance comparisons, segment geometry, polys and SVG utilities."""

from .types import Point, BBox, LineSeg, ArcSeg, CircleSeg, Segment
from .constants import EPSILON
from .geometry import (
    GeometryError, UnsupportedGeometryError,
    eq, pt_eq, angle_eq, clamp_lie, check_segment,
    side, slope, is_ccw, arc_radius, arc_sweep, arc_angles, arc_poly,
    seg_point, seg_lie,
    seg_bbox, bbox_union, bbox_inflate, bbox_intersects,
    segment_polyline,
)
from .poly import Poly
from .svg import make_svg_transform, W, H
