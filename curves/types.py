"""Shared type definitions for poly segments."""
from typing import Literal, NamedTuple

Point = tuple[float, float]
BBox = tuple[float, float, float, float]   # (xmin, ymin, xmax, ymax)
Winding = Literal["CW", "CCW"]

class LineSeg(NamedTuple):
    start: Point; end: Point

class ArcSeg(NamedTuple):
    start: Point; end: Point; center: Point
    direction: Winding

class CircleSeg(NamedTuple):
    """Full circle starting and ending at the rightmost point."""
    center: Point; radius: float
    direction: Winding

Segment = LineSeg | ArcSeg | CircleSeg
