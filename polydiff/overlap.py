"""Alignment test and overlap extent of two segment slices.

Lines overlap when collinear and running the same way; arcs when they
share a circle and a winding. Overlap extents are reported as a
PairedSpan whose lies are clamped into the slices they came from.
"""
import math

from curves.constants import EPSILON
from curves.geometry import (
    UnsupportedGeometryError, TAU,
    eq, pt_eq, angle_eq, clamp_lie,
    side, slope, arc_radius, arc_sweep, arc_angles, is_ccw, seg_lie,
)
from curves.types import LineSeg, ArcSeg, CircleSeg, Segment
from .spans import SegSlice, PairedSpan


# ============================================================
# Alignment
# ============================================================
def aligned(seg_a: Segment, seg_b: Segment) -> bool:
    """True if two segments could overlap as coincident geometry.

    Raises UnsupportedGeometryError for full circles, anti-parallel
    collinear lines and concentric arcs of opposite winding.
    """
    if isinstance(seg_a, CircleSeg) or isinstance(seg_b, CircleSeg):
        raise UnsupportedGeometryError("Full circles are not supported")
    if type(seg_a) is not type(seg_b):
        return False
    if isinstance(seg_a, LineSeg):
        if side(seg_a.start, seg_b.start, seg_b.end) != 0 or side(seg_a.end, seg_b.start, seg_b.end) != 0:
            return False
        if not angle_eq(slope(seg_a), slope(seg_b)):
            raise UnsupportedGeometryError(
                f"Anti-parallel collinear lines {seg_a.start}->{seg_a.end} and "
                f"{seg_b.start}->{seg_b.end}: same direction only")
        return True
    _reject_closed(seg_a); _reject_closed(seg_b)
    if not pt_eq(seg_a.center, seg_b.center) or not eq(arc_radius(seg_a), arc_radius(seg_b)):
        return False
    if seg_a.direction != seg_b.direction:
        raise UnsupportedGeometryError(
            f"Concentric arcs about {seg_a.center} with opposite winding: same winding only")
    return True

def _reject_closed(seg: ArcSeg) -> None:
    """An arc whose ends meet is a full circle."""
    if pt_eq(seg.start, seg.end):
        raise UnsupportedGeometryError(f"Arc closes on itself at {seg.start}: full circles not supported")

# ============================================================
# Overlap Extent
# ============================================================
def overlap(sa: SegSlice, sb: SegSlice) -> PairedSpan | None:
    """Coincident extent of two slices, or None if they do not overlap."""
    if not aligned(sa.seg, sb.seg):
        return None
    if isinstance(sa.seg, LineSeg):
        return _line_overlap(sa, sb)
    return _arc_overlap(sa, sb)

def _line_overlap(sa: SegSlice, sb: SegSlice) -> PairedSpan | None:
    a, b = sa.seg, sb.seg
    s_lie, e_lie = seg_lie(a, sb.start_point), seg_lie(a, sb.end_point)  # b, in terms of a
    if s_lie >= sa.end - EPSILON or e_lie <= sa.start + EPSILON:
        return None
    s_lie2, e_lie2 = seg_lie(b, sa.start_point), seg_lie(b, sa.end_point)  # a, in terms of b
    return _paired(sa, s_lie, e_lie, sb, s_lie2, e_lie2)

def _arc_overlap(sa: SegSlice, sb: SegSlice) -> PairedSpan | None:
    # Angles are unwound so both arcs run forward: u = sign*theta.
    sign = 1.0 if is_ccw(sa.seg) else -1.0
    a0, wa = sign*arc_angles(sa.seg)[0], arc_sweep(sa.seg)
    b0, wb = sign*arc_angles(sb.seg)[0], arc_sweep(sb.seg)
    ua0, ua1 = a0 + sa.start*wa, a0 + sa.end*wa
    ub0, ub1 = b0 + sb.start*wb, b0 + sb.end*wb
    # Shift b by whole turns so it starts within one turn after a's start;
    # the turn before can still reach back over a's start.
    shift = -math.floor((ub0 - ua0)/TAU)*TAU
    for off in (shift - TAU, shift):
        lo, hi = max(ua0, ub0 + off), min(ua1, ub1 + off)
        if hi <= lo:
            continue
        span = _paired(sa, (lo - a0)/wa, (hi - a0)/wa,
                       sb, (lo - off - b0)/wb, (hi - off - b0)/wb)
        if span is not None:
            return span
    return None

def _paired(sa: SegSlice, s1: float, e1: float,
            sb: SegSlice, s2: float, e2: float) -> PairedSpan | None:
    """Clamp both lie pairs into their slices; None if either side vanishes."""
    s1, e1 = clamp_lie(s1, sa.start, sa.end), clamp_lie(e1, sa.start, sa.end)
    s2, e2 = clamp_lie(s2, sb.start, sb.end), clamp_lie(e2, sb.start, sb.end)
    if e1 - s1 < EPSILON or e2 - s2 < EPSILON:
        return None
    return PairedSpan(SegSlice.make(sa.poly, sa.idx, s1, e1),
                      SegSlice.make(sb.poly, sb.idx, s2, e2))
