"""Segment primitives: tolerance comparisons, lies, slopes, arc angles, bounding boxes."""
import math

import numpy as np

from .constants import EPSILON, ARC_N_PTS, ARC_MIN_PTS
from .types import Point, BBox, LineSeg, ArcSeg, CircleSeg, Segment

TAU = 2*math.pi

# ============================================================
# Error Types
# ============================================================
class GeometryError(ValueError):
    """Raised for impossible or malformed geometry."""

class UnsupportedGeometryError(GeometryError):
    """Raised for configurations coverage does not attempt to resolve.

    Anti-parallel collinear lines, concentric arcs of opposite winding
    and full circles.
    """

# ============================================================
# Tolerance Comparisons
# ============================================================
def eq(x: float, y: float) -> bool:
    """Approximate equality within EPSILON."""
    return abs(x-y) < EPSILON

def pt_eq(p: Point, q: Point) -> bool:
    return eq(p[0], q[0]) and eq(p[1], q[1])

def angle_eq(a: float, b: float) -> bool:
    """Equality of two direction angles, modulo a full turn."""
    return abs(math.remainder(a-b, TAU)) < EPSILON

def clamp_lie(x: float, lo: float = 0.0, hi: float = 1.0) -> float:
    """Clamp x into [lo, hi], snapping values within EPSILON of either end."""
    if x <= lo + EPSILON: return lo
    if x >= hi - EPSILON: return hi
    return x

# ============================================================
# Segment Validation
# ============================================================
def check_segment(seg: Segment) -> Segment:
    """Return seg unchanged, or raise GeometryError if it is degenerate."""
    if isinstance(seg, LineSeg):
        if pt_eq(seg.start, seg.end):
            raise GeometryError(f"Zero-length line at {seg.start}")
        return seg
    if seg.direction not in ("CW", "CCW"):
        raise GeometryError(f"Bad winding {seg.direction!r}")
    if isinstance(seg, CircleSeg):
        if seg.radius < EPSILON:
            raise GeometryError(f"Zero-radius circle at {seg.center}")
        return seg
    r1 = math.dist(seg.center, seg.start); r2 = math.dist(seg.center, seg.end)
    if r1 < EPSILON:
        raise GeometryError(f"Zero-radius arc at {seg.center}")
    if not eq(r1, r2):
        raise GeometryError(f"Arc end off circle: r_start={r1:.6f}, r_end={r2:.6f}")
    return seg

# ============================================================
# Lines
# ============================================================
def side(p: Point, a: Point, b: Point) -> int:
    """Side of p relative to the directed line a → b: 1 left, -1 right, 0 on it."""
    dx = b[0]-a[0]; dy = b[1]-a[1]; L = math.hypot(dx, dy)
    if L < EPSILON:
        raise GeometryError(f"Degenerate line: a={a}, b={b}")
    d = (dx*(p[1]-a[1]) - dy*(p[0]-a[0]))/L
    if abs(d) < EPSILON: return 0
    return 1 if d > 0 else -1

def slope(seg: LineSeg) -> float:
    """Direction angle of a line segment in radians, (-pi, pi]."""
    return math.atan2(seg.end[1]-seg.start[1], seg.end[0]-seg.start[0])

# ============================================================
# Arcs
# ============================================================
def is_ccw(seg: ArcSeg | CircleSeg) -> bool:
    return seg.direction == "CCW"

def arc_radius(seg: ArcSeg | CircleSeg) -> float:
    if isinstance(seg, CircleSeg): return seg.radius
    return math.dist(seg.center, seg.start)

def arc_sweep(seg: ArcSeg | CircleSeg) -> float:
    """Sweep angle of an arc in radians (always positive, at most a full turn)."""
    if isinstance(seg, CircleSeg): return TAU
    c = seg.center
    ang_s = math.atan2(seg.start[1]-c[1], seg.start[0]-c[0])
    ang_e = math.atan2(seg.end[1]-c[1], seg.end[0]-c[0])
    sweep = (ang_e - ang_s) % TAU if is_ccw(seg) else (ang_s - ang_e) % TAU
    if sweep*arc_radius(seg) < EPSILON:
        raise UnsupportedGeometryError(f"Arc closes on itself at {seg.start}: full circles not supported")
    return sweep

def arc_angles(seg: ArcSeg | CircleSeg) -> tuple[float, float]:
    """Continuous (start, end) angles; end > start for CCW, end < start for CW.

    Not wrapped into [0, 2pi) so that direction and sweep stay unambiguous.
    """
    if isinstance(seg, CircleSeg):
        return (0.0, TAU) if is_ccw(seg) else (0.0, -TAU)
    c = seg.center
    s = math.atan2(seg.start[1]-c[1], seg.start[0]-c[0])
    sweep = arc_sweep(seg)
    return (s, s+sweep) if is_ccw(seg) else (s, s-sweep)

def arc_poly(cx: float, cy: float, r: float, sa: float, ea: float, n: int = 60) -> list[Point]:
    """Generate n+1 points along a circular arc from angle sa to ea (radians)."""
    ts = np.linspace(sa, ea, n+1)
    return [(float(x), float(y)) for x, y in zip(cx + r*np.cos(ts), cy + r*np.sin(ts))]

# ============================================================
# Lies
# ============================================================
def seg_point(seg: Segment, lie: float) -> Point:
    """Point at parametric position lie along seg (0 = start, 1 = end)."""
    if isinstance(seg, LineSeg):
        a, b = seg.start, seg.end
        return (a[0]+lie*(b[0]-a[0]), a[1]+lie*(b[1]-a[1]))
    s, e = arc_angles(seg); r = arc_radius(seg); c = seg.center
    t = s + lie*(e-s)
    return (c[0]+r*math.cos(t), c[1]+r*math.sin(t))

def seg_lie(seg: Segment, p: Point) -> float:
    """Unclamped lie of p against seg's own parametrization.

    Lines project onto the infinite extension; arcs measure the angle of
    p about the center in the arc's winding direction, so lies beyond 1
    run on around the host circle (up to 2pi/sweep).
    """
    if isinstance(seg, LineSeg):
        a, b = seg.start, seg.end
        dx = b[0]-a[0]; dy = b[1]-a[1]
        return ((p[0]-a[0])*dx + (p[1]-a[1])*dy)/(dx*dx + dy*dy)
    c = seg.center; s, e = arc_angles(seg)
    ang = math.atan2(p[1]-c[1], p[0]-c[0])
    off = (ang - s) % TAU if is_ccw(seg) else (s - ang) % TAU
    if off > TAU - EPSILON: off = 0.0
    return off/abs(e-s)

# ============================================================
# Bounding Boxes
# ============================================================
def seg_bbox(seg: Segment) -> BBox:
    """Axis-aligned bounding box of a segment, exact for arcs."""
    if isinstance(seg, CircleSeg):
        (cx, cy), r = seg.center, seg.radius
        return (cx-r, cy-r, cx+r, cy+r)
    pts = [seg.start, seg.end]
    if isinstance(seg, ArcSeg):
        s, e = arc_angles(seg); lo, hi = min(s, e), max(s, e)
        r = arc_radius(seg); c = seg.center
        k = math.ceil(lo/(math.pi/2))
        while k*math.pi/2 <= hi:
            t = k*math.pi/2
            pts.append((c[0]+r*math.cos(t), c[1]+r*math.sin(t)))
            k += 1
    arr = np.asarray(pts, dtype=float)
    (xmin, ymin), (xmax, ymax) = arr.min(axis=0), arr.max(axis=0)
    return (float(xmin), float(ymin), float(xmax), float(ymax))

def bbox_union(boxes: list[BBox]) -> BBox:
    arr = np.asarray(boxes, dtype=float)
    return (float(arr[:, 0].min()), float(arr[:, 1].min()),
            float(arr[:, 2].max()), float(arr[:, 3].max()))

def bbox_inflate(b: BBox, d: float) -> BBox:
    return (b[0]-d, b[1]-d, b[2]+d, b[3]+d)

def bbox_intersects(a: BBox, b: BBox) -> bool:
    """True if two boxes share at least one point (touching counts)."""
    return a[0] <= b[2] and b[0] <= a[2] and a[1] <= b[3] and b[1] <= a[3]

# ============================================================
# Path Operations
# ============================================================
def segment_polyline(seg: Segment, lo: float = 0.0, hi: float = 1.0) -> list[Point]:
    """Convert the [lo, hi] lie range of a segment to a polyline of points."""
    if isinstance(seg, LineSeg):
        return [seg_point(seg, lo), seg_point(seg, hi)]
    s, e = arc_angles(seg); c = seg.center
    sa, ea = s + lo*(e-s), s + hi*(e-s)
    n = max(ARC_MIN_PTS, math.ceil(ARC_N_PTS*abs(ea-sa)/TAU))
    return arc_poly(c[0], c[1], arc_radius(seg), sa, ea, n)
