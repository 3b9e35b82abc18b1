"""Poly: a closed, cyclic sequence of line and arc segments, plus a path parser."""
import math
import re
from functools import cached_property
from typing import Iterable, Iterator

from .types import Point, BBox, LineSeg, ArcSeg, CircleSeg, Segment, Winding
from .constants import EPSILON
from .geometry import (
    GeometryError,
    check_segment, pt_eq, seg_bbox, bbox_union,
)

_TOKEN_RE = re.compile(r"[A-Za-z]|[-+]?(?:\d*\.\d+|\d+\.?)(?:[eE][-+]?\d+)?")


class Poly:
    """Ordered, cyclic sequence of segments.

    Segment i is followed by segment i+1, the last by segment 0. The
    sequence is treated as a loop whether or not its end meets its start.
    """

    def __init__(self, segs: Iterable[Segment]):
        self.segs: tuple[Segment, ...] = tuple(check_segment(s) for s in segs)

    def __len__(self) -> int:
        return len(self.segs)

    def __getitem__(self, i: int) -> Segment:
        return self.segs[i]

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segs)

    def __repr__(self) -> str:
        return f"Poly({list(self.segs)!r})"

    @property
    def is_empty(self) -> bool:
        return not self.segs

    @property
    def is_closed(self) -> bool:
        """True if the last segment ends where the first one starts."""
        if self.is_empty: return False
        first, last = self.segs[0], self.segs[-1]
        if isinstance(first, CircleSeg): return len(self.segs) == 1
        return not isinstance(last, CircleSeg) and pt_eq(last.end, first.start)

    def next_index(self, i: int) -> int:
        """Index of the segment after i, wrapping past the last back to 0."""
        return (i+1) % len(self.segs)

    @cached_property
    def bbox(self) -> BBox:
        if self.is_empty:
            raise GeometryError("Empty poly has no bounding box")
        return bbox_union([seg_bbox(s) for s in self.segs])

    # ------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------
    @classmethod
    def circle(cls, center: Point, r: float, direction: Winding = "CCW") -> "Poly":
        return cls([CircleSeg(center, r, direction)])

    @classmethod
    def parse(cls, d: str) -> "Poly":
        """Parse an SVG-like path: M, L, H, V, A (circular), Z and relative forms.

        "M0,0 H100" is a single line from (0,0) to (100,0). Arcs are
        "A r,r rot large-arc sweep x,y" with sweep 1 meaning CCW.
        """
        tokens = _TOKEN_RE.findall(d.replace(",", " "))
        segs: list[Segment] = []
        cur: Point | None = None; start: Point | None = None
        i = 0; cmd = None

        def read(n: int) -> list[float]:
            nonlocal i
            if i + n > len(tokens) or any(t.isalpha() for t in tokens[i:i+n]):
                raise GeometryError(f"Path data ended early after {cmd!r} in {d!r}")
            vals = [float(t) for t in tokens[i:i+n]]; i += n
            return vals

        while i < len(tokens):
            if tokens[i].isalpha():
                cmd = tokens[i]; i += 1
            elif cmd is None:
                raise GeometryError(f"Numbers without a command: {d!r}")
            rel = cmd.islower(); op = cmd.upper()
            if op != "M" and cur is None:
                raise GeometryError(f"Command {cmd!r} before any M in {d!r}")
            ox, oy = cur if (rel and cur is not None) else (0.0, 0.0)
            if op == "M":
                x, y = read(2); cur = start = (ox+x, oy+y)
                cmd = "l" if rel else "L"  # extra pairs after M are line-tos
            elif op == "L":
                x, y = read(2); nxt = (ox+x, oy+y)
                segs.append(LineSeg(cur, nxt)); cur = nxt
            elif op == "H":
                (x,) = read(1); nxt = (ox+x, cur[1])
                segs.append(LineSeg(cur, nxt)); cur = nxt
            elif op == "V":
                (y,) = read(1); nxt = (cur[0], oy+y)
                segs.append(LineSeg(cur, nxt)); cur = nxt
            elif op == "A":
                rx, ry, _rot, large, sweep, x, y = read(7)
                if abs(rx - ry) > EPSILON:
                    raise GeometryError(f"Elliptical arc rx={rx}, ry={ry}: circular arcs only")
                nxt = (ox+x, oy+y)
                segs.append(_svg_arc(cur, nxt, rx, bool(large), bool(sweep))); cur = nxt
            elif op == "Z":
                if cur is not None and not pt_eq(cur, start):
                    segs.append(LineSeg(cur, start))
                cur = start; cmd = None
            else:
                raise GeometryError(f"Unsupported path command {cmd!r}")
        return cls(segs)


def _svg_arc(p0: Point, p1: Point, r: float, large: bool, sweep: bool) -> ArcSeg:
    """Center-parametrize a circular SVG arc from p0 to p1."""
    dx = p1[0]-p0[0]; dy = p1[1]-p0[1]; d = math.hypot(dx, dy)
    if d < EPSILON:
        raise GeometryError(f"Arc endpoints coincide at {p0}")
    h = d/2; r = max(abs(r), h)  # undersized radius scales up, as in SVG
    k = math.sqrt(max(0.0, r*r - h*h))
    sign = 1.0 if large != sweep else -1.0
    mx, my = (p0[0]+p1[0])/2, (p0[1]+p1[1])/2
    center = (mx + sign*k*(-dy/d), my + sign*k*(dx/d))
    return ArcSeg(p0, p1, center, "CCW" if sweep else "CW")
