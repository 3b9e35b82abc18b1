"""Segment slices and paired spans: the value types of a coverage walk."""
from typing import NamedTuple, Sequence

from curves.constants import EPSILON
from curves.geometry import GeometryError, eq, seg_point
from curves.poly import Poly
from curves.types import Point, Segment


class SegSlice(NamedTuple):
    """Read-only view of the [start, end] lie range of one segment of a poly.

    Invariant: 0 <= start < end <= 1 within EPSILON. Use make() to build
    one with that checked; the fields are positional so slices stay cheap.
    """
    poly: Poly; idx: int
    start: float = 0.0; end: float = 1.0

    @classmethod
    def make(cls, poly: Poly, idx: int, start: float = 0.0, end: float = 1.0) -> "SegSlice":
        if start < -EPSILON or end > 1 + EPSILON or end - start < EPSILON:
            raise GeometryError(f"Bad slice [{start}, {end}] on segment {idx}")
        return cls(poly, idx, start, end)

    @classmethod
    def first_of(cls, poly: Poly) -> "SegSlice":
        return cls(poly, 0)

    @property
    def seg(self) -> Segment:
        return self.poly[self.idx]

    @property
    def start_point(self) -> Point:
        return seg_point(self.seg, self.start)

    @property
    def end_point(self) -> Point:
        return seg_point(self.seg, self.end)

    @property
    def is_last(self) -> bool:
        """True if the slice reaches the very end of the poly before wrapping."""
        return self.idx == len(self.poly) - 1 and eq(self.end, 1.0)

    def next(self) -> "SegSlice":
        """Remainder of this segment, or the whole cyclically next segment."""
        if self.end < 1 - EPSILON:
            return SegSlice(self.poly, self.idx, self.end, 1.0)
        return SegSlice(self.poly, self.poly.next_index(self.idx))

    def first(self) -> "SegSlice":
        return SegSlice.first_of(self.poly)

    def truncated(self, end: float) -> "SegSlice":
        return SegSlice.make(self.poly, self.idx, self.start, end)

    def same_position(self, other: "SegSlice") -> bool:
        """Same poly, same segment, same start lie; end is ignored."""
        return (self.poly is other.poly and self.idx == other.idx
                and eq(self.start, other.start))

    def __str__(self) -> str:
        return f"{self.idx}[{self.start:g},{self.end:g}]"


class PairedSpan(NamedTuple):
    """One maximal coincident range, as a slice of each poly.

    The two lie ranges need not have equal width: an arc overlapping a
    shorter arc covers all of one and part of the other.
    """
    a: SegSlice; b: SegSlice

    @property
    def seg_a(self) -> Segment: return self.a.seg
    @property
    def start_lie_a(self) -> float: return self.a.start
    @property
    def end_lie_a(self) -> float: return self.a.end
    @property
    def seg_b(self) -> Segment: return self.b.seg
    @property
    def start_lie_b(self) -> float: return self.b.start
    @property
    def end_lie_b(self) -> float: return self.b.end

    @property
    def lies(self) -> tuple[float, float, float, float]:
        return (self.a.start, self.a.end, self.b.start, self.b.end)

    def rebased(self) -> tuple[float, float, float, float]:
        """Poly-global positions: segment index plus lie on each side."""
        ia, ib = self.a.idx, self.b.idx
        return (ia + self.a.start, ia + self.a.end, ib + self.b.start, ib + self.b.end)

    def __str__(self) -> str:
        sa, ea, sb, eb = self.lies
        return f"[({sa:g},{ea:g})({sb:g},{eb:g})]"


def spans_match(ref: Sequence, got: Sequence[PairedSpan]) -> bool:
    """Compare expected lie quadruples (or spans) against computed spans with EQ."""
    if len(ref) != len(got):
        return False
    for r, g in zip(ref, got):
        r_lies = r.lies if isinstance(r, PairedSpan) else tuple(r)
        if not all(eq(x, y) for x, y in zip(r_lies, g.lies)):
            return False
    return True
