"""Coverage walk: the cyclic two-cursor scan that pairs up coincident spans.

The walk keeps one slice cursor on each poly. While SEARCHING it sweeps
every slice of B against each segment of A in turn. The first overlap
found becomes the anchor and the walk switches to EXTENDING: after every
hit both cursors resume just past the matched range; after a miss only B
moves, restarting from its first segment, and A is held until a complete
B lap from the start finds nothing. The walk is DONE once A comes back
around to the anchor, or when a full sweep of A found no overlap at all.

Known limitation: A is held while B retries. Polys with several separated
coincident regions, where A would have to move on while B searches, may
report fewer spans than a brute-force pairwise_coverage().
"""
import logging
from enum import Enum

from curves.constants import EPSILON
from curves.geometry import GeometryError, UnsupportedGeometryError, bbox_inflate, bbox_intersects
from curves.poly import Poly
from curves.types import CircleSeg
from .spans import SegSlice, PairedSpan
from .overlap import overlap

logger = logging.getLogger(__name__)


class WalkState(Enum):
    SEARCHING = "searching"
    EXTENDING = "extending"
    DONE = "done"


class CoverageWalk:
    """State machine over two slice cursors; step() performs one transition."""

    def __init__(self, a: Poly, b: Poly):
        check_inputs(a, b)
        self.cur_a = SegSlice.first_of(a)
        self.cur_b = SegSlice.first_of(b)
        self.anchor: PairedSpan | None = None
        self.spans: list[PairedSpan] = []
        self.state = WalkState.SEARCHING
        self._b_lap_fresh = True   # cur_b started from B's first slice against the current cur_a

    def run(self) -> list[PairedSpan]:
        while self.state is not WalkState.DONE:
            self.step()
        return self.spans

    def step(self) -> None:
        if self.state is WalkState.DONE:
            return
        if self.anchor is not None:
            if self.cur_a.same_position(self.anchor.a):
                logger.debug("back at anchor %s after %d span(s)", self.anchor.a, len(self.spans))
                self.state = WalkState.DONE
                return
            self._clip_to_anchor()

        span = overlap(self.cur_a, self.cur_b)
        if span is not None:
            self.spans.append(span)
            if self.anchor is None:
                logger.debug("anchor %s", span)
                self.anchor = span
                self.state = WalkState.EXTENDING
            self.cur_a, self.cur_b = span.a.next(), span.b.next()
            self._b_lap_fresh = False
            return

        a_was_last = self.cur_a.is_last
        if not self.cur_b.is_last:
            self.cur_b = self.cur_b.next()
            return
        self.cur_b = self.cur_b.first()
        if self.state is WalkState.SEARCHING:
            self.cur_a = self.cur_a.next()
            if a_was_last:
                logger.debug("full sweep found no overlap")
                self.state = WalkState.DONE
        elif self._b_lap_fresh:
            logger.debug("no overlap for %s in a full lap of B, advancing A", self.cur_a)
            self.cur_a = self.cur_a.next()
        else:
            self._b_lap_fresh = True

    def _clip_to_anchor(self) -> None:
        """Stop cur_a at the anchor's start once it has come back around onto it."""
        anc = self.anchor.a
        cur = self.cur_a
        if cur.idx == anc.idx and cur.start < anc.start - EPSILON and cur.end > anc.start + EPSILON:
            self.cur_a = cur.truncated(anc.start)


def check_inputs(a: Poly, b: Poly) -> None:
    """Reject empty polys and polys holding a full circle, before any geometry test."""
    if a.is_empty or b.is_empty:
        raise GeometryError("Coverage needs two non-empty polys")
    for seg in (*a, *b):
        if isinstance(seg, CircleSeg):
            raise UnsupportedGeometryError("Full circles are not supported")


def compute_coverage(a: Poly, b: Poly) -> list[PairedSpan]:
    """Ordered coincident spans between polys a and b; empty if they never meet."""
    check_inputs(a, b)
    if not bbox_intersects(bbox_inflate(a.bbox, EPSILON), b.bbox):
        logger.debug("bounding boxes disjoint, no coverage")
        return []
    return CoverageWalk(a, b).run()


def pairwise_coverage(a: Poly, b: Poly) -> list[PairedSpan]:
    """Overlap of every whole-segment pair, in (i, j) order.

    Does not rely on cyclic traversal, so open polys work too. Only the
    piece earliest along A is reported for arcs that meet twice.
    """
    spans = []
    for i in range(len(a)):
        for j in range(len(b)):
            span = overlap(SegSlice(a, i), SegSlice(b, j))
            if span is not None:
                spans.append(span)
    return spans
