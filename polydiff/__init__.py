"""Coverage between two polys: coincident line and arc spans."""

from .spans import SegSlice, PairedSpan, spans_match
from .overlap import aligned, overlap
from .walk import WalkState, CoverageWalk, compute_coverage, pairwise_coverage
