"""Tolerance and sampling constants.

Every lie, slope, center, radius and position comparison goes through
EPSILON; do not introduce local tolerances.
"""

EPSILON = 1e-6                    # shared geometric tolerance

ARC_N_PTS = 40                    # polyline points per full turn of arc
ARC_MIN_PTS = 4                   # never fewer than this per arc
