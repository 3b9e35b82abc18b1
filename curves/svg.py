"""SVG transform factory and page constants."""
from typing import Callable
from .types import BBox

# US Letter landscape at 72 dpi (11" x 8.5")
W, H = 792, 612

MARGIN = 54  # 0.75" on every side


def make_svg_transform(bbox: BBox, margin: float = MARGIN) -> Callable[[float, float], tuple[float, float]]:
    """Create to_svg closure fitting bbox onto the page, y axis pointing up."""
    bw = max(bbox[2]-bbox[0], 1e-9); bh = max(bbox[3]-bbox[1], 1e-9)
    s = min((W-2*margin)/bw, (H-2*margin)/bh)
    px = (W - s*bw)/2 - s*bbox[0]
    py = (H + s*bh)/2 + s*bbox[1]
    def to_svg(x: float, y: float) -> tuple[float, float]:
        return (px + x*s, py - y*s)
    return to_svg
