"""Render two polys and the coverage between them as an SVG page.

    python gen_coverage_svg.py "M0,0 H100 V50 H0 Z" "M50,0 H150 V50 H50 Z" -o diff.svg

Poly A is drawn in grey, poly B dashed blue, covered spans in thick green.
"""
import argparse, logging, os, sys
from typing import NamedTuple
from xml.sax.saxutils import escape

from curves.geometry import GeometryError, segment_polyline, bbox_union
from curves.poly import Poly
from curves.svg import make_svg_transform, W, H
from polydiff import compute_coverage, PairedSpan

_DIR = os.path.dirname(os.path.abspath(__file__))


class LayerStyle(NamedTuple):
    stroke: str; width: float
    dash: str | None = None

STYLE_A = LayerStyle("#9e9e9e", 2.0)
STYLE_B = LayerStyle("#1565c0", 1.2, "6,4")
STYLE_SPAN = LayerStyle("#2e7d32", 5.0)


def _polyline(lines: list, pts, to_svg, style: LayerStyle, opacity: float = 1.0):
    svg_pts = " ".join(f"{to_svg(x, y)[0]:.1f},{to_svg(x, y)[1]:.1f}" for x, y in pts)
    dash = f' stroke-dasharray="{style.dash}"' if style.dash else ""
    op = f' stroke-opacity="{opacity}"' if opacity < 1.0 else ""
    lines.append(f'<polyline points="{svg_pts}" fill="none" stroke="{style.stroke}"'
                 f' stroke-width="{style.width}" stroke-linecap="round"{dash}{op}/>')


def render_coverage(a: Poly, b: Poly, spans: list[PairedSpan], title: str = "") -> str:
    """Return a complete SVG document showing a, b and the covered spans of a."""
    to_svg = make_svg_transform(bbox_union([a.bbox, b.bbox]))
    lines = [f'<svg xmlns="http://www.w3.org/2000/svg" width="{W}" height="{H}"'
             f' viewBox="0 0 {W} {H}">',
             f'<rect width="{W}" height="{H}" fill="white"/>']

    # Covered spans underneath so both outlines stay visible on top
    for span in spans:
        _polyline(lines, segment_polyline(span.seg_a, span.start_lie_a, span.end_lie_a),
                  to_svg, STYLE_SPAN, opacity=0.6)
    for seg in a:
        _polyline(lines, segment_polyline(seg), to_svg, STYLE_A)
    for seg in b:
        _polyline(lines, segment_polyline(seg), to_svg, STYLE_B)

    # Segment start dots on A, labelled with the segment index
    for i, seg in enumerate(a):
        sx, sy = to_svg(*segment_polyline(seg)[0])
        lines.append(f'<circle cx="{sx:.1f}" cy="{sy:.1f}" r="2.5" fill="{STYLE_A.stroke}"/>')
        lines.append(f'<text x="{sx+4:.1f}" y="{sy-4:.1f}" font-family="Arial" font-size="9"'
                     f' fill="#424242">A{i}</text>')

    if title:
        lines.append(f'<text x="{W/2:.1f}" y="24" text-anchor="middle" font-family="Arial"'
                     f' font-size="12" fill="#212121">{escape(title)}</text>')
    lines.append(f'<text x="{W-20}" y="{H-14}" text-anchor="end" font-family="Arial"'
                 f' font-size="9" fill="#555">{len(spans)} covered span(s)</text>')
    lines.append('</svg>')
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("poly_a"); parser.add_argument("poly_b")
    parser.add_argument("-o", "--output", default=os.path.join(_DIR, "coverage.svg"))
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO,
                        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    try:
        a, b = Poly.parse(args.poly_a), Poly.parse(args.poly_b)
        spans = compute_coverage(a, b)
    except GeometryError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    with open(args.output, "w") as f:
        f.write(render_coverage(a, b, spans, title=f"A: {args.poly_a}   B: {args.poly_b}"))
    print(f"Coverage written to {args.output}")
    for span in spans:
        print(f"  {span}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
