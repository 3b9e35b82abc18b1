"""Print the coverage between two polys given as path strings.

    python compute_coverage.py "M0,0 H100" "M10,0 H110"

Each span prints as [(startA,endA)(startB,endB)]; --rebased prints
poly-global positions (segment index + lie) instead.
"""
import argparse, logging, sys

from curves.geometry import GeometryError
from curves.poly import Poly
from polydiff import compute_coverage

logger = logging.getLogger("compute_coverage")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("poly_a", help="path data of the old poly, e.g. 'M0,0 H100'")
    parser.add_argument("poly_b", help="path data of the new poly")
    parser.add_argument("--swap", action="store_true", help="compute coverage of B against A")
    parser.add_argument("--rebased", action="store_true",
                        help="print segment index + lie instead of per-segment lies")
    parser.add_argument("-v", "--verbose", action="store_true", help="log walk transitions")
    return parser


def format_span(span, rebased: bool = False) -> str:
    if not rebased:
        return str(span)
    sa, ea, sb, eb = span.rebased()
    return f"A {sa:.6g}..{ea:.6g}  B {sb:.6g}..{eb:.6g}"


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    try:
        a, b = Poly.parse(args.poly_a), Poly.parse(args.poly_b)
        if args.swap:
            a, b = b, a
        for name, p in (("A", a), ("B", b)):
            if not p.is_empty and not p.is_closed:
                logger.debug("poly %s is open; treating it as a loop", name)
        spans = compute_coverage(a, b)
    except GeometryError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    if not spans:
        print("no coverage")
    for span in spans:
        print(format_span(span, args.rebased))
    return 0


if __name__ == "__main__":
    sys.exit(main())
