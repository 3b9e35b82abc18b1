"""Tests for the compute_coverage.py and gen_coverage_svg.py scripts."""
import pytest
from curves.poly import Poly
from polydiff import compute_coverage
from compute_coverage import main, format_span
from gen_coverage_svg import render_coverage, main as svg_main


class TestComputeCoverageMain:
    def test_prints_spans(self, capsys):
        assert main(["M0,0 H100", "M10,0 H110"]) == 0
        assert capsys.readouterr().out.strip() == "[(0.1,1)(0,0.9)]"

    def test_rebased(self, capsys):
        assert main(["M0,0 H100 V100", "M0,0 H100 V50", "--rebased"]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out[0] == "A 0..1  B 0..1"
        assert out[1] == "A 1..1.5  B 1..2"

    def test_swap(self, capsys):
        assert main(["M0,0 H100", "M0,0 H200", "--swap"]) == 0
        assert capsys.readouterr().out.strip() == "[(0,0.5)(0,1)]"

    def test_no_coverage(self, capsys):
        assert main(["M0,0 H100", "M0,10 H100"]) == 0
        assert capsys.readouterr().out.strip() == "no coverage"

    def test_unsupported_reports_error(self, capsys):
        assert main(["M0,0 H100", "M100,0 H0"]) == 2
        assert "Anti-parallel" in capsys.readouterr().err

    def test_bad_path_reports_error(self, capsys):
        assert main(["M0,0 H100", "L5,5"]) == 2
        assert "before any M" in capsys.readouterr().err


def test_format_span_plain_matches_str():
    (span,) = compute_coverage(Poly.parse("M0,0 H100"), Poly.parse("M0,0 H200"))
    assert format_span(span) == str(span) == "[(0,1)(0,0.5)]"


class TestRenderCoverage:
    def test_svg_structure(self, square, square_shifted):
        spans = compute_coverage(square, square_shifted)
        svg = render_coverage(square, square_shifted, spans, title="A & B")
        assert svg.startswith("<svg") and svg.endswith("</svg>")
        assert svg.count("<polyline") == len(spans) + len(square) + len(square_shifted)
        assert "A &amp; B" in svg
        assert "2 covered span(s)" in svg

    def test_main_writes_file(self, tmp_path, capsys):
        out = tmp_path / "diff.svg"
        assert svg_main(["M0,0 H100 V100 H0 Z", "M50,0 H150 V100 H50 Z", "-o", str(out)]) == 0
        assert out.read_text().startswith("<svg")
        assert "Coverage written to" in capsys.readouterr().out
