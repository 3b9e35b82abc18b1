"""Tests for curves/poly.py: Poly container and path parsing."""
import pytest
from curves.geometry import GeometryError, pt_eq
from curves.poly import Poly
from curves.types import LineSeg, ArcSeg, CircleSeg


class TestParse:
    def test_single_horizontal_line(self):
        p = Poly.parse("M0,0 H100")
        assert len(p) == 1
        assert p[0] == LineSeg((0.0, 0.0), (100.0, 0.0))
        assert not p.is_closed

    def test_closed_square(self, square):
        assert len(square) == 4
        assert square[3] == LineSeg((0.0, 100.0), (0.0, 0.0))
        assert square.is_closed

    def test_relative_commands(self):
        p = Poly.parse("m10,10 h5 v5 h-5 z")
        assert [s.end for s in p] == [(15, 10), (15, 15), (10, 15), (10, 10)]

    def test_repeated_coordinates(self):
        p = Poly.parse("M0,0 L3,4 5,0")
        assert len(p) == 2
        assert p[1] == LineSeg((3.0, 4.0), (5.0, 0.0))

    def test_pairs_after_move_are_lines(self):
        p = Poly.parse("M0,0 10,0 10,10")
        assert [s.end for s in p] == [(10, 0), (10, 10)]

    def test_no_space_between_commands(self):
        assert Poly.parse("M-10,0H90")[0] == LineSeg((-10.0, 0.0), (90.0, 0.0))

    def test_small_ccw_arc(self):
        p = Poly.parse("M1,0 A1,1 0 0 1 0,1")
        arc = p[0]
        assert isinstance(arc, ArcSeg)
        assert arc.direction == "CCW"
        assert pt_eq(arc.center, (0, 0))

    def test_large_arc_flips_center(self):
        arc = Poly.parse("M1,0 A1,1 0 1 1 0,1")[0]
        assert pt_eq(arc.center, (1, 1))

    def test_cw_arc(self):
        arc = Poly.parse("M0,1 A1,1 0 0 0 1,0")[0]
        assert arc.direction == "CW"
        assert pt_eq(arc.center, (0, 0))

    def test_half_circle_slot(self, slot):
        assert [type(s) for s in slot] == [LineSeg, ArcSeg, LineSeg, ArcSeg]
        assert pt_eq(slot[1].center, (100, 50))
        assert pt_eq(slot[3].center, (0, 50))
        assert slot.is_closed

    def test_empty_path(self):
        assert Poly.parse("").is_empty


class TestParseErrors:
    def test_command_before_move(self):
        with pytest.raises(GeometryError, match="before any M"):
            Poly.parse("H100")

    def test_elliptical_arc(self):
        with pytest.raises(GeometryError, match="circular arcs only"):
            Poly.parse("M0,0 A1,2 0 0 1 5,5")

    def test_truncated_data(self):
        with pytest.raises(GeometryError, match="ended early"):
            Poly.parse("M0,0 L5")

    def test_unsupported_command(self):
        with pytest.raises(GeometryError, match="Unsupported path command"):
            Poly.parse("M0,0 Q1,1 2,2")

    def test_zero_length_segment(self):
        with pytest.raises(GeometryError, match="Zero-length"):
            Poly.parse("M0,0 H0")


class TestPoly:
    def test_next_index_wraps(self, square):
        assert square.next_index(2) == 3
        assert square.next_index(3) == 0

    def test_bbox(self, slot):
        xmin, ymin, xmax, ymax = slot.bbox
        assert abs(xmin + 50) < 1e-9 and abs(xmax - 150) < 1e-9
        assert abs(ymin) < 1e-9 and abs(ymax - 100) < 1e-9

    def test_empty_bbox_raises(self):
        with pytest.raises(GeometryError, match="Empty"):
            Poly([]).bbox

    def test_circle(self):
        c = Poly.circle((0, 0), 2.0)
        assert isinstance(c[0], CircleSeg)
        assert c.bbox == (-2, -2, 2, 2)
        assert c.is_closed

    def test_iteration_and_indexing(self, square):
        assert list(square)[1] is square[1]
