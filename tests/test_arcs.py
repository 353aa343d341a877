"""Testy łuków, elips i łuków z bulge"""

import math

import pytest

from dxf2svg.dxf.arcs import (
    ellipse_arc_path, ellipse_arc_segments, full_ellipse_path,
    segment_from_bulge, segments_from_vertices,
)
from dxf2svg.dxf.entities import Vertex
from dxf2svg.dxf.svg_path import ArcTo, LineTo, MoveTo


def arcs_of(segments):
    return [s for s in segments if isinstance(s, ArcTo)]


# ============================================================
# Łuki eliptyczne
# ============================================================

def test_quarter_arc_single_segment():
    segments = ellipse_arc_segments((0, 0), (1, 0), 1.0, 0.0, math.pi / 2)
    assert isinstance(segments[0], MoveTo)
    assert segments[0].point == pytest.approx((1.0, 0.0))
    assert len(arcs_of(segments)) == 1
    arc = segments[1]
    assert not arc.is_large_arc
    assert arc.is_counter_clockwise
    assert arc.end == pytest.approx((0.0, 1.0))


def test_three_quarter_arc_is_large():
    segments = ellipse_arc_segments((0, 0), (1, 0), 1.0, 0.0, 3 * math.pi / 2)
    assert len(arcs_of(segments)) == 1
    assert segments[1].is_large_arc
    assert segments[1].is_counter_clockwise


def test_semicircle_splits_at_midpoint():
    segments = ellipse_arc_segments((0, 0), (1, 0), 1.0, 0.0, math.pi)
    arcs = arcs_of(segments)
    assert len(segments) == 3
    assert len(arcs) == 2
    assert all(not arc.is_large_arc for arc in arcs)
    assert arcs[0].end == pytest.approx((0.0, 1.0))
    assert arcs[1].end == pytest.approx((-1.0, 0.0))


def test_near_semicircle_splits():
    segments = ellipse_arc_segments((0, 0), (1, 0), 1.0, 0.0, math.pi + math.radians(0.5))
    assert len(arcs_of(segments)) == 2
    segments = ellipse_arc_segments((0, 0), (1, 0), 1.0, 0.0, math.pi - math.radians(0.9))
    assert len(arcs_of(segments)) == 2


def test_outside_split_tolerance_single_arc():
    segments = ellipse_arc_segments((0, 0), (1, 0), 1.0, 0.0, math.pi + math.radians(2.0))
    assert len(arcs_of(segments)) == 1
    assert segments[1].is_large_arc


def test_end_angle_normalized():
    # 90° -> 0° przechodzi przez 360°
    segments = ellipse_arc_segments((0, 0), (1, 0), 1.0, math.pi / 2, 0.0)
    arc = segments[1]
    assert arc.is_large_arc
    assert arc.is_counter_clockwise
    assert segments[0].point == pytest.approx((0.0, 1.0))
    assert arc.end == pytest.approx((1.0, 0.0))


def test_negative_start_angle_normalized():
    segments = ellipse_arc_segments((0, 0), (1, 0), 1.0, -math.pi / 4, math.pi / 4)
    assert len(arcs_of(segments)) == 1
    assert not segments[1].is_large_arc
    assert segments[1].is_counter_clockwise


def test_axis_lengths():
    segments = ellipse_arc_segments((0, 0), (3, 4), 0.5, 0.0, math.pi / 2)
    arc = segments[1]
    assert arc.radius_x == pytest.approx(5.0)
    assert arc.radius_y == pytest.approx(2.5)


def test_points_offset_by_center():
    segments = ellipse_arc_segments((1, 1), (2, 0), 0.5, 0.0, math.pi / 2)
    assert segments[0].point == pytest.approx((3.0, 1.0))
    assert segments[1].end == pytest.approx((1.0, 2.0))


def test_axis_rotation_uses_y_component():
    horizontal = ellipse_arc_segments((0, 0), (2, 0), 0.5, 0.0, math.pi / 2)
    assert horizontal[1].x_axis_rotation == 0.0
    vertical = ellipse_arc_segments((0, 0), (0, 2), 0.5, 0.0, math.pi / 2)
    assert vertical[1].x_axis_rotation == pytest.approx(math.atan2(2, 2))
    downward = ellipse_arc_segments((0, 0), (1, -1), 0.5, 0.0, math.pi / 2)
    assert downward[1].x_axis_rotation == pytest.approx(math.atan2(-1, -1))


def test_ellipse_arc_path_text():
    path = ellipse_arc_path((0, 0), (1, 0), 1.0, 0.0, math.pi / 2)
    assert str(path).startswith("M 1.0 0.0 A 1.0 1.0 0.0 0 1 ")


def test_full_ellipse_four_arcs():
    path = full_ellipse_path((0, 0), (2, 0), 0.5)
    assert len(path) == 5
    assert isinstance(path.segments[0], MoveTo)
    assert len(arcs_of(path)) == 4
    assert path.segments[0].point == pytest.approx((2.0, 0.0))
    assert path.end_point == pytest.approx((2.0, 0.0))
    assert path.segments[2].end == pytest.approx((-2.0, 0.0))


# ============================================================
# Bulge
# ============================================================

def test_zero_bulge_is_line():
    segment = segment_from_bulge((0, 0), (3, 4), 0.0)
    assert segment == LineTo((3, 4))


def test_coincident_points_are_line():
    segment = segment_from_bulge((1, 1), (1, 1), 0.5)
    assert isinstance(segment, LineTo)


def test_positive_bulge_counter_clockwise():
    segment = segment_from_bulge((0, 0), (2, 0), 0.5)
    assert isinstance(segment, ArcTo)
    assert segment.is_counter_clockwise
    assert not segment.is_large_arc
    # sin(2 * atan(0.5)) = 0.8
    assert segment.radius_x == pytest.approx(1.25)
    assert segment.radius_y == segment.radius_x
    assert segment.x_axis_rotation == 0.0
    assert segment.end == (2, 0)


def test_negative_bulge_clockwise():
    segment = segment_from_bulge((0, 0), (2, 0), -1.0)
    assert not segment.is_counter_clockwise
    assert segment.radius_x == pytest.approx(1.0)


def test_large_bulge_is_large_arc():
    segment = segment_from_bulge((0, 0), (2, 0), 2.0)
    assert segment.is_large_arc


def test_closed_square(square_vertices):
    segments = segments_from_vertices(square_vertices, True)
    assert len(segments) == 5
    assert isinstance(segments[0], MoveTo)
    assert all(isinstance(s, LineTo) for s in segments[1:])
    assert segments[-1].end_point == (0.0, 0.0)
    ends = [s.end_point for s in segments]
    assert all(a != b for a, b in zip(ends, ends[1:]))


def test_open_square(square_vertices):
    segments = segments_from_vertices(square_vertices, False)
    assert len(segments) == 4
    assert segments[-1].end_point == (0.0, 1.0)


def test_closing_segment_uses_last_bulge():
    vertices = [Vertex(0.0, 0.0), Vertex(2.0, 0.0, 1.0)]
    segments = segments_from_vertices(vertices, True)
    assert isinstance(segments[1], LineTo)
    assert isinstance(segments[2], ArcTo)
    assert segments[2].end == (0.0, 0.0)


def test_plain_tuples_accepted():
    segments = segments_from_vertices([(0, 0, 0.5), (2, 0, 0)], False)
    assert isinstance(segments[1], ArcTo)


def test_no_vertices():
    assert segments_from_vertices([], True) == []
