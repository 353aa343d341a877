"""
DXF Arcs - Łuki, elipsy i łuki z bulge jako segmenty ścieżki SVG
================================================================
Obsługuje: ARC, CIRCLE, ELLIPSE oraz wierzchołki polilinii z bulge.
"""

import math
from typing import List, Sequence

from config import settings

from .geometry import Point, distance, normalize_end_angle
from .svg_path import ArcTo, LineTo, MoveTo, PathSegment, SvgPath


def _point_at(center: Point, major_length: float, minor_length: float, angle: float) -> Point:
    return (center[0] + math.cos(angle) * major_length,
            center[1] + math.sin(angle) * minor_length)


def ellipse_arc_segments(
    center: Point,
    major_axis: Point,
    minor_axis_ratio: float,
    start_angle: float,
    end_angle: float
) -> List[PathSegment]:
    """
    Konwertuj łuk eliptyczny na segmenty: MoveTo + jeden lub dwa ArcTo.

    Args:
        center: Środek elipsy
        major_axis: Wektor półosi wielkiej (dla łuku kołowego: (r, 0))
        minor_axis_ratio: Stosunek półosi małej do wielkiej
        start_angle, end_angle: Kąty w radianach

    Returns:
        Lista segmentów zaczynająca się od MoveTo
    """
    # Flagi large-arc i sweep zakładają end >= start
    end_angle = normalize_end_angle(start_angle, end_angle)

    # Obrót osi liczony z dwóch składowych Y - zachowane bez zmian (zob. DESIGN.md)
    axis_angle = math.atan2(major_axis[1], major_axis[1])
    major_length = math.hypot(major_axis[0], major_axis[1])
    minor_length = major_length * minor_axis_ratio

    start = _point_at(center, major_length, minor_length, start_angle)
    end = _point_at(center, major_length, minor_length, end_angle)

    enclosed_angle = end_angle - start_angle
    is_large_arc = enclosed_angle > math.pi
    is_counter_clockwise = end_angle > start_angle

    segments: List[PathSegment] = [MoveTo(start)]
    split_tolerance = math.radians(settings.SEMICIRCLE_SPLIT_TOLERANCE_DEG)
    if abs(math.pi - enclosed_angle) <= split_tolerance:
        # Prawie półokrąg - dwie połówki, bez artefaktów renderera
        mid_angle = (start_angle + end_angle) / 2.0
        mid = _point_at(center, major_length, minor_length, mid_angle)
        segments.append(ArcTo(major_length, minor_length, axis_angle, False, is_counter_clockwise, mid))
        segments.append(ArcTo(major_length, minor_length, axis_angle, False, is_counter_clockwise, end))
    else:
        segments.append(ArcTo(major_length, minor_length, axis_angle, is_large_arc, is_counter_clockwise, end))

    return segments


def ellipse_arc_path(
    center: Point,
    major_axis: Point,
    minor_axis_ratio: float,
    start_angle: float,
    end_angle: float
) -> SvgPath:
    """Ścieżka łuku eliptycznego (kąty w radianach)"""
    return SvgPath(ellipse_arc_segments(center, major_axis, minor_axis_ratio, start_angle, end_angle))


def full_ellipse_path(
    center: Point,
    major_axis: Point,
    minor_axis_ratio: float,
    start_angle: float = 0.0
) -> SvgPath:
    """
    Pełna elipsa/okrąg jako dwie połówki.

    Pojedynczy łuk o wspólnym początku i końcu nie jest rysowany,
    dlatego obwód składa się z dwóch łuków po π (każdy dzielony na dwa).
    """
    first = ellipse_arc_segments(center, major_axis, minor_axis_ratio,
                                 start_angle, start_angle + math.pi)
    second = ellipse_arc_segments(center, major_axis, minor_axis_ratio,
                                  start_angle + math.pi, start_angle + 2.0 * math.pi)
    return SvgPath(first + second[1:])


def segment_from_bulge(last: Point, next_point: Point, bulge: float = 0.0) -> PathSegment:
    """
    Segment między wierzchołkami polilinii.

    Args:
        last: Wierzchołek początkowy
        next_point: Wierzchołek końcowy
        bulge: Bulge wierzchołka początkowego (tan(kąt/4), znak = kierunek)

    Returns:
        LineTo dla bulge == 0 lub bardzo krótkiego odcinka, w innym razie ArcTo
    """
    dist = distance(last, next_point)
    if bulge == 0.0 or dist < settings.BULGE_MIN_DISTANCE:
        # Linia albo bardzo krótki łuk
        return LineTo(next_point)

    # Promień z trójkąta: środek okręgu, wierzchołek, środek cięciwy
    included_angle = math.atan(abs(bulge)) * 4.0
    is_large_arc = included_angle > math.pi
    is_counter_clockwise = bulge > 0.0

    opposite_length = dist / 2.0
    radius = opposite_length / math.sin(included_angle / 2.0)

    return ArcTo(radius, radius, 0.0, is_large_arc, is_counter_clockwise, next_point)


def segments_from_vertices(vertices: Sequence, is_closed: bool) -> List[PathSegment]:
    """
    Segmenty polilinii z bulge.

    Args:
        vertices: Wierzchołki (x, y, bulge)
        is_closed: Dodaj segment ostatni -> pierwszy

    Returns:
        MoveTo + jeden segment na parę wierzchołków; pusta lista bez wierzchołków
    """
    if not vertices:
        return []

    first = vertices[0]
    segments: List[PathSegment] = [MoveTo((first[0], first[1]))]
    last = first
    for vertex in vertices[1:]:
        segments.append(segment_from_bulge((last[0], last[1]), (vertex[0], vertex[1]), last[2]))
        last = vertex

    if is_closed and len(vertices) > 1:
        segments.append(segment_from_bulge((last[0], last[1]), (first[0], first[1]), last[2]))

    return segments


# Eksporty
__all__ = [
    'ellipse_arc_segments',
    'ellipse_arc_path',
    'full_ellipse_path',
    'segment_from_bulge',
    'segments_from_vertices',
]
