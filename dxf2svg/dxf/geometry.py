"""
DXF Geometry - Pomocnicze funkcje geometryczne
==============================================
Punkty, odległości i bounding boxy łuków, elips i łuków z bulge.
"""

import math
from typing import Iterable, NamedTuple, Optional, Sequence, Tuple

from ezdxf.math import bulge_to_arc

Point = Tuple[float, float]

ORIGIN: Point = (0.0, 0.0)

TWO_PI = 2.0 * math.pi


def to_point(value) -> Point:
    """Zamień Vec2/Vec3/krotkę na punkt 2D (x, y)"""
    return (float(value[0]), float(value[1]))


def distance(p1: Point, p2: Point) -> float:
    """Odległość między dwoma punktami"""
    return math.hypot(p2[0] - p1[0], p2[1] - p1[1])


def points_equal(p1: Point, p2: Point, tol: float = 0.0) -> bool:
    """Porównanie punktów z tolerancją bezwzględną (0 = dokładne)"""
    return abs(p1[0] - p2[0]) <= tol and abs(p1[1] - p2[1]) <= tol


class BoundingBox(NamedTuple):
    """Bounding box (min_x, min_y, max_x, max_y)"""
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def center(self) -> Point:
        """Środek bounding boxa"""
        return ((self.min_x + self.max_x) / 2.0, (self.min_y + self.max_y) / 2.0)

    def union(self, other: "BoundingBox") -> "BoundingBox":
        return BoundingBox(
            min(self.min_x, other.min_x),
            min(self.min_y, other.min_y),
            max(self.max_x, other.max_x),
            max(self.max_y, other.max_y),
        )


def bounds_of_points(points: Iterable[Point]) -> Optional[BoundingBox]:
    """Bounding box listy punktów, None dla pustej listy"""
    xs = []
    ys = []
    for x, y in points:
        xs.append(x)
        ys.append(y)
    if not xs:
        return None
    return BoundingBox(min(xs), min(ys), max(xs), max(ys))


def merge_bounds(boxes: Iterable[Optional[BoundingBox]]) -> Optional[BoundingBox]:
    """Suma bounding boxów (pomija None)"""
    result = None
    for box in boxes:
        if box is None:
            continue
        result = box if result is None else result.union(box)
    return result


def normalize_end_angle(start: float, end: float) -> float:
    """Przesuń kąt końcowy o 2π tak, aby end >= start"""
    while end < start:
        end += TWO_PI
    return end


def ellipse_point(center: Point, major_axis: Point, ratio: float, t: float) -> Point:
    """Punkt elipsy (obróconej zgodnie z osią główną) dla parametru t"""
    ux, uy = major_axis
    vx, vy = -uy * ratio, ux * ratio
    cos_t = math.cos(t)
    sin_t = math.sin(t)
    return (center[0] + cos_t * ux + sin_t * vx, center[1] + cos_t * uy + sin_t * vy)


def ellipse_arc_bounds(
    center: Point,
    major_axis: Point,
    ratio: float,
    start: float,
    end: float
) -> BoundingBox:
    """
    Dokładny bounding box łuku eliptycznego.

    Args:
        center: Środek elipsy
        major_axis: Wektor półosi wielkiej
        ratio: Stosunek półosi małej do wielkiej
        start, end: Parametry w radianach (łuk przeciwnie do ruchu wskazówek)

    Returns:
        BoundingBox łuku
    """
    end = normalize_end_angle(start, end)
    ux, uy = major_axis
    vx, vy = -uy * ratio, ux * ratio

    params = [start, end]
    # Ekstrema x(t) i y(t): pochodna równa zero
    for base in (math.atan2(vx, ux), math.atan2(vy, uy)):
        for t in (base, base + math.pi):
            shifted = start + (t - start) % TWO_PI
            if shifted <= end:
                params.append(shifted)

    return bounds_of_points(ellipse_point(center, major_axis, ratio, t) for t in params)


def circle_bounds(center: Point, radius: float) -> BoundingBox:
    return BoundingBox(
        center[0] - radius, center[1] - radius,
        center[0] + radius, center[1] + radius
    )


def bulge_arc_bounds(p1: Point, p2: Point, bulge: float) -> BoundingBox:
    """Bounding box łuku zdefiniowanego przez bulge (z LWPOLYLINE)"""
    if bulge == 0.0 or distance(p1, p2) < 1e-10:
        return bounds_of_points([p1, p2])
    center, start_angle, end_angle, radius = bulge_to_arc(p1, p2, bulge)
    return ellipse_arc_bounds(to_point(center), (radius, 0.0), 1.0, start_angle, end_angle)


def vertices_bounds(vertices: Sequence, is_closed: bool) -> Optional[BoundingBox]:
    """
    Bounding box polilinii z bulge.

    Args:
        vertices: Lista wierzchołków (x, y, bulge)
        is_closed: Czy polilinia jest zamknięta (łuk ostatni -> pierwszy)
    """
    if not vertices:
        return None
    boxes = [bounds_of_points((v[0], v[1]) for v in vertices)]
    pairs = list(zip(vertices, vertices[1:]))
    if is_closed and len(vertices) > 1:
        pairs.append((vertices[-1], vertices[0]))
    for last, nxt in pairs:
        if last[2] != 0.0:
            boxes.append(bulge_arc_bounds((last[0], last[1]), (nxt[0], nxt[1]), last[2]))
    return merge_bounds(boxes)


__all__ = [
    'Point',
    'ORIGIN',
    'TWO_PI',
    'BoundingBox',
    'to_point',
    'distance',
    'points_equal',
    'bounds_of_points',
    'merge_bounds',
    'normalize_end_angle',
    'ellipse_point',
    'ellipse_arc_bounds',
    'circle_bounds',
    'bulge_arc_bounds',
    'vertices_bounds',
]
