"""
DXF Entities - Dataclasses dla reprezentacji geometrii DXF
==========================================================
Model entity niezależny od parsera. Każda klasa ma znacznik rodzaju
(EntityType), wspólne pola (warstwa, kolor, grubość, handle) oraz
geometrię właściwą dla rodzaju.
"""

import math
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import ClassVar, List, NamedTuple, Optional, Union

from .geometry import (
    BoundingBox, Point, ORIGIN, TWO_PI,
    bounds_of_points, circle_bounds, ellipse_arc_bounds,
    merge_bounds, vertices_bounds,
)


class EntityType(Enum):
    """Typy entities DXF"""
    ARC = "ARC"
    CIRCLE = "CIRCLE"
    ELLIPSE = "ELLIPSE"
    LINE = "LINE"
    LWPOLYLINE = "LWPOLYLINE"
    POLYLINE = "POLYLINE"
    SPLINE = "SPLINE"
    HATCH = "HATCH"
    TEXT = "TEXT"
    OTHER = "OTHER"


class HatchStyle(IntEnum):
    """Styl wypełnienia HATCH (kod grupy 75)"""
    ODD_PARITY = 0   # Normal - otwory wykluczane naprzemiennie
    OUTERMOST = 1    # Tylko najbardziej zewnętrzny obszar
    ENTIRE_AREA = 2  # Ignoruj struktury wewnętrzne


class EdgeType(Enum):
    """Typy krawędzi konturu HATCH"""
    LINE = "LINE"
    ARC = "ARC"
    ELLIPSE = "ELLIPSE"
    SPLINE = "SPLINE"


class Vertex(NamedTuple):
    """Wierzchołek polilinii z bulge (tan(kąt/4)) do następnego wierzchołka"""
    x: float
    y: float
    bulge: float = 0.0

    @property
    def point(self) -> Point:
        return (self.x, self.y)


@dataclass
class Spline:
    """
    Krzywa B-spline (NURBS).

    Wagi są przechowywane, ale nie są używane przy konwersji.
    """
    degree: int
    control_points: List[Point] = field(default_factory=list)
    knots: List[float] = field(default_factory=list)
    weights: List[float] = field(default_factory=list)

    @property
    def bounds(self) -> Optional[BoundingBox]:
        """Bounding box wielokąta kontrolnego (krzywa leży w jego otoczce)"""
        return bounds_of_points(self.control_points)


# ============================================================
# Krawędzie i kontury HATCH
# ============================================================

@dataclass
class LineEdge:
    start: Point
    end: Point

    edge_type: ClassVar[EdgeType] = EdgeType.LINE

    @property
    def start_point(self) -> Point:
        return self.start

    @property
    def bounds(self) -> Optional[BoundingBox]:
        return bounds_of_points([self.start, self.end])


@dataclass
class ArcEdge:
    """Łuk kołowy konturu (kąty w stopniach)"""
    center: Point
    radius: float
    start_angle: float
    end_angle: float
    ccw: bool = True

    edge_type: ClassVar[EdgeType] = EdgeType.ARC

    @property
    def bounds(self) -> Optional[BoundingBox]:
        return circle_bounds(self.center, self.radius)


@dataclass
class EllipseEdge:
    """Łuk eliptyczny konturu (kąty w stopniach)"""
    center: Point
    major_axis: Point
    ratio: float
    start_angle: float
    end_angle: float
    ccw: bool = True

    edge_type: ClassVar[EdgeType] = EdgeType.ELLIPSE

    @property
    def bounds(self) -> Optional[BoundingBox]:
        return ellipse_arc_bounds(self.center, self.major_axis, self.ratio, 0.0, TWO_PI)


@dataclass
class SplineEdge:
    spline: Spline

    edge_type: ClassVar[EdgeType] = EdgeType.SPLINE

    @property
    def start_point(self) -> Point:
        return self.spline.control_points[0]

    @property
    def bounds(self) -> Optional[BoundingBox]:
        return self.spline.bounds


BoundaryEdge = Union[LineEdge, ArcEdge, EllipseEdge, SplineEdge]


@dataclass
class PolylineBoundary:
    """Kontur HATCH w postaci polilinii z bulge"""
    vertices: List[Vertex] = field(default_factory=list)
    is_closed: bool = True

    @property
    def bounds(self) -> Optional[BoundingBox]:
        return vertices_bounds(self.vertices, self.is_closed)


@dataclass
class EdgeBoundary:
    """Kontur HATCH złożony z krawędzi (ciągły i domknięty)"""
    edges: List[BoundaryEdge] = field(default_factory=list)

    @property
    def bounds(self) -> Optional[BoundingBox]:
        return merge_bounds(edge.bounds for edge in self.edges)


BoundaryPath = Union[PolylineBoundary, EdgeBoundary]


# ============================================================
# Entities
# ============================================================

@dataclass
class DXFEntity:
    """
    Bazowa entity DXF.

    color: indeks ACI (256 = ByLayer, 0 = ByBlock)
    """
    layer: str = "0"
    color: int = 256
    thickness: Optional[float] = None
    handle: str = ""

    entity_type: ClassVar[EntityType] = EntityType.OTHER

    @property
    def bounds(self) -> Optional[BoundingBox]:
        return None


@dataclass
class LineEntity(DXFEntity):
    start: Point = ORIGIN
    end: Point = ORIGIN

    entity_type: ClassVar[EntityType] = EntityType.LINE

    @property
    def bounds(self) -> Optional[BoundingBox]:
        return bounds_of_points([self.start, self.end])


@dataclass
class ArcEntity(DXFEntity):
    """Łuk kołowy - kąty w stopniach, jak w DXF"""
    center: Point = ORIGIN
    radius: float = 0.0
    start_angle: float = 0.0
    end_angle: float = 0.0

    entity_type: ClassVar[EntityType] = EntityType.ARC

    @property
    def bounds(self) -> Optional[BoundingBox]:
        return ellipse_arc_bounds(
            self.center, (self.radius, 0.0), 1.0,
            math.radians(self.start_angle), math.radians(self.end_angle)
        )


@dataclass
class CircleEntity(DXFEntity):
    center: Point = ORIGIN
    radius: float = 0.0

    entity_type: ClassVar[EntityType] = EntityType.CIRCLE

    @property
    def bounds(self) -> Optional[BoundingBox]:
        return circle_bounds(self.center, self.radius)


@dataclass
class EllipseEntity(DXFEntity):
    """Elipsa - parametry start/end w radianach"""
    center: Point = ORIGIN
    major_axis: Point = (1.0, 0.0)
    ratio: float = 1.0
    start_param: float = 0.0
    end_param: float = TWO_PI

    entity_type: ClassVar[EntityType] = EntityType.ELLIPSE

    @property
    def bounds(self) -> Optional[BoundingBox]:
        return ellipse_arc_bounds(
            self.center, self.major_axis, self.ratio, self.start_param, self.end_param
        )


@dataclass
class LWPolylineEntity(DXFEntity):
    vertices: List[Vertex] = field(default_factory=list)
    is_closed: bool = False

    entity_type: ClassVar[EntityType] = EntityType.LWPOLYLINE

    @property
    def bounds(self) -> Optional[BoundingBox]:
        return vertices_bounds(self.vertices, self.is_closed)


@dataclass
class PolylineEntity(LWPolylineEntity):
    """POLYLINE (stary format) - geometria jak LWPOLYLINE"""

    entity_type: ClassVar[EntityType] = EntityType.POLYLINE


@dataclass
class SplineEntity(DXFEntity):
    spline: Spline = field(default_factory=lambda: Spline(degree=3))

    entity_type: ClassVar[EntityType] = EntityType.SPLINE

    @property
    def bounds(self) -> Optional[BoundingBox]:
        return self.spline.bounds


@dataclass
class HatchEntity(DXFEntity):
    """
    Wypełniony obszar.

    transparency: 0.0 = nieprzezroczysty, 1.0 = całkowicie przezroczysty
    """
    boundaries: List[BoundaryPath] = field(default_factory=list)
    hatch_style: HatchStyle = HatchStyle.ODD_PARITY
    transparency: float = 0.0

    entity_type: ClassVar[EntityType] = EntityType.HATCH

    @property
    def bounds(self) -> Optional[BoundingBox]:
        return merge_bounds(boundary.bounds for boundary in self.boundaries)


@dataclass
class TextEntity(DXFEntity):
    """TEXT lub MTEXT - opis umieszczony w punkcie wstawienia"""
    text: str = ""
    insert: Point = ORIGIN

    entity_type: ClassVar[EntityType] = EntityType.TEXT

    @property
    def bounds(self) -> Optional[BoundingBox]:
        return BoundingBox(self.insert[0], self.insert[1], self.insert[0], self.insert[1])


@dataclass
class OtherEntity(DXFEntity):
    """Entity bez konwertera - bounding box opcjonalnie policzony przez parser"""
    dxftype: str = ""
    extents: Optional[BoundingBox] = None

    entity_type: ClassVar[EntityType] = EntityType.OTHER

    @property
    def bounds(self) -> Optional[BoundingBox]:
        return self.extents


# Eksporty
__all__ = [
    'EntityType',
    'HatchStyle',
    'EdgeType',
    'Vertex',
    'Spline',
    'LineEdge',
    'ArcEdge',
    'EllipseEdge',
    'SplineEdge',
    'BoundaryEdge',
    'PolylineBoundary',
    'EdgeBoundary',
    'BoundaryPath',
    'DXFEntity',
    'LineEntity',
    'ArcEntity',
    'CircleEntity',
    'EllipseEntity',
    'LWPolylineEntity',
    'PolylineEntity',
    'SplineEntity',
    'HatchEntity',
    'TextEntity',
    'OtherEntity',
]
