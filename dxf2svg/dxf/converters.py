"""
DXF Entity Converters - Konwersja entities DXF na ścieżki SVG
=============================================================
Obsługuje: LINE, ARC, CIRCLE, ELLIPSE, LWPOLYLINE, POLYLINE, SPLINE, HATCH
"""

import math
import logging
from typing import Callable, Dict, List, NamedTuple, Optional, Sequence

from config import settings

from ..exceptions import UnsupportedFeatureError
from .arcs import ellipse_arc_path, full_ellipse_path, segments_from_vertices
from .bezier import spline_to_path
from .descriptions import associate_descriptions
from .entities import (
    ArcEntity, CircleEntity, DXFEntity, EllipseEntity, EntityType,
    HatchEntity, LineEntity, LWPolylineEntity, SplineEntity,
)
from .geometry import TWO_PI
from .hatch import hatch_to_path
from .svg_path import LineTo, MoveTo, SvgPath

logger = logging.getLogger(__name__)


def is_full_ellipse(entity: EllipseEntity) -> bool:
    """Czy elipsa obejmuje pełny zakres parametru 0 - 2π"""
    tol = settings.FULL_ELLIPSE_TOLERANCE
    return (math.isclose(entity.start_param, 0.0, abs_tol=tol)
            and math.isclose(entity.end_param, TWO_PI, abs_tol=tol))


def convert_line(entity: LineEntity) -> SvgPath:
    """Konwertuj LINE entity"""
    return SvgPath([MoveTo(entity.start), LineTo(entity.end)])


def convert_arc(entity: ArcEntity) -> SvgPath:
    """Konwertuj ARC entity (kąty w stopniach)"""
    return ellipse_arc_path(
        entity.center, (entity.radius, 0.0), 1.0,
        math.radians(entity.start_angle), math.radians(entity.end_angle)
    )


def convert_circle(entity: CircleEntity) -> SvgPath:
    """Konwertuj CIRCLE entity"""
    return full_ellipse_path(entity.center, (entity.radius, 0.0), 1.0)


def convert_ellipse(entity: EllipseEntity) -> SvgPath:
    """Konwertuj ELLIPSE entity (parametry w radianach)"""
    if is_full_ellipse(entity):
        return full_ellipse_path(entity.center, entity.major_axis, entity.ratio)
    return ellipse_arc_path(
        entity.center, entity.major_axis, entity.ratio,
        entity.start_param, entity.end_param
    )


def convert_polyline(entity: LWPolylineEntity) -> Optional[SvgPath]:
    """Konwertuj LWPOLYLINE/POLYLINE (z obsługą bulge)"""
    segments = segments_from_vertices(entity.vertices, entity.is_closed)
    if not segments:
        logger.debug(f"{entity.entity_type.value} {entity.handle} has no vertices")
        return None
    return SvgPath(segments)


def convert_spline(entity: SplineEntity) -> SvgPath:
    """Konwertuj SPLINE entity (dokładnie, odcinkami Béziera)"""
    return spline_to_path(entity.spline)


def convert_hatch(entity: HatchEntity) -> Optional[SvgPath]:
    """Konwertuj HATCH entity"""
    return hatch_to_path(entity)


CONVERTERS: Dict[EntityType, Callable[[DXFEntity], Optional[SvgPath]]] = {
    EntityType.LINE: convert_line,
    EntityType.ARC: convert_arc,
    EntityType.CIRCLE: convert_circle,
    EntityType.ELLIPSE: convert_ellipse,
    EntityType.LWPOLYLINE: convert_polyline,
    EntityType.POLYLINE: convert_polyline,
    EntityType.SPLINE: convert_spline,
    EntityType.HATCH: convert_hatch,
}


def convert_entity(entity: DXFEntity) -> Optional[SvgPath]:
    """
    Uniwersalny konwerter entity.

    Args:
        entity: Entity z modelu dxf2svg

    Returns:
        SvgPath lub None jeśli typ lub cecha entity nie jest obsługiwana

    Raises:
        StructuralInputError: dane wejściowe łamią niezmiennik formatu
    """
    converter = CONVERTERS.get(entity.entity_type)
    if converter is None:
        # TEXT, OTHER
        return None

    try:
        return converter(entity)
    except UnsupportedFeatureError as e:
        logger.debug(f"Skipping {entity.entity_type.value} {entity.handle}: {e}")
        return None


class ConvertedEntity(NamedTuple):
    """Entity z opisem i gotową ścieżką"""
    description: Optional[str]
    entity: DXFEntity
    path: SvgPath


def convert_entities(entities: Sequence[DXFEntity]) -> List[ConvertedEntity]:
    """
    Połącz opisy z obiektami i skonwertuj obiekty na ścieżki.

    Entities bez ścieżki (nieobsługiwane) są pomijane.
    """
    result = []
    skipped = 0
    for description, entity in associate_descriptions(entities):
        path = convert_entity(entity)
        if path is None:
            skipped += 1
            continue
        result.append(ConvertedEntity(description, entity, path))

    if skipped:
        logger.debug(f"Skipped {skipped} entities without path")
    return result


# Eksporty
__all__ = [
    'is_full_ellipse',
    'convert_line',
    'convert_arc',
    'convert_circle',
    'convert_ellipse',
    'convert_polyline',
    'convert_spline',
    'convert_hatch',
    'CONVERTERS',
    'convert_entity',
    'ConvertedEntity',
    'convert_entities',
]
