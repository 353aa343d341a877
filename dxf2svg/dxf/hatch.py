"""
DXF Hatch - Konwersja konturów wypełnień na ścieżkę SVG
=======================================================
Kontur polilinii -> segmenty z bulge.
Kontur z krawędzi -> MoveTo + linie i spline'y, potem usuwanie duplikatów.
Łuki i łuki eliptyczne w konturach nie są obsługiwane.
"""

import logging
from enum import Enum
from typing import Callable, Dict, List, Optional, Sequence

from config import settings

from ..exceptions import UnsupportedBoundaryEdgeError, UnsupportedHatchStyleError
from .arcs import segments_from_vertices
from .bezier import spline_segments
from .entities import (
    BoundaryEdge, BoundaryPath, EdgeBoundary, EdgeType, HatchEntity,
    HatchStyle, PolylineBoundary,
)
from .geometry import points_equal
from .svg_path import LineTo, MoveTo, PathSegment, SvgPath

logger = logging.getLogger(__name__)


class FillPolicy(Enum):
    """Sposób wypełnienia dla stylu HATCH"""
    UNSUPPORTED = "unsupported"
    FULL_OPACITY = "full_opacity"
    TRANSPARENCY = "transparency"


# Style wymagające wykluczania otworów nie są renderowane
HATCH_STYLE_POLICY: Dict[HatchStyle, FillPolicy] = {
    HatchStyle.ODD_PARITY: FillPolicy.UNSUPPORTED,
    HatchStyle.OUTERMOST: FillPolicy.UNSUPPORTED,
    HatchStyle.ENTIRE_AREA: FillPolicy.TRANSPARENCY,
}


def fill_policy(hatch_style: HatchStyle) -> FillPolicy:
    """
    Raises:
        UnsupportedHatchStyleError: styl bez obsługi
    """
    policy = HATCH_STYLE_POLICY.get(hatch_style, FillPolicy.UNSUPPORTED)
    if policy is FillPolicy.UNSUPPORTED:
        raise UnsupportedHatchStyleError(hatch_style)
    return policy


def fill_opacity(hatch: HatchEntity) -> float:
    """Krycie wypełnienia 0.0 - 1.0 według tabeli stylów"""
    policy = fill_policy(hatch.hatch_style)
    if policy is FillPolicy.FULL_OPACITY:
        return 1.0
    transparency = min(max(hatch.transparency, 0.0), 1.0)
    return 1.0 - transparency


# ============================================================
# Krawędzie
# ============================================================

def _line_edge_segments(edge) -> List[PathSegment]:
    return [LineTo(edge.end)]


def _spline_edge_segments(edge) -> List[PathSegment]:
    return spline_segments(edge.spline)


def _unsupported_edge(edge) -> List[PathSegment]:
    raise UnsupportedBoundaryEdgeError(edge.edge_type.value)


EDGE_CONVERTERS: Dict[EdgeType, Callable[[BoundaryEdge], List[PathSegment]]] = {
    EdgeType.LINE: _line_edge_segments,
    EdgeType.SPLINE: _spline_edge_segments,
    EdgeType.ARC: _unsupported_edge,
    EdgeType.ELLIPSE: _unsupported_edge,
}


def optimize_path(segments: Sequence[PathSegment]) -> List[PathSegment]:
    """
    Usuń segmenty kończące się w tym samym punkcie co poprzedni.

    Pierwszy segment (MoveTo) zostaje zawsze. Porównanie z tolerancją
    settings.POINT_TOLERANCE.
    """
    if not segments:
        return []

    first = segments[0]
    result = [first]
    current = first.end_point
    for segment in segments[1:]:
        end = segment.end_point
        if not points_equal(end, current, settings.POINT_TOLERANCE):
            result.append(segment)
        current = end
    return result


def edge_boundary_segments(boundary: EdgeBoundary) -> List[PathSegment]:
    """
    Segmenty konturu z krawędzi (zakładamy ciągłość i domknięcie).

    Raises:
        UnsupportedBoundaryEdgeError: łuk lub łuk eliptyczny w konturze
    """
    if not boundary.edges:
        return []

    first = boundary.edges[0]
    if first.edge_type not in (EdgeType.LINE, EdgeType.SPLINE):
        raise UnsupportedBoundaryEdgeError(first.edge_type.value)

    segments: List[PathSegment] = [MoveTo(first.start_point)]
    for edge in boundary.edges:
        segments.extend(EDGE_CONVERTERS[edge.edge_type](edge))
    return optimize_path(segments)


def polyline_boundary_segments(boundary: PolylineBoundary) -> List[PathSegment]:
    return segments_from_vertices(boundary.vertices, boundary.is_closed)


def boundary_segments(boundary: BoundaryPath) -> List[PathSegment]:
    if isinstance(boundary, PolylineBoundary):
        return polyline_boundary_segments(boundary)
    return edge_boundary_segments(boundary)


def hatch_to_path(hatch: HatchEntity) -> Optional[SvgPath]:
    """
    Ścieżka wszystkich konturów HATCH.

    Returns:
        SvgPath albo None gdy żaden kontur nie dał segmentów

    Raises:
        UnsupportedHatchStyleError: styl wymagający wykluczania otworów
        UnsupportedBoundaryEdgeError: nieobsługiwana krawędź konturu
    """
    fill_policy(hatch.hatch_style)

    segments: List[PathSegment] = []
    for boundary in hatch.boundaries:
        segments.extend(boundary_segments(boundary))

    if not segments:
        logger.debug(f"Hatch {hatch.handle} has no boundary segments")
        return None
    return SvgPath(segments)


# Eksporty
__all__ = [
    'FillPolicy',
    'HATCH_STYLE_POLICY',
    'fill_policy',
    'fill_opacity',
    'EDGE_CONVERTERS',
    'optimize_path',
    'edge_boundary_segments',
    'polyline_boundary_segments',
    'boundary_segments',
    'hatch_to_path',
]
