"""
DXF SVG Reader - Odczyt plików DXF do modelu entities
=====================================================
Mapuje entities ezdxf na dataclasses z entities.py, grupuje je po
warstwach i sortuje według kolejności rysowania (SORTENTS).
"""

import logging
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional

import ezdxf
from ezdxf import bbox, reorder
from ezdxf.entities.boundary_paths import BoundaryPathType
from ezdxf.entities.boundary_paths import EdgeType as DXFEdgeType
from ezdxf.lldxf.const import DXFError, DXFStructureError

from ..exceptions import DXFReadError
from .entities import (
    ArcEdge, ArcEntity, BoundaryEdge, BoundaryPath, CircleEntity, DXFEntity,
    EdgeBoundary, EllipseEdge, EllipseEntity, HatchEntity, HatchStyle,
    LineEdge, LineEntity, LWPolylineEntity, OtherEntity, PolylineBoundary,
    PolylineEntity, Spline, SplineEdge, SplineEntity, TextEntity, Vertex,
)
from .geometry import BoundingBox, to_point

logger = logging.getLogger(__name__)

BYLAYER = 256


def _dxf_value(entity, key: str, default=None):
    """Atrybut DXF albo default, także gdy typ entity go nie definiuje"""
    if entity.dxf.is_supported(key):
        return entity.dxf.get(key, default)
    return default


def _common_attributes(entity, layer_colors: Optional[Dict[str, int]]) -> dict:
    layer = _dxf_value(entity, 'layer', '0')
    color = _dxf_value(entity, 'color', BYLAYER)
    if color == BYLAYER and layer_colors:
        color = layer_colors.get(layer, BYLAYER)
    return {
        'layer': layer,
        'color': color,
        'thickness': _dxf_value(entity, 'thickness'),
        'handle': _dxf_value(entity, 'handle') or "",
    }


# ============================================================
# Geometria
# ============================================================

def _spline_from_dxf(entity) -> Spline:
    control_points = [to_point(p) for p in entity.control_points]
    if control_points:
        return Spline(
            degree=entity.dxf.degree,
            control_points=control_points,
            knots=[float(k) for k in entity.knots],
            weights=[float(w) for w in entity.weights],
        )

    # Tylko punkty dopasowania - punkty kontrolne z narzędzia konstrukcyjnego
    tool = entity.construction_tool()
    return Spline(
        degree=tool.degree,
        control_points=[to_point(p) for p in tool.control_points],
        knots=[float(k) for k in tool.knots()],
    )


def _edge_from_dxf(edge) -> BoundaryEdge:
    if edge.type == DXFEdgeType.LINE:
        return LineEdge(to_point(edge.start), to_point(edge.end))
    if edge.type == DXFEdgeType.ARC:
        return ArcEdge(
            to_point(edge.center), edge.radius,
            edge.start_angle, edge.end_angle, bool(edge.ccw)
        )
    if edge.type == DXFEdgeType.ELLIPSE:
        return EllipseEdge(
            to_point(edge.center), to_point(edge.major_axis), edge.ratio,
            edge.start_angle, edge.end_angle, bool(edge.ccw)
        )
    return SplineEdge(Spline(
        degree=edge.degree,
        control_points=[to_point(p) for p in edge.control_points],
        knots=[float(k) for k in edge.knot_values],
        weights=[float(w) for w in edge.weights],
    ))


def _boundary_from_dxf(path) -> BoundaryPath:
    if path.type == BoundaryPathType.POLYLINE:
        return PolylineBoundary(
            vertices=[Vertex(v[0], v[1], v[2] if len(v) > 2 else 0.0) for v in path.vertices],
            is_closed=bool(path.is_closed),
        )
    return EdgeBoundary(edges=[_edge_from_dxf(edge) for edge in path.edges])


def _line(e, attribs: dict) -> DXFEntity:
    return LineEntity(start=to_point(e.dxf.start), end=to_point(e.dxf.end), **attribs)


def _arc(e, attribs: dict) -> DXFEntity:
    return ArcEntity(
        center=to_point(e.dxf.center), radius=e.dxf.radius,
        start_angle=e.dxf.start_angle, end_angle=e.dxf.end_angle, **attribs
    )


def _circle(e, attribs: dict) -> DXFEntity:
    return CircleEntity(center=to_point(e.dxf.center), radius=e.dxf.radius, **attribs)


def _ellipse(e, attribs: dict) -> DXFEntity:
    return EllipseEntity(
        center=to_point(e.dxf.center), major_axis=to_point(e.dxf.major_axis),
        ratio=e.dxf.ratio, start_param=e.dxf.start_param, end_param=e.dxf.end_param,
        **attribs
    )


def _lwpolyline(e, attribs: dict) -> DXFEntity:
    vertices = [Vertex(x, y, b) for x, y, b in e.get_points('xyb')]
    return LWPolylineEntity(vertices=vertices, is_closed=bool(e.closed), **attribs)


def _polyline(e, attribs: dict) -> DXFEntity:
    if e.is_poly_face_mesh or e.is_polygon_mesh:
        return _other(e, attribs)
    vertices = []
    for v in e.vertices:
        x, y = to_point(v.dxf.location)
        vertices.append(Vertex(x, y, v.dxf.get('bulge', 0.0)))
    return PolylineEntity(vertices=vertices, is_closed=bool(e.is_closed), **attribs)


def _spline(e, attribs: dict) -> DXFEntity:
    return SplineEntity(spline=_spline_from_dxf(e), **attribs)


def _hatch(e, attribs: dict) -> DXFEntity:
    return HatchEntity(
        boundaries=[_boundary_from_dxf(path) for path in e.paths],
        hatch_style=HatchStyle(e.dxf.get('hatch_style', HatchStyle.ODD_PARITY)),
        transparency=float(e.transparency),
        **attribs
    )


def _text(e, attribs: dict) -> DXFEntity:
    return TextEntity(text=e.dxf.text, insert=to_point(e.dxf.insert), **attribs)


def _mtext(e, attribs: dict) -> DXFEntity:
    return TextEntity(text=e.plain_text(), insert=to_point(e.dxf.insert), **attribs)


def _other(e, attribs: dict) -> DXFEntity:
    extents = bbox.extents([e])
    bounds = None
    if extents.has_data:
        bounds = BoundingBox(
            extents.extmin.x, extents.extmin.y, extents.extmax.x, extents.extmax.y
        )
    return OtherEntity(dxftype=e.dxftype(), extents=bounds, **attribs)


ENTITY_MAPPERS: Dict[str, Callable[[object, dict], DXFEntity]] = {
    'LINE': _line,
    'ARC': _arc,
    'CIRCLE': _circle,
    'ELLIPSE': _ellipse,
    'LWPOLYLINE': _lwpolyline,
    'POLYLINE': _polyline,
    'SPLINE': _spline,
    'HATCH': _hatch,
    'TEXT': _text,
    'MTEXT': _mtext,
}


def entity_from_dxf(entity, layer_colors: Optional[Dict[str, int]] = None) -> Optional[DXFEntity]:
    """
    Zamień entity ezdxf na entity modelu dxf2svg.

    Args:
        entity: Entity ezdxf
        layer_colors: Kolory ACI warstw do rozwiązania ByLayer

    Returns:
        DXFEntity (OtherEntity dla typów bez konwertera) lub None przy błędzie
    """
    etype = entity.dxftype()
    mapper = ENTITY_MAPPERS.get(etype, _other)
    try:
        return mapper(entity, _common_attributes(entity, layer_colors))
    except (DXFError, AttributeError, ValueError, IndexError) as e:
        logger.warning(f"Error mapping {etype}: {e}")
        return None


class DXFSvgReader:
    """
    Reader plików DXF dla konwersji do SVG.

    Obsługuje:
    - LINE, ARC, CIRCLE, ELLIPSE, LWPOLYLINE, POLYLINE, SPLINE, HATCH
    - TEXT, MTEXT jako opisy
    - Filtrowanie warstw
    - Kolejność rysowania z tabeli SORTENTS
    """

    def __init__(self, layers: Optional[Iterable[str]] = None):
        """
        Args:
            layers: Nazwy warstw do wczytania (None = wszystkie)
        """
        self.layers = set(layers) if layers is not None else None

    def read(self, filepath: str) -> Dict[str, List[DXFEntity]]:
        """
        Wczytaj plik DXF.

        Args:
            filepath: Ścieżka do pliku DXF

        Returns:
            Słownik nazwa_warstwy -> entities w kolejności rysowania

        Raises:
            DXFReadError: plik nie istnieje lub nie jest poprawnym DXF
        """
        filepath = str(filepath)
        if not Path(filepath).exists():
            raise DXFReadError(filepath, "file not found")

        try:
            doc = ezdxf.readfile(filepath)
        except IOError as e:
            raise DXFReadError(filepath, str(e)) from e
        except DXFStructureError as e:
            raise DXFReadError(filepath, f"invalid or corrupted DXF: {e}") from e
        except DXFError as e:
            raise DXFReadError(filepath, str(e)) from e

        logger.info(f"Loaded {filepath} (DXF {doc.dxfversion})")
        return self.read_document(doc)

    def read_document(self, doc) -> Dict[str, List[DXFEntity]]:
        """Entities modelspace dokumentu ezdxf pogrupowane po warstwach"""
        layer_colors = self._layer_colors(doc)
        msp = doc.modelspace()

        layer_entities: Dict[str, List[DXFEntity]] = {}
        count = 0
        for entity in reorder.ascending(msp, msp.get_redraw_order()):
            layer = entity.dxf.layer
            if self.layers is not None and layer not in self.layers:
                continue

            mapped = entity_from_dxf(entity, layer_colors)
            if mapped is None:
                continue
            layer_entities.setdefault(layer, []).append(mapped)
            count += 1

        logger.info(f"Read {count} entities on {len(layer_entities)} layers")
        return {name: layer_entities[name] for name in sorted(layer_entities)}

    def _layer_colors(self, doc) -> Dict[str, int]:
        """Kolory ACI warstw"""
        return {layer.dxf.name: layer.color for layer in doc.layers}


# Eksporty
__all__ = [
    'ENTITY_MAPPERS',
    'entity_from_dxf',
    'DXFSvgReader',
]
