"""
DXF Module - Konwersja geometrii DXF do SVG
===========================================

Główne komponenty:
- SvgPath: Ścieżka SVG (M, L, C, Q, A, Z)
- PiecewiseBezier: Dokładny rozkład spline na odcinki Béziera
- convert_entity: Ścieżka SVG dla pojedynczej entity
- associate_descriptions: Łączenie opisów tekstowych z obiektami
- DXFSvgReader: Odczyt pliku DXF (ezdxf) do modelu entities

Użycie:
    from dxf2svg.dxf import DXFSvgReader, convert_entities

    layers = DXFSvgReader().read("path/to/file.dxf")
    for layer, entities in layers.items():
        for item in convert_entities(entities):
            print(layer, item.description, item.path)
"""

from .svg_path import (
    format_number,
    PathSegment,
    MoveTo,
    LineTo,
    CubicCurveTo,
    QuadraticCurveTo,
    ArcTo,
    ClosePath,
    SvgPath,
)

from .entities import (
    EntityType,
    HatchStyle,
    EdgeType,
    Vertex,
    Spline,
    LineEdge,
    ArcEdge,
    EllipseEdge,
    SplineEdge,
    PolylineBoundary,
    EdgeBoundary,
    DXFEntity,
    LineEntity,
    ArcEntity,
    CircleEntity,
    EllipseEntity,
    LWPolylineEntity,
    PolylineEntity,
    SplineEntity,
    HatchEntity,
    TextEntity,
    OtherEntity,
)

from .arcs import (
    ellipse_arc_path,
    full_ellipse_path,
    segment_from_bulge,
    segments_from_vertices,
)

from .bezier import (
    PiecewiseBezier,
    spline_to_path,
)

from .hatch import (
    FillPolicy,
    HATCH_STYLE_POLICY,
    optimize_path,
    hatch_to_path,
)

from .descriptions import (
    AnnotatedEntity,
    associate_descriptions,
)

from .converters import (
    convert_entity,
    ConvertedEntity,
    convert_entities,
)

from .reader import (
    entity_from_dxf,
    DXFSvgReader,
)

from .svg_elements import (
    aci_to_hex,
    entity_to_element,
    to_markup,
)


__all__ = [
    # Path
    'format_number',
    'PathSegment',
    'MoveTo',
    'LineTo',
    'CubicCurveTo',
    'QuadraticCurveTo',
    'ArcTo',
    'ClosePath',
    'SvgPath',

    # Entities
    'EntityType',
    'HatchStyle',
    'EdgeType',
    'Vertex',
    'Spline',
    'LineEdge',
    'ArcEdge',
    'EllipseEdge',
    'SplineEdge',
    'PolylineBoundary',
    'EdgeBoundary',
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

    # Builders
    'ellipse_arc_path',
    'full_ellipse_path',
    'segment_from_bulge',
    'segments_from_vertices',
    'PiecewiseBezier',
    'spline_to_path',
    'FillPolicy',
    'HATCH_STYLE_POLICY',
    'optimize_path',
    'hatch_to_path',

    # Descriptions
    'AnnotatedEntity',
    'associate_descriptions',

    # Converters
    'convert_entity',
    'ConvertedEntity',
    'convert_entities',

    # Reader
    'entity_from_dxf',
    'DXFSvgReader',

    # Elements
    'aci_to_hex',
    'entity_to_element',
    'to_markup',
]
