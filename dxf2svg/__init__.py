"""
dxf2svg
=======
Konwersja geometrii rysunków DXF do ścieżek SVG.
"""

__version__ = "0.1.0"

# Exceptions
from dxf2svg.exceptions import (
    ConverterError,
    GeometryError,
    StructuralInputError,
    NotPinnedError,
    InvalidKnotVectorError,
    KnotInsertionError,
    DescriptionCountMismatchError,
    InvalidPathError,
    UnsupportedFeatureError,
    UnsupportedHatchStyleError,
    UnsupportedBoundaryEdgeError,
    UnsupportedSplineDegreeError,
    DXFReadError,
)

__all__ = [
    'ConverterError',
    'GeometryError',
    'StructuralInputError',
    'NotPinnedError',
    'InvalidKnotVectorError',
    'KnotInsertionError',
    'DescriptionCountMismatchError',
    'InvalidPathError',
    'UnsupportedFeatureError',
    'UnsupportedHatchStyleError',
    'UnsupportedBoundaryEdgeError',
    'UnsupportedSplineDegreeError',
    'DXFReadError',
]
