"""
SVG Path - Model segmentów ścieżki SVG
======================================
Zamknięty zbiór segmentów: M, L, C, Q, A, Z.
Każdy segment zna swój punkt końcowy i zapis tekstowy (atrybut "d").
"""

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import ClassVar, Iterator, List, Tuple

from config import settings

from ..exceptions import GeometryError, InvalidPathError
from .geometry import ORIGIN, Point


def format_number(value: float) -> str:
    """
    Zapis liczby niezależny od locale: "0.0##############".

    Minimum jedna cyfra po kropce, nieznaczące zera obcięte,
    ujemne zero zapisane jako "0.0".
    """
    if not math.isfinite(value):
        raise GeometryError(value)
    # Najkrótszy zapis float (repr), dopiero potem zaokrąglenie
    with localcontext() as ctx:
        ctx.prec = 400
        rounded = Decimal(repr(float(value))).quantize(
            Decimal(1).scaleb(-settings.DISPLAY_MAX_DECIMALS), rounding=ROUND_HALF_UP
        )
    text = format(rounded, 'f').rstrip('0')
    if text.endswith('.'):
        text += '0'
    if text == '-0.0':
        text = '0.0'
    return text


def format_point(point: Point) -> str:
    return f"{format_number(point[0])} {format_number(point[1])}"


@dataclass(frozen=True)
class PathSegment:
    """Bazowy segment ścieżki"""

    command: ClassVar[str] = ""

    @property
    def end_point(self) -> Point:
        raise NotImplementedError

    def values(self) -> List[str]:
        """Tokeny parametrów segmentu (bez litery komendy)"""
        raise NotImplementedError

    def __str__(self):
        return " ".join([self.command] + self.values())


@dataclass(frozen=True)
class MoveTo(PathSegment):
    """Przesunięcie bezwzględne"""
    point: Point

    command: ClassVar[str] = "M"

    @property
    def end_point(self) -> Point:
        return self.point

    def values(self) -> List[str]:
        return [format_point(self.point)]


@dataclass(frozen=True)
class LineTo(PathSegment):
    """Linia bezwzględna"""
    point: Point

    command: ClassVar[str] = "L"

    @property
    def end_point(self) -> Point:
        return self.point

    def values(self) -> List[str]:
        return [format_point(self.point)]


@dataclass(frozen=True)
class CubicCurveTo(PathSegment):
    """Krzywa Béziera trzeciego stopnia"""
    c1: Point
    c2: Point
    end: Point

    command: ClassVar[str] = "C"

    @property
    def end_point(self) -> Point:
        return self.end

    def values(self) -> List[str]:
        return [format_point(self.c1), format_point(self.c2), format_point(self.end)]


@dataclass(frozen=True)
class QuadraticCurveTo(PathSegment):
    """Krzywa Béziera drugiego stopnia"""
    c1: Point
    end: Point

    command: ClassVar[str] = "Q"

    @property
    def end_point(self) -> Point:
        return self.end

    def values(self) -> List[str]:
        return [format_point(self.c1), format_point(self.end)]


@dataclass(frozen=True)
class ArcTo(PathSegment):
    """
    Łuk eliptyczny.

    x_axis_rotation jest zapisywany bez przeliczania (radiany).
    is_counter_clockwise odpowiada fladze sweep = 1.
    """
    radius_x: float
    radius_y: float
    x_axis_rotation: float
    is_large_arc: bool
    is_counter_clockwise: bool
    end: Point

    command: ClassVar[str] = "A"

    @property
    def end_point(self) -> Point:
        return self.end

    def values(self) -> List[str]:
        return [
            format_number(self.radius_x),
            format_number(self.radius_y),
            format_number(self.x_axis_rotation),
            "1" if self.is_large_arc else "0",
            "1" if self.is_counter_clockwise else "0",
            format_point(self.end),
        ]


@dataclass(frozen=True)
class ClosePath(PathSegment):
    """Zamknięcie ścieżki - punkt końcowy traktowany jako początek układu"""

    command: ClassVar[str] = "Z"

    @property
    def end_point(self) -> Point:
        return ORIGIN

    def values(self) -> List[str]:
        return []


@dataclass(frozen=True)
class SvgPath:
    """
    Niemutowalna ścieżka SVG.

    Niezmiennik: co najmniej jeden segment, pierwszy segment to MoveTo.
    """
    segments: Tuple[PathSegment, ...]

    def __post_init__(self):
        segments = tuple(self.segments)
        object.__setattr__(self, 'segments', segments)
        if not segments:
            raise InvalidPathError("path has no segments")
        if not isinstance(segments[0], MoveTo):
            raise InvalidPathError(f"path starts with '{segments[0].command}' instead of 'M'")

    def __iter__(self) -> Iterator[PathSegment]:
        return iter(self.segments)

    def __len__(self) -> int:
        return len(self.segments)

    def __str__(self):
        return " ".join(str(segment) for segment in self.segments)

    @property
    def end_point(self) -> Point:
        return self.segments[-1].end_point


# Eksporty
__all__ = [
    'format_number',
    'format_point',
    'PathSegment',
    'MoveTo',
    'LineTo',
    'CubicCurveTo',
    'QuadraticCurveTo',
    'ArcTo',
    'ClosePath',
    'SvgPath',
]
