"""
Piecewise Bezier - Rozkład NURBS na odcinki Béziera
===================================================
Wstawianie węzłów (Boehm) aż każdy węzeł wewnętrzny ma krotność
stopień krzywej. Wtedy każdy przedział węzłów to jeden łuk Béziera
(stopień 3 -> C, stopień 2 -> Q). Konwersja jest dokładna.
"""

import logging
from typing import List, Sequence, Tuple

from ..exceptions import (
    InvalidKnotVectorError,
    KnotInsertionError,
    NotPinnedError,
    UnsupportedSplineDegreeError,
)
from .entities import Spline
from .geometry import Point, to_point
from .svg_path import CubicCurveTo, MoveTo, PathSegment, QuadraticCurveTo, SvgPath

logger = logging.getLogger(__name__)

SUPPORTED_DEGREES = (2, 3)


def multiplicity(knots: Sequence[float], index: int) -> int:
    """Liczba kolejnych węzłów równych knots[index], licząc od index"""
    m = 1
    for i in range(index + 1, len(knots)):
        if knots[i] == knots[index]:
            m += 1
        else:
            break
    return m


def check_pinned(k: int, knots: Sequence[float]) -> None:
    """
    Sprawdź czy pierwsze i ostatnie k węzłów są równe.

    Raises:
        NotPinnedError: wektor węzłów nie jest przypięty
    """
    if len(knots) < k:
        raise NotPinnedError(k, knots)
    # Przypięty na początku
    for i in range(1, k):
        if knots[i] != knots[0]:
            raise NotPinnedError(k, knots)
    # Przypięty na końcu
    last = len(knots) - 1
    for i in range(last - 1, last - k, -1):
        if knots[i] != knots[last]:
            raise NotPinnedError(k, knots)


def compute_insertions(k: int, knots: Sequence[float]) -> List[float]:
    """Węzły do wstawienia, aby każdy węzeł wewnętrzny miał krotność k - 1"""
    inserts: List[float] = []
    i = k
    while i < len(knots) - k:
        knot = knots[i]
        m = multiplicity(knots, i)
        inserts.extend([knot] * (k - m - 1))
        i += m
    return inserts


def insert_knot(
    k: int,
    control_points: Sequence[Point],
    knots: Sequence[float],
    new_knot: float
) -> Tuple[List[Point], List[float]]:
    """
    Wstaw jeden węzeł bez zmiany kształtu krzywej.

    Args:
        k: Rząd krzywej (stopień + 1)
        control_points: Punkty kontrolne b
        knots: Wektor węzłów x
        new_knot: Wstawiany węzeł

    Returns:
        (nowe punkty kontrolne, nowy wektor węzłów)

    Raises:
        KnotInsertionError: węzeł nie leży w żadnym przedziale (x[j], x[j+1]]
    """
    x = knots
    b = control_points
    n = len(control_points)

    i = None
    for j in range(len(x) - 1):
        if x[j] < new_knot <= x[j + 1]:
            i = j
            break
    if i is None:
        raise KnotInsertionError(new_knot)

    x_hat = list(x[:i + 1]) + [new_knot] + list(x[i + 1:])

    b_hat: List[Point] = []
    for j in range(n + 1):
        if j <= i - k + 1:
            alpha = 1.0
        elif j <= i:
            span = x[j + k - 1] - x[j]
            alpha = 0.0 if span == 0 else (new_knot - x[j]) / span
        else:
            alpha = 0.0

        # Kopiuj punkt dla alpha 0/1, bez błędów zaokrągleń
        if alpha == 0.0:
            b_hat.append(b[j - 1])
        elif alpha == 1.0:
            b_hat.append(b[j])
        else:
            b_hat.append((
                (1.0 - alpha) * b[j - 1][0] + alpha * b[j][0],
                (1.0 - alpha) * b[j - 1][1] + alpha * b[j][1],
            ))

    return b_hat, x_hat


class PiecewiseBezier:
    """
    Spline rozłożony na odcinki Béziera.

    Po konstrukcji control_points i knots opisują tę samą krzywą,
    ale każdy węzeł wewnętrzny ma krotność k - 1.
    """

    def __init__(self, spline: Spline):
        """
        Args:
            spline: Przypięty B-spline stopnia 2 lub 3

        Raises:
            UnsupportedSplineDegreeError: stopień inny niż 2 lub 3
            InvalidKnotVectorError: liczba węzłów != punkty + stopień + 1
            NotPinnedError: wektor węzłów nie jest przypięty
        """
        if spline.degree not in SUPPORTED_DEGREES:
            raise UnsupportedSplineDegreeError(spline.degree)

        self.k = spline.degree + 1
        controls = [to_point(p) for p in spline.control_points]
        knots = [float(t) for t in spline.knots]

        if len(controls) < self.k:
            raise InvalidKnotVectorError(
                f"{len(controls)} control points are not enough for degree {spline.degree}",
                spline.degree, len(controls), len(knots)
            )
        if len(knots) != len(controls) + self.k:
            raise InvalidKnotVectorError(
                f"expected {len(controls) + self.k} knots, got {len(knots)}",
                spline.degree, len(controls), len(knots)
            )

        check_pinned(self.k, knots)
        insertions = compute_insertions(self.k, knots)
        for new_knot in insertions:
            controls, knots = insert_knot(self.k, controls, knots, new_knot)

        if insertions:
            logger.debug(f"Inserted {len(insertions)} knots into degree {spline.degree} spline")

        self.control_points: List[Point] = controls
        self.knots: List[float] = knots

    def segments(self) -> List[PathSegment]:
        """Segmenty C (stopień 3) lub Q (stopień 2), MoveTo tylko przy przerwie"""
        segments: List[PathSegment] = []
        control_index = 0
        knot_index = self.k
        last = None
        while knot_index < len(self.knots) - self.k + 1:
            m = multiplicity(self.knots, knot_index)
            cp = self.control_points[control_index:control_index + self.k]
            if len(cp) < self.k:
                raise InvalidKnotVectorError(
                    "control points exhausted before the last knot span",
                    self.k - 1, len(self.control_points), len(self.knots)
                )

            if last is None or last != cp[0]:
                segments.append(MoveTo(cp[0]))
            if self.k == 4:
                segments.append(CubicCurveTo(cp[1], cp[2], cp[3]))
            else:
                segments.append(QuadraticCurveTo(cp[1], cp[2]))
            last = cp[-1]

            control_index += m
            knot_index += m
        return segments

    def to_svg_path(self) -> SvgPath:
        return SvgPath(self.segments())


def spline_segments(spline: Spline) -> List[PathSegment]:
    return PiecewiseBezier(spline).segments()


def spline_to_path(spline: Spline) -> SvgPath:
    """Dokładna ścieżka SVG dla przypiętego B-spline stopnia 2 lub 3"""
    return PiecewiseBezier(spline).to_svg_path()


# Eksporty
__all__ = [
    'SUPPORTED_DEGREES',
    'multiplicity',
    'check_pinned',
    'compute_insertions',
    'insert_knot',
    'PiecewiseBezier',
    'spline_segments',
    'spline_to_path',
]
