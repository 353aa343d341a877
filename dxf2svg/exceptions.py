"""
dxf2svg - Własne wyjątki
========================
Hierarchia wyjątków dla konwertera DXF -> SVG.

- StructuralInputError: dane wejściowe łamią niezmiennik formatu, konwersja
  całego dokumentu jest przerywana
- UnsupportedFeatureError: nieobsługiwana cecha pojedynczej entity,
  entity jest pomijana (brak ścieżki)
"""


class ConverterError(Exception):
    """Bazowy wyjątek dla wszystkich błędów konwertera"""

    def __init__(self, message: str, code: str = None, details: dict = None):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def __str__(self):
        if self.details:
            return f"[{self.code}] {self.message} | Details: {self.details}"
        return f"[{self.code}] {self.message}"


class GeometryError(ConverterError):
    """Niepoprawna wartość liczbowa (NaN, nieskończoność)"""

    def __init__(self, value: float):
        super().__init__(
            f"Cannot format non-finite value: {value}",
            code="NON_FINITE_VALUE",
            details={"value": str(value)}
        )


# ============================================================
# Structural Input Errors
# ============================================================

class StructuralInputError(ConverterError):
    """Dane wejściowe łamią niezmiennik formatu - dokument nie do konwersji"""
    pass


class NotPinnedError(StructuralInputError):
    """Wektor węzłów spline nie jest przypięty (clamped)"""

    def __init__(self, order: int, knots):
        super().__init__(
            f"Knot vector is not pinned for order {order}",
            code="NOT_PINNED",
            details={"order": order, "knots": list(knots)}
        )


class InvalidKnotVectorError(StructuralInputError):
    """Wektor węzłów nie pasuje do punktów kontrolnych"""

    def __init__(self, reason: str, degree: int, control_count: int, knot_count: int):
        super().__init__(
            f"Invalid spline definition: {reason}",
            code="INVALID_KNOT_VECTOR",
            details={
                "degree": degree,
                "control_count": control_count,
                "knot_count": knot_count
            }
        )


class KnotInsertionError(StructuralInputError):
    """Wstawiany węzeł nie leży w żadnym przedziale wektora węzłów"""

    def __init__(self, new_knot: float):
        super().__init__(
            f"Invalid new knot: {new_knot} is not inside any knot span",
            code="KNOT_INSERTION_ERROR",
            details={"new_knot": new_knot}
        )


class DescriptionCountMismatchError(StructuralInputError):
    """Liczba opisów różni się od liczby obiektów graficznych"""

    def __init__(self, description_count: int, object_count: int):
        super().__init__(
            f"Number of objects ({object_count}) differs from number of "
            f"descriptions ({description_count})",
            code="DESCRIPTION_COUNT_MISMATCH",
            details={
                "description_count": description_count,
                "object_count": object_count
            }
        )


class InvalidPathError(StructuralInputError):
    """Ścieżka SVG pusta albo nie zaczyna się od MoveTo"""

    def __init__(self, reason: str):
        super().__init__(
            f"Invalid path: {reason}",
            code="INVALID_PATH",
            details={"reason": reason}
        )


# ============================================================
# Unsupported Features
# ============================================================

class UnsupportedFeatureError(ConverterError):
    """Nieobsługiwana cecha entity - entity zostaje pominięta"""
    pass


class UnsupportedHatchStyleError(UnsupportedFeatureError):
    """Styl wypełnienia HATCH wymagający wykluczania otworów"""

    def __init__(self, style):
        super().__init__(
            f"Hatch style '{style}' is not supported",
            code="UNSUPPORTED_HATCH_STYLE",
            details={"style": str(style)}
        )


class UnsupportedBoundaryEdgeError(UnsupportedFeatureError):
    """Krawędź konturu HATCH, której nie konwertujemy (łuk, łuk eliptyczny)"""

    def __init__(self, edge_type):
        super().__init__(
            f"Boundary edge '{edge_type}' is not supported",
            code="UNSUPPORTED_BOUNDARY_EDGE",
            details={"edge_type": str(edge_type)}
        )


class UnsupportedSplineDegreeError(UnsupportedFeatureError):
    """Spline o stopniu innym niż 2 lub 3"""

    def __init__(self, degree: int):
        super().__init__(
            f"Spline degree {degree} is not supported (expected 2 or 3)",
            code="UNSUPPORTED_SPLINE_DEGREE",
            details={"degree": degree}
        )


# ============================================================
# Adapter Errors
# ============================================================

class DXFReadError(ConverterError):
    """Nie udało się wczytać pliku DXF"""

    def __init__(self, path: str, reason: str = None):
        super().__init__(
            f"Failed to read DXF file: {path}" + (f" - {reason}" if reason else ""),
            code="DXF_READ_ERROR",
            details={"path": path, "reason": reason}
        )
