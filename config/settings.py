#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Konfiguracja konwertera dxf2svg
Konwersja geometrii rysunków DXF na ścieżki SVG

Wartości można nadpisać zmiennymi środowiskowymi (plik .env).
"""

import os
from dotenv import load_dotenv

# Wczytaj zmienne środowiskowe z .env
load_dotenv()

# ============================================================
# LOGOWANIE
# ============================================================

LOG_LEVEL = os.getenv("DXF2SVG_LOG_LEVEL", "INFO").upper()

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# ============================================================
# FORMATOWANIE LICZB
# ============================================================

# Maksymalna liczba cyfr po przecinku w danych ścieżki
# (format "0.0##############" - minimum jedna, maksimum 15 cyfr)
DISPLAY_MAX_DECIMALS = int(os.getenv("DXF2SVG_DISPLAY_MAX_DECIMALS", "15"))

# ============================================================
# TOLERANCJE GEOMETRYCZNE
# ============================================================

# Tolerancja porównania punktów końcowych przy optymalizacji ścieżki
POINT_TOLERANCE = float(os.getenv("DXF2SVG_POINT_TOLERANCE", "1e-9"))

# Poniżej tej odległości łuk z bulge staje się linią
BULGE_MIN_DISTANCE = 1.0e-10

# Łuki bliskie półokręgowi (w stopniach) są dzielone na dwie połówki
SEMICIRCLE_SPLIT_TOLERANCE_DEG = 1.0

# Tolerancja rozpoznania pełnej elipsy (parametr 0 .. 2π)
FULL_ELLIPSE_TOLERANCE = 1.0e-10

# ============================================================
# ELEMENTY SVG
# ============================================================

# Minimalna grubość linii (px)
MIN_STROKE_WIDTH = float(os.getenv("DXF2SVG_MIN_STROKE_WIDTH", "1.0"))

# Kolor dla ByLayer/ByBlock bez rozwiązanej warstwy
DEFAULT_COLOR = os.getenv("DXF2SVG_DEFAULT_COLOR", "#000000")


# ============================================================
# WALIDACJA KONFIGURACJI
# ============================================================

def validate_config():
    """
    Sprawdź czy konfiguracja jest poprawna.
    Wywołaj przy starcie aplikacji.
    """
    errors = []

    if LOG_LEVEL not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        errors.append(f"DXF2SVG_LOG_LEVEL ma niepoprawną wartość: {LOG_LEVEL}")

    if not 1 <= DISPLAY_MAX_DECIMALS <= 17:
        errors.append("DXF2SVG_DISPLAY_MAX_DECIMALS musi być w zakresie 1..17")

    if POINT_TOLERANCE < 0:
        errors.append("DXF2SVG_POINT_TOLERANCE nie może być ujemna")

    if MIN_STROKE_WIDTH <= 0:
        errors.append("DXF2SVG_MIN_STROKE_WIDTH musi być dodatnia")

    if not (DEFAULT_COLOR.startswith("#") and len(DEFAULT_COLOR) == 7):
        errors.append(f"DXF2SVG_DEFAULT_COLOR nie jest kolorem #RRGGBB: {DEFAULT_COLOR}")

    if errors:
        raise ValueError(f"Błędy konfiguracji: {', '.join(errors)}")

    return True


if __name__ == "__main__":
    print("=" * 60)
    print("KONFIGURACJA dxf2svg")
    print("=" * 60)
    print(f"Log level: {LOG_LEVEL}")
    print(f"Max decimals: {DISPLAY_MAX_DECIMALS}")
    print(f"Point tolerance: {POINT_TOLERANCE}")
    print(f"Min stroke width: {MIN_STROKE_WIDTH}")
    print()

    try:
        validate_config()
        print("[OK] Konfiguracja poprawna")
    except ValueError as e:
        print(f"[FAIL] {e}")
