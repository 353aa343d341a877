#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
dxf2svg - Konwersja DXF do elementów SVG
Główny plik uruchomieniowy

Uruchomienie:
    python main.py rysunek.dxf                 # Elementy SVG na stdout
    python main.py rysunek.dxf --layer KONTUR  # Tylko wybrane warstwy
    python main.py rysunek.dxf -o wynik.svg    # Zapis do pliku
    python main.py rysunek.dxf --debug         # Więcej logów
"""

import sys
import argparse
import logging

from config import settings
from config.settings import validate_config
from dxf2svg.exceptions import ConverterError, DXFReadError, StructuralInputError
from dxf2svg.dxf import DXFSvgReader, convert_entities, entity_to_element, to_markup

logger = logging.getLogger(__name__)


def setup_logging(debug: bool = False):
    """Konfiguracja logowania"""
    logging.basicConfig(
        level=logging.DEBUG if debug else settings.LOG_LEVEL,
        format=settings.LOG_FORMAT
    )


def convert_file(filepath: str, layers=None) -> list:
    """
    Konwertuj plik DXF na linie znaczników SVG.

    Returns:
        Lista linii: komentarz z nazwą warstwy, potem elementy warstwy
    """
    reader = DXFSvgReader(layers=layers)
    lines = []
    for layer, entities in reader.read(filepath).items():
        converted = convert_entities(entities)
        logger.info(f"Layer {layer}: {len(converted)} of {len(entities)} entities converted")

        lines.append(f"<!-- layer: {layer} -->")
        for item in converted:
            element = entity_to_element(item.entity, item.description, item.path)
            if element is not None:
                lines.append(to_markup(element))
    return lines


def main():
    """Główna funkcja"""
    parser = argparse.ArgumentParser(description="dxf2svg - DXF to SVG converter")
    parser.add_argument('file', help='Plik DXF')
    parser.add_argument('--layer', action='append', dest='layers', help='Warstwa do konwersji (można powtarzać)')
    parser.add_argument('-o', '--output', help='Plik wynikowy (domyślnie stdout)')
    parser.add_argument('--debug', action='store_true', help='Tryb debug (więcej logów)')

    args = parser.parse_args()

    # Walidacja konfiguracji
    try:
        validate_config()
    except ValueError as e:
        print(f"Błąd konfiguracji: {e}")
        print("\nSprawdź plik config/settings.py lub utwórz plik .env")
        return 1

    setup_logging(args.debug)

    try:
        lines = convert_file(args.file, args.layers)
    except DXFReadError as e:
        logger.error(f"{e}")
        return 1
    except StructuralInputError as e:
        logger.error(f"Drawing cannot be converted: {e}")
        return 1
    except ConverterError as e:
        logger.error(f"Conversion failed: {e}")
        return 1

    if args.output:
        with open(args.output, 'w', encoding='utf-8') as f:
            f.write("\n".join(lines) + "\n")
        logger.info(f"Saved {args.output}")
    else:
        print("\n".join(lines))

    return 0


if __name__ == "__main__":
    sys.exit(main())
