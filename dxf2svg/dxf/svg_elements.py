"""
SVG Elements - Elementy SVG dla pojedynczych entities
=====================================================
Ścieżka entity opakowana w element z kolorem linii, grubością,
kryciem wypełnienia i vector-effect.
"""

from typing import Callable, Dict, Optional
from xml.etree import ElementTree as ET

from ezdxf.colors import aci2rgb

from config import settings

from .converters import convert_entity, is_full_ellipse
from .entities import DXFEntity, EntityType
from .geometry import distance
from .hatch import fill_opacity
from .svg_path import SvgPath, format_number

AttributeGenerator = Callable[[str], Dict[str, str]]


def aci_to_hex(aci: int) -> str:
    """Konwertuj ACI color index na hex (ByBlock/ByLayer -> kolor domyślny)"""
    if not 1 <= aci <= 255:
        return settings.DEFAULT_COLOR
    r, g, b = aci2rgb(aci)
    return f"#{r:02X}{g:02X}{b:02X}"


# Pozostałe typy rysowane stałą grubością
THICKNESS_STROKE_TYPES = (EntityType.LINE, EntityType.ARC, EntityType.CIRCLE)


def _stroke_attributes(entity: DXFEntity) -> Dict[str, str]:
    thickness = entity.thickness if entity.entity_type in THICKNESS_STROKE_TYPES else None
    width = max(thickness or 0.0, settings.MIN_STROKE_WIDTH)
    return {
        'stroke': aci_to_hex(entity.color),
        'stroke-width': f"{format_number(width)}px",
        'vector-effect': "non-scaling-stroke",
    }


def _base_element(entity: DXFEntity, path: SvgPath) -> ET.Element:
    if entity.entity_type == EntityType.LINE:
        return ET.Element('line', {
            'x1': format_number(entity.start[0]),
            'y1': format_number(entity.start[1]),
            'x2': format_number(entity.end[0]),
            'y2': format_number(entity.end[1]),
        })

    if entity.entity_type == EntityType.CIRCLE:
        rx = ry = entity.radius
    elif entity.entity_type == EntityType.ELLIPSE and is_full_ellipse(entity):
        rx = distance((0.0, 0.0), entity.major_axis)
        ry = rx * entity.ratio
    else:
        return ET.Element('path', {'d': str(path), 'fill-opacity': "0"})

    return ET.Element('ellipse', {
        'cx': format_number(entity.center[0]),
        'cy': format_number(entity.center[1]),
        'rx': format_number(rx),
        'ry': format_number(ry),
        'fill-opacity': "0",
    })


def _hatch_element(entity: DXFEntity, path: SvgPath) -> ET.Element:
    return ET.Element('path', {
        'd': str(path),
        'fill': aci_to_hex(entity.color),
        'fill-opacity': format_number(fill_opacity(entity)),
        'vector-effect': "non-scaling-stroke",
    })


def entity_to_element(
    entity: DXFEntity,
    description: Optional[str] = None,
    path: Optional[SvgPath] = None,
    attribute_generator: Optional[AttributeGenerator] = None
) -> Optional[ET.Element]:
    """
    Zbuduj element SVG dla entity.

    Args:
        entity: Entity z modelu dxf2svg
        description: Opis przypisany do entity
        path: Gotowa ścieżka (None = konwertuj teraz)
        attribute_generator: Atrybuty z opisu (domyślnie data-description)

    Returns:
        ET.Element lub None gdy entity nie ma ścieżki
    """
    if path is None:
        path = convert_entity(entity)
        if path is None:
            return None

    if entity.entity_type == EntityType.HATCH:
        element = _hatch_element(entity, path)
    else:
        element = _base_element(entity, path)
        for key, value in _stroke_attributes(entity).items():
            element.set(key, value)

    if description is not None:
        if attribute_generator is not None:
            attributes = attribute_generator(description)
        else:
            attributes = {'data-description': description}
        for key, value in attributes.items():
            element.set(key, value)

    element.set('class', f"dxf-entity {entity.entity_type.value} {entity.handle}".rstrip())
    return element


def to_markup(element: ET.Element) -> str:
    return ET.tostring(element, encoding='unicode')


# Eksporty
__all__ = [
    'AttributeGenerator',
    'aci_to_hex',
    'entity_to_element',
    'to_markup',
]
