"""Testy elementów SVG dla entities"""

import math

from config import settings
from dxf2svg.dxf.entities import (
    ArcEntity, CircleEntity, EllipseEntity, HatchEntity, HatchStyle, LineEntity,
    LWPolylineEntity, PolylineBoundary, TextEntity,
)
from dxf2svg.dxf.svg_elements import aci_to_hex, entity_to_element, to_markup


def test_aci_to_hex():
    assert aci_to_hex(1) == "#FF0000"
    assert aci_to_hex(5) == "#0000FF"
    assert aci_to_hex(256) == settings.DEFAULT_COLOR
    assert aci_to_hex(0) == settings.DEFAULT_COLOR


def test_line_element():
    line = LineEntity(start=(0, 0), end=(2, 1), color=1, handle="1A")
    element = entity_to_element(line)
    assert element.tag == "line"
    assert element.get("x1") == "0.0"
    assert element.get("y2") == "1.0"
    assert element.get("stroke") == "#FF0000"
    assert element.get("stroke-width") == "1.0px"
    assert element.get("vector-effect") == "non-scaling-stroke"
    assert element.get("class") == "dxf-entity LINE 1A"


def test_stroke_width_from_thickness():
    line = LineEntity(start=(0, 0), end=(2, 1), thickness=2.5)
    assert entity_to_element(line).get("stroke-width") == "2.5px"
    thin = LineEntity(start=(0, 0), end=(2, 1), thickness=0.1)
    assert entity_to_element(thin).get("stroke-width") == "1.0px"


def test_polyline_thickness_is_not_stroke_width(square_vertices):
    polyline = LWPolylineEntity(vertices=square_vertices, thickness=5.0)
    assert entity_to_element(polyline).get("stroke-width") == "1.0px"
    circle = CircleEntity(center=(0, 0), radius=1.0, thickness=3.0)
    assert entity_to_element(circle).get("stroke-width") == "3.0px"


def test_circle_is_ellipse_element():
    element = entity_to_element(CircleEntity(center=(1, 2), radius=3.0))
    assert element.tag == "ellipse"
    assert (element.get("cx"), element.get("cy")) == ("1.0", "2.0")
    assert element.get("rx") == element.get("ry") == "3.0"
    assert element.get("fill-opacity") == "0"


def test_full_ellipse_element():
    element = entity_to_element(EllipseEntity(center=(0, 0), major_axis=(0, 4), ratio=0.5))
    assert element.tag == "ellipse"
    assert element.get("rx") == "4.0"
    assert element.get("ry") == "2.0"


def test_partial_ellipse_is_path():
    entity = EllipseEntity(center=(0, 0), major_axis=(4, 0), ratio=0.5, end_param=math.pi / 2)
    element = entity_to_element(entity)
    assert element.tag == "path"
    assert element.get("d").startswith("M 4.0 0.0 A 4.0 2.0 ")


def test_arc_path_element():
    element = entity_to_element(ArcEntity(center=(0, 0), radius=1.0, start_angle=0, end_angle=90))
    assert element.tag == "path"
    assert element.get("fill-opacity") == "0"
    assert element.get("d").startswith("M 1.0 0.0 A 1.0 1.0 0.0 0 1 ")


def test_hatch_element(square_vertices):
    hatch = HatchEntity(
        boundaries=[PolylineBoundary(square_vertices)],
        hatch_style=HatchStyle.ENTIRE_AREA,
        transparency=0.25,
        color=3,
    )
    element = entity_to_element(hatch)
    assert element.tag == "path"
    assert element.get("fill") == "#00FF00"
    assert element.get("fill-opacity") == "0.75"
    assert element.get("stroke") is None
    assert element.get("d") == "M 0.0 0.0 L 1.0 0.0 L 1.0 1.0 L 0.0 1.0 L 0.0 0.0"


def test_unsupported_hatch_has_no_element(square_vertices):
    hatch = HatchEntity(boundaries=[PolylineBoundary(square_vertices)])
    assert entity_to_element(hatch) is None


def test_text_has_no_element():
    assert entity_to_element(TextEntity(text="A", insert=(1, 1))) is None


def test_description_attribute():
    line = LineEntity(start=(0, 0), end=(1, 1))
    element = entity_to_element(line, description="Otwór 10")
    assert element.get("data-description") == "Otwór 10"


def test_attribute_generator():
    line = LineEntity(start=(0, 0), end=(1, 1))

    def generator(description):
        return {"data-id": description.upper(), "title": description}

    element = entity_to_element(line, description="a1", attribute_generator=generator)
    assert element.get("data-id") == "A1"
    assert element.get("title") == "a1"
    assert element.get("data-description") is None


def test_class_without_handle():
    element = entity_to_element(CircleEntity(center=(0, 0), radius=1.0))
    assert element.get("class") == "dxf-entity CIRCLE"


def test_to_markup():
    markup = to_markup(entity_to_element(LineEntity(start=(0, 0), end=(1, 1))))
    assert markup.startswith("<line ")
    assert 'x2="1.0"' in markup
