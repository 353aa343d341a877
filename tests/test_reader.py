"""Testy odczytu entities ezdxf do modelu dxf2svg"""

import math

import pytest

from dxf2svg.exceptions import DXFReadError
from dxf2svg.dxf.converters import convert_entity
from dxf2svg.dxf.entities import (
    ArcEntity, CircleEntity, EdgeBoundary, EllipseEntity, HatchEntity, HatchStyle,
    LineEdge, LineEntity, LWPolylineEntity, OtherEntity, PolylineBoundary,
    PolylineEntity, SplineEntity, TextEntity, Vertex,
)
from dxf2svg.dxf.reader import DXFSvgReader, entity_from_dxf
from dxf2svg.dxf.svg_path import CubicCurveTo


def test_line(msp):
    line = msp.add_line((0, 0), (1, 2), dxfattribs={'layer': 'A', 'color': 1})
    entity = entity_from_dxf(line)
    assert isinstance(entity, LineEntity)
    assert entity.start == (0.0, 0.0)
    assert entity.end == (1.0, 2.0)
    assert entity.layer == 'A'
    assert entity.color == 1
    assert entity.handle == line.dxf.handle


def test_arc_and_circle(msp):
    arc = entity_from_dxf(msp.add_arc((1, 1), 2.0, 0, 90))
    assert isinstance(arc, ArcEntity)
    assert arc.center == (1.0, 1.0)
    assert arc.radius == 2.0
    assert (arc.start_angle, arc.end_angle) == (0.0, 90.0)

    circle = entity_from_dxf(msp.add_circle((3, 4), 1.5))
    assert isinstance(circle, CircleEntity)
    assert circle.radius == 1.5


def test_ellipse(msp):
    e = msp.add_ellipse((0, 0), major_axis=(2, 0), ratio=0.5, start_param=0, end_param=math.pi)
    entity = entity_from_dxf(e)
    assert isinstance(entity, EllipseEntity)
    assert entity.major_axis == (2.0, 0.0)
    assert entity.ratio == pytest.approx(0.5)
    assert entity.end_param == pytest.approx(math.pi)


def test_lwpolyline_with_bulge(msp):
    pl = msp.add_lwpolyline([(0, 0, 0), (1, 0, 0.5), (1, 1, 0)], format='xyb', close=True)
    entity = entity_from_dxf(pl)
    assert isinstance(entity, LWPolylineEntity)
    assert entity.is_closed
    assert entity.vertices[1] == Vertex(1.0, 0.0, 0.5)


def test_polyline_2d(msp):
    pl = msp.add_polyline2d([(0, 0), (2, 0), (2, 2)], close=True)
    entity = entity_from_dxf(pl)
    assert isinstance(entity, PolylineEntity)
    assert entity.is_closed
    assert [v.point for v in entity.vertices] == [(0.0, 0.0), (2.0, 0.0), (2.0, 2.0)]
    assert len(convert_entity(entity)) == 4


def test_spline_converts_exactly(msp):
    sp = msp.add_open_spline(
        [(0, 0), (1, 2), (3, 2), (4, 0)], degree=3, knots=[0, 0, 0, 0, 1, 1, 1, 1]
    )
    entity = entity_from_dxf(sp)
    assert isinstance(entity, SplineEntity)
    assert entity.spline.degree == 3
    assert len(entity.spline.control_points) == 4
    path = convert_entity(entity)
    assert path.segments[1] == CubicCurveTo((1.0, 2.0), (3.0, 2.0), (4.0, 0.0))


def test_hatch_polyline_path(msp):
    hatch = msp.add_hatch(color=2)
    hatch.paths.add_polyline_path([(0, 0), (1, 0), (1, 1)], is_closed=True)
    hatch.dxf.hatch_style = 2
    entity = entity_from_dxf(hatch)
    assert isinstance(entity, HatchEntity)
    assert entity.hatch_style is HatchStyle.ENTIRE_AREA
    assert entity.color == 2
    boundary = entity.boundaries[0]
    assert isinstance(boundary, PolylineBoundary)
    assert boundary.is_closed
    assert boundary.vertices == [Vertex(0.0, 0.0, 0.0), Vertex(1.0, 0.0, 0.0), Vertex(1.0, 1.0, 0.0)]


def test_hatch_edge_path(msp):
    hatch = msp.add_hatch()
    edge_path = hatch.paths.add_edge_path()
    edge_path.add_line((0, 0), (1, 0))
    edge_path.add_line((1, 0), (0, 1))
    edge_path.add_line((0, 1), (0, 0))
    entity = entity_from_dxf(hatch)
    boundary = entity.boundaries[0]
    assert isinstance(boundary, EdgeBoundary)
    assert boundary.edges[0] == LineEdge((0.0, 0.0), (1.0, 0.0))
    assert len(boundary.edges) == 3


def test_hatch_transparency(msp):
    hatch = msp.add_hatch()
    hatch.paths.add_polyline_path([(0, 0), (1, 0), (1, 1)], is_closed=True)
    hatch.transparency = 0.5
    entity = entity_from_dxf(hatch)
    assert entity.transparency == pytest.approx(0.5, abs=0.01)


def test_text_and_mtext(msp):
    text = entity_from_dxf(msp.add_text("Opis", dxfattribs={'insert': (2, 3)}))
    assert isinstance(text, TextEntity)
    assert text.text == "Opis"
    assert text.insert == (2.0, 3.0)

    mtext = entity_from_dxf(msp.add_mtext("Drugi opis", dxfattribs={'insert': (4, 5)}))
    assert isinstance(mtext, TextEntity)
    assert mtext.text == "Drugi opis"
    assert mtext.insert == (4.0, 5.0)


def test_other_entity_with_extents(msp):
    entity = entity_from_dxf(msp.add_point((1, 2)))
    assert isinstance(entity, OtherEntity)
    assert entity.dxftype == "POINT"
    assert entity.bounds.center == pytest.approx((1.0, 2.0))


def test_bylayer_color_resolved(doc, msp):
    doc.layers.add("RED", color=1)
    msp.add_line((0, 0), (1, 0), dxfattribs={'layer': 'RED'})
    layers = DXFSvgReader().read_document(doc)
    assert layers["RED"][0].color == 1


def test_read_document_groups_and_filters(doc, msp):
    msp.add_line((0, 0), (1, 0), dxfattribs={'layer': 'B'})
    msp.add_circle((0, 0), 1.0, dxfattribs={'layer': 'A'})
    msp.add_line((0, 0), (0, 1), dxfattribs={'layer': 'B'})

    layers = DXFSvgReader().read_document(doc)
    assert list(layers) == ['A', 'B']
    assert len(layers['B']) == 2

    only_b = DXFSvgReader(layers=['B']).read_document(doc)
    assert list(only_b) == ['B']


def test_redraw_order(doc, msp):
    first = msp.add_line((0, 0), (1, 0))
    second = msp.add_line((0, 0), (0, 1))
    msp.set_redraw_order({first.dxf.handle: 'FF', second.dxf.handle: '1'})
    entities = DXFSvgReader().read_document(doc)['0']
    assert [e.handle for e in entities] == [second.dxf.handle, first.dxf.handle]


def test_read_file(tmp_path, doc, msp):
    msp.add_line((0, 0), (1, 0))
    filepath = tmp_path / "line.dxf"
    doc.saveas(filepath)
    layers = DXFSvgReader().read(filepath)
    assert isinstance(layers['0'][0], LineEntity)


def test_read_missing_file(tmp_path):
    with pytest.raises(DXFReadError):
        DXFSvgReader().read(tmp_path / "missing.dxf")


def test_read_invalid_file(tmp_path):
    filepath = tmp_path / "broken.dxf"
    filepath.write_text("not a dxf file")
    with pytest.raises(DXFReadError):
        DXFSvgReader().read(filepath)


def test_pattern_hatch_filled_like_solid(msp):
    hatch = msp.add_hatch()
    hatch.set_pattern_fill('ANSI31')
    hatch.paths.add_polyline_path([(0, 0), (1, 0), (1, 1)], is_closed=True)
    hatch.dxf.hatch_style = 2
    entity = entity_from_dxf(hatch)
    assert not hasattr(entity, 'solid_fill')
    assert str(convert_entity(entity)) == "M 0.0 0.0 L 1.0 0.0 L 1.0 1.0 L 0.0 0.0"
