"""Wspólne fixtures dla testów dxf2svg"""

import ezdxf
import pytest

from dxf2svg.dxf.entities import Spline, Vertex


@pytest.fixture
def square_vertices():
    """Kwadrat 1 x 1 bez łuków"""
    return [Vertex(0.0, 0.0), Vertex(1.0, 0.0), Vertex(1.0, 1.0), Vertex(0.0, 1.0)]


@pytest.fixture
def cubic_spline():
    """Spline stopnia 3 z dwoma różnymi węzłami wewnętrznymi"""
    return Spline(
        degree=3,
        control_points=[(0.0, 0.0), (1.0, 2.0), (2.0, 2.0), (3.0, 0.0), (4.0, -2.0), (5.0, 0.0)],
        knots=[0.0, 0.0, 0.0, 0.0, 1.0, 2.0, 3.0, 3.0, 3.0, 3.0],
    )


@pytest.fixture
def doc():
    return ezdxf.new()


@pytest.fixture
def msp(doc):
    return doc.modelspace()
