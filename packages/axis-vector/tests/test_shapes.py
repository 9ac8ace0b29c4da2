"""Tests for the built-in shapes and the end-to-end walk."""
from __future__ import annotations

from axis_vector import V2, V3, V4, V3Axis, format_axes, scaled


class TestConstruction:
    def test_fields(self) -> None:
        v = V4(1, 2, 3, 4)
        assert (v.x, v.y, v.z, v.w) == (1.0, 2.0, 3.0, 4.0)

    def test_ints_stored_as_float(self) -> None:
        assert isinstance(V2(1, 2).x, float)

    def test_equality(self) -> None:
        assert V3(1.0, 2.0, 3.0) == V3(1.0, 2.0, 3.0)
        assert V3(1.0, 2.0, 3.0) != V3(1.0, 2.0, 4.0)

    def test_repr(self) -> None:
        assert repr(V2(1.0, 2.5)) == "V2(x=1.0, y=2.5)"


class TestEndToEnd:
    def test_walkthrough(self) -> None:
        v = V3(5, 5, 5)
        v.add_scalar(5)
        assert v.as_tuple() == (10.0, 10.0, 10.0)
        v.divide_scalar(4)
        assert v.as_tuple() == (2.5, 2.5, 2.5)
        v[V3Axis.Z] += 1
        assert v.as_tuple() == (2.5, 2.5, 3.5)
        assert format_axes(v) == "x: 2.5, y: 2.5, z: 3.5"


class TestFormat:
    def test_shortest_single_precision(self) -> None:
        assert format_axes(V2(0.1, 0.0)) == "x: 0.1, y: 0.0"

    def test_non_exact_values(self) -> None:
        assert format_axes(V3(1 / 3, 0.3, -0.2)) == "x: 0.33333334, y: 0.3, z: -0.2"

    def test_four_axes(self) -> None:
        assert format_axes(V4(1, 2, 3, 4)) == "x: 1.0, y: 2.0, z: 3.0, w: 4.0"


class TestScaled:
    def test_new_vector(self) -> None:
        v = V3(2.0, 4.0, 6.0)
        half = scaled(v, 0.5)
        assert half == V3(1.0, 2.0, 3.0)
        assert v == V3(2.0, 4.0, 6.0)
        assert type(half) is V3
