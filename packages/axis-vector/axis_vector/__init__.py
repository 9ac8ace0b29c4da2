"""axis-vector - Fixed-dimension vectors sharing one elementwise arithmetic engine."""
from __future__ import annotations

from axis_vector.axes import V2Axis, V3Axis, V4Axis, all_axes, axis_names, select_axes
from axis_vector.engine import Vector, format_axes
from axis_vector.shapes import V2, V3, V4, scaled
from axis_vector.types import AxisMappingError, AxisStorage, ShapeMismatchError

__all__ = [
    "AxisMappingError",
    "AxisStorage",
    "ShapeMismatchError",
    "V2",
    "V2Axis",
    "V3",
    "V3Axis",
    "V4",
    "V4Axis",
    "Vector",
    "all_axes",
    "axis_names",
    "format_axes",
    "scaled",
    "select_axes",
]
