"""Built-in 2, 3 and 4 component vector shapes."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeVar

from axis_vector.axes import V2Axis, V3Axis, V4Axis
from axis_vector.engine import Vector

S = TypeVar("S", bound=Vector[Any])


@dataclass
class V2(Vector[V2Axis], axes=V2Axis):
    x: float
    y: float


@dataclass
class V3(Vector[V3Axis], axes=V3Axis):
    x: float
    y: float
    z: float


@dataclass
class V4(Vector[V4Axis], axes=V4Axis):
    """Four components; w is the scale axis of a quaternion."""

    x: float
    y: float
    z: float
    w: float


def scaled(vector: S, factor: float) -> S:
    """New vector of the same shape with every axis multiplied by ``factor``."""
    result = vector.copy()
    result.multiply_scalar(factor)
    return result
