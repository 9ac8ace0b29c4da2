"""Axis enumerations for the built-in vector shapes and ordering helpers."""
from __future__ import annotations

from enum import Enum
from typing import TypeVar

A = TypeVar("A", bound=Enum)


class V2Axis(Enum):
    X = "x"
    Y = "y"


class V3Axis(Enum):
    X = "x"
    Y = "y"
    Z = "z"


class V4Axis(Enum):
    """x, y, z plus the w (scale) component used by quaternions."""

    X = "x"
    Y = "y"
    Z = "z"
    W = "w"


def all_axes(axis_type: type[A]) -> tuple[A, ...]:
    """Every axis of ``axis_type`` in declaration order."""
    return tuple(axis_type)


def select_axes(axis_type: type[A], *axes: A) -> tuple[A, ...]:
    """The given axes in the given order. Rejects members of other enums."""
    for axis in axes:
        if not isinstance(axis, axis_type):
            raise TypeError(
                f"{axis!r} is not an axis of {axis_type.__name__}"
            )
    return axes


def axis_names(axis_type: type[Enum]) -> tuple[str, ...]:
    return tuple(axis.value for axis in axis_type)
