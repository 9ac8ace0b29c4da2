"""Vector - elementwise arithmetic written once against an axis enum.

A shape binds the engine to one axis enum with the ``axes`` class keyword
and supplies one annotated field per axis, named by the axis value::

    @dataclass
    class V2(Vector[V2Axis], axes=V2Axis):
        x: float
        y: float

Every stored value is single precision. Arithmetic follows IEEE-754, so
dividing by zero gives inf or nan instead of raising.
"""
from __future__ import annotations

import copy as _copy
import dataclasses
import inspect
import logging
import numbers
import operator
from enum import Enum
from typing import Any, Callable, ClassVar, Generic, TypeVar

import numpy as np

from axis_vector.axes import all_axes, axis_names
from axis_vector.types import AxisMappingError, AxisStorage, ShapeMismatchError

logger = logging.getLogger(__name__)

A = TypeVar("A", bound=Enum)
V = TypeVar("V", bound="Vector[Any]")

_Op = Callable[[np.float32, np.float32], np.float32]


def _single(value: float) -> float:
    if not isinstance(value, numbers.Real):
        raise TypeError(f"axis values must be real numbers, got {type(value).__name__}")
    with np.errstate(over="ignore"):
        return float(np.float32(value))


def _declared_fields(cls: type) -> set[str]:
    names: set[str] = set()
    for klass in cls.__mro__:
        if klass is Vector:
            break
        names.update(inspect.get_annotations(klass))
    return names


class Vector(Generic[A]):
    """In-place elementwise arithmetic shared by every vector shape."""

    _axis_type: ClassVar[type[Enum] | None] = None
    _slots: ClassVar[frozenset[str]] = frozenset()

    def __init_subclass__(cls, axes: type[Enum] | None = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if axes is None:
            # Subclasses of a bound shape keep the parent's axes.
            return
        bad = [axis.name for axis in axes if not isinstance(axis.value, str)]
        if bad:
            raise AxisMappingError(
                f"{cls.__name__}: axes {', '.join(bad)} of {axes.__name__} "
                f"must have str values naming a field"
            )
        names = axis_names(axes)
        if not names:
            raise AxisMappingError(
                f"{cls.__name__}: axis type {axes.__name__} has no axes"
            )
        declared = _declared_fields(cls)
        missing = [name for name in names if name not in declared]
        if missing:
            raise AxisMappingError(
                f"{cls.__name__}: no field for axes {', '.join(map(str, missing))} "
                f"of {axes.__name__}"
            )
        cls._axis_type = axes
        cls._slots = frozenset(names)
        logger.debug("bound %s to %s (%s)", cls.__name__, axes.__name__, ", ".join(names))

    def __new__(cls, *args: Any, **kwargs: Any) -> Vector[Any]:
        if cls._axis_type is None:
            raise TypeError(f"{cls.__name__} is not bound to an axis type")
        if not dataclasses.is_dataclass(cls):
            raise AxisMappingError(f"{cls.__name__} has no storage; decorate it with @dataclass")
        stored = {field.name for field in dataclasses.fields(cls)}
        missing = sorted(cls._slots - stored)
        if missing:
            raise AxisMappingError(
                f"{cls.__name__}: axes {', '.join(missing)} are not dataclass fields"
            )
        return super().__new__(cls)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in self._slots:
            value = _single(value)
        super().__setattr__(name, value)

    # --- Per-axis access ---

    @classmethod
    def axes(cls) -> tuple[A, ...]:
        assert cls._axis_type is not None
        return all_axes(cls._axis_type)  # type: ignore[return-value]

    def _slot(self, axis: A) -> str:
        if not isinstance(axis, self._axis_type):  # type: ignore[arg-type]
            raise KeyError(axis)
        return axis.value

    def __getitem__(self, axis: A) -> float:
        return getattr(self, self._slot(axis))

    def __setitem__(self, axis: A, value: float) -> None:
        setattr(self, self._slot(axis), value)

    # --- Scalar operations ---

    def add_scalar(self, scale: float) -> None:
        self._apply_scalar(operator.add, scale)

    def sub_scalar(self, scale: float) -> None:
        self._apply_scalar(operator.sub, scale)

    def multiply_scalar(self, scale: float) -> None:
        self._apply_scalar(operator.mul, scale)

    def divide_scalar(self, scale: float) -> None:
        """Divide every axis by ``scale``. Zero gives inf/nan per axis."""
        self._apply_scalar(operator.truediv, scale)

    # --- Vector operations ---

    def add_vector(self, other: Vector[A]) -> None:
        self._apply_vector(operator.add, other)

    def sub_vector(self, other: Vector[A]) -> None:
        self._apply_vector(operator.sub, other)

    def multiply_vector(self, other: Vector[A]) -> None:
        self._apply_vector(operator.mul, other)

    def divide_vector(self, other: Vector[A]) -> None:
        self._apply_vector(operator.truediv, other)

    def _apply_scalar(self, op: _Op, scale: float) -> None:
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            operand = np.float32(scale)
            for axis in self.axes():
                self[axis] = op(np.float32(self[axis]), operand)

    def _apply_vector(self, op: _Op, other: Vector[A]) -> None:
        if not isinstance(other, Vector) or other._axis_type is not self._axis_type:
            raise ShapeMismatchError(type(self), type(other))
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            for axis in self.axes():
                self[axis] = op(np.float32(self[axis]), np.float32(other[axis]))

    # --- Conversions ---

    def as_tuple(self) -> tuple[float, ...]:
        return tuple(self[axis] for axis in self.axes())

    def as_dict(self) -> dict[str, float]:
        return {axis.value: self[axis] for axis in self.axes()}

    def copy(self: V) -> V:
        """Independent instance of the same shape holding the same values."""
        return _copy.copy(self)


def format_axes(vector: AxisStorage) -> str:
    """``"x: 2.5, y: 2.5"`` using the shortest single-precision repr."""
    return ", ".join(
        f"{axis.value}: {str(np.float32(vector[axis]))}" for axis in vector.axes()
    )
