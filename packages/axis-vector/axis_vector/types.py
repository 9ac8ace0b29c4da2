"""Shared exceptions and protocols for axis-vector."""
from __future__ import annotations

from enum import Enum
from typing import Protocol


class AxisMappingError(TypeError):
    """Raised while defining a shape whose fields do not cover every axis."""


class ShapeMismatchError(TypeError):
    """Raised when a vector operation mixes two different shapes."""

    def __init__(self, expected: type, actual: type) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"expected a vector over {expected.__name__}, got {actual.__name__}"
        )


class AxisStorage(Protocol):
    """Read/write capability the engine drives, one scalar per axis."""

    @classmethod
    def axes(cls) -> tuple[Enum, ...]: ...
    def __getitem__(self, axis: Enum) -> float: ...
    def __setitem__(self, axis: Enum, value: float) -> None: ...
