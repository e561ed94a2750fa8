"""Caller-input errors raised before any drawing starts."""

from __future__ import annotations


class BiomorphError(ValueError):
    """Base class for invalid genome or surface input."""


class InvalidGenomeLength(BiomorphError):
    def __init__(self, length: int, expected: int):
        super().__init__(f"genome must have {expected} genes, got {length}")
        self.length = length
        self.expected = expected


class GeneOutOfRange(BiomorphError):
    def __init__(self, index: int, value: object, low: int, high: int):
        super().__init__(f"gene {index} must be an integer in [{low}, {high}], got {value!r}")
        self.index = index
        self.value = value


class InvalidSurfaceDimensions(BiomorphError):
    def __init__(self, width: float, height: float):
        super().__init__(f"surface dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
