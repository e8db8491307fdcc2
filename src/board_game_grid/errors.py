"""Exceptions raised by the grid model."""

from __future__ import annotations


class GridError(Exception):
    """Base class for all board-game-grid errors."""


class InvalidSquaresError(GridError, TypeError):
    """A square set was built from a mixed or unrecognised sequence."""


class UnknownPieceTypeError(GridError, ValueError):
    """A serialized piece names a type tag nobody registered."""
