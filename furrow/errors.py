"""Errors — typed failures raised by the farm grid and its items.

Every failure carries the human-readable message shown to the farmer.
None of them are fatal: callers catch ``FarmError`` and report
``str(error)``.
"""

from __future__ import annotations


class FarmError(Exception):
    """Base class for every recoverable farm failure."""


class UnableToInteractError(FarmError):
    """A harvest or interaction could not be carried out."""


class OutOfBoundsError(UnableToInteractError):
    """The requested coordinate lies outside the grid."""


class EmptyCellError(UnableToInteractError):
    """The requested cell holds no item."""


class NotReadyError(UnableToInteractError):
    """A plant was harvested before reaching its final growth stage."""


class NotFedError(UnableToInteractError):
    """An animal was harvested before being fed today."""


class AlreadyProducedError(UnableToInteractError):
    """An animal was harvested a second time in one day."""


class UnknownCommandError(UnableToInteractError):
    """The command is not supported by the grid or the item."""


class WrongFarmTypeError(UnableToInteractError):
    """The item family does not match the farm type."""


class OccupiedCellError(FarmError):
    """Something already occupies the target cell."""


class LoadFormatError(FarmError, ValueError):
    """A saved farm file could not be parsed."""
