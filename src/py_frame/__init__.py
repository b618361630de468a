"""
py-frame: a small immutable data frame with two access policies

Column access follows one of two fixed profiles chosen when a frame is built:

    - Policy.LEGACY: partial name matching, dimension dropping on
      frame[rows, col], compound-key chaining on extract(), recycling
      on assign()
    - Policy.STRICT: exact names (missing names warn), frames stay
      frames, scalar-only extract(), broadcast-or-exact assign()

Main classes:
    - PyColumn: immutable homogeneous column (bool, int, float or str)
    - PyFrame: ordered named columns of equal length plus a Policy

Every operator returns a new value; nothing is modified in place.
"""

from loguru import logger

from .column import PyColumn
from .errors import (
	InvalidIndexError,
	LengthMismatchError,
	MissingColumnWarning,
	PyFrameError,
	PyFrameIndexError,
	PyFrameKeyError,
	PyFrameTypeError,
	PyFrameValueError,
	PyFrameWarning,
	RecycleLengthWarning,
	ShapeError,
	UnequalColumnLengthError,
)
from .frame import FrameDescription, Lookup, PyFrame, describe, make_container
from .policy import DEFAULT_POLICY, Policy
from .resolver import Resolution, resolve_columns
from .rows import make_from_rows
from .typing import DataType

# Silent unless the application calls logger.enable("py_frame")
logger.disable("py_frame")

__version__ = "0.1.0"
__all__ = [
	"PyColumn",
	"PyFrame",
	"Policy",
	"DEFAULT_POLICY",
	"DataType",
	"Lookup",
	"FrameDescription",
	"Resolution",
	"make_container",
	"make_from_rows",
	"describe",
	"resolve_columns",
	"PyFrameError",
	"PyFrameKeyError",
	"PyFrameTypeError",
	"PyFrameValueError",
	"PyFrameIndexError",
	"InvalidIndexError",
	"LengthMismatchError",
	"ShapeError",
	"UnequalColumnLengthError",
	"PyFrameWarning",
	"MissingColumnWarning",
	"RecycleLengthWarning",
]
