"""
DataType system for PyColumn / PyFrame.

Pure metadata design:
  - DataType describes column semantics (kind + nullable flag)
  - Only four kinds exist: bool, int, float and str (text)
  - Promotion is functional (immutable DataType instances)
  - Numeric kinds widen along bool -> int -> float; anything else is text
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Type

from .errors import PyFrameTypeError


KINDS = (bool, int, float, str)
_NUMERIC_LADDER = (bool, int, float)


@dataclass(frozen=True)
class DataType:
    """
    Describes the semantic type of a PyColumn.

    Attributes
    ----------
    kind : Type
        One of bool, int, float, str
    nullable : bool
        Whether the column may contain None values

    Examples
    --------
    >>> DataType(int)
    <int>
    >>> DataType(int).promote_with(2.5)
    <float>
    >>> DataType(int).promote_with("x")
    <str>
    >>> DataType(float).promote_with(None)
    <float nullable>
    """

    kind: Type[Any]
    nullable: bool = False

    def __post_init__(self):
        if self.kind not in KINDS:
            raise PyFrameTypeError(
                f"Unsupported column kind {getattr(self.kind, '__name__', self.kind)!s}; "
                f"expected one of bool, int, float, str"
            )

    def __repr__(self):
        if self.nullable:
            return f"<{self.kind.__name__} nullable>"
        return f"<{self.kind.__name__}>"

    @property
    def is_numeric(self) -> bool:
        """True if kind is bool, int or float."""
        return self.kind in _NUMERIC_LADDER

    def with_nullable(self, nullable: bool = True) -> "DataType":
        if nullable == self.nullable:
            return self
        return DataType(self.kind, nullable)

    def promote_with(self, value: Any) -> "DataType":
        """
        Promote this DataType to accommodate a new Python value.

        Never mutates; always returns new DataType.
        """
        # None just lifts nullability
        if value is None:
            return self.with_nullable(True)

        vkind = infer_kind(value)

        if vkind is self.kind:
            return self

        # Numeric ladder (bool -> int -> float)
        if self.is_numeric and vkind in _NUMERIC_LADDER:
            new_kind = max(self.kind, vkind, key=_NUMERIC_LADDER.index)
            return DataType(new_kind, self.nullable)

        # Any non-numeric value forces text
        return DataType(str, self.nullable)


def infer_kind(value: Any) -> Optional[Type]:
    """
    Infer the column kind for a single scalar.

    Returns None for None values. Scalars outside the numeric kinds
    (bytes, dates, decimals, ...) are text; validate_scalar stores them
    as str(value).
    """
    if value is None:
        return None

    # Check bool BEFORE int (bool is subclass of int)
    if isinstance(value, bool):
        return bool
    if isinstance(value, int):
        return int
    if isinstance(value, float):
        return float
    if isinstance(value, (str, bytes, bytearray)):
        return str
    # Other sized values are containers (lists, tuples, columns), not scalars
    if hasattr(value, "__len__"):
        raise PyFrameTypeError(
            f"Column values must be scalars, not {type(value).__name__}"
        )
    return str


def infer_dtype(values: Iterable[Any]) -> DataType:
    """
    Infer a DataType from an iterable of Python scalars.

    Empty or all-None input is a nullable bool column, the
    same as a logical missing value.

    Examples
    --------
    >>> infer_dtype([1, 2, 3])
    <int>
    >>> infer_dtype([True, 2, 3.5])
    <float>
    >>> infer_dtype([1, None, 3])
    <int nullable>
    >>> infer_dtype(["a", 1])
    <str>
    """
    dtype: Optional[DataType] = None
    saw_none = False

    for v in values:
        if v is None:
            saw_none = True
            continue
        if dtype is None:
            dtype = DataType(infer_kind(v))
        else:
            dtype = dtype.promote_with(v)

    if dtype is None:
        return DataType(bool, nullable=True)

    return dtype.with_nullable(True) if saw_none else dtype


def validate_scalar(value: Any, dtype: DataType) -> Any:
    """
    Validate (and possibly coerce) a scalar before storing it in a column.

    Raises
    ------
    PyFrameTypeError
        If value is incompatible with dtype
    """
    if value is None:
        if not dtype.nullable:
            raise PyFrameTypeError(
                f"Cannot store None in non-nullable {dtype.kind.__name__} column"
            )
        return None

    vkind = infer_kind(value)

    if vkind is dtype.kind and (vkind is not str or isinstance(value, str)):
        return value

    # Numeric coercions
    if dtype.kind is float and vkind in (int, bool):
        return float(value)
    if dtype.kind is int and vkind is bool:
        return int(value)

    # Everything renders as text
    if dtype.kind is str:
        return str(value)

    raise PyFrameTypeError(
        f"Incompatible value {value!r} for column<{dtype.kind.__name__}>"
    )


def as_dtype(dtype) -> Optional[DataType]:
    """Convert a python type (or DataType, or None) to a DataType."""
    if dtype is None or isinstance(dtype, DataType):
        return dtype
    return DataType(dtype)
