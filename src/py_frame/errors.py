class PyFrameError(Exception):
    """Base exception for py-frame library."""
    pass


class PyFrameKeyError(PyFrameError, KeyError):
    """Raised when a column/key is missing."""
    pass


class PyFrameTypeError(PyFrameError, TypeError):
    """Raised for invalid types in API calls."""
    pass


class PyFrameValueError(PyFrameError, ValueError):
    """Raised for invalid values or mismatched lengths."""
    pass


class PyFrameIndexError(PyFrameError, IndexError):
    """Raised for out-of-range positions."""
    pass


class InvalidIndexError(PyFrameIndexError):
    """Raised when a compound key is given where only a scalar key is allowed."""
    pass


class LengthMismatchError(PyFrameValueError):
    """Raised when an assigned column cannot be fitted to the row count."""
    pass


class ShapeError(PyFrameValueError):
    """Raised when row-major values do not fill a whole number of rows."""
    pass


class UnequalColumnLengthError(PyFrameValueError):
    """Raised when columns of differing length are combined into one frame."""
    pass


class PyFrameWarning(UserWarning):
    """Base warning for py-frame library."""
    pass


class MissingColumnWarning(PyFrameWarning):
    """A column lookup found nothing under the strict policy."""
    pass


class RecycleLengthWarning(PyFrameWarning):
    """A legacy assignment was skipped because the source length does not divide the row count."""
    pass


def _missing_col_error(name, context="PyFrame"):
    return PyFrameKeyError(f"Column '{name}' not found in {context}")
