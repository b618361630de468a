"""Row-major frame construction."""

from loguru import logger

from .column import PyColumn
from .errors import ShapeError
from .frame import PyFrame
from .naming import _column_name_from_token
from .naming import _validate_names
from .policy import Policy
from .typing import infer_dtype
from .typing import validate_scalar


def make_from_rows(names, values):
	"""
	Build a frame from column name tokens and a flat, row-major list of values.

	Args:
		names: column names, optionally written as '~name' tokens
		values: flat values, row by row; the count must be a multiple of len(names)

	Returns:
		PyFrame under the STRICT policy, whatever the default policy is

	Raises:
		ShapeError: no names given, or values do not fill whole rows

	Each column gathers every C-th value starting at its own offset. Its kind
	is the narrowest one covering those values: bool -> int -> float, and
	any non-numeric value turns the whole column into text.

	Examples
	--------
	>>> f = make_from_rows(["~letters", "~numbers"], ["a", 1, "b", 2, "c", 3])
	>>> f.describe().kinds
	(<class 'str'>, <class 'int'>)
	"""
	names = _validate_names(_column_name_from_token(tok) for tok in names)
	values = tuple(values)
	width = len(names)

	if width == 0:
		raise ShapeError("At least one column name is required")
	if len(values) % width:
		raise ShapeError(
			f"{len(values)} values cannot be split into rows of {width} columns"
		)

	nrows = len(values) // width
	columns = []
	for pos, name in enumerate(names):
		gathered = values[pos::width]
		dtype = infer_dtype(gathered)
		coerced = tuple(validate_scalar(v, dtype) for v in gathered)
		columns.append(PyColumn._from_validated(coerced, dtype, name))

	logger.debug("Built {} x {} frame from rows", nrows, width)
	return PyFrame._from_columns(columns, nrows, Policy.STRICT)
