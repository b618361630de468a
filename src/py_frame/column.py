from loguru import logger

from .errors import LengthMismatchError
from .errors import PyFrameIndexError
from .errors import PyFrameTypeError
from .errors import PyFrameValueError
from .policy import Policy
from .typing import as_dtype
from .typing import infer_dtype
from .typing import validate_scalar


# How many elements repr() shows before inserting "..."
MAX_REPR_ITEMS = 10


def _normalize_position(pos, n, what="Index"):
	"""Turn a (possibly negative) 0-based position into an in-range one."""
	if isinstance(pos, bool) or not isinstance(pos, int):
		raise PyFrameTypeError(f"{what} must be an integer, not {type(pos).__name__}")
	if pos < 0:
		pos += n
	if not (0 <= pos < n):
		raise PyFrameIndexError(f"{what} {pos} out of range for length {n}")
	return pos


class PyColumn():
	""" Immutable, homogeneous column of scalars """
	__slots__ = ('_underlying', '_dtype', '_name')

	def __init__(self, initial=(), dtype=None, name=None):
		if isinstance(initial, (str, bytes)):
			raise PyFrameTypeError("PyColumn needs an iterable of values; use PyColumn.new(value, length) for a constant")
		if isinstance(initial, PyColumn):
			if dtype is None:
				dtype = initial._dtype
			if name is None:
				name = initial._name

		values = tuple(initial)
		dtype = as_dtype(dtype)
		if dtype is None:
			dtype = infer_dtype(values)

		self._dtype = dtype
		self._name = name
		self._underlying = tuple(validate_scalar(v, dtype) for v in values)

	@classmethod
	def _from_validated(cls, values, dtype, name=None):
		""" Build a column from values already known to fit dtype (no copy, no checks) """
		col = object.__new__(cls)
		col._underlying = values
		col._dtype = dtype
		col._name = name
		return col

	@classmethod
	def new(cls, default_element, length, name=None):
		""" create a new column of length * default_element """
		if isinstance(length, bool) or not isinstance(length, int) or length < 0:
			raise PyFrameValueError(f"length must be a non-negative integer, not {length!r}")
		dtype = infer_dtype([default_element])
		value = validate_scalar(default_element, dtype)
		return cls._from_validated((value,) * length, dtype, name)

	def schema(self):
		"""Get the DataType schema of this column."""
		return self._dtype

	@property
	def dtype(self):
		return self._dtype

	@property
	def kind(self):
		return self._dtype.kind

	@property
	def name(self):
		return self._name

	def rename(self, new_name):
		"""Return a renamed column sharing this column's storage."""
		return PyColumn._from_validated(self._underlying, self._dtype, new_name)

	def __iter__(self):
		""" iterate over the underlying tuple """
		return iter(self._underlying)

	def __len__(self):
		""" length of the underlying tuple """
		return len(self._underlying)

	def __eq__(self, other):
		if not isinstance(other, PyColumn):
			return NotImplemented
		return self._dtype.kind is other._dtype.kind and self._underlying == other._underlying

	def __hash__(self):
		return hash((self._dtype.kind, self._underlying))

	def __repr__(self):
		vals = self._underlying
		if len(vals) > MAX_REPR_ITEMS:
			shown = ', '.join(repr(v) for v in vals[:MAX_REPR_ITEMS]) + ', ...'
		else:
			shown = ', '.join(repr(v) for v in vals)
		name = f", name={self._name!r}" if self._name is not None else ""
		return f"PyColumn{self._dtype!r}([{shown}]{name})"

	def __getitem__(self, key):
		""" Get item(s) from self. Behavior varies by input type:
		The following return a PyColumn:
			# PyColumn of bool, or list of bool: masking (length must match)
			# Slice: the elements of the slice
			# List of int: the elements at those positions, in order

		Special: Indexing a single position returns a value
			# Int (0-based, negative counts from the end)
		"""
		if isinstance(key, int) and not isinstance(key, bool):
			return self._underlying[_normalize_position(key, len(self))]
		return self.take(key)

	def element(self, pos):
		"""Positional element read (0-based)."""
		return self._underlying[_normalize_position(pos, len(self))]

	def take(self, selector):
		"""
		Apply a row selector and always return a PyColumn.

		An integer selects a single row (a length-1 column), Ellipsis
		selects everything.
		"""
		n = len(self)
		underlying = self._underlying

		if selector is Ellipsis:
			return self
		if isinstance(selector, slice):
			return PyColumn._from_validated(underlying[selector], self._dtype, self._name)
		if isinstance(selector, int) and not isinstance(selector, bool):
			return PyColumn._from_validated((underlying[_normalize_position(selector, n)],), self._dtype, self._name)

		if isinstance(selector, PyColumn):
			if selector.kind is bool and not selector.dtype.nullable:
				selector = list(selector)
			elif selector.kind is int and not selector.dtype.nullable:
				selector = list(selector)
			else:
				raise PyFrameTypeError(f"Row selector columns must be non-nullable bool or int, not {selector.dtype!r}")

		if isinstance(selector, (list, tuple)):
			if selector and all(isinstance(e, bool) for e in selector):
				if len(selector) != n:
					raise PyFrameValueError(f"Boolean mask length {len(selector)} must match column length {n}")
				values = tuple(x for x, keep in zip(underlying, selector) if keep)
				return PyColumn._from_validated(values, self._dtype, self._name)
			values = tuple(underlying[_normalize_position(i, n)] for i in selector)
			return PyColumn._from_validated(values, self._dtype, self._name)

		raise PyFrameTypeError(f'Row selectors must be slices, integers, boolean masks or integer lists, not {type(selector).__name__}')

	def recycle(self, length, policy):
		"""
		Stretch this column to `length` rows.

		LEGACY repeats the values cyclically when len(self) evenly divides
		length. STRICT only broadcasts a single value or accepts an exact fit.

		Raises
		------
		LengthMismatchError
			When the policy does not allow this source length
		"""
		policy = Policy.coerce(policy)
		n = len(self)
		if n == length:
			return self

		if policy is Policy.STRICT:
			if n != 1:
				raise LengthMismatchError(
					f"Cannot fit a column of length {n} into {length} rows; "
					f"only length 1 or {length} is allowed"
				)
		elif n == 0 or length % n:
			raise LengthMismatchError(
				f"Cannot recycle a column of length {n} into {length} rows; "
				f"{length} is not a multiple of {n}"
			)

		logger.debug("Recycling column {!r} from {} to {} rows", self._name, n, length)
		return PyColumn._from_validated(self._underlying * (length // n), self._dtype, self._name)
