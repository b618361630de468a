from __future__ import annotations
import warnings
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional, Tuple, Type

from loguru import logger

from .column import PyColumn
from .column import _normalize_position
from .errors import LengthMismatchError
from .errors import PyFrameIndexError
from .errors import PyFrameKeyError
from .errors import PyFrameTypeError
from .errors import RecycleLengthWarning
from .errors import UnequalColumnLengthError
from .errors import _missing_col_error
from .naming import _validate_names
from .policy import DEFAULT_POLICY
from .policy import Policy
from .resolver import resolve_columns
from .typing import DataType


@dataclass(frozen=True)
class Lookup:
	"""
	Result of a soft lookup (name access or extract()).

	value is None when nothing was found (found is False). warning holds
	the diagnostic the lookup produced, if any; it is only issued through
	the warnings module when the caller asks for it with unwrap().
	"""
	key: Any
	value: Any = None
	warning: Optional[Warning] = None
	found: bool = True

	@classmethod
	def not_found(cls, key, warning=None):
		return cls(key, None, warning, found=False)

	def unwrap(self, stacklevel=2):
		"""Issue the attached warning (if any) and return the value."""
		if self.warning is not None:
			warnings.warn(self.warning, stacklevel=stacklevel)
		return self.value


@dataclass(frozen=True)
class FrameDescription:
	"""Metadata snapshot of a frame, for printers and other collaborators."""
	names: Tuple[str, ...]
	kinds: Tuple[Type, ...]
	row_count: int
	policy: Policy


def _to_column(source, name):
	""" Coerce an assignment/constructor source into a PyColumn named name """
	if isinstance(source, PyFrame):
		raise PyFrameTypeError("A PyFrame cannot be used as a single column")
	if isinstance(source, PyColumn):
		return source.rename(name)
	if isinstance(source, (str, bytes)) or not hasattr(source, '__iter__'):
		return PyColumn.new(source, 1, name=name)
	return PyColumn(source, name=name)


class _RowView:
	"""Lightweight row view for iterating over frame rows with attribute access."""
	__slots__ = ('_cols', '_column_map', '_index')

	def __init__(self, frame, index):
		# Cache direct handles to underlying tuples
		self._cols = [col._underlying for col in frame._columns]
		self._column_map = {name: idx for idx, name in enumerate(frame._names)}
		self._index = index

	def set_index(self, index):
		"""Reuse this row view for a different index (avoids allocation during iteration)."""
		self._index = index
		return self

	def __getattr__(self, attr):
		"""Access column values by exact column name."""
		if attr.startswith('_'):
			raise AttributeError(attr)
		col_idx = self._column_map.get(attr)
		if col_idx is None:
			raise AttributeError(f"Row has no attribute '{attr}'")
		return self._cols[col_idx][self._index]

	def __getitem__(self, key):
		"""Access column values by position or name."""
		if isinstance(key, str):
			col_idx = self._column_map.get(key)
			if col_idx is None:
				raise _missing_col_error(key, context="row")
			return self._cols[col_idx][self._index]
		return self._cols[_normalize_position(key, len(self._cols), "Column position")][self._index]

	def __iter__(self):
		idx = self._index
		for col in self._cols:
			yield col[idx]

	def __len__(self):
		return len(self._cols)

	def __repr__(self):
		idx = self._index
		values = [repr(col[idx]) for col in self._cols]
		return f"Row({idx}: {', '.join(values)})"


class PyFrame():
	""" Named columns of the same length under one access policy

	Every operator returns a new value; a PyFrame is never modified after
	it is built. Columns are shared between frame versions by reference.

	Access operators:
		frame.get(name) / frame.<name>   name access
		frame.select(key) / frame[key]   always a PyFrame; an unknown name gives an empty one
		frame[rows, key]                 drops to a PyColumn for one column under LEGACY
		frame.extract(key)               one whole column; LEGACY chains compound keys
		frame.assign(name, source)       new frame with the column replaced or added

	LEGACY resolves unique name prefixes in every name lookup.
	"""
	__slots__ = ('_columns', '_names', '_length', '_policy')

	def __init__(self, columns=(), policy=DEFAULT_POLICY):
		if isinstance(columns, Mapping):
			cols = [_to_column(values, name) for name, values in columns.items()]
		else:
			cols = []
			for col in columns:
				if not isinstance(col, PyColumn) or col.name is None:
					raise PyFrameTypeError("PyFrame columns must be a mapping or a sequence of named PyColumns")
				cols.append(col)

		lengths = [len(col) for col in cols]
		if len(set(lengths)) > 1:
			detail = ', '.join(f"'{col.name}': {n}" for col, n in zip(cols, lengths))
			raise UnequalColumnLengthError(f"All columns must have the same length; got {detail}")

		self._init(tuple(cols), lengths[0] if lengths else 0, Policy.coerce(policy))

	def _init(self, columns, length, policy):
		self._names = _validate_names(col.name for col in columns)
		self._columns = columns
		self._length = length
		self._policy = policy

	@classmethod
	def _from_columns(cls, columns, length, policy):
		""" Build a frame from named columns already known to have `length` rows """
		frame = object.__new__(cls)
		frame._init(tuple(columns), length, policy)
		return frame

	@classmethod
	def from_rows(cls, names, values):
		""" Build a STRICT frame from row-major values; see make_from_rows """
		from .rows import make_from_rows
		return make_from_rows(names, values)

	# ------------------------------------------------------------------
	# Metadata
	# ------------------------------------------------------------------

	@property
	def names(self):
		return self._names

	@property
	def policy(self):
		return self._policy

	@property
	def ncols(self):
		return len(self._columns)

	def columns(self):
		return self._columns

	def size(self):
		return (self._length, len(self._columns))

	def describe(self):
		return FrameDescription(
			names=self._names,
			kinds=tuple(col.kind for col in self._columns),
			row_count=self._length,
			policy=self._policy,
		)

	def with_policy(self, policy):
		"""Return the same columns under another policy."""
		return type(self)._from_columns(self._columns, self._length, Policy.coerce(policy))

	def __len__(self):
		return self._length

	def __contains__(self, name):
		return name in self._names

	def __eq__(self, other):
		if not isinstance(other, PyFrame):
			return NotImplemented
		return (
			self._policy is other._policy
			and self._length == other._length
			and self._names == other._names
			and self._columns == other._columns
		)

	def __hash__(self):
		return hash((self._names, self._columns, self._length, self._policy))

	def __iter__(self):
		"""Iterate over rows using a reusable _RowView."""
		row_view = _RowView(self, 0)
		for i in range(self._length):
			row_view.set_index(i)
			yield row_view

	def __repr__(self):
		return (
			f"PyFrame({self._length} x {len(self._columns)}, "
			f"policy={self._policy.value}, names={list(self._names)})"
		)

	def __dir__(self):
		"""Return list of available attributes including column names."""
		return sorted(set(object.__dir__(self)) | {n for n in self._names if n.isidentifier()})

	# ------------------------------------------------------------------
	# Access operators
	# ------------------------------------------------------------------

	def get(self, name):
		"""
		Name access.

		Exact names resolve under both policies. LEGACY also resolves a
		unique prefix; a missing or ambiguous name is a silent miss.
		STRICT misses carry a MissingColumnWarning.

		Returns:
			Lookup with the PyColumn, or with value None when not found
		"""
		if not isinstance(name, str):
			raise PyFrameTypeError(f"Name access takes a column name, not {type(name).__name__}")
		res = resolve_columns(self, name)
		if not res.found:
			return Lookup.not_found(name, res.warning)
		return Lookup(name, self._columns[res.indices[0]])

	def __getattr__(self, attr):
		"""Name access as attributes: frame.values, frame.val (LEGACY prefix)."""
		if attr.startswith('_'):
			raise AttributeError(f"{self.__class__.__name__!s} object has no attribute '{attr}'")
		return self.get(attr).unwrap(stacklevel=3)

	def select(self, key):
		"""
		Single-bracket access: a new PyFrame holding the selected columns
		in the requested order. Never unwraps to a PyColumn.

		key may be a name, a position, a slice of positions, or a
		list/tuple of names and positions. LEGACY resolves unique name
		prefixes. A name that is not found gives a frame with no columns;
		under STRICT a MissingColumnWarning is issued as well.
		"""
		return self._select(key, stacklevel=3)

	def _select(self, key, stacklevel):
		res = resolve_columns(self, key)
		if not res.found:
			return self._not_found(res, Ellipsis, stacklevel + 1)
		return self._subset(res.indices)

	def __getitem__(self, key):
		if isinstance(key, tuple):
			if len(key) != 2:
				raise PyFrameKeyError(f"Frame indexing takes [key] or [rows, key], got {len(key)} indices")
			return self._row_col(key[0], key[1])
		return self._select(key, stacklevel=3)

	def _not_found(self, res, rows, stacklevel):
		""" Soft miss for bracket access: an empty frame, plus the warning under STRICT """
		if res.warning is not None:
			warnings.warn(res.warning, stacklevel=stacklevel)
		logger.debug("Bracket lookup found no column for {!r}", res.key)
		return self._subset((), rows)

	def _row_col(self, rows, key):
		res = resolve_columns(self, key)
		if not res.found:
			return self._not_found(res, rows, 4)
		if self._policy is Policy.LEGACY and len(res.indices) == 1:
			# drop to the bare column
			return self._columns[res.indices[0]].take(rows)
		return self._subset(res.indices, rows)

	def _subset(self, indices, rows=Ellipsis):
		cols = [self._columns[i].take(rows) for i in indices]
		if cols:
			length = len(cols[0])
		elif rows is Ellipsis:
			length = self._length
		else:
			row_ids = PyColumn._from_validated(tuple(range(self._length)), DataType(int))
			length = len(row_ids.take(rows))
		return type(self)._from_columns(cols, length, self._policy)

	def extract(self, key):
		"""
		Double-bracket access.

		A single name or position returns the whole column under both
		policies. A compound key such as [1, 3] is rejected under STRICT
		(InvalidIndexError); under LEGACY it is chained: key[0] picks the
		column and every further element is a positional lookup into the
		previous result, so [1, 3] is element 3 of column 1.

		Returns:
			Lookup with the column (or chained element), or value None
			for a missing name
		"""
		res = resolve_columns(self, key, arity="double")
		if not res.found:
			return Lookup.not_found(key, res.warning)

		value = self._columns[res.indices[0]]
		if isinstance(key, (str, int)):
			return Lookup(key, value)

		rest = list(key)[1:]
		for pos in rest:
			if not isinstance(value, PyColumn):
				raise PyFrameIndexError(f"Cannot index into scalar {value!r} with {pos!r}")
			value = value.element(pos)
		if rest:
			logger.debug("Chained extract {!r} -> {!r}", key, value)
		return Lookup(key, value)

	def assign(self, name, source):
		"""
		Column assignment. Returns a new PyFrame; the receiver is untouched.

		name is a column name (replaced in place if present, appended
		otherwise) or an existing column position. source is a PyColumn,
		an iterable of scalars, a single scalar, or None to drop the column.

		LEGACY recycles the source when its length divides the row count;
		otherwise it issues a RecycleLengthWarning and returns the receiver.
		STRICT accepts length 1 or the row count and raises
		LengthMismatchError for anything else.
		"""
		if isinstance(name, str):
			if name == "":
				raise PyFrameKeyError("Column names must not be empty")
			idx = self._names.index(name) if name in self._names else None
			target = name
		elif isinstance(name, int) and not isinstance(name, bool):
			idx = _normalize_position(name, len(self._columns), "Column position")
			target = self._names[idx]
		else:
			raise PyFrameTypeError(f"Assignment target must be a column name or position, not {type(name).__name__}")

		if source is None:
			if idx is None:
				return self
			cols = self._columns[:idx] + self._columns[idx + 1:]
			return type(self)._from_columns(cols, self._length, self._policy)

		col = _to_column(source, target)
		target_len = self._length if self._columns else len(col)
		try:
			col = col.recycle(target_len, self._policy)
		except LengthMismatchError as e:
			if self._policy is Policy.STRICT:
				raise
			logger.debug("Skipped assignment to '{}': {}", target, e)
			warnings.warn(RecycleLengthWarning(f"Assignment to '{target}' was not applied: {e}"), stacklevel=2)
			return self

		if idx is None:
			cols = self._columns + (col,)
		else:
			cols = self._columns[:idx] + (col,) + self._columns[idx + 1:]
		return type(self)._from_columns(cols, target_len, self._policy)


def make_container(columns, policy=DEFAULT_POLICY):
	"""
	Build a PyFrame from columns.

	Args:
		columns: mapping of name -> PyColumn or iterable of scalars,
			or a sequence of named PyColumns
		policy: Policy or 'legacy' / 'strict'

	Raises:
		UnequalColumnLengthError: columns differ in length
	"""
	return PyFrame(columns, policy=policy)


def describe(frame):
	"""Names, kinds, row count and policy of frame."""
	if not isinstance(frame, PyFrame):
		raise PyFrameTypeError(f"describe() takes a PyFrame, not {type(frame).__name__}")
	return frame.describe()
