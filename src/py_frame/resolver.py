"""
Column index resolution for PyFrame.

resolve_columns() is a pure function: given a frame, a lookup key and an
arity context it returns a Resolution holding the ordered column positions
or a NotFound outcome (indices is None), possibly carrying a warning.

Positions are 0-based; negative positions count from the end. Positional
lookups behave the same under both policies.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Optional, Tuple

from loguru import logger

from .column import PyColumn
from .column import _normalize_position
from .errors import InvalidIndexError
from .errors import MissingColumnWarning
from .errors import PyFrameTypeError
from .errors import PyFrameValueError
from .naming import _prefix_matches
from .policy import Policy


ARITIES = ("single", "double")


@dataclass(frozen=True)
class Resolution:
	"""Outcome of a column lookup."""
	key: Any
	indices: Optional[Tuple[int, ...]]
	warning: Optional[Warning] = None

	@property
	def found(self) -> bool:
		return self.indices is not None


def _is_scalar_key(key) -> bool:
	if isinstance(key, bool):
		raise PyFrameTypeError("Column keys must be names or positions, not bool")
	return isinstance(key, (str, int))


def _as_key_list(key) -> list:
	if isinstance(key, PyColumn):
		return list(key)
	if isinstance(key, (list, tuple)):
		return list(key)
	raise PyFrameTypeError(
		f"Column keys must be names, positions, slices or sequences of those, not {type(key).__name__}"
	)


def _missing(key, policy) -> Resolution:
	if policy is Policy.STRICT:
		return Resolution(key, None, MissingColumnWarning(f"Unknown or uninitialised column: '{key}'."))
	return Resolution(key, None)


def _resolve_scalar(names, policy, key, partial) -> Resolution:
	if not _is_scalar_key(key):
		raise PyFrameTypeError(f"Column keys must be names or positions, not {type(key).__name__}")

	if isinstance(key, int):
		return Resolution(key, (_normalize_position(key, len(names), "Column position"),))

	# Exact match wins under every policy
	for idx, name in enumerate(names):
		if name == key:
			return Resolution(key, (idx,))

	if policy is Policy.LEGACY and partial:
		matches = _prefix_matches(key, names)
		if len(matches) == 1:
			logger.debug("Partial match: '{}' resolved to column '{}'", key, names[matches[0]])
			return Resolution(key, (matches[0],))
		if matches:
			logger.debug("Partial match: '{}' is ambiguous between {}", key, [names[i] for i in matches])

	return _missing(key, policy)


def resolve_columns(frame, key, arity="single", partial=True) -> Resolution:
	"""
	Resolve key against the columns of frame.

	Args:
		frame: PyFrame supplying the column names and the policy
		key: name, position, slice of positions, or a sequence of names/positions
		arity: "single" for name and bracket access, "double" for extract()
		partial: allow unique-prefix name matches (LEGACY only; on by default)

	Returns:
		Resolution. For arity "double" with a compound key under LEGACY
		only the head of the key is resolved; the caller chains the rest.

	Raises:
		PyFrameIndexError: position out of range
		InvalidIndexError: compound key with arity "double" under STRICT
		PyFrameTypeError: unsupported key type
	"""
	if arity not in ARITIES:
		raise PyFrameValueError(f"arity must be one of {ARITIES}, not {arity!r}")

	names = frame.names
	policy = frame.policy

	if _is_scalar_key(key):
		return _resolve_scalar(names, policy, key, partial)

	if arity == "double":
		if isinstance(key, slice):
			raise InvalidIndexError("extract() takes a single name or position, not a slice")
		keys = _as_key_list(key)
		if not keys:
			raise InvalidIndexError("extract() needs a non-empty key")
		if len(keys) == 1:
			return _resolve_scalar(names, policy, keys[0], partial)
		if policy is Policy.STRICT:
			raise InvalidIndexError(
				f"extract() takes a single name or position under the strict policy, got {len(keys)} keys"
			)
		return _resolve_scalar(names, policy, keys[0], partial)

	if isinstance(key, slice):
		return Resolution(key, tuple(range(len(names))[key]))

	indices = []
	for k in _as_key_list(key):
		res = _resolve_scalar(names, policy, k, partial)
		if not res.found:
			return Resolution(k, None, res.warning)
		indices.extend(res.indices)
	return Resolution(key, tuple(indices))
