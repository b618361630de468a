"""Column name validation and row-builder token utilities."""

from __future__ import annotations

from .errors import PyFrameTypeError, PyFrameValueError


def _column_name_from_token(token) -> str:
	"""Normalise a row-builder name token.

	Rules:
	- Must be a string
	- A single leading '~' marks a column header and is dropped
	- Surrounding whitespace is stripped
	- Must not be empty afterwards
	"""
	if not isinstance(token, str):
		raise PyFrameTypeError(f"Column name tokens must be strings, not {type(token).__name__}")

	name = token.strip()
	if name.startswith("~"):
		name = name[1:].strip()

	if name == "":
		raise PyFrameValueError(f"Column name token {token!r} is empty")
	return name


def _validate_names(names) -> tuple[str, ...]:
	"""Check names are non-empty strings and unique; return them as a tuple."""
	names = tuple(names)
	seen = set()
	for name in names:
		if not isinstance(name, str):
			raise PyFrameTypeError(f"Column names must be strings, not {type(name).__name__}")
		if name == "":
			raise PyFrameValueError("Column names must not be empty")
		if name in seen:
			raise PyFrameValueError(f"Duplicate column name '{name}'")
		seen.add(name)
	return names


def _prefix_matches(key: str, names) -> list[int]:
	"""Positions of every name that starts with key."""
	return [idx for idx, name in enumerate(names) if name.startswith(key)]
