"""Access policies for PyFrame."""

from enum import Enum

from .errors import PyFrameValueError


class Policy(Enum):
	""" Behaviour profile fixed on a frame when it is built.

	LEGACY: partial name matching, dimension dropping on [rows, col],
	compound-key chaining on extract(), recycling on assign().
	STRICT: exact names only (with a warning when missing), no dimension
	dropping, scalar-only extract(), broadcast-or-exact assign().
	"""
	LEGACY = "legacy"
	STRICT = "strict"

	def __repr__(self):
		return f"Policy.{self.name}"

	@classmethod
	def coerce(cls, policy):
		"""Accept a Policy or its string value (case-insensitive)."""
		if isinstance(policy, cls):
			return policy
		if isinstance(policy, str):
			try:
				return cls(policy.lower())
			except ValueError:
				pass
		raise PyFrameValueError(f"Unknown policy {policy!r}; expected 'legacy' or 'strict'")


# Policy used when a frame is built without naming one
DEFAULT_POLICY = Policy.LEGACY
