"""Contract exceptions."""

from typing import Optional


class ContractViolationError(Exception):
    """Raised when contract invariants are violated."""
    pass


class InvalidSpec(ContractViolationError, ValueError):
    """Raised when a problem specification fails validation.

    The ``reason`` attribute names the invariant that failed:
    ``length_mismatch``, ``empty_bounds``, ``bound_ordering``,
    ``non_numeric`` or ``sense``. For ``bound_ordering`` (and
    ``non_numeric``) ``index`` is the first offending coordinate.
    """

    def __init__(self, message: str, reason: str, index: Optional[int] = None):
        super().__init__(message)
        self.reason = reason
        self.index = index


class NoDataYet(ContractViolationError, LookupError):
    """Raised by a solver when a result is requested before any data was told."""
    pass


__all__ = ["ContractViolationError", "InvalidSpec", "NoDataYet"]
