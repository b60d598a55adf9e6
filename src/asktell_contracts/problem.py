"""Problem specifications for box-constrained optimization.

A problem spec is pure data: the optimization sense plus one lower and one
upper bound per coordinate. It is validated once, when it is built, and can
never change afterwards. A different search domain means a new spec.

Validation runs in a fixed order and stops at the first violation:

1. ``lower_bounds`` and ``upper_bounds`` have the same length
2. the bounds are not empty
3. ``lower_bounds[i] <= upper_bounds[i]`` for every coordinate ``i``

The element types of the two bound sequences are independent. Integer lower
bounds next to float upper bounds are fine, and values are stored exactly as
given (no coercion to a common type).
"""

import numbers
from dataclasses import dataclass
from typing import Any, Generic, Sequence, TypeVar

from .errors import InvalidSpec
from .types import Sense

S = TypeVar('S')
T = TypeVar('T')


def _as_bounds(name: str, values: Any) -> tuple:
    """Freeze a bound sequence to a tuple, rejecting non-sequences."""
    # numpy arrays are not registered Sequences but sized and iterable
    sized = hasattr(values, "__len__") and hasattr(values, "__iter__")
    unordered = isinstance(values, (set, frozenset, dict))
    if isinstance(values, (str, bytes)) or unordered or not sized:
        raise InvalidSpec(
            f"`{name}` must be an ordered sequence of numbers, got {type(values).__name__}",
            reason="non_numeric",
        )
    return tuple(values)


def _is_real(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


@dataclass(frozen=True)
class BoxConstrainedSpec(Generic[S, T]):
    """Search specification for a box-constrained optimization problem.

    Raises:
        InvalidSpec: if the bounds differ in length, are empty, are not
            pointwise ordered, or hold non-numeric values; or if ``sense``
            is not a ``Sense``.
    """
    sense: Sense
    lower_bounds: Sequence[S]
    upper_bounds: Sequence[T]

    def __post_init__(self):
        if not isinstance(self.sense, Sense):
            raise InvalidSpec(
                f"`sense` must be a Sense, got {self.sense!r}", reason="sense"
            )

        lower = _as_bounds("lower_bounds", self.lower_bounds)
        upper = _as_bounds("upper_bounds", self.upper_bounds)
        object.__setattr__(self, "lower_bounds", lower)
        object.__setattr__(self, "upper_bounds", upper)

        if len(lower) != len(upper):
            raise InvalidSpec(
                "`lower_bounds` and `upper_bounds` must have the same length "
                f"(got {len(lower)} and {len(upper)})",
                reason="length_mismatch",
            )
        if not lower:
            raise InvalidSpec("bounds must not be empty", reason="empty_bounds")

        for i, (lo, hi) in enumerate(zip(lower, upper)):
            if not (_is_real(lo) and _is_real(hi)):
                raise InvalidSpec(
                    f"bounds must be real numbers, got {lo!r} and {hi!r} at index {i}",
                    reason="non_numeric",
                    index=i,
                )
            # NaN compares false, so it fails here as well
            if not lo <= hi:
                raise InvalidSpec(
                    "`lower_bounds` must be pointwise less or equal to `upper_bounds` "
                    f"(index {i}: {lo!r} > {hi!r})",
                    reason="bound_ordering",
                    index=i,
                )

    @property
    def dimension(self) -> int:
        """Number of coordinates in the search domain."""
        return len(self.lower_bounds)


# The generic name used by drivers and solver implementations
ProblemSpec = BoxConstrainedSpec


__all__ = ["BoxConstrainedSpec", "ProblemSpec"]
