"""Evaluation oracles.

An oracle scores candidate points. ``Objective`` wraps an arbitrary
single-objective callable behind a uniform ``evaluate(point)`` call and adds
nothing of its own: no caching, no retries, no error translation. Whatever
the wrapped callable returns or raises reaches the caller unchanged.

Matching the callable's signature to the problem dimensionality is the
caller's contract; it is never checked here.
"""

from dataclasses import dataclass
from typing import Callable, Generic, Iterable, Protocol, TypeVar, runtime_checkable

from .errors import ContractViolationError
from .types import Point, Real

P = TypeVar('P')
R = TypeVar('R')


@runtime_checkable
class Oracle(Protocol):
    """Protocol for anything that evaluates a candidate point."""

    def evaluate(self, point: Point) -> Real:
        """Score a single point."""
        ...


@dataclass(frozen=True)
class Objective(Generic[P, R]):
    """Oracle that evaluates a single-objective function."""
    f: Callable[[P], R]

    def __post_init__(self):
        if not callable(self.f):
            raise ContractViolationError(
                f"Objective requires a callable, got {type(self.f).__name__}"
            )

    def evaluate(self, point: P) -> R:
        return self.f(point)

    def __call__(self, point: P) -> R:
        return self.f(point)


def evaluate(oracle: Oracle, point: Point) -> Real:
    """Evaluate ``point`` against ``oracle``."""
    return oracle.evaluate(point)


def evaluate_batch(oracle: Oracle, points: Iterable[Point]) -> list[Real]:
    """Evaluate a batch of points in order.

    The first failure propagates and aborts the rest of the batch.
    """
    return [oracle.evaluate(point) for point in points]


__all__ = ["Oracle", "Objective", "evaluate", "evaluate_batch"]
