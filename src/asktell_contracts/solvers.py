"""Ask-tell solver protocol.

The ask-tell protocol decouples a solver from the way its queries are
evaluated. A driver repeatedly asks the solver for queries, evaluates them
against an oracle, and tells the solver the observed values. The solver's
current best solution can be read at any time with result().

Typical control flow:
    solver = SomeSolver(problem, ...)
    solver.tell(start_xs, start_ys)  # optional warm start
    for _ in range(max_iterations):
        queries = solver.ask()
        observations = oracle.evaluate(queries)
        solver.tell(queries, observations)
    solution = solver.result()

or, when the driver does not need to control the loop:
    solution = optimize(Objective(f), solver, max_iterations=100)

What a conforming solver guarantees:
- ask() returns one or more queries. The shape is solver-defined: a point,
  a batch of points, a point plus a fidelity level, etc.
- tell() may be called any number of times, interleaved with ask() in any
  order. Calling order alone never makes a call fail.
- result() returns the current best solution and does not change state:
  two calls with no tell() in between return the same value. result()
  before any tell() is solver-defined; raising NoDataYet is recommended
  over returning a degenerate answer.
- There is no terminal state. A solver stays queryable indefinitely.

Solvers are structurally typed: any class with the right methods conforms.
There is no base class to inherit from. Solver families (single-fidelity,
multi-fidelity, multi-objective) are independent types.

Concurrency:
- Everything here is synchronous. A solver instance owns private mutable
  state, so concurrent calls on one instance must be serialized by the
  caller, or each thread should own its own solver.

Failures:
- Exceptions raised by the oracle or the solver propagate unmodified and
  abort the loop. Solvers that want to skip failed evaluations should
  provide their own optimize() and document it.
"""

import logging
from typing import Any, Callable, Optional, Protocol, runtime_checkable

from .errors import ContractViolationError
from .oracles import Oracle

logger = logging.getLogger(__name__)


@runtime_checkable
class AskTellSolver(Protocol):
    """Protocol for ask-tell optimization solvers."""

    def ask(self, *args: Any, **kwargs: Any) -> Any:
        """Generate queries for oracle evaluation."""
        ...

    def tell(self, *args: Any, **kwargs: Any) -> None:
        """Process oracle evaluations."""
        ...

    def result(self, *args: Any, **kwargs: Any) -> Any:
        """Return the current result, typically the best solution found."""
        ...


@runtime_checkable
class OptimizingSolver(AskTellSolver, Protocol):
    """Ask-tell solver that also runs its own optimization loop."""

    def optimize(self, oracle: Oracle, *args: Any, **kwargs: Any) -> Any:
        """Run the optimization loop against ``oracle`` and return the result."""
        ...


def _require_solver(solver: Any) -> None:
    if not isinstance(solver, AskTellSolver):
        raise ContractViolationError(
            f"{type(solver).__name__} does not implement ask/tell/result"
        )


def ask(solver: AskTellSolver, *args: Any, **kwargs: Any) -> Any:
    """Generate queries for oracle evaluation."""
    return solver.ask(*args, **kwargs)


def tell(solver: AskTellSolver, *args: Any, **kwargs: Any) -> None:
    """Process oracle evaluations."""
    solver.tell(*args, **kwargs)


def result(solver: AskTellSolver, *args: Any, **kwargs: Any) -> Any:
    """Return the solver's current result."""
    return solver.result(*args, **kwargs)


def _evaluate_queries(oracle: Oracle, queries: Any) -> Any:
    return oracle.evaluate(queries)


def ask_tell_loop(
    oracle: Oracle,
    solver: AskTellSolver,
    max_iterations: int,
    evaluate: Optional[Callable[[Oracle, Any], Any]] = None,
) -> Any:
    """Run a fixed number of ask -> evaluate -> tell rounds.

    Args:
        oracle: Oracle the queries are evaluated against
        solver: Any ask-tell solver
        max_iterations: Number of rounds to run (may be zero)
        evaluate: ``evaluate(oracle, queries) -> observations``. Defaults to
            ``oracle.evaluate(queries)``; pass ``evaluate_batch`` for solvers
            whose ask() returns a batch of points.

    Returns:
        ``solver.result()`` after the last round

    Raises:
        ContractViolationError: If solver does not conform or max_iterations
            is not a non-negative integer
    """
    _require_solver(solver)
    if isinstance(max_iterations, bool) or not isinstance(max_iterations, int):
        raise ContractViolationError(
            f"max_iterations must be an integer, got {type(max_iterations).__name__}"
        )
    if max_iterations < 0:
        raise ContractViolationError(
            f"max_iterations must be non-negative, got {max_iterations}"
        )

    evaluate = evaluate or _evaluate_queries
    for iteration in range(max_iterations):
        queries = solver.ask()
        observations = evaluate(oracle, queries)
        solver.tell(queries, observations)
        logger.debug("ask-tell iteration %d/%d done", iteration + 1, max_iterations)

    logger.debug("ask-tell loop finished after %d iterations", max_iterations)
    return solver.result()


def optimize(oracle: Oracle, solver: AskTellSolver, *args: Any, **kwargs: Any) -> Any:
    """Run an optimization loop and return the solver's result.

    Solvers that provide their own ``optimize`` are delegated to with all
    arguments. Otherwise the generic ``ask_tell_loop`` runs, which takes
    ``max_iterations`` and an optional ``evaluate``.
    """
    _require_solver(solver)
    if isinstance(solver, OptimizingSolver):
        return solver.optimize(oracle, *args, **kwargs)
    return ask_tell_loop(oracle, solver, *args, **kwargs)


__all__ = [
    "AskTellSolver",
    "OptimizingSolver",
    "ask",
    "tell",
    "result",
    "optimize",
    "ask_tell_loop",
]
