"""Ask-tell contracts - stable interface between optimization drivers and solvers."""

from .version import CONTRACTS_VERSION
from .types import (
    Real,
    Point,
    Sense,
    Minimize,
    Maximize,
)
from .errors import ContractViolationError, InvalidSpec, NoDataYet
from .problem import BoxConstrainedSpec, ProblemSpec
from .oracles import Oracle, Objective, evaluate, evaluate_batch
from .solvers import (
    AskTellSolver,
    OptimizingSolver,
    ask,
    tell,
    result,
    optimize,
    ask_tell_loop,
)
from .config import ProblemConfig, load_problem

__version__ = CONTRACTS_VERSION

__all__ = [
    # Version
    "CONTRACTS_VERSION",
    # Problem specs
    "Sense",
    "Minimize",
    "Maximize",
    "BoxConstrainedSpec",
    "ProblemSpec",
    # Type aliases
    "Real",
    "Point",
    # Evaluation oracles
    "Oracle",
    "Objective",
    "evaluate",
    "evaluate_batch",
    # Ask-tell solver interface
    "AskTellSolver",
    "OptimizingSolver",
    "ask",
    "tell",
    "result",
    "optimize",
    "ask_tell_loop",
    # Errors
    "ContractViolationError",
    "InvalidSpec",
    "NoDataYet",
    # Configuration
    "ProblemConfig",
    "load_problem",
]
