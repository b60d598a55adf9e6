"""Core contract types."""

import enum
from typing import Sequence

# Type definitions
Real = int | float
Point = Sequence[Real]


class Sense(enum.Enum):
    """Optimization sense, either minimization or maximization."""
    MINIMIZE = -1
    MAXIMIZE = 1


# Exported constants
Minimize = Sense.MINIMIZE
Maximize = Sense.MAXIMIZE


__all__ = [
    "Real",
    "Point",
    "Sense",
    "Minimize",
    "Maximize",
]
