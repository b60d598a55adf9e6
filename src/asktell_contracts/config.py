"""Problem configuration loading.

Drivers usually keep the search domain next to the rest of their settings.
``ProblemConfig`` is the serializable form of a ``BoxConstrainedSpec``: it
loads from YAML or plain dicts, validates through the same invariants as the
spec itself, and converts to and from the spec.

Example YAML:
    sense: minimize
    lower_bounds: [0, -1.5]
    upper_bounds: [10, 1.5]
"""

from pathlib import Path
from typing import Any, List, Union
import yaml
from pydantic import BaseModel, StrictFloat, StrictInt, field_validator, model_validator

from .errors import InvalidSpec
from .problem import BoxConstrainedSpec
from .types import Sense


_SENSE_ALIASES = {
    "min": Sense.MINIMIZE,
    "minimize": Sense.MINIMIZE,
    "minimise": Sense.MINIMIZE,
    "max": Sense.MAXIMIZE,
    "maximize": Sense.MAXIMIZE,
    "maximise": Sense.MAXIMIZE,
}


class ProblemConfig(BaseModel):
    """Serializable box-constrained problem definition."""

    sense: Sense
    lower_bounds: List[Union[StrictInt, StrictFloat]]
    upper_bounds: List[Union[StrictInt, StrictFloat]]

    @field_validator('sense', mode='before')
    def parse_sense(cls, v):
        if isinstance(v, Sense):
            return v
        if isinstance(v, str):
            key = v.strip().lower()
            if key in _SENSE_ALIASES:
                return _SENSE_ALIASES[key]
            raise ValueError(
                f"sense must be one of {sorted(_SENSE_ALIASES)}, got {v!r}"
            )
        if isinstance(v, int) and not isinstance(v, bool):
            return Sense(v)
        raise ValueError(f"sense must be a string or Sense, got {type(v).__name__}")

    @model_validator(mode='after')
    def validate_bounds(self):
        try:
            self.to_spec()
        except InvalidSpec as e:
            raise ValueError(f"{e} [{e.reason}]") from e
        return self

    def to_spec(self) -> BoxConstrainedSpec:
        """Build the validated, immutable problem spec."""
        return BoxConstrainedSpec(self.sense, self.lower_bounds, self.upper_bounds)

    @classmethod
    def from_spec(cls, spec: BoxConstrainedSpec) -> 'ProblemConfig':
        """Create a config from an existing spec."""
        return cls(
            sense=spec.sense,
            lower_bounds=list(spec.lower_bounds),
            upper_bounds=list(spec.upper_bounds),
        )

    @classmethod
    def from_dict(cls, data: dict) -> 'ProblemConfig':
        return cls.model_validate(data or {})

    @classmethod
    def from_yaml(cls, path: Path) -> 'ProblemConfig':
        """Load from a specific YAML file."""
        with open(path) as f:
            data = yaml.safe_load(f)
        return cls.model_validate(data or {})

    @classmethod
    def from_yaml_string(cls, yaml_str: str) -> 'ProblemConfig':
        """Load from YAML string."""
        data = yaml.safe_load(yaml_str)
        return cls.model_validate(data or {})

    def to_dict(self) -> dict[str, Any]:
        """Plain-data form with ``sense`` as its lowercase name."""
        data = self.model_dump()
        data['sense'] = self.sense.name.lower()
        return data

    def to_yaml(self, path: Path) -> None:
        """Save to a specific YAML file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w') as f:
            yaml.safe_dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

    def to_yaml_string(self) -> str:
        """Export to YAML string."""
        return yaml.safe_dump(self.to_dict(), default_flow_style=False, sort_keys=False)


def load_problem(path: Path) -> BoxConstrainedSpec:
    """Load a YAML problem file straight to a validated spec."""
    return ProblemConfig.from_yaml(path).to_spec()


__all__ = ["ProblemConfig", "load_problem"]
