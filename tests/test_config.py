"""Tests for problem configuration loading."""

import pytest
import yaml
from pydantic import ValidationError

from asktell_contracts import (
    ProblemConfig,
    BoxConstrainedSpec,
    Minimize,
    Maximize,
    load_problem,
)


def test_from_dict():
    """Test loading from plain data."""
    config = ProblemConfig.from_dict({
        "sense": "minimize",
        "lower_bounds": [0, -1.5],
        "upper_bounds": [10, 1.5],
    })
    assert config.sense is Minimize
    spec = config.to_spec()
    assert isinstance(spec, BoxConstrainedSpec)
    assert spec.lower_bounds == (0, -1.5)
    assert spec.upper_bounds == (10, 1.5)


@pytest.mark.parametrize("value,expected", [
    ("min", Minimize),
    ("Minimize", Minimize),
    (" MAX ", Maximize),
    ("maximise", Maximize),
    (-1, Minimize),
    (1, Maximize),
    (Maximize, Maximize),
])
def test_sense_spellings(value, expected):
    """Test accepted spellings of the sense."""
    config = ProblemConfig(sense=value, lower_bounds=[0], upper_bounds=[1])
    assert config.sense is expected


@pytest.mark.parametrize("value", ["sideways", 0, 2, None, 1.0])
def test_invalid_sense(value):
    """Test unknown senses are rejected."""
    with pytest.raises(ValidationError):
        ProblemConfig(sense=value, lower_bounds=[0], upper_bounds=[1])


def test_number_types_preserved():
    """Test integer and float bounds survive loading."""
    config = ProblemConfig.from_yaml_string(
        "sense: max\nlower_bounds: [1, 2]\nupper_bounds: [1.5, 2.5]\n"
    )
    spec = config.to_spec()
    assert all(type(v) is int for v in spec.lower_bounds)
    assert all(type(v) is float for v in spec.upper_bounds)


@pytest.mark.parametrize("lower,upper,reason", [
    ([1, 2, 3], [3, 4], "length_mismatch"),
    ([], [], "empty_bounds"),
    ([1, 23], [4, 1], "bound_ordering"),
])
def test_invalid_problem_rejected_at_load(lower, upper, reason):
    """Test spec invariants are enforced when the config loads."""
    with pytest.raises(ValidationError, match=reason):
        ProblemConfig(sense="min", lower_bounds=lower, upper_bounds=upper)


def test_yaml_string_roundtrip():
    """Test YAML export keeps sense readable."""
    config = ProblemConfig(sense=Maximize, lower_bounds=[0.5], upper_bounds=[2])
    text = config.to_yaml_string()
    data = yaml.safe_load(text)
    assert data == {"sense": "maximize", "lower_bounds": [0.5], "upper_bounds": [2]}
    assert ProblemConfig.from_yaml_string(text) == config


def test_yaml_file(tmp_path):
    """Test saving and loading a YAML file."""
    path = tmp_path / "problems" / "sphere.yaml"
    spec = BoxConstrainedSpec(Minimize, [-5.0, -5.0], [5.0, 5.0])
    ProblemConfig.from_spec(spec).to_yaml(path)

    assert path.exists()
    assert ProblemConfig.from_yaml(path).to_spec() == spec
    assert load_problem(path) == spec


def test_missing_field():
    """Test incomplete configs are rejected."""
    with pytest.raises(ValidationError):
        ProblemConfig.from_yaml_string("sense: min\nlower_bounds: [0]\n")


@pytest.mark.parametrize("lower,upper", [
    ([True], [1]),
    ([0], [False]),
    (["0"], ["1.5"]),
    ([0], ["1"]),
])
def test_non_numeric_bounds_rejected(lower, upper):
    """Test bools and numeric strings are not coerced to numbers."""
    with pytest.raises(ValidationError):
        ProblemConfig(sense="min", lower_bounds=lower, upper_bounds=upper)


def test_yaml_boolean_bound_rejected():
    """Test YAML booleans are not read as bounds."""
    with pytest.raises(ValidationError):
        ProblemConfig.from_yaml_string("sense: min\nlower_bounds: [yes]\nupper_bounds: [1]\n")


@pytest.mark.parametrize("text", ["", "# nothing here\n", "- 1\n- 2\n"])
def test_empty_or_non_mapping_yaml(text):
    """Test documents without a mapping fail validation cleanly."""
    with pytest.raises(ValidationError):
        ProblemConfig.from_yaml_string(text)


def test_empty_yaml_file(tmp_path):
    """Test an empty file fails validation cleanly."""
    path = tmp_path / "empty.yaml"
    path.write_text("")
    with pytest.raises(ValidationError):
        ProblemConfig.from_yaml(path)
