from typing import Any, Dict, List, Optional, Tuple, TypeAlias, Union
from dataclasses import dataclass, field
import datetime
import math
from pathlib import Path

import dateparser
import yaml

from rangeset.domain import Domain, domain_for
from rangeset.range import Range
from rangeset.rangeset import RangeSet

################################################################################
# Errors
################################################################################

class ConfigError(ValueError):
    pass

################################################################################
# Value coercion
################################################################################

def _to_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"Expected an integer, got {value!r}")
    return value

def _to_float(value: Any) -> float:
    # YAML 1.1 leaves '1e3' and 'inf' as strings
    if isinstance(value, str):
        try:
            value = float(value)
        except ValueError:
            raise ConfigError(f"Expected a number, got {value!r}")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"Expected a number, got {value!r}")
    if math.isnan(value):
        raise ConfigError("NaN is not an ordered value")
    return float(value)

def _to_char(value: Any) -> str:
    if not isinstance(value, str) or len(value) != 1:
        raise ConfigError(f"Expected a single character, got {value!r}")
    return value

def _to_date(value: Any) -> datetime.date:
    # YAML already turns unquoted ISO dates into date objects
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    if not isinstance(value, str):
        raise ConfigError(f"Expected a date, got {value!r}")
    try:
        return datetime.date.fromisoformat(value)
    except ValueError:
        pass
    parsed = dateparser.parse(value)
    if parsed is None:
        raise ConfigError(f"Could not parse date: {value!r}")
    return parsed.date()

_COERCIONS = {
    'int': _to_int,
    'float': _to_float,
    'continuous': _to_float,
    'char': _to_char,
    'date': _to_date,
}

################################################################################
# Scenario
################################################################################

Step: TypeAlias = Tuple[Any, Any]

@dataclass
class ScenarioConfig:
    domain: str
    discrete: bool
    steps: List[Step] = field(default_factory=list)
    probes: List[Any] = field(default_factory=list)

    def __post_init__(self):
        if self.domain not in _COERCIONS:
            raise ConfigError(f"Unknown domain: {self.domain!r}. Must be one of {', '.join(_COERCIONS)}")
        if self.discrete and domain_for(self.domain) is None:
            raise ConfigError(f"Domain '{self.domain}' has no successor, it cannot be discrete")

    def build(self) -> RangeSet:
        """Returns an empty RangeSet configured for this scenario's domain and mode."""
        domain: Optional[Domain] = domain_for(self.domain) if self.discrete else None
        return RangeSet(Range, domain)

    def coerce(self, value: Any) -> Any:
        return _COERCIONS[self.domain](value)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ScenarioConfig':
        if not isinstance(data, dict):
            raise ConfigError(f"Expected a mapping at the top level, got {type(data).__name__}")

        unknown = set(data) - {'domain', 'discrete', 'steps', 'probes'}
        if unknown:
            raise ConfigError(f"Unknown keys: {', '.join(sorted(unknown))}")

        domain_name = data.get('domain', 'int')
        if domain_name not in _COERCIONS:
            raise ConfigError(f"Unknown domain: {domain_name!r}. Must be one of {', '.join(_COERCIONS)}")

        discrete = data.get('discrete', domain_for(domain_name) is not None)
        if not isinstance(discrete, bool):
            raise ConfigError(f"'discrete' must be true or false, got {discrete!r}")

        coerce = _COERCIONS[domain_name]

        steps = data.get('steps') or []
        if not isinstance(steps, list):
            raise ConfigError("'steps' must be a list")

        parsed_steps = []
        for i, step in enumerate(steps):
            try:
                parsed_steps.append(_parse_step(step, coerce))
            except ConfigError as e:
                raise ConfigError(f"Step {i + 1}: {e}") from e

        probes = data.get('probes') or []
        if not isinstance(probes, list):
            raise ConfigError("'probes' must be a list")

        return cls(
            domain=domain_name,
            discrete=discrete,
            steps=parsed_steps,
            probes=[coerce(p) for p in probes],
        )


def _parse_step(step: Any, coerce) -> Step:
    # A step is either a single point or a [min, max] pair. Bounds are not
    # checked here, a reversed pair fails when it is inserted.
    if isinstance(step, list):
        if len(step) != 2:
            raise ConfigError(f"Expected [min, max], got {step!r}")
        return coerce(step[0]), coerce(step[1])
    point = coerce(step)
    return point, point


def load_config(path: Union[str, Path]) -> ScenarioConfig:
    path = Path(path)
    if not path.is_file():
        raise ConfigError(f"Scenario file {path} does not exist")
    with open(path, 'rt', encoding='utf-8') as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    return ScenarioConfig.from_dict(data or {})
