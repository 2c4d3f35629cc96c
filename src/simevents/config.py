"""
Process definitions read from JSON.

A definition document looks like::

    {
      "seed": 7,
      "processes": [
        {"type": "singleton", "name": "boot", "duration": 5, "arrival": 0},
        {"type": "periodic", "name": "tick", "duration": 2,
         "interarrival_time": 10, "first_arrival": 0, "num_repetitions": 3},
        {"type": "stochastic", "name": "web", "mean_duration": 3.0,
         "mean_interarrival_time": 4.0, "first_arrival": 0, "end_time": 100}
      ]
    }

A top-level ``seed`` seeds every stochastic definition without a seed of
its own, offset by the definition's position so that no two share a stream.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt, ValidationError, confloat, conint, constr

from simevents.errors import ConfigError
from simevents.process import PeriodicProcess, Process, SingletonProcess, StochasticProcess

logger = logging.getLogger(__name__)

Name = constr(min_length=1, strict=True)
Time = conint(ge=0, strict=True)
PositiveMean = confloat(gt=0, allow_inf_nan=False, strict=True)


class _Definition(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    name: Name


class SingletonDefinition(_Definition):
    type: Literal["singleton"]
    duration: Time
    arrival: Time


class PeriodicDefinition(_Definition):
    type: Literal["periodic"]
    duration: Time
    interarrival_time: Time
    first_arrival: Time
    num_repetitions: Time


class StochasticDefinition(_Definition):
    type: Literal["stochastic"]
    mean_duration: PositiveMean
    mean_interarrival_time: PositiveMean
    first_arrival: Time
    end_time: Time
    seed: Optional[StrictInt] = None


ProcessDefinition = Annotated[
    Union[SingletonDefinition, PeriodicDefinition, StochasticDefinition],
    Field(discriminator="type"),
]


class SimulationConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    processes: List[ProcessDefinition] = Field(default_factory=list)
    seed: Optional[StrictInt] = Field(None, description="Base seed for stochastic processes without their own")


def build_process(definition: ProcessDefinition, seed: int | None = None) -> Process:
    """
    Construct the process a definition describes.

    ``seed`` is used only for a stochastic definition that has none.
    """
    if isinstance(definition, SingletonDefinition):
        return SingletonProcess(definition.name, definition.duration, definition.arrival)
    if isinstance(definition, PeriodicDefinition):
        return PeriodicProcess(
            definition.name,
            definition.duration,
            definition.interarrival_time,
            definition.first_arrival,
            definition.num_repetitions,
        )
    if isinstance(definition, StochasticDefinition):
        return StochasticProcess(
            definition.name,
            definition.mean_duration,
            definition.mean_interarrival_time,
            definition.first_arrival,
            definition.end_time,
            seed=definition.seed if definition.seed is not None else seed,
        )
    raise TypeError(f"unknown process definition {definition!r}")


def build_processes(config: SimulationConfig) -> list[Process]:
    processes = []
    for index, definition in enumerate(config.processes):
        seed = None if config.seed is None else config.seed + index
        processes.append(build_process(definition, seed))
    return processes


def parse_config(data: object) -> SimulationConfig:
    """Validate an already decoded document."""
    try:
        return SimulationConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"invalid process definitions:\n{exc}") from exc


def load_config(path: Path | str) -> SimulationConfig:
    """Read and validate a JSON definition file."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"cannot read {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"{path} is not valid JSON: {exc}") from exc

    config = parse_config(data)
    logger.info("Loaded %d process definitions from %s", len(config.processes), path)
    return config
