"""
Tests for loading process definitions.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from simevents.config import (
    PeriodicDefinition,
    SimulationConfig,
    StochasticDefinition,
    build_process,
    build_processes,
    load_config,
    parse_config,
)
from simevents.errors import ConfigError
from simevents.event import Event
from simevents.merge import generate_all
from simevents.process import PeriodicProcess, SingletonProcess, StochasticProcess

DOCUMENT = {
    "seed": 11,
    "processes": [
        {"type": "singleton", "name": "boot", "duration": 5, "arrival": 10},
        {
            "type": "periodic",
            "name": "tick",
            "duration": 2,
            "interarrival_time": 10,
            "first_arrival": 0,
            "num_repetitions": 3,
        },
        {
            "type": "stochastic",
            "name": "web",
            "mean_duration": 3.0,
            "mean_interarrival_time": 4.0,
            "first_arrival": 0,
            "end_time": 100,
        },
    ],
}


class TestLoadConfig:
    """Tests for load_config and parse_config."""

    def test_load(self, write_config) -> None:
        config = load_config(write_config(DOCUMENT))
        assert config.seed == 11
        assert [d.type for d in config.processes] == ["singleton", "periodic", "stochastic"]

    def test_build(self, write_config) -> None:
        processes = build_processes(load_config(write_config(DOCUMENT)))
        assert isinstance(processes[0], SingletonProcess)
        assert isinstance(processes[1], PeriodicProcess)
        assert isinstance(processes[2], StochasticProcess)
        assert processes[0].generate_events() == [Event("boot", 10, 5)]
        assert processes[1].generate_events() == [Event("tick", 0, 2), Event("tick", 10, 2), Event("tick", 20, 2)]

    def test_seeded_document_is_reproducible(self, write_config) -> None:
        path = write_config(DOCUMENT)
        first = generate_all(build_processes(load_config(path)))
        second = generate_all(build_processes(load_config(path)))
        assert first == second

    def test_top_level_seed_is_offset(self) -> None:
        """Two identical stochastic definitions still get distinct streams."""
        definition = dict(DOCUMENT["processes"][2])
        config = parse_config({"seed": 1, "processes": [definition, definition]})
        a, b = build_processes(config)
        assert a.generate_events() != b.generate_events()

    def test_own_seed_wins(self) -> None:
        definition = StochasticDefinition(
            type="stochastic",
            name="web",
            mean_duration=3.0,
            mean_interarrival_time=4.0,
            first_arrival=0,
            end_time=500,
            seed=3,
        )
        a = build_process(definition, seed=100)
        b = StochasticProcess("web", 3.0, 4.0, 0, 500, seed=3)
        assert a.generate_events() == b.generate_events()

    def test_empty_document(self) -> None:
        config = parse_config({})
        assert config == SimulationConfig()
        assert build_processes(config) == []

    def test_definitions_are_frozen(self) -> None:
        definition = PeriodicDefinition(
            type="periodic", name="p", duration=1, interarrival_time=1, first_arrival=0, num_repetitions=1
        )
        with pytest.raises(ValidationError):
            definition.duration = 2  # type: ignore[misc]


class TestInvalidConfig:
    """Documents that must be rejected."""

    @pytest.mark.parametrize(
        "definition",
        [
            {"type": "singleton", "name": "a", "duration": -1, "arrival": 0},
            {"type": "singleton", "name": "", "duration": 1, "arrival": 0},
            {"type": "singleton", "name": "a", "duration": True, "arrival": 0},
            {"type": "singleton", "name": "a", "duration": 1},
            {"type": "singleton", "name": "a", "duration": 1, "arrival": 0, "extra": 1},
            {"type": "periodic", "name": "p", "duration": 1, "interarrival_time": 1,
             "first_arrival": 0, "num_repetitions": -2},
            {"type": "stochastic", "name": "s", "mean_duration": 0, "mean_interarrival_time": 1.0,
             "first_arrival": 0, "end_time": 10},
            {"type": "stochastic", "name": "s", "mean_duration": True, "mean_interarrival_time": 1.0,
             "first_arrival": 0, "end_time": 10},
            {"type": "stochastic", "name": "s", "mean_duration": 3.0, "mean_interarrival_time": "4",
             "first_arrival": 0, "end_time": 10},
            {"type": "stochastic", "name": "s", "mean_duration": 3.0, "mean_interarrival_time": 4.0,
             "first_arrival": 0, "end_time": 10, "seed": True},
            {"type": "stochastic", "name": "s", "mean_duration": 3.0, "mean_interarrival_time": 4.0,
             "first_arrival": 0, "end_time": 10, "seed": "5"},
            {"type": "bursty", "name": "b"},
        ],
    )
    def test_rejected(self, definition: dict) -> None:
        with pytest.raises(ConfigError):
            parse_config({"processes": [definition]})

    @pytest.mark.parametrize("seed", [True, "5", 1.5])
    def test_rejected_top_level_seed(self, seed: object) -> None:
        with pytest.raises(ConfigError):
            parse_config({"seed": seed, "processes": []})

    def test_integer_mean_accepted(self) -> None:
        definition = dict(DOCUMENT["processes"][2], mean_duration=3)
        config = parse_config({"processes": [definition]})
        assert config.processes[0].mean_duration == 3.0

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="cannot read"):
            load_config(tmp_path / "missing.json")

    def test_bad_json(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigError, match="not valid JSON"):
            load_config(path)

    def test_not_an_object(self, write_config) -> None:
        with pytest.raises(ConfigError):
            load_config(write_config([1, 2, 3]))
