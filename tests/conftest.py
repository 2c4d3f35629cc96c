"""
Pytest configuration and fixtures for simevents.
"""

import json
from pathlib import Path
from typing import Callable

import pytest
import simpy

from simevents.random import reset_prng_cache


@pytest.fixture(autouse=True)
def fresh_prng_cache() -> None:
    """Each test starts without a cached default shuffle table."""
    reset_prng_cache()


@pytest.fixture
def env() -> simpy.Environment:
    """Create a fresh SimPy environment."""
    return simpy.Environment()


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[object], Path]:
    """Write a definition document to a temporary JSON file."""

    def _write(document: object, name: str = "processes.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return _write

