"""Shared fixtures for the Furrow test suite."""

from __future__ import annotations

import numpy as np
import pytest
from numpy.random import Generator

from furrow.produce.quality import QualityGenerator
from furrow.simulation.config import FarmConfig
from furrow.world.farm import FarmGrid, FarmType

ROWS = 5
COLUMNS = 10


@pytest.fixture
def rng() -> Generator:
    """A deterministic random generator for reproducible tests."""
    return np.random.default_rng(seed=12345)


@pytest.fixture
def qualities(rng: Generator) -> QualityGenerator:
    """A seeded quality service with the default 4:3:2:1 weighting."""
    return QualityGenerator(rng=rng)


@pytest.fixture
def gold_only() -> QualityGenerator:
    """A quality service that always draws GOLD."""
    return QualityGenerator.from_seed(0, weights=(0, 0, 1, 0))


@pytest.fixture
def plant_grid(qualities: QualityGenerator) -> FarmGrid:
    """An empty 5x10 plant farm."""
    return FarmGrid(
        rows=ROWS,
        columns=COLUMNS,
        farm_type=FarmType.PLANT,
        qualities=qualities,
    )


@pytest.fixture
def animal_grid(qualities: QualityGenerator) -> FarmGrid:
    """An empty 5x10 animal farm."""
    return FarmGrid(
        rows=ROWS,
        columns=COLUMNS,
        farm_type=FarmType.ANIMAL,
        qualities=qualities,
    )


@pytest.fixture
def default_config() -> FarmConfig:
    """Default farm config (no YAML file needed)."""
    return FarmConfig()
