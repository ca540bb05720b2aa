"""
Shared test fixtures for the grid epidemic engine.
"""

import os
import sys

import numpy as np
import pytest

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from outbreak_sim.core import DiseaseModel, Population, SimulationConfig  # noqa: E402


@pytest.fixture
def rng():
    """Seeded random source."""
    return np.random.default_rng(42)


@pytest.fixture
def disease():
    """Non-lethal disease with short, non-zero stage durations."""
    return DiseaseModel(
        name="Test Fever",
        infection_rate=0.5,
        mortality_rate=0.0,
        min_recovery_days=2,
        max_recovery_days=4,
        min_contagious_days=1,
        max_contagious_days=3,
    )


@pytest.fixture
def certain_disease():
    """Always transmits, never kills."""
    return DiseaseModel(
        name="Certain",
        infection_rate=1.0,
        mortality_rate=0.0,
        min_recovery_days=3,
        max_recovery_days=5,
        min_contagious_days=2,
        max_contagious_days=4,
    )


@pytest.fixture
def grid_population():
    """100 people on a 10 x 10 grid."""
    return Population(100)


@pytest.fixture
def base_config():
    """Small seeded configuration."""
    return SimulationConfig(
        population_size=100,
        infection_rate=0.3,
        mortality_rate=0.05,
        min_recovery_days=2,
        max_recovery_days=4,
        min_contagious_days=2,
        max_contagious_days=3,
        max_days=30,
        seed=7,
    )
