"""
Disease Parameters and Spread
=============================
Disease rates, duration ranges, and the neighborhood transmission step
"""

import logging
from dataclasses import dataclass, replace
from typing import Mapping, Tuple, Union

import numpy as np

from .population import HealthStatus, Population
from .presets import DiseasePreset, GENERIC_DISEASE
from ..spatial.grid import NEIGHBORHOOD_RADIUS

logger = logging.getLogger(__name__)


def _clamp_rate(value: float) -> float:
    return min(max(float(value), 0.0), 1.0)


def _ordered_range(low: int, high: int) -> Tuple[int, int]:
    low, high = max(int(low), 0), max(int(high), 0)
    if low > high:
        low, high = high, low
    return low, high


@dataclass
class DiseaseModel:
    """
    Disease parameters for the grid model

    Rates are clamped into [0, 1] and day ranges reordered so min <= max.
    Out-of-range input is normalized, never rejected.
    """
    name: str = GENERIC_DISEASE.name

    # Per-contact, per-day transmission probability
    infection_rate: float = GENERIC_DISEASE.infection_rate
    # Per-day death probability while infected or contagious
    mortality_rate: float = GENERIC_DISEASE.mortality_rate

    # Days spent INFECTED before becoming CONTAGIOUS (inclusive range)
    min_recovery_days: int = GENERIC_DISEASE.min_recovery_days
    max_recovery_days: int = GENERIC_DISEASE.max_recovery_days

    # Days spent CONTAGIOUS before RECOVERED (inclusive range)
    min_contagious_days: int = GENERIC_DISEASE.min_contagious_days
    max_contagious_days: int = GENERIC_DISEASE.max_contagious_days

    def __post_init__(self):
        self.set_infection_rate(self.infection_rate)
        self.set_mortality_rate(self.mortality_rate)
        self.set_recovery_days(self.min_recovery_days, self.max_recovery_days)
        self.set_contagious_days(self.min_contagious_days, self.max_contagious_days)

    # ------------------------------------------------------------------
    # Setters
    # ------------------------------------------------------------------

    def set_infection_rate(self, rate: float):
        self.infection_rate = _clamp_rate(rate)

    def set_mortality_rate(self, rate: float):
        self.mortality_rate = _clamp_rate(rate)

    def set_recovery_days(self, min_days: int, max_days: int):
        self.min_recovery_days, self.max_recovery_days = _ordered_range(min_days, max_days)

    def set_contagious_days(self, min_days: int, max_days: int):
        self.min_contagious_days, self.max_contagious_days = _ordered_range(min_days, max_days)

    # ------------------------------------------------------------------
    # Presets and copies
    # ------------------------------------------------------------------

    @classmethod
    def from_preset(cls, preset: Union[DiseasePreset, Mapping]) -> "DiseaseModel":
        """Build a disease from a preset record or a mapping with the same keys"""
        if isinstance(preset, DiseasePreset):
            preset = preset.to_dict()
        return cls(
            name=preset['name'],
            infection_rate=preset['infection_rate'],
            mortality_rate=preset['mortality_rate'],
            min_recovery_days=preset['min_recovery_days'],
            max_recovery_days=preset['max_recovery_days'],
            min_contagious_days=preset['min_contagious_days'],
            max_contagious_days=preset['max_contagious_days'],
        )

    def to_preset(self, name: str = None) -> DiseasePreset:
        """Snapshot the current parameters as an immutable preset"""
        return DiseasePreset(
            name=self.name if name is None else name,
            infection_rate=self.infection_rate,
            mortality_rate=self.mortality_rate,
            min_recovery_days=self.min_recovery_days,
            max_recovery_days=self.max_recovery_days,
            min_contagious_days=self.min_contagious_days,
            max_contagious_days=self.max_contagious_days,
        )

    def copy(self) -> "DiseaseModel":
        """Independent value-equal clone"""
        return replace(self)

    # ------------------------------------------------------------------
    # Sampling
    # ------------------------------------------------------------------

    def sample_recovery_days(self, rng: np.random.Generator) -> int:
        """Uniform integer in [min_recovery_days, max_recovery_days]"""
        return int(rng.integers(self.min_recovery_days, self.max_recovery_days, endpoint=True))

    def sample_contagious_days(self, rng: np.random.Generator) -> int:
        """Uniform integer in [min_contagious_days, max_contagious_days]"""
        return int(rng.integers(self.min_contagious_days, self.max_contagious_days, endpoint=True))

    # ------------------------------------------------------------------
    # Transmission
    # ------------------------------------------------------------------

    def spread(self, population: Population, rng: np.random.Generator) -> int:
        """
        Spread the disease for one day

        Every contagious person makes one Bernoulli(infection_rate) attempt
        on each susceptible neighbor in its 5 x 5 block. Attempts are judged
        against the statuses at the start of the call, so people infected
        today cannot transmit until tomorrow. A target reached by several
        sources gets several independent attempts.

        Args:
            population: People to update in place
            rng: Random source for the trials and the duration draws

        Returns:
            Number of people newly infected
        """
        if len(population) == 0:
            return 0

        snapshot = population.statuses()
        next_state = snapshot.copy()
        geometry = population.geometry

        for index, person in enumerate(population.people):
            if not person.is_contagious():
                continue
            for neighbor in geometry.neighbors(index, NEIGHBORHOOD_RADIUS):
                if snapshot[neighbor] != HealthStatus.SUSCEPTIBLE:
                    continue
                if rng.random() < self.infection_rate:
                    next_state[neighbor] = HealthStatus.INFECTED

        newly_infected = np.flatnonzero(next_state != snapshot)
        for index in newly_infected:
            population.people[index].infect(self, rng)

        logger.debug("%s spread to %d people", self.name, len(newly_infected))
        return len(newly_infected)

    def summary(self) -> str:
        summary = f"Disease: {self.name}\n"
        summary += f"  Infection rate: {self.infection_rate:.2f}\n"
        summary += f"  Mortality rate: {self.mortality_rate:.2f}\n"
        summary += f"  Recovery days: {self.min_recovery_days}-{self.max_recovery_days}\n"
        summary += f"  Contagious days: {self.min_contagious_days}-{self.max_contagious_days}\n"
        return summary


if __name__ == "__main__":
    rng = np.random.default_rng(42)
    disease = DiseaseModel.from_preset(GENERIC_DISEASE)
    print(disease.summary())

    pop = Population(size=100)
    pop.person(55).infect(disease, rng)
    for day in range(5):
        new = disease.spread(pop, rng)
        for person in pop.living():
            person.progress_day(disease, rng)
        print(f"Day {day}: {new} new infections")
