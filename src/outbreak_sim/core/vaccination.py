"""
Vaccination Campaign
====================
Daily vaccination of a random share of the eligible population
"""

import logging
import math
from dataclasses import dataclass

import numpy as np

from .population import Population

logger = logging.getLogger(__name__)


@dataclass
class VaccinationCampaign:
    """
    Daily vaccination policy

    Holds no per-person state: eligibility (alive and not yet vaccinated)
    is recomputed from the population on every call.
    """
    daily_min_fraction: float = 0.0
    daily_max_fraction: float = 0.0
    start_day: int = 0
    efficacy: float = 1.0

    def __post_init__(self):
        low = min(max(float(self.daily_min_fraction), 0.0), 1.0)
        high = min(max(float(self.daily_max_fraction), 0.0), 1.0)
        self.daily_min_fraction, self.daily_max_fraction = min(low, high), max(low, high)
        self.start_day = max(int(self.start_day), 0)
        self.efficacy = min(max(float(self.efficacy), 0.0), 1.0)

    @property
    def is_active(self) -> bool:
        """False when both daily fractions are zero"""
        return self.daily_min_fraction > 0 or self.daily_max_fraction > 0

    def is_due(self, day: int) -> bool:
        return self.is_active and day >= self.start_day

    def daily_quota(self, eligible_count: int, rng: np.random.Generator) -> int:
        """
        Number of people to vaccinate today

        Draws a fraction uniformly from the daily range and rounds half up.
        At least one person is vaccinated while anyone is eligible.
        """
        if eligible_count == 0:
            return 0
        fraction = rng.uniform(self.daily_min_fraction, self.daily_max_fraction)
        count = int(math.floor(eligible_count * fraction + 0.5))
        return min(max(count, 1), eligible_count)

    def apply_to(self, population: Population, rng: np.random.Generator) -> int:
        """
        Vaccinate today's share of the eligible population

        Returns:
            Number of people vaccinated
        """
        eligible = [p for p in population.people if p.status.is_alive and not p.vaccinated]
        if not eligible:
            return 0

        count = self.daily_quota(len(eligible), rng)
        chosen = rng.permutation(len(eligible))[:count]
        for i in chosen:
            eligible[i].vaccinate(self.efficacy)

        logger.debug("Vaccinated %d of %d eligible", count, len(eligible))
        return count
