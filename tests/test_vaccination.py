"""
Tests for the daily vaccination campaign.
"""

import numpy as np
import pytest

from outbreak_sim.core import HealthStatus, Population, VaccinationCampaign


def count_vaccinated(population):
    return sum(1 for p in population if p.vaccinated)


class TestVaccinationCampaign:
    """Eligibility, quotas and scheduling."""

    def test_fractions_are_normalized(self):
        campaign = VaccinationCampaign(daily_min_fraction=0.8, daily_max_fraction=1.4, start_day=-3)
        assert (campaign.daily_min_fraction, campaign.daily_max_fraction) == (0.8, 1.0)
        assert campaign.start_day == 0

        swapped = VaccinationCampaign(daily_min_fraction=0.4, daily_max_fraction=0.1)
        assert (swapped.daily_min_fraction, swapped.daily_max_fraction) == (0.1, 0.4)

    def test_is_due(self):
        campaign = VaccinationCampaign(daily_min_fraction=0.1, daily_max_fraction=0.2, start_day=3)
        assert not campaign.is_due(2)
        assert campaign.is_due(3)
        assert campaign.is_due(10)

        idle = VaccinationCampaign(start_day=0)
        assert not idle.is_active
        assert not idle.is_due(5)

    def test_half_then_half_of_remaining(self):
        rng = np.random.default_rng(2024)
        campaign = VaccinationCampaign(daily_min_fraction=0.5, daily_max_fraction=0.5)
        pop = Population(100)

        assert campaign.apply_to(pop, rng) == 50
        assert count_vaccinated(pop) == 50

        second = campaign.apply_to(pop, rng)
        assert 24 <= second <= 26
        assert count_vaccinated(pop) == 50 + second

    def test_no_one_is_vaccinated_twice(self):
        rng = np.random.default_rng(5)
        campaign = VaccinationCampaign(daily_min_fraction=0.1, daily_max_fraction=0.4)
        pop = Population(60)

        total = 0
        while count_vaccinated(pop) < len(pop):
            total += campaign.apply_to(pop, rng)
        assert total == len(pop)
        assert campaign.apply_to(pop, rng) == 0

    def test_small_quota_forces_one(self, rng):
        campaign = VaccinationCampaign(daily_min_fraction=0.01, daily_max_fraction=0.01)
        pop = Population(10)
        assert campaign.daily_quota(10, rng) == 1
        assert campaign.apply_to(pop, rng) == 1

    def test_dead_are_not_eligible(self, rng):
        campaign = VaccinationCampaign(daily_min_fraction=1.0, daily_max_fraction=1.0)
        pop = Population(10)
        for p in pop.people[:4]:
            p.status = HealthStatus.DEAD

        assert campaign.apply_to(pop, rng) == 6
        assert all(not p.vaccinated for p in pop.people[:4])

    def test_infected_get_flag_but_keep_status(self, disease, rng):
        campaign = VaccinationCampaign(daily_min_fraction=1.0, daily_max_fraction=1.0, efficacy=0.7)
        pop = Population(4)
        pop.person(0).infect(disease, rng)

        campaign.apply_to(pop, rng)
        assert pop.person(0).vaccinated
        assert pop.person(0).status is HealthStatus.INFECTED
        assert pop.person(0).vaccine_efficacy == pytest.approx(0.7)
        assert all(p.status is HealthStatus.VACCINATED for p in pop.people[1:])

    def test_empty_population_is_noop(self, rng):
        campaign = VaccinationCampaign(daily_min_fraction=0.5, daily_max_fraction=0.5)
        assert campaign.apply_to(Population(0), rng) == 0
