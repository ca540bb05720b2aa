"""
Grid Epidemic Simulation Engine
===============================
Composes population, disease, vaccination and statistics into one daily step
"""

import logging
from dataclasses import dataclass, replace
from typing import Iterable, Optional

import numpy as np
import pandas as pd

from .disease_params import DiseaseModel
from .population import Population
from .presets import DiseasePreset, GENERIC_DISEASE
from .statistics import StatisticsCollector
from .vaccination import VaccinationCampaign
from ..utils.logging import log_call

logger = logging.getLogger(__name__)


@dataclass
class SimulationConfig:
    """Configuration for simulation run"""
    population_size: int = 300

    # Disease
    disease_name: str = "Custom"
    infection_rate: float = GENERIC_DISEASE.infection_rate
    mortality_rate: float = GENERIC_DISEASE.mortality_rate
    min_recovery_days: int = GENERIC_DISEASE.min_recovery_days
    max_recovery_days: int = GENERIC_DISEASE.max_recovery_days
    min_contagious_days: int = GENERIC_DISEASE.min_contagious_days
    max_contagious_days: int = GENERIC_DISEASE.max_contagious_days

    # Vaccination
    vaccination_enabled: bool = False
    vaccination_start_day: int = 0
    daily_vaccination_min_fraction: float = 0.0
    daily_vaccination_max_fraction: float = 0.0
    vaccine_efficacy: float = 1.0

    max_days: int = 50
    seed: Optional[int] = None

    @classmethod
    def from_preset(cls, preset: DiseasePreset, **overrides) -> "SimulationConfig":
        """Configuration whose disease fields come from a preset"""
        values = dict(
            disease_name=preset.name,
            infection_rate=preset.infection_rate,
            mortality_rate=preset.mortality_rate,
            min_recovery_days=preset.min_recovery_days,
            max_recovery_days=preset.max_recovery_days,
            min_contagious_days=preset.min_contagious_days,
            max_contagious_days=preset.max_contagious_days,
        )
        values.update(overrides)
        return cls(**values)

    def build_disease(self) -> DiseaseModel:
        return DiseaseModel(
            name=self.disease_name,
            infection_rate=self.infection_rate,
            mortality_rate=self.mortality_rate,
            min_recovery_days=self.min_recovery_days,
            max_recovery_days=self.max_recovery_days,
            min_contagious_days=self.min_contagious_days,
            max_contagious_days=self.max_contagious_days,
        )

    def build_campaign(self) -> VaccinationCampaign:
        return VaccinationCampaign(
            daily_min_fraction=self.daily_vaccination_min_fraction,
            daily_max_fraction=self.daily_vaccination_max_fraction,
            start_day=self.vaccination_start_day,
            efficacy=self.vaccine_efficacy,
        )


class EpidemicSimulator:
    """
    Stochastic grid epidemic simulator
    Agent-based model tracking each individual, advanced one day per step()
    """

    def __init__(self, config: SimulationConfig = None):
        """
        Initialize simulator

        Args:
            config: Simulation configuration (defaults if None)
        """
        self.apply_config(config if config is not None else SimulationConfig())

    @log_call
    def apply_config(self, config: SimulationConfig):
        """
        Rebuild every model from a configuration

        Population, disease, vaccination campaign and statistics are all
        replaced, the random source is reseeded from `config.seed`, and the
        day counter returns to 0. The simulator keeps its own copy of the
        configuration; later edits to `config` take effect only when it is
        applied again.
        """
        self.config = replace(config)
        self.rng = np.random.default_rng(config.seed)

        self.population = Population(config.population_size)
        self.disease = config.build_disease()
        self.vaccination = config.build_campaign()
        self.statistics = StatisticsCollector()

        self.current_day = 0
        logger.info("Applied configuration: %d people on a %dx%d grid, disease %r",
                    self.population.size, self.population.rows, self.population.columns,
                    self.disease.name)

    def start(self):
        """Restart the day counter and statistics, keeping the current models"""
        self.current_day = 0
        self.statistics.reset()
        logger.debug("Simulation restarted")

    @property
    def max_days(self) -> int:
        return self.config.max_days

    @property
    def is_finished(self) -> bool:
        return self.current_day >= self.config.max_days

    def seed_infections(self, indices: Iterable[int]) -> int:
        """
        Infect the people at the given grid indices

        Indices outside the population are ignored.

        Returns:
            Number of people newly infected
        """
        infected = 0
        for index in indices:
            if not 0 <= index < self.population.size:
                logger.debug("Ignoring seed index %d outside population", index)
                continue
            if self.population.person(index).infect(self.disease, self.rng):
                infected += 1
        return infected

    def seed_random_infections(self, n: int) -> int:
        """Infect up to `n` randomly chosen susceptible people"""
        susceptible = self.population.get_susceptible()
        n_initial = min(n, len(susceptible))
        if n_initial <= 0:
            return 0

        chosen = self.rng.choice(len(susceptible), size=n_initial, replace=False)
        for i in chosen:
            susceptible[i].infect(self.disease, self.rng)
        return n_initial

    def step(self) -> bool:
        """
        Execute one simulated day

        Order: vaccinate (if due) -> spread -> progress living people ->
        record statistics -> advance day.

        Returns:
            True while more days remain; False once max_days is reached.
            Calling step() after that is a no-op returning False.
        """
        if self.is_finished:
            return False

        # 1. Vaccination
        if self.config.vaccination_enabled and self.vaccination.is_due(self.current_day):
            self.vaccination.apply_to(self.population, self.rng)

        # 2. Transmission
        self.disease.spread(self.population, self.rng)

        # 3. Disease progression
        for person in self.population.living():
            person.progress_day(self.disease, self.rng)

        # 4. Record state
        counts = self.statistics.record_day(self.population)

        # 5. Increment day
        self.current_day += 1
        logger.debug("Day %d: %s", self.current_day, counts)

        if self.is_finished:
            logger.info("Simulation reached day %d", self.current_day)
        return not self.is_finished

    @log_call
    def run(self, verbose: bool = True) -> pd.DataFrame:
        """
        Step until the configured number of days is reached

        Args:
            verbose: Print progress

        Returns:
            DataFrame with the daily statistics
        """
        if verbose:
            print(f"Starting simulation...")
            print(f"Population: {self.population.size} ({self.population.rows} x {self.population.columns} grid)")
            print(f"Disease: {self.disease.name}")
            print(f"Duration: {self.config.max_days} days")
            print()

        while self.step():
            if verbose and self.current_day % 10 == 0:
                counts = self.statistics.latest_counts()
                print(f"Day {self.current_day:3d}: S={counts['susceptible']:5d}, "
                      f"I={counts['infected']:5d}, C={counts['contagious']:5d}, "
                      f"safe={counts['safe']:5d}, D={counts['dead']:4d}")

        if verbose:
            print(f"\nSimulation complete!")
            print(self.statistics.report())

        return self.get_results()

    def get_results(self) -> pd.DataFrame:
        """Get results as DataFrame"""
        return self.statistics.to_frame()


def plot_results(df: pd.DataFrame, title: str = "Grid Epidemic Simulation"):
    """
    Plot the daily category counts

    Args:
        df: Results DataFrame from simulation
        title: Plot title
    """
    import matplotlib.pyplot as plt

    fig, (ax1, ax2) = plt.subplots(2, 1, figsize=(12, 10))

    # Plot 1: All categories
    ax1.plot(df['day'], df['susceptible'], label='Susceptible', color='blue', linewidth=2)
    ax1.plot(df['day'], df['infected'], label='Infected', color='orange', linewidth=2)
    ax1.plot(df['day'], df['contagious'], label='Contagious', color='red', linewidth=2)
    ax1.plot(df['day'], df['safe'], label='Recovered/Vaccinated', color='green', linewidth=2)
    ax1.plot(df['day'], df['dead'], label='Dead', color='black', linewidth=2, linestyle='--')

    ax1.set_xlabel('Days', fontsize=12)
    ax1.set_ylabel('Number of People', fontsize=12)
    ax1.set_title(title, fontsize=14, fontweight='bold')
    ax1.legend(loc='best', fontsize=11)
    ax1.grid(True, alpha=0.3)

    # Plot 2: Active cases and daily deaths
    ax2_twin = ax2.twinx()

    active = df['infected'] + df['contagious']
    ax2.plot(df['day'], active, label='Active Infections', color='red', linewidth=2)
    ax2.set_xlabel('Days', fontsize=12)
    ax2.set_ylabel('Active Infections', fontsize=12, color='red')
    ax2.tick_params(axis='y', labelcolor='red')
    ax2.grid(True, alpha=0.3)

    new_deaths = df['dead'].diff().fillna(df['dead'])
    ax2_twin.plot(df['day'], new_deaths, label='New Deaths',
                  color='black', linewidth=2, linestyle='--')
    ax2_twin.set_ylabel('New Deaths', fontsize=12, color='black')
    ax2_twin.tick_params(axis='y', labelcolor='black')

    plt.tight_layout()
    return fig
