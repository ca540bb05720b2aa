"""
Daily Statistics
================
Per-day counts of each health category
"""

import logging
from typing import Dict, List, Tuple

import pandas as pd

from .population import Population

logger = logging.getLogger(__name__)

CATEGORIES = ('susceptible', 'infected', 'contagious', 'safe', 'dead')


class StatisticsCollector:
    """
    Append-only daily history of the five health categories

    RECOVERED and VACCINATED both count as 'safe'. Every recorded day
    sums to the population size.
    """

    def __init__(self):
        self._history: Dict[str, List[int]] = {name: [] for name in CATEGORIES}

    def reset(self):
        """Clear all recorded days"""
        for series in self._history.values():
            series.clear()

    def record_day(self, population: Population) -> Dict[str, int]:
        """Classify everyone and append one count per category"""
        counts = {name: 0 for name in CATEGORIES}
        for person in population:
            counts[person.status.category] += 1

        for name, count in counts.items():
            self._history[name].append(count)
        return counts

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def days_recorded(self) -> int:
        return len(self._history['susceptible'])

    def history(self, category: str) -> Tuple[int, ...]:
        """Full ordered history of one category"""
        return tuple(self._history[category])

    def latest(self, category: str) -> int:
        """Most recent count of one category (0 before the first day)"""
        series = self._history[category]
        return series[-1] if series else 0

    def latest_counts(self) -> Dict[str, int]:
        return {name: self.latest(name) for name in CATEGORIES}

    @property
    def daily_susceptible(self) -> Tuple[int, ...]:
        return self.history('susceptible')

    @property
    def daily_infected(self) -> Tuple[int, ...]:
        return self.history('infected')

    @property
    def daily_contagious(self) -> Tuple[int, ...]:
        return self.history('contagious')

    @property
    def daily_safe(self) -> Tuple[int, ...]:
        return self.history('safe')

    @property
    def daily_deaths(self) -> Tuple[int, ...]:
        return self.history('dead')

    # ------------------------------------------------------------------
    # Reporting
    # ------------------------------------------------------------------

    def to_frame(self) -> pd.DataFrame:
        """History as a DataFrame, one row per recorded day"""
        df = pd.DataFrame({name: list(series) for name, series in self._history.items()},
                          columns=list(CATEGORIES))
        df.insert(0, 'day', range(1, len(df) + 1))
        return df

    def export_csv(self, path) -> None:
        """Write the history to a CSV file"""
        self.to_frame().to_csv(path, index=False)
        logger.info("Exported %d days of statistics to %s", self.days_recorded, path)

    def report(self) -> str:
        """Return a text summary of the recorded history"""
        summary = f"Simulation Statistics\n"
        summary += f"=" * 50 + "\n"
        summary += f"Days recorded: {self.days_recorded}\n"

        if self.days_recorded == 0:
            return summary

        active = [i + c for i, c in zip(self._history['infected'], self._history['contagious'])]
        peak = max(active)
        peak_day = active.index(peak) + 1
        summary += f"Peak active infections: {peak} on day {peak_day}\n\n"

        summary += f"Final counts:\n"
        for name in CATEGORIES:
            summary += f"  {name:12s}: {self.latest(name):6d}\n"
        return summary
