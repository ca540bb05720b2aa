"""
Tests for the daily statistics collector.
"""

import pandas as pd

from outbreak_sim.core import HealthStatus, Population, StatisticsCollector


def mixed_population():
    pop = Population(10)
    states = [
        HealthStatus.SUSCEPTIBLE, HealthStatus.SUSCEPTIBLE, HealthStatus.SUSCEPTIBLE,
        HealthStatus.INFECTED, HealthStatus.INFECTED,
        HealthStatus.CONTAGIOUS,
        HealthStatus.RECOVERED, HealthStatus.VACCINATED, HealthStatus.VACCINATED,
        HealthStatus.DEAD,
    ]
    for person, state in zip(pop, states):
        person.status = state
    return pop


class TestStatisticsCollector:
    """Recording, accessors and reporting."""

    def test_record_day_classifies_everyone(self):
        stats = StatisticsCollector()
        counts = stats.record_day(mixed_population())

        assert counts == {'susceptible': 3, 'infected': 2, 'contagious': 1, 'safe': 3, 'dead': 1}
        assert sum(counts.values()) == 10
        assert stats.latest('safe') == 3
        assert stats.daily_deaths == (1,)

    def test_history_is_append_only_and_ordered(self):
        stats = StatisticsCollector()
        pop = Population(5)
        stats.record_day(pop)
        pop.people[0].status = HealthStatus.DEAD
        stats.record_day(pop)

        assert stats.days_recorded == 2
        assert stats.daily_susceptible == (5, 4)
        assert stats.daily_deaths == (0, 1)
        assert isinstance(stats.history('dead'), tuple)

    def test_latest_before_any_day(self):
        stats = StatisticsCollector()
        assert stats.latest_counts() == {'susceptible': 0, 'infected': 0, 'contagious': 0, 'safe': 0, 'dead': 0}

    def test_reset_clears_history(self):
        stats = StatisticsCollector()
        stats.record_day(mixed_population())
        stats.reset()
        assert stats.days_recorded == 0
        assert stats.daily_infected == ()

    def test_to_frame_and_csv(self, tmp_path):
        stats = StatisticsCollector()
        pop = mixed_population()
        stats.record_day(pop)
        stats.record_day(pop)

        df = stats.to_frame()
        assert list(df.columns) == ['day', 'susceptible', 'infected', 'contagious', 'safe', 'dead']
        assert df['day'].tolist() == [1, 2]
        assert (df.drop(columns='day').sum(axis=1) == 10).all()

        path = tmp_path / "stats.csv"
        stats.export_csv(path)
        loaded = pd.read_csv(path)
        pd.testing.assert_frame_equal(loaded, df, check_dtype=False)

    def test_empty_frame(self):
        df = StatisticsCollector().to_frame()
        assert len(df) == 0
        assert 'day' in df.columns

    def test_report(self):
        stats = StatisticsCollector()
        assert "Days recorded: 0" in stats.report()

        stats.record_day(mixed_population())
        report = stats.report()
        assert "Days recorded: 1" in report
        assert "Peak active infections: 3 on day 1" in report
