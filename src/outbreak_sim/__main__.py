"""
Entrypoint module, in case you use `python -m outbreak_sim`.
"""

import click

from outbreak_sim.core import DEFAULT_PRESETS, EpidemicSimulator, SimulationConfig, get_preset, plot_results
from outbreak_sim.utils import configure_logging


@click.command()
@click.option(
    "--preset",
    type=click.Choice([p.name for p in DEFAULT_PRESETS], case_sensitive=False),
    default=DEFAULT_PRESETS[0].name,
    show_default=True,
    help="Built-in disease preset",
)
@click.option("--population", type=click.IntRange(min=1), default=300, show_default=True, help="Number of people")
@click.option("--days", type=click.IntRange(min=1), default=50, show_default=True, help="Maximum simulated days")
@click.option("--initial-infections", type=click.IntRange(min=0), default=1, show_default=True)
@click.option("--vaccinate/--no-vaccinate", default=False, help="Enable the daily vaccination campaign")
@click.option("--vaccination-start", type=click.IntRange(min=0), default=0, show_default=True)
@click.option(
    "--vaccination-fraction",
    type=(float, float),
    default=(0.01, 0.05),
    show_default=True,
    help="Daily min and max share of eligible people vaccinated",
)
@click.option("--seed", type=int, default=None, help="Random seed for a reproducible run")
@click.option("--results-path", type=click.Path(dir_okay=False), default=None, help="Write daily statistics as CSV")
@click.option("--plot-path", type=click.Path(dir_okay=False), default=None, help="Save the epidemic curves as an image")
@click.option("--log-level", type=str, default=None, help="Logging level (default: $OUTBREAK_SIM_LOG_LEVEL or WARNING)")
def main(preset, population, days, initial_infections, vaccinate, vaccination_start, vaccination_fraction,
         seed, results_path, plot_path, log_level):
    """Run a grid epidemic simulation from a disease preset."""
    configure_logging(log_level)

    min_fraction, max_fraction = vaccination_fraction
    config = SimulationConfig.from_preset(
        get_preset(preset),
        population_size=population,
        max_days=days,
        vaccination_enabled=vaccinate,
        vaccination_start_day=vaccination_start,
        daily_vaccination_min_fraction=min_fraction,
        daily_vaccination_max_fraction=max_fraction,
        seed=seed,
    )

    simulator = EpidemicSimulator(config)
    simulator.seed_random_infections(initial_infections)
    results = simulator.run(verbose=True)

    if results_path:
        simulator.statistics.export_csv(results_path)
        print(f"Results saved as '{results_path}'")

    if plot_path:
        fig = plot_results(results, title=f"{config.disease_name} on a {population}-person grid")
        fig.savefig(plot_path, dpi=150, bbox_inches='tight')
        print(f"Plot saved as '{plot_path}'")


if __name__ == "__main__":
    main()
