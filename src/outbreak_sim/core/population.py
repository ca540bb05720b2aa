"""
Population Management
=====================
Per-person health state machine and the grid-arranged population
"""

import logging
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import TYPE_CHECKING, Dict, Iterator, List, Optional, Tuple

import numpy as np

from ..spatial.grid import GridGeometry

if TYPE_CHECKING:
    from .disease_params import DiseaseModel

logger = logging.getLogger(__name__)


class HealthStatus(IntEnum):
    """Enumeration of health states"""
    SUSCEPTIBLE = 0
    INFECTED = 1
    CONTAGIOUS = 2
    RECOVERED = 3
    VACCINATED = 4
    DEAD = 5

    @property
    def is_contagious(self) -> bool:
        """Can transmit: incubating or past incubation"""
        return self in (HealthStatus.INFECTED, HealthStatus.CONTAGIOUS)

    @property
    def is_alive(self) -> bool:
        return self is not HealthStatus.DEAD

    @property
    def is_safe(self) -> bool:
        """Immune without having died"""
        return self in (HealthStatus.RECOVERED, HealthStatus.VACCINATED)

    @property
    def category(self) -> str:
        """Statistics bucket for this state"""
        if self.is_safe:
            return 'safe'
        return self.name.lower()


class HealthEvent(Enum):
    """Things that can happen to a person"""
    INFECT = 'infect'
    VACCINATE = 'vaccinate'
    DIE = 'die'
    INCUBATION_ELAPSED = 'incubation_elapsed'
    CONTAGION_ELAPSED = 'contagion_elapsed'


# Every legal move. Anything missing is a no-op.
TRANSITIONS: Dict[Tuple[HealthStatus, HealthEvent], HealthStatus] = {
    (HealthStatus.SUSCEPTIBLE, HealthEvent.INFECT): HealthStatus.INFECTED,
    (HealthStatus.SUSCEPTIBLE, HealthEvent.VACCINATE): HealthStatus.VACCINATED,
    (HealthStatus.INFECTED, HealthEvent.DIE): HealthStatus.DEAD,
    (HealthStatus.INFECTED, HealthEvent.INCUBATION_ELAPSED): HealthStatus.CONTAGIOUS,
    (HealthStatus.CONTAGIOUS, HealthEvent.DIE): HealthStatus.DEAD,
    (HealthStatus.CONTAGIOUS, HealthEvent.CONTAGION_ELAPSED): HealthStatus.RECOVERED,
}


def transition(status: HealthStatus, event: HealthEvent) -> Optional[HealthStatus]:
    """Next state for `event`, or None if the event does not apply"""
    return TRANSITIONS.get((status, event))


@dataclass
class Person:
    """Individual agent in the simulation"""
    id: int

    # Health state
    status: HealthStatus = HealthStatus.SUSCEPTIBLE

    # Vaccination (flag is independent of the visible status)
    vaccinated: bool = False
    vaccine_efficacy: float = 0.0

    # Progression counters, reset on each relevant transition
    days_infected: int = 0
    days_contagious: int = 0

    # Drawn once per infection episode
    recovery_duration: int = 0
    contagious_duration: int = 0

    def _apply(self, event: HealthEvent) -> bool:
        """Move along the transition table; False if the event was ignored"""
        next_status = transition(self.status, event)
        if next_status is None:
            return False
        self.status = next_status
        return True

    def is_contagious(self) -> bool:
        return self.status.is_contagious

    def infect(self, disease: "DiseaseModel", rng: np.random.Generator) -> bool:
        """
        Infect this person if susceptible

        Draws the incubation (recovery) and contagious durations from the
        disease's inclusive ranges and resets both counters.

        Returns:
            True if the person became infected
        """
        if not self._apply(HealthEvent.INFECT):
            return False

        self.recovery_duration = disease.sample_recovery_days(rng)
        self.contagious_duration = disease.sample_contagious_days(rng)
        self.days_infected = 0
        self.days_contagious = 0
        return True

    def progress_day(self, disease: "DiseaseModel", rng: np.random.Generator):
        """
        Advance this person by one day

        Mortality is rolled first; a death ends progression for the day.
        Otherwise the counter for the current stage is incremented and the
        stage ends once the counter reaches its drawn duration.
        """
        if not self.status.is_contagious:
            return

        if rng.random() < disease.mortality_rate:
            self._apply(HealthEvent.DIE)
            return

        if self.status is HealthStatus.INFECTED:
            self.days_infected += 1
            if self.days_infected >= self.recovery_duration:
                self._apply(HealthEvent.INCUBATION_ELAPSED)
                self.days_contagious = 0
        else:
            self.days_contagious += 1
            if self.days_contagious >= self.contagious_duration:
                self._apply(HealthEvent.CONTAGION_ELAPSED)

    def vaccinate(self, efficacy: float = 1.0):
        """
        Vaccinate this person

        Records the flag for anyone alive; only a susceptible person's
        status changes. Repeat calls and calls on the dead have no effect.
        """
        if self.vaccinated or not self.status.is_alive:
            return
        self.vaccinated = True
        self.vaccine_efficacy = min(max(float(efficacy), 0.0), 1.0)
        self._apply(HealthEvent.VACCINATE)


class Population:
    """
    Fixed-length, ordered collection of people laid out on a grid
    """

    def __init__(self, size: int):
        """
        Initialize population

        Args:
            size: Number of people
        """
        self.geometry = GridGeometry.from_size(size)
        self.people = self._initialize_people(size)

    @staticmethod
    def _initialize_people(size: int) -> List[Person]:
        return [Person(id=i) for i in range(size)]

    def resize(self, size: int):
        """Rebuild with fresh people; all prior health state is discarded"""
        logger.debug("Resizing population from %d to %d", self.size, size)
        self.geometry = GridGeometry.from_size(size)
        self.people = self._initialize_people(size)

    @property
    def size(self) -> int:
        return len(self.people)

    @property
    def rows(self) -> int:
        return self.geometry.rows

    @property
    def columns(self) -> int:
        return self.geometry.columns

    def __len__(self) -> int:
        return len(self.people)

    def __iter__(self) -> Iterator[Person]:
        return iter(self.people)

    def person(self, index: int) -> Person:
        """Person at a grid index"""
        if not 0 <= index < len(self.people):
            raise IndexError(f"Index {index} outside population of {len(self.people)}")
        return self.people[index]

    def living(self) -> List[Person]:
        """Everyone not dead"""
        return [p for p in self.people if p.status.is_alive]

    def get_susceptible(self) -> List[Person]:
        """Get all susceptible individuals"""
        return [p for p in self.people if p.status is HealthStatus.SUSCEPTIBLE]

    def statuses(self) -> np.ndarray:
        """Status codes in index order"""
        return np.fromiter((p.status for p in self.people), dtype=np.int8, count=len(self.people))

    def status_grid(self) -> np.ndarray:
        """Status codes as a rows x columns array, -1 where no person sits"""
        grid = np.full(self.rows * self.columns, -1, dtype=np.int8)
        grid[:self.size] = self.statuses()
        return grid.reshape(self.geometry.shape)

    def get_state_counts(self) -> Dict[HealthStatus, int]:
        """Count people in each health state"""
        counts = {state: 0 for state in HealthStatus}
        for person in self.people:
            counts[person.status] += 1
        return counts

    def summary(self) -> str:
        """Return population summary statistics"""
        summary = f"Population Summary\n"
        summary += f"=" * 50 + "\n"
        summary += f"Total size: {self.size}\n"
        summary += f"Grid: {self.rows} x {self.columns}\n\n"

        summary += f"Health states:\n"
        for state, count in self.get_state_counts().items():
            pct = 100 * count / self.size if self.size else 0.0
            summary += f"  {state.name:12s}: {count:6d} ({pct:5.1f}%)\n"

        vaccinated = sum(1 for p in self.people if p.vaccinated)
        summary += f"\nVaccinated: {vaccinated}\n"
        return summary


if __name__ == "__main__":
    pop = Population(size=300)
    print(pop.summary())
