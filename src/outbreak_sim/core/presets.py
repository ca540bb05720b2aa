"""
Disease Presets
===============
Named parameter records a disease model can be built from
"""

from dataclasses import dataclass, asdict
from typing import Dict, Tuple


@dataclass(frozen=True)
class DiseasePreset:
    """Stored disease parameters"""
    name: str
    infection_rate: float
    mortality_rate: float
    min_recovery_days: int
    max_recovery_days: int
    min_contagious_days: int
    max_contagious_days: int

    def to_dict(self) -> Dict:
        return asdict(self)


GENERIC_DISEASE = DiseasePreset(
    name="Generic Disease",
    infection_rate=0.2,
    mortality_rate=0.0,
    min_recovery_days=3, max_recovery_days=5,
    min_contagious_days=2, max_contagious_days=4,
)

COVID_19 = DiseasePreset(
    name="COVID-19",
    infection_rate=0.35,
    mortality_rate=0.01,
    min_recovery_days=7, max_recovery_days=14,
    min_contagious_days=3, max_contagious_days=10,
)

BLACK_PLAGUE = DiseasePreset(
    name="Black Plague",
    infection_rate=0.6,
    mortality_rate=0.3,
    min_recovery_days=5, max_recovery_days=10,
    min_contagious_days=2, max_contagious_days=5,
)

DEFAULT_PRESETS: Tuple[DiseasePreset, ...] = (GENERIC_DISEASE, COVID_19, BLACK_PLAGUE)


def get_preset(name: str) -> DiseasePreset:
    """Look up a built-in preset by name (case-insensitive)"""
    for preset in DEFAULT_PRESETS:
        if preset.name.lower() == name.lower():
            return preset
    raise KeyError(f"Unknown disease preset: {name!r}")
