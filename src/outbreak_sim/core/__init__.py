"""Core epidemic modeling components"""

from .disease_params import DiseaseModel
from .population import Population, Person, HealthStatus, HealthEvent, transition
from .presets import DiseasePreset, GENERIC_DISEASE, COVID_19, BLACK_PLAGUE, DEFAULT_PRESETS, get_preset
from .simulator import EpidemicSimulator, SimulationConfig, plot_results
from .statistics import StatisticsCollector
from .vaccination import VaccinationCampaign

__all__ = [
    'DiseaseModel',
    'Population',
    'Person',
    'HealthStatus',
    'HealthEvent',
    'transition',
    'DiseasePreset',
    'GENERIC_DISEASE',
    'COVID_19',
    'BLACK_PLAGUE',
    'DEFAULT_PRESETS',
    'get_preset',
    'EpidemicSimulator',
    'SimulationConfig',
    'plot_results',
    'StatisticsCollector',
    'VaccinationCampaign',
]
