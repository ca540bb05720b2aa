"""Grid layout of the population"""

from .grid import GridGeometry, NEIGHBORHOOD_RADIUS

__all__ = ['GridGeometry', 'NEIGHBORHOOD_RADIUS']
