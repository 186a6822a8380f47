"""
Glide Analyzer Models
=====================

Value records describing planets and aircraft.
"""

from .planet import PlanetProfile
from .aircraft import AircraftProfile

__all__ = [
    "PlanetProfile",
    "AircraftProfile",
]
