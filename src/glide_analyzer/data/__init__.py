"""
Glide Analyzer Data Module
==========================

Contains the planet catalog, aircraft presets and lookup functions.
"""

from .planet_database import (
    PLANET_DATABASE,
    EARTH_DEFAULTS,
    get_planet,
    list_planets,
)
from .aircraft_presets import (
    AIRCRAFT_PRESETS,
    CUSTOM_AIRCRAFT_DEFAULTS,
    get_preset,
    list_presets,
    create_custom_aircraft,
)

__all__ = [
    "PLANET_DATABASE",
    "EARTH_DEFAULTS",
    "get_planet",
    "list_planets",
    "AIRCRAFT_PRESETS",
    "CUSTOM_AIRCRAFT_DEFAULTS",
    "get_preset",
    "list_presets",
    "create_custom_aircraft",
]
