"""
Planet Database
===============

Fixed catalog of the eight planets of the solar system with the
surface gravity and relative air thickness used by the glide model.

Air thickness is expressed relative to Earth's atmosphere (atm).
The gas giants have no surface; their values describe a nominal
reference level and are only meaningful inside this simplified model.
"""

from types import MappingProxyType
from typing import List, Mapping

from ..models.planet import PlanetProfile


# =============================================================================
# Planet Catalog (menu order)
# =============================================================================

_PLANETS = (
    PlanetProfile(name="Mercury", gravity=3.7, air_thickness=0.00000000003),
    PlanetProfile(name="Venus", gravity=8.87, air_thickness=92.0),
    PlanetProfile(name="Earth", gravity=9.8, air_thickness=1.0),
    PlanetProfile(name="Mars", gravity=3.71, air_thickness=0.006),
    PlanetProfile(name="Jupiter", gravity=24.79, air_thickness=0.1),
    PlanetProfile(name="Saturn", gravity=10.44, air_thickness=0.0001),
    PlanetProfile(name="Uranus", gravity=8.87, air_thickness=0.00001),
    PlanetProfile(name="Neptune", gravity=11.15, air_thickness=0.00001),
)

PLANET_DATABASE: Mapping[str, PlanetProfile] = MappingProxyType(
    {planet.name: planet for planet in _PLANETS}
)

# Used for any name not in the catalog
EARTH_DEFAULTS = PlanetProfile(name="Earth", gravity=9.8, air_thickness=1.0)


# =============================================================================
# Database Access Functions
# =============================================================================

def get_planet(name: str) -> PlanetProfile:
    """
    Get a planet by name.

    Matching is case-sensitive. Unknown names fall back to Earth
    gravity and air thickness, keeping the name that was asked for.

    Parameters:
    ----------
    name : str
        Planet name (e.g., "Mars")

    Returns:
    -------
    PlanetProfile
        Catalog entry, or Earth defaults under the requested name
    """
    planet = PLANET_DATABASE.get(name)
    if planet is None:
        return EARTH_DEFAULTS.renamed(name)
    return planet


def list_planets() -> List[str]:
    """
    List all planet names.

    Returns:
    -------
    List[str]
        Planet names in menu order (innermost first)
    """
    return list(PLANET_DATABASE.keys())
