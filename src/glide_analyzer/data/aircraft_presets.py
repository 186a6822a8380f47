"""
Aircraft Presets
================

Default aircraft offered by the console menu, plus the factory used
for manually entered ("custom") aircraft.

Menu numbering starts at 1; choice 0 (or any number outside the
preset range) selects manual entry.

Aspect ratios are stored on each preset. The fighter and the light
aircraft carry their own values; everything else, custom entries
included, uses the default of 8.0.
"""

from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple

from ..config import DEFAULT_ASPECT_RATIO
from ..models.aircraft import AircraftProfile


# =============================================================================
# Default Presets (menu order)
# =============================================================================

AIRCRAFT_PRESETS: Tuple[AircraftProfile, ...] = (
    AircraftProfile(
        name="Boeing 737",
        wing_area=125.0,
        drag_coefficient=0.027,
        lift_coefficient=0.27,
        mass_kg=79000.0,
        glide_ratio=17.0,
        velocity=75.0,
    ),
    AircraftProfile(
        name="Boeing 747",
        wing_area=541.0,
        drag_coefficient=0.031,
        lift_coefficient=0.25,
        mass_kg=333400.0,
        glide_ratio=17.0,
        velocity=85.0,
    ),
    AircraftProfile(
        name="Airbus A320",
        wing_area=122.6,
        drag_coefficient=0.030,
        lift_coefficient=0.28,
        mass_kg=73500.0,
        glide_ratio=17.0,
        velocity=70.0,
    ),
    AircraftProfile(
        name="F-16 Falcon",
        wing_area=27.87,
        drag_coefficient=0.018,
        lift_coefficient=0.50,
        mass_kg=12000.0,
        glide_ratio=4.0,
        velocity=150.0,
        aspect_ratio=6.0,
    ),
    AircraftProfile(
        name="Cessna 172",
        wing_area=16.2,
        drag_coefficient=0.025,
        lift_coefficient=1.2,
        mass_kg=1111.0,
        glide_ratio=9.0,
        velocity=33.0,
        aspect_ratio=7.0,
    ),
)

# Starting values for manual entry
CUSTOM_AIRCRAFT_DEFAULTS: Mapping[str, float] = MappingProxyType({
    "lift_coefficient": 1.0,
    "wing_area": 1.0,
    "drag_coefficient": 0.05,
    "mass_kg": 1000.0,
    "glide_ratio": 10.0,
    "velocity": 50.0,
})


# =============================================================================
# Preset Access Functions
# =============================================================================

def get_preset(choice: int) -> Optional[AircraftProfile]:
    """
    Get a preset by its menu number.

    Parameters:
    ----------
    choice : int
        Menu number, 1 to len(AIRCRAFT_PRESETS)

    Returns:
    -------
    AircraftProfile or None
        The preset, or None when the choice means manual entry
    """
    if 0 < choice <= len(AIRCRAFT_PRESETS):
        return AIRCRAFT_PRESETS[choice - 1]
    return None


def list_presets() -> List[Tuple[int, str]]:
    """
    List presets with their menu numbers.

    Returns:
    -------
    List[Tuple[int, str]]
        (menu number, aircraft name) pairs
    """
    return [(i + 1, preset.name) for i, preset in enumerate(AIRCRAFT_PRESETS)]


def create_custom_aircraft(
    lift_coefficient: float = CUSTOM_AIRCRAFT_DEFAULTS["lift_coefficient"],
    wing_area: float = CUSTOM_AIRCRAFT_DEFAULTS["wing_area"],
    drag_coefficient: float = CUSTOM_AIRCRAFT_DEFAULTS["drag_coefficient"],
    mass_kg: float = CUSTOM_AIRCRAFT_DEFAULTS["mass_kg"],
    glide_ratio: float = CUSTOM_AIRCRAFT_DEFAULTS["glide_ratio"],
    velocity: float = CUSTOM_AIRCRAFT_DEFAULTS["velocity"],
    name: str = "Custom",
) -> AircraftProfile:
    """
    Create a manually specified aircraft.

    Custom aircraft always use the default aspect ratio.

    Parameters:
    ----------
    lift_coefficient : float
        Lift coefficient Cl

    wing_area : float
        Cross-sectional (wing) area (m²)

    drag_coefficient : float
        Drag coefficient Cd

    mass_kg : float
        Mass (kg)

    glide_ratio : float
        Glide ratio (L/D)

    velocity : float
        Airspeed (m/s)

    name : str
        Display name. Default "Custom"

    Returns:
    -------
    AircraftProfile
        New aircraft profile
    """
    return AircraftProfile(
        name=name,
        wing_area=wing_area,
        drag_coefficient=drag_coefficient,
        lift_coefficient=lift_coefficient,
        mass_kg=mass_kg,
        glide_ratio=glide_ratio,
        velocity=velocity,
        aspect_ratio=DEFAULT_ASPECT_RATIO,
    )
