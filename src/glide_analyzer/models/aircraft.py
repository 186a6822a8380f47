"""
Aircraft Profile Model
======================

Defines the AircraftProfile dataclass that represents an aircraft
in unpowered glide: its wing, aerodynamic coefficients, mass, rated
glide ratio and airspeed.
"""

from dataclasses import dataclass

from ..config import DEFAULT_ASPECT_RATIO


@dataclass(frozen=True)
class AircraftProfile:
    """
    Aerodynamic description of an aircraft.

    Attributes:
    ----------
    name : str
        Aircraft name (e.g., "Cessna 172", "Custom")

    wing_area : float
        Wing (reference) area (m²)

    drag_coefficient : float
        Parasite drag coefficient Cd (dimensionless)

    lift_coefficient : float
        Lift coefficient Cl (dimensionless)

    mass_kg : float
        Aircraft mass (kg)

    glide_ratio : float
        Horizontal distance per unit of altitude lost (L/D)

    velocity : float
        Airspeed (m/s)

    aspect_ratio : float
        Wing aspect ratio (b²/S). Only used for induced drag.
        Default 8.0
    """
    name: str
    wing_area: float
    drag_coefficient: float
    lift_coefficient: float
    mass_kg: float
    glide_ratio: float
    velocity: float
    aspect_ratio: float = DEFAULT_ASPECT_RATIO
