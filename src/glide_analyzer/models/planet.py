"""
Planet Profile Model
====================

Defines the PlanetProfile dataclass holding the two planetary
parameters the glide model needs: surface gravity and the thickness
of the atmosphere relative to Earth's.
"""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class PlanetProfile:
    """
    Gravity and atmosphere of a planet.

    Attributes:
    ----------
    name : str
        Planet name as shown in the menu (e.g., "Earth", "Mars")

    gravity : float
        Surface gravitational acceleration (m/s²)

    air_thickness : float
        Atmospheric thickness relative to Earth at the reference
        altitude (atm). Earth = 1.0, no atmosphere = 0.0
    """
    name: str
    gravity: float
    air_thickness: float

    def renamed(self, name: str) -> "PlanetProfile":
        """Return a copy of this profile under another name."""
        return replace(self, name=name)

    def __str__(self) -> str:
        return (
            f"{self.name}: Gravity = {self.gravity:.6g} m/s^2, "
            f"Air thickness = {self.air_thickness:.6g} atm"
        )
