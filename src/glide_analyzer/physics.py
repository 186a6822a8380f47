"""
Glide Physics Module
====================

The flight physics core: given a planet, an aircraft and an altitude,
compute air density, lift, drag components and the glide distance.

Theory Background:
-----------------

**Air Density:**
    ρ = ρ_ISA(h) × thickness        (see config.py for the ISA bands)

**Lift and Parasite Drag:**
    L  = 0.5 × ρ × V² × S × Cl
    Dp = 0.5 × ρ × V² × S × Cd

**Induced Drag:**
    Di = L² / (π × AR × 0.5 × ρ × V² × S)

**Glide Distance:**
    drag_factor = 1 / (1 + D_total / L)
    air_factor  = 1 / thickness       (2.0 with no atmosphere)
    distance    = glide_ratio × h × (9.8 / g) × air_factor × drag_factor

The 9.8 in the glide distance is Earth's gravity used as a fixed
normalization for every planet.

Degenerate Inputs:
-----------------
Zero velocity, wing area, air density or lift are not guarded. All
arithmetic runs on numpy float64 with floating point errors ignored,
so those cases yield inf/NaN in the results instead of raising.

Classes:
--------
- FlightInputs: Planet + aircraft + altitude
- FlightResults: Computed quantities
- FlightPhysicsCalculator: The calculator

Usage:
------
    from src.glide_analyzer import FlightInputs, compute, get_planet, get_preset

    inputs = FlightInputs(
        planet=get_planet("Mars"),
        aircraft=get_preset(5),
        altitude=1500.0,
    )
    results = compute(inputs)

    print(f"Lift: {results.lift:.1f} N")
    print(f"Glide distance: {results.glide_distance:.0f} m")
"""

from dataclasses import dataclass, fields
from typing import Dict, Iterable, Optional

import numpy as np

from .config import GlideAnalyzerConfig, DEFAULT_CONFIG
from .debugger import debug_section, debug_step
from .models.aircraft import AircraftProfile
from .models.planet import PlanetProfile


@dataclass(frozen=True)
class FlightInputs:
    """
    Everything one glide calculation needs.

    Attributes:
    ----------
    planet : PlanetProfile
        Gravity and air thickness

    aircraft : AircraftProfile
        Wing, coefficients, mass, glide ratio and airspeed

    altitude : float
        Altitude above the reference level (m). May be zero or negative.
    """
    planet: PlanetProfile
    aircraft: AircraftProfile
    altitude: float


@dataclass(frozen=True)
class FlightResults:
    """
    Output of a glide calculation.

    Attributes:
    ----------
    air_density : float
        Air density at altitude (kg/m³)

    air_factor : float
        Glide distance factor from air thickness

    weight : float
        Aircraft weight on the planet (N)

    lift : float
        Lift at the given airspeed (N)

    parasite_drag : float
        Form + friction drag (N)

    aspect_ratio : float
        Aspect ratio used for induced drag

    induced_drag : float
        Lift-dependent drag (N)

    total_drag : float
        Parasite + induced drag (N)

    drag_factor : float
        1 / (1 + D/L)

    glide_distance : float
        Horizontal distance covered descending from altitude (m)

    acceleration_g : float
        Lift to weight ratio (g)

    lift_insufficient : bool
        True when lift is less than weight
    """
    air_density: float
    air_factor: float
    weight: float
    lift: float
    parasite_drag: float
    aspect_ratio: float
    induced_drag: float
    total_drag: float
    drag_factor: float
    glide_distance: float
    acceleration_g: float
    lift_insufficient: bool

    def summary(self) -> str:
        """Generate the labeled result lines shown by the console."""
        lines = [
            f"Air density: {self.air_density:.6g} kg/m^3",
            f"Lift: {self.lift:.6g} N",
            f"Parasite drag: {self.parasite_drag:.6g} N",
            f"Induced drag: {self.induced_drag:.6g} N",
            f"Total drag: {self.total_drag:.6g} N",
            f"Acceleration: {self.acceleration_g:.6g} g",
            f"Distance traveled: {self.glide_distance:.6g} m",
        ]
        if self.lift_insufficient:
            lines.append(
                "WARNING: LIFT IS LESS THAN WEIGHT! "
                "Aircraft cannot maintain flight."
            )
        return "\n".join(lines)


class FlightPhysicsCalculator:
    """
    Glide physics calculator.

    Stateless apart from its configuration; compute() may be called
    any number of times, from any thread.

    Example:
    -------
        calculator = FlightPhysicsCalculator()
        results = calculator.compute(inputs)
    """

    def __init__(self, config: Optional[GlideAnalyzerConfig] = None):
        """
        Initialize the calculator.

        Parameters:
        ----------
        config : GlideAnalyzerConfig, optional
            Model constants. Uses default if not specified.
        """
        self.config = config if config is not None else DEFAULT_CONFIG

    def compute(self, inputs: FlightInputs) -> FlightResults:
        """
        Run the glide calculation.

        Parameters:
        ----------
        inputs : FlightInputs
            Planet, aircraft and altitude

        Returns:
        -------
        FlightResults
            Computed quantities. Never raises for numeric input;
            degenerate cases produce inf or NaN.
        """
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            return self._compute(inputs)

    def _compute(self, inputs: FlightInputs) -> FlightResults:
        planet = inputs.planet
        aircraft = inputs.aircraft

        h = np.float64(inputs.altitude)
        gravity = np.float64(planet.gravity)
        thickness = np.float64(planet.air_thickness)

        # ---------------------------------------------------------------------
        # Atmosphere
        # ---------------------------------------------------------------------
        debug_section("Atmosphere")

        air_factor = np.float64(self.config.get_air_factor(planet.air_thickness))
        debug_step(
            "Atmosphere", "Air thickness factor",
            "air_factor = 1 / thickness (2.0 if thickness <= 0)",
            {"thickness": float(thickness)},
            float(air_factor), "air_factor",
        )

        base_density = np.float64(self.config.get_base_density(inputs.altitude))
        debug_step(
            "Atmosphere", "ISA air density at altitude",
            "rho_isa = ISA(h)",
            {"h": float(h)},
            float(base_density), "rho_isa", "kg/m^3",
        )

        rho = base_density * thickness
        debug_step(
            "Atmosphere", "Scale density by planet air thickness",
            "rho = rho_isa * thickness",
            {"rho_isa": float(base_density), "thickness": float(thickness)},
            float(rho), "rho", "kg/m^3",
        )

        # ---------------------------------------------------------------------
        # Forces
        # ---------------------------------------------------------------------
        debug_section("Forces")

        v = np.float64(aircraft.velocity)
        area = np.float64(aircraft.wing_area)

        weight = np.float64(aircraft.mass_kg) * gravity
        debug_step(
            "Forces", "Weight",
            "W = m * g",
            {"m": aircraft.mass_kg, "g": float(gravity)},
            float(weight), "W", "N",
        )

        lift = 0.5 * rho * v ** 2 * area * np.float64(aircraft.lift_coefficient)
        debug_step(
            "Forces", "Lift",
            "L = 0.5 * rho * V^2 * S * Cl",
            {"rho": float(rho), "V": float(v), "S": float(area),
             "Cl": aircraft.lift_coefficient},
            float(lift), "L", "N",
        )

        parasite_drag = (
            0.5 * rho * v ** 2 * area * np.float64(aircraft.drag_coefficient)
        )
        debug_step(
            "Forces", "Parasite drag",
            "Dp = 0.5 * rho * V^2 * S * Cd",
            {"rho": float(rho), "V": float(v), "S": float(area),
             "Cd": aircraft.drag_coefficient},
            float(parasite_drag), "Dp", "N",
        )

        aspect_ratio = np.float64(aircraft.aspect_ratio)
        induced_drag = lift ** 2 / (np.pi * aspect_ratio * 0.5 * rho * v ** 2 * area)
        debug_step(
            "Forces", "Induced drag",
            "Di = L^2 / (pi * AR * 0.5 * rho * V^2 * S)",
            {"L": float(lift), "AR": float(aspect_ratio), "rho": float(rho),
             "V": float(v), "S": float(area)},
            float(induced_drag), "Di", "N",
        )

        total_drag = parasite_drag + induced_drag
        debug_step(
            "Forces", "Total drag",
            "D = Dp + Di",
            {"Dp": float(parasite_drag), "Di": float(induced_drag)},
            float(total_drag), "D", "N",
        )

        # ---------------------------------------------------------------------
        # Glide
        # ---------------------------------------------------------------------
        debug_section("Glide")

        drag_factor = 1.0 / (1.0 + total_drag / lift)
        debug_step(
            "Glide", "Drag factor",
            "drag_factor = 1 / (1 + D / L)",
            {"D": float(total_drag), "L": float(lift)},
            float(drag_factor), "drag_factor",
        )

        gravity_reference = np.float64(self.config.gravity_reference)
        glide_distance = (
            np.float64(aircraft.glide_ratio) * h
            * (gravity_reference / gravity) * air_factor * drag_factor
        )
        debug_step(
            "Glide", "Glide distance",
            "distance = glide_ratio * h * (g_ref / g) * air_factor * drag_factor",
            {"glide_ratio": aircraft.glide_ratio, "h": float(h),
             "g_ref": float(gravity_reference), "g": float(gravity),
             "air_factor": float(air_factor), "drag_factor": float(drag_factor)},
            float(glide_distance), "distance", "m",
            comment="g_ref is Earth gravity for every planet",
        )

        acceleration_g = lift / weight
        debug_step(
            "Glide", "Lift to weight ratio",
            "accel = L / W",
            {"L": float(lift), "W": float(weight)},
            float(acceleration_g), "accel", "g",
        )

        lift_insufficient = bool(lift < weight)
        debug_step(
            "Glide", "Lift check",
            "L < W",
            {"L": float(lift), "W": float(weight)},
            lift_insufficient, "lift_insufficient",
        )

        return FlightResults(
            air_density=float(rho),
            air_factor=float(air_factor),
            weight=float(weight),
            lift=float(lift),
            parasite_drag=float(parasite_drag),
            aspect_ratio=float(aspect_ratio),
            induced_drag=float(induced_drag),
            total_drag=float(total_drag),
            drag_factor=float(drag_factor),
            glide_distance=float(glide_distance),
            acceleration_g=float(acceleration_g),
            lift_insufficient=lift_insufficient,
        )

    def sweep_altitude(
        self,
        planet: PlanetProfile,
        aircraft: AircraftProfile,
        altitudes: Iterable[float]
    ) -> Dict[str, np.ndarray]:
        """
        Compute results over a range of altitudes.

        Parameters:
        ----------
        planet : PlanetProfile
            Planet to fly on

        aircraft : AircraftProfile
            Aircraft to fly

        altitudes : iterable of float
            Altitudes (m)

        Returns:
        -------
        dict
            "altitude" plus one numpy array per FlightResults field
        """
        altitude_array = np.asarray(list(altitudes), dtype=float)
        results = [
            self.compute(FlightInputs(planet, aircraft, float(h)))
            for h in altitude_array
        ]

        sweep = {"altitude": altitude_array}
        for f in fields(FlightResults):
            dtype = bool if f.name == "lift_insufficient" else float
            sweep[f.name] = np.array(
                [getattr(r, f.name) for r in results], dtype=dtype
            )
        return sweep


def compute(
    inputs: FlightInputs,
    config: Optional[GlideAnalyzerConfig] = None
) -> FlightResults:
    """
    Run one glide calculation with a throwaway calculator.

    Parameters:
    ----------
    inputs : FlightInputs
        Planet, aircraft and altitude

    config : GlideAnalyzerConfig, optional
        Model constants. Uses default if not specified.

    Returns:
    -------
    FlightResults
    """
    return FlightPhysicsCalculator(config).compute(inputs)
