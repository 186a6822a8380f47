"""
Glide Analyzer Module
=====================

Simplified glide-flight physics for any planet of the solar system.

Given a planet (gravity, relative air thickness), an altitude and an
aircraft (wing area, lift/drag coefficients, mass, glide ratio,
airspeed) the module computes:
- Air density (Earth ISA curve scaled by air thickness)
- Lift, parasite drag, induced drag, total drag
- Lift to weight ratio and a lift-insufficient warning
- Glide distance from the given altitude

Key Classes:
------------
- PlanetProfile / AircraftProfile: Input value records
- FlightInputs / FlightResults: Calculation input and output
- FlightPhysicsCalculator: The calculator
- GlideConsole: Interactive console session

Example Usage:
-------------
    from src.glide_analyzer import FlightInputs, compute, get_planet, get_preset

    results = compute(FlightInputs(
        planet=get_planet("Earth"),
        aircraft=get_preset(5),   # Cessna 172
        altitude=0.0,
    ))

    print(f"Lift: {results.lift:.1f} N")
    if results.lift_insufficient:
        print("Lift is less than weight")

Units Convention:
----------------
- Velocity: m/s
- Forces: Newtons (N)
- Area: m² (square meters)
- Density: kg/m³
- Altitude and distance: meters
- Air thickness: atm (Earth = 1.0)
"""

from .config import GlideAnalyzerConfig, DEFAULT_CONFIG, AIR_DENSITY_SEA_LEVEL
from .models import PlanetProfile, AircraftProfile
from .data import (
    PLANET_DATABASE,
    AIRCRAFT_PRESETS,
    get_planet,
    list_planets,
    get_preset,
    list_presets,
    create_custom_aircraft,
)
from .physics import FlightInputs, FlightResults, FlightPhysicsCalculator, compute
from .debugger import CalculationDebugger, get_debugger, set_debugger
from .debug_trace import trace_calculation

__all__ = [
    # Core
    "FlightInputs",
    "FlightResults",
    "FlightPhysicsCalculator",
    "compute",
    # Models
    "PlanetProfile",
    "AircraftProfile",
    # Catalogs
    "PLANET_DATABASE",
    "AIRCRAFT_PRESETS",
    "get_planet",
    "list_planets",
    "get_preset",
    "list_presets",
    "create_custom_aircraft",
    # Config
    "GlideAnalyzerConfig",
    "DEFAULT_CONFIG",
    "AIR_DENSITY_SEA_LEVEL",
    # Debugger
    "CalculationDebugger",
    "get_debugger",
    "set_debugger",
    "trace_calculation",
]
