"""
Calculation Trace
=================

Runs a single glide calculation with a debugger installed and returns
the full step-by-step report.

Usage:
------
    from src.glide_analyzer import FlightInputs, get_planet, get_preset
    from src.glide_analyzer.debug_trace import trace_calculation

    inputs = FlightInputs(get_planet("Venus"), get_preset(1), 3000.0)
    print(trace_calculation(inputs))
"""

from typing import Optional

from .config import GlideAnalyzerConfig
from .debugger import CalculationDebugger, get_debugger, set_debugger
from .physics import FlightInputs, FlightPhysicsCalculator


def trace_calculation(
    inputs: FlightInputs,
    config: Optional[GlideAnalyzerConfig] = None,
    debugger: Optional[CalculationDebugger] = None
) -> str:
    """
    Trace every step of a glide calculation.

    Parameters:
    ----------
    inputs : FlightInputs
        Planet, aircraft and altitude

    config : GlideAnalyzerConfig, optional
        Model constants. Uses default if not specified.

    debugger : CalculationDebugger, optional
        Debugger to record into. A new one is created if not given.

    Returns:
    -------
    str
        Formatted calculation trace
    """
    debugger = debugger if debugger is not None else CalculationDebugger()
    previous = get_debugger()
    set_debugger(debugger)

    planet = inputs.planet
    aircraft = inputs.aircraft

    try:
        debugger.start(planet=planet.name, aircraft=aircraft.name)

        debugger.start_section("Inputs")
        debugger.add_input("g", planet.gravity, "m/s^2", "Planet gravity")
        debugger.add_input("thickness", planet.air_thickness, "atm", "Planet air thickness")
        debugger.add_input("h", inputs.altitude, "m", "Altitude")
        debugger.add_input("S", aircraft.wing_area, "m^2", "Wing area")
        debugger.add_input("Cd", aircraft.drag_coefficient, "", "Drag coefficient")
        debugger.add_input("Cl", aircraft.lift_coefficient, "", "Lift coefficient")
        debugger.add_input("m", aircraft.mass_kg, "kg", "Mass")
        debugger.add_input("glide_ratio", aircraft.glide_ratio, "", "Glide ratio")
        debugger.add_input("V", aircraft.velocity, "m/s", "Airspeed")
        debugger.add_input("AR", aircraft.aspect_ratio, "", "Aspect ratio")

        FlightPhysicsCalculator(config).compute(inputs)
        debugger.finish()
    finally:
        set_debugger(previous)

    return debugger.get_report()
