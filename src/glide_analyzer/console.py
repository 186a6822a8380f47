"""
Glide Analyzer Console
======================

Interactive prompt/response session for the glide calculator.

Session Flow:
------------
1. Pick a planet by name (unknown names use Earth values)
2. Enter the altitude in meters
3. Pick an aircraft preset, or 0 for manual entry
4. (manual entry) lift coefficient, area, drag coefficient,
   weight, glide ratio, velocity
5. Results are printed, followed by the planet echo line

Input Parsing:
-------------
Each answer is read as a single token. A blank or unparsable answer
keeps the field's default (planet "Earth", altitude 0, preset 0,
custom aircraft defaults from data.aircraft_presets).

Usage:
------
    from src.glide_analyzer.console import GlideConsole

    GlideConsole().run()
"""

import sys
from typing import Callable, Optional, TextIO

from .config import GlideAnalyzerConfig
from .data.aircraft_presets import (
    CUSTOM_AIRCRAFT_DEFAULTS,
    create_custom_aircraft,
    get_preset,
    list_presets,
)
from .data.planet_database import get_planet, list_planets
from .models.aircraft import AircraftProfile
from .models.planet import PlanetProfile
from .physics import FlightInputs, FlightPhysicsCalculator, FlightResults


# Manual entry prompts, in the order they are asked
CUSTOM_PROMPTS = (
    ("lift_coefficient", "lift coefficient: "),
    ("wing_area", "cross-sectional area (m^2): "),
    ("drag_coefficient", "drag coefficient: "),
    ("mass_kg", "weight (kg): "),
    ("glide_ratio", "glide ratio: "),
    ("velocity", "velocity (m/s): "),
)


def _first_token(answer: str) -> str:
    parts = answer.split()
    return parts[0] if parts else ""


def parse_float(answer: str, default: float) -> float:
    """Parse a numeric answer, keeping the default when it is not a number."""
    try:
        return float(_first_token(answer))
    except ValueError:
        return default


def parse_int(answer: str, default: int) -> int:
    """Parse an integer answer, keeping the default when it is not one."""
    try:
        return int(_first_token(answer))
    except ValueError:
        return default


class GlideConsole:
    """
    Console session for the glide calculator.

    Attributes:
    ----------
    calculator : FlightPhysicsCalculator
        Physics core used for the results

    input_func : callable
        Reads one answer; called with the prompt text

    stream : TextIO
        Where menus and results are written
    """

    DEFAULT_PLANET = "Earth"

    def __init__(
        self,
        config: Optional[GlideAnalyzerConfig] = None,
        input_func: Callable[[str], str] = input,
        stream: Optional[TextIO] = None
    ):
        self.calculator = FlightPhysicsCalculator(config)
        self.input_func = input_func
        self.stream = stream if stream is not None else sys.stdout

    def _print(self, text: str = ""):
        print(text, file=self.stream)

    # -------------------------------------------------------------------------
    # Prompts
    # -------------------------------------------------------------------------

    def ask_planet(self) -> PlanetProfile:
        """Show the planet list and read a selection."""
        self._print("Planets: " + " ".join(list_planets()))
        name = _first_token(self.input_func("Select a planet: ")) or self.DEFAULT_PLANET
        return get_planet(name)

    def ask_altitude(self) -> float:
        """Read the altitude in meters."""
        return parse_float(self.input_func("Height (altitude in meters): "), 0.0)

    def ask_aircraft(self) -> AircraftProfile:
        """Show the preset menu and read a preset or manual entry."""
        self._print("Select aircraft preset or 0 for custom:")
        for number, name in list_presets():
            self._print(f"{number}: {name}")
        self._print("0: Custom")

        choice = parse_int(self.input_func(""), 0)
        preset = get_preset(choice)
        if preset is not None:
            self._print(f"Selected: {preset.name}")
            return preset

        values = {}
        for field_name, prompt in CUSTOM_PROMPTS:
            values[field_name] = parse_float(
                self.input_func(prompt), CUSTOM_AIRCRAFT_DEFAULTS[field_name]
            )
        return create_custom_aircraft(**values)

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def show_results(self, inputs: FlightInputs, results: FlightResults):
        """Print the results block and the planet echo line."""
        self._print()
        self._print("--- Results ---")
        self._print(results.summary())
        self._print(str(inputs.planet))

    # -------------------------------------------------------------------------
    # Session
    # -------------------------------------------------------------------------

    def run(self) -> int:
        """
        Run one session.

        Returns:
        -------
        int
            Exit code, always 0. End of input stops the session early.
        """
        try:
            planet = self.ask_planet()
            altitude = self.ask_altitude()
            aircraft = self.ask_aircraft()
        except EOFError:
            self._print()
            return 0

        inputs = FlightInputs(planet=planet, aircraft=aircraft, altitude=altitude)
        results = self.calculator.compute(inputs)
        self.show_results(inputs, results)
        return 0


def main() -> int:
    """Run an interactive session on stdin/stdout."""
    return GlideConsole().run()


if __name__ == "__main__":
    sys.exit(main())
