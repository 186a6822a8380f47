"""
Glide Console Tests
===================

Drives the console session with scripted answers and checks the
printed transcript.
"""

import sys
from pathlib import Path
import io
import unittest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.glide_analyzer.console import GlideConsole, parse_float, parse_int


class ScriptedInput:
    """Stand-in for input() that replays answers and records prompts."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []

    def __call__(self, prompt=""):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


def run_session(answers):
    scripted = ScriptedInput(answers)
    stream = io.StringIO()
    code = GlideConsole(input_func=scripted, stream=stream).run()
    return code, stream.getvalue(), scripted.prompts


class TestInputParsing(unittest.TestCase):

    def test_parse_float(self):
        self.assertEqual(parse_float("1500", 0.0), 1500.0)
        self.assertEqual(parse_float("  -20.5 extra", 0.0), -20.5)
        self.assertEqual(parse_float("abc", 7.0), 7.0)
        self.assertEqual(parse_float("", 7.0), 7.0)

    def test_parse_int(self):
        self.assertEqual(parse_int("3", 0), 3)
        self.assertEqual(parse_int("2.5", 0), 0)
        self.assertEqual(parse_int("", 0), 0)


class TestGlideConsole(unittest.TestCase):

    def test_preset_session(self):
        code, output, prompts = run_session(["Earth", "0", "5"])

        self.assertEqual(code, 0)
        self.assertIn("Planets: Mercury Venus Earth Mars Jupiter Saturn Uranus Neptune",
                      output)
        self.assertIn("1: Boeing 737", output)
        self.assertIn("0: Custom", output)
        self.assertIn("Selected: Cessna 172", output)
        self.assertIn("--- Results ---", output)
        self.assertIn("Air density: 1.225 kg/m^3", output)
        self.assertIn("Lift: 12966.7 N", output)
        self.assertIn("Distance traveled: 0 m", output)
        self.assertNotIn("WARNING", output)
        self.assertTrue(output.rstrip().endswith(
            "Earth: Gravity = 9.8 m/s^2, Air thickness = 1 atm"
        ))
        self.assertEqual(
            prompts, ["Select a planet: ", "Height (altitude in meters): ", ""]
        )

    def test_custom_session_warns_when_lift_too_low(self):
        code, output, prompts = run_session(
            ["Mars", "1000", "0", "1.0", "1.0", "0.05", "1000", "10", "50"]
        )

        self.assertEqual(code, 0)
        self.assertNotIn("Selected:", output)
        self.assertIn(
            "WARNING: LIFT IS LESS THAN WEIGHT! Aircraft cannot maintain flight.",
            output,
        )
        self.assertIn("Mars: Gravity = 3.71 m/s^2, Air thickness = 0.006 atm", output)
        self.assertEqual(prompts[3:], [
            "lift coefficient: ",
            "cross-sectional area (m^2): ",
            "drag coefficient: ",
            "weight (kg): ",
            "glide ratio: ",
            "velocity (m/s): ",
        ])

    def test_out_of_range_preset_goes_to_manual_entry(self):
        _, output, prompts = run_session(
            ["Earth", "-100", "9", "1.2", "16.2", "0.025", "1111", "9", "33"]
        )
        self.assertIn("lift coefficient: ", prompts)
        self.assertIn("Lift: 12966.7 N", output)

    def test_unknown_planet_uses_earth_values(self):
        _, output, _ = run_session(["Pluto", "0", "1"])
        self.assertIn("Pluto: Gravity = 9.8 m/s^2, Air thickness = 1 atm", output)
        self.assertIn("Air density: 1.225 kg/m^3", output)

    def test_blank_answers_keep_defaults(self):
        _, output, _ = run_session(["", "not a number", "", "", "", "", "", "", ""])
        self.assertIn("Earth: Gravity = 9.8 m/s^2", output)
        self.assertIn("Distance traveled: 0 m", output)
        self.assertIn("Lift: 1531.25 N", output)

    def test_zero_velocity_prints_nan(self):
        _, output, _ = run_session(
            ["Earth", "500", "0", "1", "1", "0.05", "1000", "10", "0"]
        )
        self.assertIn("Induced drag: nan N", output)
        self.assertIn("WARNING", output)

    def test_end_of_input_exits_cleanly(self):
        code, output, _ = run_session(["Venus"])
        self.assertEqual(code, 0)
        self.assertNotIn("--- Results ---", output)


if __name__ == "__main__":
    unittest.main()
