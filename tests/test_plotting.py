"""
Glide Plotting Tests
====================

Checks that each plot builds a figure with the expected lines.
Uses the non-interactive Agg backend.
"""

import sys
from pathlib import Path
import unittest

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.glide_analyzer import create_custom_aircraft, get_planet, get_preset
from src.glide_analyzer.plotting import GlidePlotter


class TestGlidePlotter(unittest.TestCase):

    def setUp(self):
        self.plotter = GlidePlotter()

    def tearDown(self):
        plt.close("all")

    def test_density_profile(self):
        fig = self.plotter.plot_density_profile(get_planet("Earth"), num_points=50)
        ax = fig.axes[0]

        # Density curve plus the two band boundaries
        self.assertEqual(len(ax.lines), 3)
        x, y = ax.lines[0].get_data()
        self.assertEqual(len(x), 50)
        self.assertAlmostEqual(float(y[0]), 1.225)

    def test_glide_distance_one_line_per_planet(self):
        fig = self.plotter.plot_glide_distance(get_preset(5), num_points=20)
        self.assertEqual(len(fig.axes[0].lines), 8)

        planets = [get_planet("Earth"), get_planet("Mars")]
        fig = self.plotter.plot_glide_distance(get_preset(5), planets, num_points=20)
        labels = [line.get_label() for line in fig.axes[0].lines]
        self.assertEqual(labels, ["Earth", "Mars"])

    def test_force_breakdown(self):
        fig = self.plotter.plot_force_breakdown(
            get_planet("Venus"), get_preset(1), altitude_range=(0.0, 5000.0),
            num_points=10,
        )
        labels = [line.get_label() for line in fig.axes[0].lines]
        self.assertEqual(
            labels,
            ["Lift", "Weight", "Parasite drag", "Induced drag", "Total drag"],
        )

    def test_existing_axes(self):
        fig, ax = plt.subplots()
        returned = self.plotter.plot_density_profile(get_planet("Mars"), ax=ax)
        self.assertIs(returned, fig)

    def test_stalled_aircraft_still_plots(self):
        stalled = create_custom_aircraft(velocity=0.0)
        fig = self.plotter.plot_force_breakdown(
            get_planet("Earth"), stalled, num_points=10
        )
        induced = np.ma.filled(fig.axes[0].lines[3].get_ydata(), np.nan)
        self.assertFalse(np.any(np.isfinite(induced)))

    def test_too_few_points(self):
        with self.assertRaises(ValueError):
            self.plotter.plot_density_profile(get_planet("Earth"), num_points=1)


if __name__ == "__main__":
    unittest.main()
