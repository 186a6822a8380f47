#!/usr/bin/env python3
"""
Planetary Glide Plots Launcher
==============================

Shows the glide model plots for a planet and an aircraft preset:
- Air density profile
- Force breakdown vs altitude
- Glide distance vs altitude on every planet

Usage:
------
    python run_glide_plots.py [planet] [preset]

    python run_glide_plots.py Mars 5

Requirements:
------------
    - Python 3.8+
    - numpy
    - matplotlib
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))


def check_dependencies():
    """Check that all required packages are installed."""
    missing = []

    try:
        import numpy
    except ImportError:
        missing.append("numpy")

    try:
        import matplotlib
    except ImportError:
        missing.append("matplotlib")

    if missing:
        print("Missing required packages:")
        for pkg in missing:
            print(f"  - {pkg}")
        print("\nInstall with: pip install -e .")
        sys.exit(1)


def main():
    """Show the plots."""
    check_dependencies()

    import matplotlib.pyplot as plt

    from src.glide_analyzer import get_planet, get_preset, AIRCRAFT_PRESETS
    from src.glide_analyzer.plotting import GlidePlotter

    planet = get_planet(sys.argv[1] if len(sys.argv) > 1 else "Earth")
    choice = int(sys.argv[2]) if len(sys.argv) > 2 else len(AIRCRAFT_PRESETS)
    aircraft = get_preset(choice) or AIRCRAFT_PRESETS[-1]

    print(f"Plotting {aircraft.name} on {planet.name}...")
    print("(Close the windows to exit)")

    plotter = GlidePlotter()
    plotter.plot_density_profile(planet)
    plotter.plot_force_breakdown(planet, aircraft)
    plotter.plot_glide_distance(aircraft)
    plt.show()

    return 0


if __name__ == "__main__":
    sys.exit(main())
