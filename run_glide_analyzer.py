#!/usr/bin/env python3
"""
Planetary Glide Analyzer Launcher
=================================

Launch script for the interactive glide calculator console.

The session asks for a planet, an altitude and an aircraft (preset or
manual entry), then prints air density, lift, drag, acceleration and
glide distance.

Usage:
------
    python run_glide_analyzer.py

Requirements:
------------
    - Python 3.8+
    - numpy
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

    if missing:
        print("Missing required packages:")
        for pkg in missing:
            print(f"  - {pkg}")
        print("\nInstall with: pip install -e .")
        sys.exit(1)


def main():
    """Run one console session."""
    check_dependencies()

    from src.glide_analyzer.console import GlideConsole

    return GlideConsole().run()


if __name__ == "__main__":
    sys.exit(main())
