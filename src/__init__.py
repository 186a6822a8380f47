"""
PlanetaryGlideAnalyzer - Main Package
=====================================

Tools for estimating unpowered glide performance of aircraft on the
planets of the solar system.

This package provides:
- Glide Analysis (glide_analyzer): Air density, lift, drag and glide
  distance for a planet / aircraft / altitude combination

License: See LICENSE file in project root
"""

__version__ = "0.1.0"
__author__ = "PlanetaryGlideAnalyzer Team"
