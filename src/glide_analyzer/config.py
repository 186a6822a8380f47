"""
Glide Analyzer Configuration Module
===================================

This module contains configuration settings and physical constants
for the planetary glide calculator, including the simplified
International Standard Atmosphere (ISA) density bands.

Physical Constants:
------------------
- AIR_DENSITY_SEA_LEVEL: Standard air density at sea level (1.225 kg/m³)
- EARTH_GRAVITY_REFERENCE: Earth gravity used to normalize glide distance (9.8 m/s²)
- ISA_SCALE_HEIGHT: Stratosphere density scale height (6341.62 m)

Atmosphere Model:
----------------
The Earth ISA density curve is computed and then scaled by the
target planet's relative air thickness (atm). There is no
planet-specific atmosphere model.

    h <= 0               ρ = 1.225
    0 < h < 11000        ρ = 1.225 × (1 - 2.25577e-5 × h)^4.2561
    11000 <= h < 20000   ρ = 0.36391 × exp((11000 - h) / 6341.62)
    h >= 20000           ρ = 0.08803 × exp((20000 - h) / 6341.62)

Usage:
------
    from src.glide_analyzer.config import GlideAnalyzerConfig

    config = GlideAnalyzerConfig()
    density = config.get_air_density(altitude=1000)  # Earth, 1000m
    density = config.get_air_density(altitude=1000, air_thickness=92.0)  # Venus
"""

from dataclasses import dataclass

import numpy as np


# =============================================================================
# Physical Constants
# =============================================================================

# Standard air density at sea level (kg/m³)
# ISA conditions: 15°C, 101325 Pa
AIR_DENSITY_SEA_LEVEL = 1.225

# Earth gravity (m/s²) used as a fixed glide distance normalization,
# independent of the selected planet
EARTH_GRAVITY_REFERENCE = 9.8

# Troposphere density lapse coefficient (1/m) and exponent
ISA_TROPOSPHERE_LAPSE = 0.0000225577
ISA_TROPOSPHERE_EXPONENT = 4.2561

# Band boundaries (m)
ISA_TROPOPAUSE_ALTITUDE = 11000.0
ISA_UPPER_BAND_ALTITUDE = 20000.0

# Density at the band boundaries (kg/m³)
ISA_DENSITY_TROPOPAUSE = 0.36391
ISA_DENSITY_UPPER_BAND = 0.08803

# Stratosphere density scale height (m)
ISA_SCALE_HEIGHT = 6341.62


# =============================================================================
# Model Defaults
# =============================================================================

# Aspect ratio used for every aircraft without an explicit value
DEFAULT_ASPECT_RATIO = 8.0

# Air factor used when the planet has no atmosphere (thickness <= 0)
ZERO_THICKNESS_AIR_FACTOR = 2.0


@dataclass
class GlideAnalyzerConfig:
    """
    Configuration settings for the Glide Analyzer module.

    Attributes:
    ----------
    sea_level_density : float
        Air density at or below sea level (kg/m³). Default 1.225.

    gravity_reference : float
        Gravity the glide distance is normalized against (m/s²).
        Default 9.8 (Earth).

    zero_thickness_air_factor : float
        Air factor returned for planets with zero air thickness.
    """

    # -------------------------------------------------------------------------
    # Atmosphere
    # -------------------------------------------------------------------------

    sea_level_density: float = AIR_DENSITY_SEA_LEVEL

    troposphere_lapse: float = ISA_TROPOSPHERE_LAPSE
    troposphere_exponent: float = ISA_TROPOSPHERE_EXPONENT

    tropopause_altitude: float = ISA_TROPOPAUSE_ALTITUDE
    upper_band_altitude: float = ISA_UPPER_BAND_ALTITUDE

    tropopause_density: float = ISA_DENSITY_TROPOPAUSE
    upper_band_density: float = ISA_DENSITY_UPPER_BAND

    scale_height: float = ISA_SCALE_HEIGHT

    # -------------------------------------------------------------------------
    # Glide Model
    # -------------------------------------------------------------------------

    gravity_reference: float = EARTH_GRAVITY_REFERENCE

    zero_thickness_air_factor: float = ZERO_THICKNESS_AIR_FACTOR

    # -------------------------------------------------------------------------
    # Atmospheric Calculations
    # -------------------------------------------------------------------------

    def get_base_density(self, altitude: float) -> float:
        """
        Earth ISA air density at altitude, before planet scaling.

        Parameters:
        ----------
        altitude : float
            Altitude above sea level (m). Negative values are
            treated as sea level.

        Returns:
        -------
        float
            Air density (kg/m³)
        """
        h = np.float64(altitude)

        if h <= 0:
            density = np.float64(self.sea_level_density)
        elif h < self.tropopause_altitude:
            density = self.sea_level_density * np.power(
                1.0 - self.troposphere_lapse * h, self.troposphere_exponent
            )
        elif h < self.upper_band_altitude:
            density = self.tropopause_density * np.exp(
                (self.tropopause_altitude - h) / self.scale_height
            )
        else:
            # NaN altitudes also land here and propagate
            density = self.upper_band_density * np.exp(
                (self.upper_band_altitude - h) / self.scale_height
            )

        return float(density)

    def get_air_density(
        self,
        altitude: float = 0.0,
        air_thickness: float = 1.0
    ) -> float:
        """
        Calculate air density at altitude for a planet.

        ρ = ρ_ISA(h) × air_thickness

        Parameters:
        ----------
        altitude : float
            Altitude above sea level (m). Default 0.

        air_thickness : float
            Planet air thickness relative to Earth (atm). Default 1.0.

        Returns:
        -------
        float
            Air density (kg/m³)

        Example:
        -------
            config = GlideAnalyzerConfig()

            # Sea level, Earth
            rho = config.get_air_density(0)  # 1.225 kg/m³

            # Sea level, Venus
            rho = config.get_air_density(0, 92.0)  # 112.7 kg/m³
        """
        return self.get_base_density(altitude) * air_thickness

    def get_air_factor(self, air_thickness: float) -> float:
        """
        Glide distance factor for a planet's air thickness.

        Thinner air stretches the glide (1 / thickness); a planet
        with no air at all uses the fixed zero-thickness factor.

        Parameters:
        ----------
        air_thickness : float
            Planet air thickness relative to Earth (atm).

        Returns:
        -------
        float
            Air factor (dimensionless)
        """
        if air_thickness > 0:
            return 1.0 / air_thickness
        return self.zero_thickness_air_factor


# =============================================================================
# Default Configuration Instance
# =============================================================================

DEFAULT_CONFIG = GlideAnalyzerConfig()
