"""
Glide Analyzer Plotting Module
==============================

Visualization of the glide model across altitude.

Plot Types Available:
--------------------
- Air density profile for a planet (ISA bands marked)
- Glide distance vs altitude, one line per planet
- Force breakdown (lift, weight, drag components) vs altitude

Non-finite values (e.g. zero-velocity aircraft) are masked out of
the plotted lines.

Classes:
--------
- GlidePlotter: Main class for generating glide plots

Usage:
-----
    from src.glide_analyzer.plotting import GlidePlotter

    plotter = GlidePlotter()
    plotter.plot_density_profile(get_planet("Earth"))
    plt.show()
"""

from typing import Optional, Sequence, Tuple

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from .config import GlideAnalyzerConfig, DEFAULT_CONFIG
from .data.planet_database import PLANET_DATABASE
from .models.aircraft import AircraftProfile
from .models.planet import PlanetProfile
from .physics import FlightPhysicsCalculator


class GlidePlotter:
    """
    Glide model visualization class.

    Attributes:
    ----------
    config : GlideAnalyzerConfig
        Model constants.

    calculator : FlightPhysicsCalculator
        Calculator used to generate plot data.

    Example:
    -------
        plotter = GlidePlotter()

        plotter.plot_density_profile(get_planet("Venus"))
        plotter.plot_glide_distance(get_preset(5))

        plt.show()
    """

    # =========================================================================
    # Default Plot Styling
    # =========================================================================

    DEFAULT_FIGURE_SIZE = (10, 6)
    DEFAULT_ALTITUDE_RANGE = (0.0, 30000.0)
    DEFAULT_NUM_POINTS = 200

    def __init__(self, config: Optional[GlideAnalyzerConfig] = None):
        """
        Initialize the GlidePlotter.

        Parameters:
        ----------
        config : GlideAnalyzerConfig, optional
            Configuration object. Uses default if not specified.
        """
        self.config = config if config is not None else DEFAULT_CONFIG
        self.calculator = FlightPhysicsCalculator(self.config)

    def _altitudes(
        self,
        altitude_range: Optional[Tuple[float, float]],
        num_points: int
    ) -> np.ndarray:
        if num_points < 2:
            raise ValueError(f"num_points must be at least 2, got {num_points}")
        low, high = altitude_range or self.DEFAULT_ALTITUDE_RANGE
        return np.linspace(low, high, num_points)

    def _figure(self, ax: Optional[Axes], figsize) -> Tuple[Figure, Axes]:
        if ax is None:
            fig, ax = plt.subplots(figsize=figsize or self.DEFAULT_FIGURE_SIZE)
        else:
            fig = ax.get_figure()
        return fig, ax

    # =========================================================================
    # Density Profile
    # =========================================================================

    def plot_density_profile(
        self,
        planet: PlanetProfile,
        altitude_range: Optional[Tuple[float, float]] = None,
        num_points: int = DEFAULT_NUM_POINTS,
        figsize: Optional[Tuple[int, int]] = None,
        ax: Optional[Axes] = None
    ) -> Figure:
        """
        Plot air density vs altitude for a planet.

        Parameters:
        ----------
        planet : PlanetProfile
            Planet whose air thickness scales the ISA curve.

        altitude_range : tuple, optional
            (min_altitude, max_altitude) in m. Default 0-30 km.

        num_points : int
            Number of altitude samples (at least 2).

        figsize : tuple, optional
            Figure size.

        ax : Axes, optional
            Existing axes.

        Returns:
        -------
        Figure
            Matplotlib figure object.
        """
        altitudes = self._altitudes(altitude_range, num_points)
        densities = np.array([
            self.config.get_air_density(h, planet.air_thickness)
            for h in altitudes
        ])

        fig, ax = self._figure(ax, figsize)

        ax.plot(altitudes, np.ma.masked_invalid(densities),
                linewidth=2, label=planet.name)

        # ISA band boundaries
        ax.axvline(self.config.tropopause_altitude, color='gray',
                   linestyle='--', alpha=0.6, label='Tropopause')
        ax.axvline(self.config.upper_band_altitude, color='gray',
                   linestyle=':', alpha=0.6, label='Upper band')

        ax.set_xlabel('Altitude (m)')
        ax.set_ylabel('Air density (kg/m³)')
        ax.set_title(
            f'Air Density - {planet.name} ({planet.air_thickness:g} atm)'
        )
        ax.legend(loc='upper right')
        ax.grid(True, alpha=0.3)

        return fig

    # =========================================================================
    # Glide Distance
    # =========================================================================

    def plot_glide_distance(
        self,
        aircraft: AircraftProfile,
        planets: Optional[Sequence[PlanetProfile]] = None,
        altitude_range: Optional[Tuple[float, float]] = None,
        num_points: int = DEFAULT_NUM_POINTS,
        figsize: Optional[Tuple[int, int]] = None,
        ax: Optional[Axes] = None
    ) -> Figure:
        """
        Plot glide distance vs altitude for one aircraft on several planets.

        Parameters:
        ----------
        aircraft : AircraftProfile
            Aircraft to fly.

        planets : sequence of PlanetProfile, optional
            Planets to compare. Default: the whole catalog.

        altitude_range : tuple, optional
            (min_altitude, max_altitude) in m.

        num_points : int
            Number of altitude samples (at least 2).

        figsize : tuple, optional
            Figure size.

        ax : Axes, optional
            Existing axes.

        Returns:
        -------
        Figure
            Matplotlib figure object.
        """
        if planets is None:
            planets = list(PLANET_DATABASE.values())

        altitudes = self._altitudes(altitude_range, num_points)
        fig, ax = self._figure(ax, figsize)

        for planet in planets:
            sweep = self.calculator.sweep_altitude(planet, aircraft, altitudes)
            ax.plot(altitudes, np.ma.masked_invalid(sweep["glide_distance"]),
                    linewidth=2, label=planet.name)

        ax.set_xlabel('Altitude (m)')
        ax.set_ylabel('Glide distance (m)')
        ax.set_yscale('symlog')
        ax.set_title(f'Glide Distance - {aircraft.name}')
        ax.legend(title='Planet', loc='upper left')
        ax.grid(True, alpha=0.3)

        return fig

    # =========================================================================
    # Force Breakdown
    # =========================================================================

    def plot_force_breakdown(
        self,
        planet: PlanetProfile,
        aircraft: AircraftProfile,
        altitude_range: Optional[Tuple[float, float]] = None,
        num_points: int = DEFAULT_NUM_POINTS,
        figsize: Optional[Tuple[int, int]] = None,
        ax: Optional[Axes] = None
    ) -> Figure:
        """
        Plot lift, weight and drag components vs altitude.

        Parameters:
        ----------
        planet : PlanetProfile
            Planet to fly on.

        aircraft : AircraftProfile
            Aircraft to fly.

        altitude_range : tuple, optional
            (min_altitude, max_altitude) in m.

        num_points : int
            Number of altitude samples (at least 2).

        figsize : tuple, optional
            Figure size.

        ax : Axes, optional
            Existing axes.

        Returns:
        -------
        Figure
            Matplotlib figure object.
        """
        altitudes = self._altitudes(altitude_range, num_points)
        sweep = self.calculator.sweep_altitude(planet, aircraft, altitudes)

        fig, ax = self._figure(ax, figsize)

        ax.plot(altitudes, np.ma.masked_invalid(sweep["lift"]),
                linewidth=2, label='Lift')
        ax.plot(altitudes, sweep["weight"], 'k--', linewidth=1.5, label='Weight')
        ax.plot(altitudes, np.ma.masked_invalid(sweep["parasite_drag"]),
                linewidth=1.5, label='Parasite drag')
        ax.plot(altitudes, np.ma.masked_invalid(sweep["induced_drag"]),
                linewidth=1.5, label='Induced drag')
        ax.plot(altitudes, np.ma.masked_invalid(sweep["total_drag"]),
                linewidth=2, label='Total drag')

        ax.set_xlabel('Altitude (m)')
        ax.set_ylabel('Force (N)')
        ax.set_title(f'Forces - {aircraft.name} on {planet.name}')
        ax.legend(loc='upper right')
        ax.grid(True, alpha=0.3)

        return fig
