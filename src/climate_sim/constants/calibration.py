# src/climate_sim/constants/calibration.py
from __future__ import annotations
from dataclasses import dataclass
import numpy as np
from .base import FrozenNamespace

@dataclass(frozen=True)
class Calibration(FrozenNamespace):
    # Tuning parameters of the model, not physical constants
    planck_scale: float = 2.78          # Empirical efficiency multiplier on Planck's law [-]
    atmosphere_offset: float = 50.0     # Surface minus atmosphere temperature [K]
    sigma_co2: float = 1.0e-25          # CO2 absorption cross-section in its sub-band [m²]
    sigma_h2o: float = 2.0e-28          # H2O absorption cross-section in the band [m²]
    # Spectral layout [μm]
    window_low: float = 8.0
    window_high: float = 14.0           # Also the lower edge of the absorption band
    band_high: float = 19.0
    co2_band_low: float = 14.3
    co2_band_high: float = 15.6
    # Integration grid [μm]
    grid_start: float = 0.01
    grid_stop: float = 1000.0
    grid_step: float = 0.01

    def wavelength_grid(self) -> np.ndarray:
        """Sample wavelengths [μm], from grid_start to grid_stop included."""
        n = int(round((self.grid_stop - self.grid_start) / self.grid_step)) + 1
        return self.grid_start + self.grid_step * np.arange(n)

CALIBRATION = Calibration()
