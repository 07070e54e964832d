"""
Radiative power balance of the Earth.

- incoming_flux: solar power intercepted by the Earth's disk
- outgoing_flux: thermal power emitted to space, integrated over the wavelength grid
- band_transmittance: Beer-Lambert transmittance of the CO2/H2O absorption band

Powers are totals for the whole planet [W]; densities are in mol/m3.
"""
from __future__ import annotations
from typing import Optional, Tuple
import logging
import math
import warnings
import numpy as np

from climate_sim.constants import THERMO, ASTRO, EARTH, CALIBRATION, Astro, Earth, Calibration
from climate_sim.helpers import InvalidArgumentError, NumericDegeneracyWarning, check_non_negative, check_positive, um2m
from climate_sim.physics.blackbody import SpectralSample, blackbody_intensity

logger = logging.getLogger(__name__)


def incoming_flux(astro: Astro = ASTRO, earth: Earth = EARTH) -> float:
    """
    Solar power absorbed by the Earth [W].
    The solar luminosity is spread over a sphere of radius D_sun and intercepted by the Earth's cross-section
    """
    luminosity = THERMO.sigma * astro.T_sun**4 * 4.0 * math.pi * astro.R_sun**2
    return luminosity / (4.0 * math.pi * astro.D_sun**2) * earth.cross_section


def band_transmittance(wavelength: np.ndarray, density_h2o: float, density_co2: float,
                       calibration: Calibration = CALIBRATION, earth: Earth = EARTH) -> np.ndarray:
    """
    Fraction of the surface radiation crossing the atmosphere at each wavelength [μm] of the absorption band.
    Water vapour absorbs over the whole band, CO2 only between co2_band_low and co2_band_high.
    """
    check_non_negative('H2O density', density_h2o)
    check_non_negative('CO2 density', density_co2)
    wavelength = np.asarray(wavelength, dtype=float)
    tau_h2o = density_h2o * THERMO.N_A * calibration.sigma_h2o * earth.scale_height
    in_co2_band = (wavelength >= calibration.co2_band_low) & (wavelength <= calibration.co2_band_high)
    tau_co2 = np.where(in_co2_band, density_co2 * THERMO.N_A * calibration.sigma_co2 * earth.scale_height, 0.0)
    return math.exp(-tau_h2o) * np.exp(-tau_co2)


def outgoing_flux(earth_T: float,
                  density_h2o: float,
                  density_co2: float,
                  use_greenhouse: bool,
                  emit_spectrum: bool = False,
                  calibration: Calibration = CALIBRATION,
                  earth: Earth = EARTH) -> Tuple[float, Optional[SpectralSample]]:
    """
    Thermal power leaving the Earth [W], integrated with the rectangle rule over the calibration grid.

    Parameters
    ----------
    earth_T : float
        Surface temperature [K]
    density_h2o : float
        Water vapour molar density [mol/m3]
    density_co2 : float
        CO2 molar density [mol/m3]
    use_greenhouse : bool
        If False the surface radiates as an unattenuated blackbody at every wavelength.
        If True, outside the window and band the radiation comes from the atmosphere at earth_T - atmosphere_offset,
        in the window (window_low to window_high) directly from the surface, and in the absorption band
        (window_high to band_high) from a mix of both weighted by the band transmittance
    emit_spectrum : bool, optional
        If True the per-wavelength intensity is returned as well. Defaults to False

    Returns
    -------
    tuple
        Total power [W] and the SpectralSample, or None when emit_spectrum is False
    """
    check_positive('Surface temperature', earth_T)
    wavelength = calibration.wavelength_grid()
    surface = blackbody_intensity(earth_T, um2m(wavelength), calibration)
    if use_greenhouse:
        atm_T = earth_T - calibration.atmosphere_offset
        if atm_T <= 0.0:
            raise InvalidArgumentError(f'Surface temperature {earth_T} K gives a non-positive atmosphere temperature {atm_T} K')
        atmosphere = blackbody_intensity(atm_T, um2m(wavelength), calibration)
        window = (wavelength >= calibration.window_low) & (wavelength < calibration.window_high)
        band = (wavelength >= calibration.window_high) & (wavelength < calibration.band_high)
        transmittance = band_transmittance(wavelength, density_h2o, density_co2, calibration, earth)
        mixed = surface * transmittance + atmosphere * (1.0 - transmittance)
        intensity = np.where(window, surface, np.where(band, mixed, atmosphere))
    else:
        intensity = surface
    total = float(np.sum(intensity)) * um2m(calibration.grid_step) * earth.surface_area
    if total == 0.0:
        warnings.warn(f'Every spectral bin saturated at {earth_T} K, outgoing flux clamped to 0', NumericDegeneracyWarning)
    logger.debug('Outgoing flux at %.3f K: %.6e W', earth_T, total)
    spectrum = SpectralSample(wavelength, intensity) if emit_spectrum else None
    return total, spectrum
