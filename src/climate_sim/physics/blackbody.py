from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Tuple
import math
import numpy as np
import pandas as pd

from climate_sim.constants import THERMO, CALIBRATION, Calibration
from climate_sim.helpers import check_positive, um2m

# exp(x) overflows double precision just above x = 709
EXPONENT_LIMIT = 700.0


@dataclass(frozen=True)
class SpectralSample:
    wavelength: np.ndarray   # [μm]
    intensity: np.ndarray    # [W·m⁻²·m⁻¹]

    def __post_init__(self):
        if len(self.wavelength) != len(self.intensity):
            raise ValueError(f'Wavelength and intensity must have the same length, got {len(self.wavelength)} and {len(self.intensity)}')

    def __len__(self):
        return len(self.wavelength)

    def pairs(self) -> Iterator[Tuple[float, float]]:
        return zip(self.wavelength.tolist(), self.intensity.tolist())

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame({'intensity': self.intensity}, index=pd.Index(self.wavelength, name='wavelength'))


def blackbody_intensity(T, wavelength, calibration: Calibration = CALIBRATION):
    """
    Spectral intensity emitted by a blackbody, Planck's law scaled by the empirical efficiency multiplier.

    Parameters
    ----------
    T : float
        Temperature of the body [K]
    wavelength : float or np.ndarray
        Wavelength [m]
    calibration : Calibration, optional
        Provides the efficiency multiplier. Defaults to CALIBRATION

    Returns
    -------
    float or np.ndarray
        Intensity [W/m2/m]. Where h*c/(lambda*k_B*T) exceeds EXPONENT_LIMIT the intensity is
        clamped to 0.0, the value it underflows to anyway.
    """
    check_positive('Temperature', T)
    check_positive('Wavelength', wavelength)
    wavelength = np.asarray(wavelength, dtype=float)
    x = THERMO.h * THERMO.c / (wavelength * THERMO.k_B * T)
    saturated = x > EXPONENT_LIMIT
    denominator = np.expm1(np.where(saturated, EXPONENT_LIMIT, x))
    intensity = calibration.planck_scale * math.pi * THERMO.h * THERMO.c**2 / wavelength**5 / denominator
    intensity = np.where(saturated, 0.0, intensity)
    return float(intensity) if intensity.ndim == 0 else intensity


def blackbody_spectrum(T: float, calibration: Calibration = CALIBRATION) -> SpectralSample:
    # Unattenuated spectrum of a body at T on the integration grid
    wavelength = calibration.wavelength_grid()
    return SpectralSample(wavelength, blackbody_intensity(T, um2m(wavelength), calibration))
