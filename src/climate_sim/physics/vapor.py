"""
Saturation vapour pressure of water and its conversion to a molar density.

All densities are in mol/m3. Convert with helpers.per_m3_to_per_cm3 where mol/cm3 is needed.
"""
from __future__ import annotations
import math

from climate_sim.constants import THERMO
from climate_sim.helpers import InvalidArgumentError, check_positive


def saturation_vapor_pressure(T: float) -> float:
    """
    Empirical saturation vapour pressure of water [Pa] at temperature T [K].
    Magnus form, P = 610.94 * exp(17.625 * t / (t + 243.04)) with t = T - 273
    """
    check_positive('Temperature', T)
    t = T - 273.0
    if t + 243.04 <= 0.0:
        raise InvalidArgumentError(f'Temperature {T} K is below the range of the vapour pressure formula')
    return 1000.0 * 0.61094 * math.exp(17.625 * t / (t + 243.04))


def water_vapor_density(T: float) -> float:
    # Ideal gas law, n = P / (R T), in mol/m3
    return saturation_vapor_pressure(T) / (THERMO.R_univ * T)


def vapor_pressure_from_density(density: float, T: float) -> float:
    check_positive('Temperature', T)
    return density * THERMO.R_univ * T
