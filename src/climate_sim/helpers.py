import math
import numpy as np


def um2m(wavelength):
    return wavelength * 1e-6

def per_cm3_to_per_m3(density):
    # mol/cm3 -> mol/m3
    return density * 1e6

def per_m3_to_per_cm3(density):
    # mol/m3 -> mol/cm3
    return density * 1e-6


def check_positive(name: str, value):
    """
    Raises InvalidArgumentError unless every element of value is finite and strictly positive.
    Works for scalars and numpy arrays alike
    """
    values = np.asarray(value, dtype=float)
    if values.size == 0 or not np.all(np.isfinite(values)) or np.any(values <= 0.0):
        raise InvalidArgumentError(f'{name} must be finite and strictly positive, got {value}')
    return value


def check_non_negative(name: str, value: float):
    if not math.isfinite(value) or value < 0.0:
        raise InvalidArgumentError(f'{name} must be finite and non-negative, got {value}')
    return value


class InvalidArgumentError(ValueError):
    pass

class NumericDegeneracyError(ArithmeticError):
    pass

class NumericDegeneracyWarning(RuntimeWarning):
    pass

class SimulationAlreadyRunError(RuntimeError):
    pass

class ConfigError(Exception):
    pass
