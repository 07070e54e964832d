# src/climate_sim/constants/__init__.py
from .thermo import THERMO, Thermo
from .astro import ASTRO, EARTH, Astro, Earth
from .calibration import CALIBRATION, Calibration
from .base import override

__all__ = ["THERMO", "ASTRO", "EARTH", "CALIBRATION", "Thermo", "Astro", "Earth", "Calibration", "override"]
