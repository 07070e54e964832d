# src/climate_sim/constants/astro.py
from __future__ import annotations
from dataclasses import dataclass
import math
from .base import FrozenNamespace

@dataclass(frozen=True)
class Astro(FrozenNamespace):
    T_sun: float = 5778.0              # Effective temperature of the Sun [K]
    R_sun: float = 6.957e8             # Solar radius [m]
    D_sun: float = 1.496e11            # Mean Earth–Sun distance [m]
    seconds_per_year: float = 3.15576e7  # Julian year [s]

@dataclass(frozen=True)
class Earth(FrozenNamespace):
    R: float = 6.371e6                 # Mean radius [m]
    scale_height: float = 8500.0       # Atmospheric scale height [m]
    heat_capacity: float = 4.184e8     # Effective heat capacity [J·m⁻²·K⁻¹], 100 m water column

    @property
    def surface_area(self) -> float:
        return 4.0 * math.pi * self.R**2

    @property
    def cross_section(self) -> float:
        return math.pi * self.R**2

ASTRO = Astro()
EARTH = Earth()
