# src/climate_sim/constants/thermo.py
from __future__ import annotations
from dataclasses import dataclass
from .base import FrozenNamespace

@dataclass(frozen=True)
class Thermo(FrozenNamespace):
    sigma: float = 5.670374419e-8   # Stefan–Boltzmann constant [W·m⁻²·K⁻⁴] (CODATA 2018)
    R_univ: float = 8.314462618      # Universal gas constant [J·mol⁻¹·K⁻¹]
    h: float = 6.62607015e-34        # Planck constant [J·s]
    c: float = 2.99792458e8          # Speed of light [m·s⁻¹]
    k_B: float = 1.380649e-23        # Boltzmann constant [J·K⁻¹]
    N_A: float = 6.02214076e23       # Avogadro constant [mol⁻¹]

THERMO = Thermo()
