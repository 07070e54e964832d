# src/climate_sim/constants/base.py
from __future__ import annotations
from dataclasses import dataclass, replace
from typing import TypeVar

N = TypeVar("N", bound="FrozenNamespace")

@dataclass(frozen=True)
class FrozenNamespace:
    """Immutable bag of constants. Values are plain floats (SI unless stated)."""

def override(obj: N, **updates: float) -> N:
    """
    Return a copy of a FrozenNamespace with some values changed. The original is left untouched.
    Usage:
        cal = override(CALIBRATION, atmosphere_offset=66.0)
        Simulator(cfg, calibration=cal).run()
    """
    return replace(obj, **updates)
