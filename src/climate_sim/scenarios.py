"""
Ready-made experiments on the model. They return data only; plotting is left to the caller.
"""
from __future__ import annotations
from typing import Dict, Tuple
import logging
import numpy as np
import pandas as pd

from climate_sim.constants import CALIBRATION, Calibration
from climate_sim.helpers import InvalidArgumentError, per_cm3_to_per_m3
from climate_sim.physics.blackbody import SpectralSample, blackbody_spectrum
from climate_sim.physics.flux import outgoing_flux
from climate_sim.sim.config import SimulationConfig
from climate_sim.sim.results import SimulationResults
from climate_sim.sim.simulator import Simulator

logger = logging.getLogger(__name__)

# Present-day CO2 number density, 9.6e15 molecules/cm3, expressed in mol/cm3
REFERENCE_CO2_DENSITY = 9.6e15 / 6.02e23


def compare_greenhouse(end_year: float = 30,
                       time_step: float = 0.1,
                       initial_temperature: float = 270,
                       co2_density: float = REFERENCE_CO2_DENSITY,
                       calibration: Calibration = CALIBRATION) -> Tuple[SimulationResults, SimulationResults]:
    """
    Runs the same scenario with and without greenhouse absorption.

    Returns
    -------
    tuple
        Results with greenhouse gases, results without
    """
    results = []
    for use_greenhouse in (True, False):
        cfg = SimulationConfig(end_year, time_step, initial_temperature, co2_density, 0.0, use_greenhouse)
        results.append(Simulator(cfg, calibration=calibration).run())
    logger.info('Final temperature with greenhouse %.2f K, without %.2f K', results[0].final_temperature, results[1].final_temperature)
    return results[0], results[1]


def equilibrium_by_co2(max_co2: float = 15e14 / 6.02e23,
                       divisions: int = 20,
                       end_year: float = 30,
                       time_step: float = 0.5,
                       initial_temperature: float = 281,
                       calibration: Calibration = CALIBRATION) -> pd.DataFrame:
    """
    Final temperature reached for evenly spaced constant CO2 densities in [0, max_co2).
    Returns a DataFrame indexed by CO2 density [mol/cm3] with the column 'equilibrium_temperature' [K]
    """
    if divisions < 1:
        raise InvalidArgumentError(f'divisions must be at least 1, got {divisions}')
    densities = max_co2 / divisions * np.arange(divisions)
    temperatures = []
    for co2 in densities:
        cfg = SimulationConfig(end_year, time_step, initial_temperature, float(co2), 0.0, True)
        temperatures.append(Simulator(cfg, calibration=calibration).run().final_temperature)
        logger.info('CO2 density %.3e mol/cm3: equilibrium temperature %.2f K', co2, temperatures[-1])
    return pd.DataFrame({'equilibrium_temperature': temperatures}, index=pd.Index(densities, name='co2_density'))


def reference_spectra(temperature: float = 273 + 14,
                      density_h2o: float = 6.69e-7,
                      density_co2: float = 1.6e-8,
                      calibration: Calibration = CALIBRATION) -> Dict[str, SpectralSample]:
    """
    Spectra of the surface, of the top of the atmosphere and of the surface seen through the greenhouse gases.
    Densities are given in mol/cm3.
    """
    _, greenhouse = outgoing_flux(temperature,
                                  per_cm3_to_per_m3(density_h2o),
                                  per_cm3_to_per_m3(density_co2),
                                  use_greenhouse=True,
                                  emit_spectrum=True,
                                  calibration=calibration)
    return {
        'earth': blackbody_spectrum(temperature, calibration),
        'atmosphere': blackbody_spectrum(temperature - calibration.atmosphere_offset, calibration),
        'greenhouse': greenhouse,
    }
