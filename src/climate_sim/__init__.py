# Re-export a stable public API
from .constants import THERMO, ASTRO, EARTH, CALIBRATION, Calibration, override
from .sim.config import SimulationConfig
from .sim.simulator import Simulator, euler_step
from .sim.results import SimulationResults
from .physics.blackbody import SpectralSample, blackbody_intensity, blackbody_spectrum
from .physics.vapor import saturation_vapor_pressure, water_vapor_density, vapor_pressure_from_density
from .physics.flux import incoming_flux, outgoing_flux, band_transmittance
from .scenarios import compare_greenhouse, equilibrium_by_co2, reference_spectra
from .io.loader import load_scenarios, load_default_scenarios
from .helpers import InvalidArgumentError, NumericDegeneracyError, NumericDegeneracyWarning, SimulationAlreadyRunError, ConfigError

__all__ = [
    "THERMO", "ASTRO", "EARTH", "CALIBRATION", "Calibration", "override",
    "SimulationConfig", "Simulator", "euler_step", "SimulationResults",
    "SpectralSample", "blackbody_intensity", "blackbody_spectrum",
    "saturation_vapor_pressure", "water_vapor_density", "vapor_pressure_from_density",
    "incoming_flux", "outgoing_flux", "band_transmittance",
    "compare_greenhouse", "equilibrium_by_co2", "reference_spectra",
    "load_scenarios", "load_default_scenarios",
    "InvalidArgumentError", "NumericDegeneracyError", "NumericDegeneracyWarning", "SimulationAlreadyRunError", "ConfigError",
]
