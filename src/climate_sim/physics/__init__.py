from .blackbody import SpectralSample, blackbody_intensity, blackbody_spectrum
from .vapor import saturation_vapor_pressure, water_vapor_density, vapor_pressure_from_density
from .flux import incoming_flux, outgoing_flux, band_transmittance

__all__ = [
    "SpectralSample", "blackbody_intensity", "blackbody_spectrum",
    "saturation_vapor_pressure", "water_vapor_density", "vapor_pressure_from_density",
    "incoming_flux", "outgoing_flux", "band_transmittance",
]
