import pytest, math
import numpy as np
import climate_sim as cs
from climate_sim.helpers import per_cm3_to_per_m3


def test_incoming_flux_is_the_solar_constant_over_a_quarter():
    # About 1367 W/m2 at the Earth's distance, spread over four times the cross-section
    per_area = cs.incoming_flux() / cs.EARTH.surface_area
    assert math.isclose(per_area, 341.7, abs_tol = 0.5)

def test_incoming_flux_depends_on_distance():
    far = cs.override(cs.ASTRO, D_sun = 2 * cs.ASTRO.D_sun)
    assert math.isclose(cs.incoming_flux(far), cs.incoming_flux() / 4, rel_tol = 1e-12)

def test_outgoing_flux_without_greenhouse_follows_stefan_boltzmann():
    # Planck's law scaled by 2.78 instead of 2 integrates to 1.39 sigma T^4
    for T in (250, 288, 300):
        total, spectrum = cs.outgoing_flux(T, 0.0, 0.0, use_greenhouse = False)
        expected = 2.78 / 2 * cs.THERMO.sigma * T**4 * cs.EARTH.surface_area
        assert math.isclose(total, expected, rel_tol = 1e-3)
        assert spectrum is None

def test_outgoing_flux_strictly_increasing_with_temperature():
    totals = [cs.outgoing_flux(T, 0.0, 0.0, use_greenhouse = False)[0] for T in (250, 270, 300)]
    assert totals[0] < totals[1] < totals[2]

def test_outgoing_flux_is_deterministic():
    args = (287, 0.669, per_cm3_to_per_m3(1.6e-8), True)
    first, spectrum_1 = cs.outgoing_flux(*args, emit_spectrum = True)
    second, spectrum_2 = cs.outgoing_flux(*args, emit_spectrum = True)
    assert first == second
    np.testing.assert_array_equal(spectrum_1.intensity, spectrum_2.intensity)

def test_greenhouse_reduces_outgoing_flux():
    h2o, co2 = cs.water_vapor_density(287), per_cm3_to_per_m3(1.6e-8)
    with_gh, _ = cs.outgoing_flux(287, h2o, co2, use_greenhouse = True)
    without_gh, _ = cs.outgoing_flux(287, h2o, co2, use_greenhouse = False)
    assert with_gh < without_gh

def test_greenhouse_without_greenhouse_ignores_gases():
    reference, _ = cs.outgoing_flux(287, 0.0, 0.0, use_greenhouse = False)
    with_gases, _ = cs.outgoing_flux(287, 10.0, 10.0, use_greenhouse = False)
    assert reference == with_gases

def test_more_co2_reduces_outgoing_flux():
    h2o = cs.water_vapor_density(287)
    totals = [cs.outgoing_flux(287, h2o, per_cm3_to_per_m3(co2), use_greenhouse = True)[0] for co2 in (0.0, 1e-9, 1e-8)]
    assert totals[0] > totals[1] > totals[2]

def test_greenhouse_spectrum_by_region(spectra):
    wavelength = spectra['greenhouse'].wavelength
    greenhouse = spectra['greenhouse'].intensity
    window = (wavelength > 8.05) & (wavelength < 13.95)
    outside = (wavelength < 7.95) | (wavelength > 19.05)
    band = (wavelength > 14.05) & (wavelength < 18.95)
    np.testing.assert_allclose(greenhouse[window], spectra['earth'].intensity[window], rtol = 1e-12)
    np.testing.assert_allclose(greenhouse[outside], spectra['atmosphere'].intensity[outside], rtol = 1e-12)
    # In the band the intensity lies between the atmosphere and the surface ones
    assert np.all(greenhouse[band] <= spectra['earth'].intensity[band])
    assert np.all(greenhouse[band] >= spectra['atmosphere'].intensity[band])

def test_band_transmittance():
    wavelength = np.array([14.1, 15.0, 16.0])
    np.testing.assert_array_equal(cs.band_transmittance(wavelength, 0.0, 0.0), np.ones(3))
    co2_only = cs.band_transmittance(wavelength, 0.0, 0.01)
    # CO2 absorbs only in its sub-band
    assert co2_only[0] == 1.0 and co2_only[2] == 1.0
    expected = math.exp(-0.01 * cs.THERMO.N_A * cs.CALIBRATION.sigma_co2 * cs.EARTH.scale_height)
    assert math.isclose(co2_only[1], expected, rel_tol = 1e-12)
    with_water = cs.band_transmittance(wavelength, 0.5, 0.01)
    assert np.all(with_water < co2_only)
    with pytest.raises(cs.InvalidArgumentError):
        cs.band_transmittance(wavelength, -1.0, 0.0)

def test_outgoing_flux_rejects_too_cold_atmosphere():
    # The atmosphere would be at a negative temperature
    with pytest.raises(cs.InvalidArgumentError):
        cs.outgoing_flux(cs.CALIBRATION.atmosphere_offset - 1, 0.0, 0.0, use_greenhouse = True)
    with pytest.raises(cs.InvalidArgumentError):
        cs.outgoing_flux(0.0, 0.0, 0.0, use_greenhouse = False)

def test_outgoing_flux_warns_when_fully_saturated():
    with pytest.warns(cs.NumericDegeneracyWarning):
        total, _ = cs.outgoing_flux(0.01, 0.0, 0.0, use_greenhouse = False)
    assert total == 0.0


@pytest.fixture(scope="module")
def spectra():
    return cs.reference_spectra()
