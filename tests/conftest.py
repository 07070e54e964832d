# tests/conftest.py
import pytest
import climate_sim as cs


@pytest.fixture(scope="session")
def reference_co2():
    # 9.6e15 molecules/cm3, in mol/cm3
    return 9.6e15 / 6.02e23

@pytest.fixture
def greenhouse_config(reference_co2):
    return cs.SimulationConfig(end_year = 30, time_step = 0.1, initial_temperature = 270,
                               initial_co2_density = reference_co2, co2_slope = 0, use_greenhouse = True)

@pytest.fixture
def short_config(reference_co2):
    # Coarse and short, for tests that only need a few steps
    return cs.SimulationConfig(end_year = 5, time_step = 0.5, initial_temperature = 280,
                               initial_co2_density = reference_co2, co2_slope = 0, use_greenhouse = True)

@pytest.fixture(scope="session")
def greenhouse_results(reference_co2):
    cfg = cs.SimulationConfig(30, 0.1, 270, reference_co2, 0, True)
    return cs.Simulator(cfg).run()

@pytest.fixture(scope="session")
def no_greenhouse_results(reference_co2):
    cfg = cs.SimulationConfig(30, 0.1, 270, reference_co2, 0, False)
    return cs.Simulator(cfg).run()
