# climate_sim/sim/simulator.py
from dataclasses import dataclass, field
import logging
import math

from climate_sim.constants import ASTRO, EARTH, CALIBRATION, Astro, Earth, Calibration
from climate_sim.helpers import NumericDegeneracyError, SimulationAlreadyRunError, per_cm3_to_per_m3
from climate_sim.physics.flux import incoming_flux, outgoing_flux
from climate_sim.physics.vapor import water_vapor_density
from .config import SimulationConfig
from .state import SimulationState
from .simulation_data import SimulationSeries
from .results import SimulationResults

logger = logging.getLogger(__name__)


def euler_step(temperature: float, heat_in: float, heat_out: float, time_step: float,
               astro: Astro = ASTRO, earth: Earth = EARTH) -> float:
    """
    Explicit (forward) Euler update of the surface temperature.
    Stable only if time_step is small compared to the thermal relaxation time; this is not checked.

    Parameters
    ----------
    temperature : float
        Surface temperature at the start of the step [K]
    heat_in, heat_out : float
        Incoming and outgoing power [W]
    time_step : float
        Step length [years]
    """
    net_energy = (heat_in - heat_out) * time_step * astro.seconds_per_year
    return temperature + net_energy / (earth.heat_capacity * earth.surface_area)


@dataclass
class Simulator:
    cfg: SimulationConfig
    calibration: Calibration = CALIBRATION
    astro: Astro = ASTRO
    earth: Earth = EARTH
    _results: SimulationResults | None = field(default=None, init=False, repr=False)
    _started: bool = field(default=False, init=False, repr=False)

    def run(self) -> SimulationResults:
        if self._started:
            raise SimulationAlreadyRunError('Simulator.run() can only be called once. Create a new Simulator to run again')
        self._started = True
        logger.info('Starting simulation: %s', self.cfg)

        self.state = SimulationState()
        self.state.init_time(self.cfg)
        series = SimulationSeries()
        heat_in = incoming_flux(self.astro, self.earth)

        # Main loop
        while not self.state.finished:
            self._step(series, heat_in)
            self.state.advance()

        self._results = SimulationResults.from_series(self.cfg, heat_in, series)
        logger.info('Simulation completed after %d steps, final temperature %.2f K', len(series), self._results.final_temperature)
        return self._results

    @property
    def results(self) -> SimulationResults:
        if self._results is None:
            raise RuntimeError('No results available: run() has not completed')
        return self._results

    def _step(self, series: SimulationSeries, heat_in: float) -> None:
        state = self.state
        co2_density = self.cfg.co2_density_at(state.time)
        earth_T = state.temperature
        heat_out, _ = outgoing_flux(earth_T,
                                    water_vapor_density(earth_T),
                                    per_cm3_to_per_m3(co2_density),
                                    self.cfg.use_greenhouse,
                                    calibration=self.calibration,
                                    earth=self.earth)
        # The first sample records the initial state
        if state.time_id > 0:
            state.temperature = euler_step(earth_T, heat_in, heat_out, state.time_step, self.astro, self.earth)
            self._check_temperature(state)
        logger.debug('t = %.4f y, T = %.4f K, Hout = %.6e W', state.time, state.temperature, heat_out)
        series.append(state.time, state.temperature, co2_density, heat_out)

    def _check_temperature(self, state: SimulationState) -> None:
        # Forward Euler overshoots when the step is long compared to the relaxation time
        where = f'at time {state.time} years, time ID {state.time_id}. Reduce the time step'
        if not math.isfinite(state.temperature) or state.temperature <= 0.0:
            raise NumericDegeneracyError(f'Temperature became {state.temperature} K {where}')
        if self.cfg.use_greenhouse and state.temperature - self.calibration.atmosphere_offset <= 0.0:
            raise NumericDegeneracyError(
                f'Temperature became {state.temperature} K, leaving the atmosphere at or below 0 K, {where}')
