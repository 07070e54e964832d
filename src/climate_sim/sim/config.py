# climate_sim/sim/config.py
from dataclasses import dataclass, asdict
import math

from climate_sim.helpers import InvalidArgumentError, check_positive, check_non_negative

@dataclass(frozen=True)
class SimulationConfig:
    """
    Scenario of a simulation run. Immutable once created.

    Parameters
    ----------
    end_year : float
        Horizon of the simulation [years from t = 0]
    time_step : float
        Time step [years]
    initial_temperature : float
        Surface temperature at t = 0 [K]
    initial_co2_density : float
        CO2 molar density at t = 0 [mol/cm3]
    co2_slope : float
        Linear change of the CO2 molar density [mol/cm3 per year]
    use_greenhouse : bool
        Enables the absorption of the atmosphere outside the window
    """
    end_year: float
    time_step: float
    initial_temperature: float
    initial_co2_density: float
    co2_slope: float
    use_greenhouse: bool

    def __post_init__(self):
        # YAML may deliver numbers as strings, e.g. end_year: "30"
        for name in ('end_year', 'time_step', 'initial_temperature', 'initial_co2_density', 'co2_slope'):
            value = getattr(self, name)
            try:
                object.__setattr__(self, name, float(value))
            except (TypeError, ValueError):
                raise InvalidArgumentError(f'{name} must be a number, got {value!r}') from None
        check_positive('end_year', self.end_year)
        check_positive('time_step', self.time_step)
        if self.time_step > self.end_year:
            raise InvalidArgumentError(f'time_step ({self.time_step}) cannot exceed end_year ({self.end_year})')
        check_positive('initial_temperature', self.initial_temperature)
        check_non_negative('initial_co2_density', self.initial_co2_density)
        if not math.isfinite(self.co2_slope):
            raise InvalidArgumentError(f'co2_slope must be finite, got {self.co2_slope}')
        last_time = (self.n_steps - 1) * self.time_step
        if self.co2_density_at(last_time) < 0.0:
            raise InvalidArgumentError(
                f'co2_slope ({self.co2_slope}) drives the CO2 density below zero before year {last_time}')

    @property
    def n_steps(self) -> int:
        # The tolerance keeps e.g. 30 / 0.1 = 299.99999999999994 at 300
        return int(math.floor(self.end_year / self.time_step + 1e-9))

    def co2_density_at(self, time: float) -> float:
        return self.initial_co2_density + self.co2_slope * time

    def to_dict(self) -> dict:
        return asdict(self)
