from climate_sim.sim.config import SimulationConfig
from climate_sim.sim.simulation_data import SimulationSeries
from dataclasses import dataclass
import numpy as np
import pandas as pd

@dataclass(frozen=True)
class SimulationResults:
    config: SimulationConfig
    heat_in: float               # W
    time: np.ndarray             # years
    temperature: np.ndarray      # K, temperature[0] is the initial temperature
    co2_density: np.ndarray      # mol/cm3
    # W. heat_out[0] is emitted by the initial state. For i > 0, heat_out[i] is emitted at
    # temperature[i-1] and produces temperature[i], so heat_out[0] == heat_out[1]
    heat_out: np.ndarray

    @classmethod
    def from_series(cls, config: SimulationConfig, heat_in: float, series: SimulationSeries):
        time, temperature, co2_density, heat_out = series.to_arrays()
        return cls(config, heat_in, time, temperature, co2_density, heat_out)

    def __len__(self):
        return len(self.time)

    @property
    def final_temperature(self) -> float:
        return float(self.temperature[-1])

    def get_net_flux(self) -> np.ndarray:
        # Positive when the Earth is gaining energy. Entry i is the imbalance that produced temperature[i]
        return self.heat_in - self.heat_out

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame({'temperature': self.temperature,
                             'co2_density': self.co2_density,
                             'heat_out': self.heat_out},
                            index=pd.Index(self.time, name='time'))
