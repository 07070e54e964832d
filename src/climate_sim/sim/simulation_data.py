from dataclasses import dataclass, field
from typing import List
import numpy as np

@dataclass
class SimulationSeries:
    time: List[float] = field(default_factory=list)           # years
    temperature: List[float] = field(default_factory=list)    # K
    co2_density: List[float] = field(default_factory=list)    # mol/cm3
    heat_out: List[float] = field(default_factory=list)       # W

    def append(self, time: float, temperature: float, co2_density: float, heat_out: float) -> None:
        self.time.append(time)
        self.temperature.append(temperature)
        self.co2_density.append(co2_density)
        self.heat_out.append(heat_out)

    def __len__(self):
        return len(self.time)

    def to_arrays(self):
        # Read-only copies, so that the recorded series cannot be altered by consumers
        arrays = []
        for values in (self.time, self.temperature, self.co2_density, self.heat_out):
            array = np.array(values, dtype=float)
            array.flags.writeable = False
            arrays.append(array)
        return tuple(arrays)
