from climate_sim.sim.config import SimulationConfig
from dataclasses import dataclass

@dataclass
class SimulationState:
    time: float = 0.0           # years
    time_id: int = 0
    n_steps: int = 0
    time_step: float = 0.0      # years
    temperature: float = 0.0    # K

    def init_time(self, cfg: SimulationConfig) -> None:
        self.time = 0.0
        self.time_id = 0
        self.n_steps = cfg.n_steps
        self.time_step = cfg.time_step
        self.temperature = cfg.initial_temperature

    def advance(self) -> None:
        # Time is recomputed from the index so that no rounding error accumulates
        self.time_id += 1
        self.time = self.time_id * self.time_step

    @property
    def finished(self) -> bool:
        return self.time_id >= self.n_steps
