from .config import SimulationConfig
from .results import SimulationResults
from .simulator import Simulator, euler_step

__all__ = ["SimulationConfig", "SimulationResults", "Simulator", "euler_step"]
