"""Core: configurazione, errori e traiettoria."""

from oscsim.core.config import ChartConfig, OutputConfig, RunConfig, SimulationConfig
from oscsim.core.errors import IntegrationError, OscSimError, RenderError, TrajectoryWriteError
from oscsim.core.trajectory import Trajectory

__all__ = [
    "SimulationConfig",
    "OutputConfig",
    "ChartConfig",
    "RunConfig",
    "OscSimError",
    "IntegrationError",
    "TrajectoryWriteError",
    "RenderError",
    "Trajectory",
]
