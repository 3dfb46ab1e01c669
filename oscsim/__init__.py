"""
oscsim: simulazione di un oscillatore armonico con integratore adattivo,
export della traiettoria su file di testo e grafico scatter.
"""

__version__ = "0.1.0"

from oscsim.core.config import RunConfig, SimulationConfig
from oscsim.core.trajectory import Trajectory
from oscsim.physics.library import HarmonicOscillator
from oscsim.pipeline import run

__all__ = [
    "__version__",
    "RunConfig",
    "SimulationConfig",
    "Trajectory",
    "HarmonicOscillator",
    "run",
]
