"""Parametri della simulazione, dell'output su file e del grafico."""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class SimulationConfig:
    """Sistema fisico e parametri dell'integratore adattivo."""

    w: float = 1.0
    t_start: float = 0.0
    t_end: float = 50.0
    initial_step: float = 0.1
    y0: Tuple[float, float] = (1.0, 0.0)
    abs_tol: float = 1e-10
    rel_tol: float = 1e-10
    # None = un campione per ogni step accettato
    output_step: Optional[float] = 0.1
    method: str = "RK45"
    max_steps: int = 100_000

    def __post_init__(self) -> None:
        if isinstance(self.y0, list):
            object.__setattr__(self, "y0", tuple(self.y0))


@dataclass(frozen=True)
class OutputConfig:
    """Destinazione del file di testo con la traiettoria."""

    data_path: str = "outputs/harmonic_oscillator.dat"


@dataclass(frozen=True)
class ChartConfig:
    """Vista scatter (tempo, posizione) salvata su immagine."""

    path: str = "scatter.svg"
    x_range: Tuple[float, float] = (0.0, 10.0)
    y_range: Tuple[float, float] = (-2.0, 2.0)
    x_label: str = "Some varying variable"
    y_label: str = "The response of something"
    colour: str = "#DD3355"
    marker_size: float = 9.0
    component: int = 0


@dataclass(frozen=True)
class RunConfig:
    """Configurazione completa di una run della pipeline."""

    simulation: SimulationConfig = field(default_factory=SimulationConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    chart: ChartConfig = field(default_factory=ChartConfig)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
