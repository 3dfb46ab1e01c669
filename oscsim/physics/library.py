"""
Modelli fisici parametrici pronti all'uso.

Sottoclassi di ODEModel con rhs() già implementato; l'utente imposta solo i parametri.
"""

from typing import Any

import numpy as np

from oscsim.physics.ode import ODEModel


class HarmonicOscillator(ODEModel):
    """
    Oscillatore armonico: d²x/dt² = -w x.
    Stato [pos, vel]; rhs: dx/dt = vel, dv/dt = -w*pos.
    """

    state_names = ("position", "velocity")

    def __init__(self, w: float = 1.0, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.w = float(w)

    def rhs(self, t: float, y: np.ndarray) -> np.ndarray:
        pos, vel = y[0], y[1]
        return np.array([vel, -self.w * pos])

    def __repr__(self) -> str:
        return f"HarmonicOscillator(w={self.w})"
