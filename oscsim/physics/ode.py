"""Modello a equazioni differenziali ordinarie: dy/dt = rhs(t, y)."""

from abc import ABC, abstractmethod
from typing import Tuple

import numpy as np


class ODEModel(ABC):
    """
    Classe base per modelli descritti da ODE autonome o non autonome.
    Il metodo rhs() va implementato nelle sottoclassi.

    Le istanze sono callable con la firma (t, y) attesa dagli integratori,
    quindi si possono passare direttamente a integrate().
    """

    state_names: Tuple[str, ...] = ()

    @property
    def state_dim(self) -> int:
        return len(self.state_names)

    @abstractmethod
    def rhs(self, t: float, y: np.ndarray) -> np.ndarray:
        """
        Termine destro dell'ODE: dy/dt = rhs(t, y).
        Da implementare nelle sottoclassi.
        """
        raise NotImplementedError("Sottoclassi devono implementare rhs(t, y).")

    def __call__(self, t: float, y: np.ndarray) -> np.ndarray:
        return self.rhs(t, y)
