"""Traiettoria prodotta da una singola integrazione: tempi e stati campionati."""

from typing import Iterator, List, Sequence, Tuple, Union

import numpy as np


class Trajectory:
    """
    Sequenza ordinata di coppie (t, stato), in sola lettura.

    Invarianti (verificati alla costruzione):
      - len(times) == len(states)
      - times ordinato in modo crescente (non stretto)
      - states bidimensionale, una riga per campione
    """

    def __init__(
        self,
        times: Union[Sequence[float], np.ndarray],
        states: Union[Sequence[Sequence[float]], np.ndarray],
        state_names: Sequence[str] = ("position", "velocity"),
    ) -> None:
        """
        Args:
            times: array (N,) dei tempi
            states: array (N, state_dim) degli stati
            state_names: nomi delle componenti dello stato
        """
        t = np.array(times, dtype=float).ravel()
        x = np.array(states, dtype=float)
        if x.size == 0:
            x = x.reshape(0, len(state_names))
        if x.ndim != 2:
            raise ValueError(f"states deve essere (N, state_dim), ricevuto shape {x.shape}")
        if len(t) != len(x):
            raise ValueError(
                f"times e states devono avere la stessa lunghezza ({len(t)} != {len(x)})"
            )
        if t.size > 1 and np.any(np.diff(t) < 0):
            raise ValueError("times deve essere ordinato in modo crescente")
        t.setflags(write=False)
        x.setflags(write=False)
        self._times = t
        self._states = x
        self.state_names: Tuple[str, ...] = tuple(state_names)

    @property
    def times(self) -> np.ndarray:
        return self._times

    @property
    def states(self) -> np.ndarray:
        return self._states

    @property
    def state_dim(self) -> int:
        return self._states.shape[1]

    def component(self, index: int) -> np.ndarray:
        """Serie temporale della componente `index` dello stato."""
        if not 0 <= index < self.state_dim:
            raise IndexError(f"componente {index} fuori range (state_dim={self.state_dim})")
        return self._states[:, index]

    @property
    def positions(self) -> np.ndarray:
        return self.component(0)

    @property
    def velocities(self) -> np.ndarray:
        return self.component(1)

    def points(self, index: int = 0) -> List[Tuple[float, float]]:
        """Proiezione (t, componente) come lista di coppie, es. per uno scatter."""
        values = self.component(index)
        return [(float(t), float(v)) for t, v in zip(self._times, values)]

    def __iter__(self) -> Iterator[Tuple[float, np.ndarray]]:
        for t, x in zip(self._times, self._states):
            yield float(t), x

    def __len__(self) -> int:
        return len(self._times)

    def __repr__(self) -> str:
        if not len(self):
            return "Trajectory(empty)"
        return f"Trajectory(n={len(self)}, t=[{self._times[0]:g}, {self._times[-1]:g}])"
