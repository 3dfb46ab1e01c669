"""
Adaptive-step integration of initial value problems.

Thin layer over scipy's explicit embedded Runge-Kutta steppers: the solver is
advanced one accepted step at a time so that the solution can be sampled on a
regular output grid (dense output) and step statistics can be reported.
Interface: integrate(f, t_start, t_end, y0, ...) -> (Trajectory, IntegrationStats).
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Tuple, Type, Union

import numpy as np
from scipy.integrate import DOP853, RK23, RK45, OdeSolver

from oscsim.core.errors import IntegrationError
from oscsim.core.trajectory import Trajectory

# Type for ODE right-hand side: (t, y) -> dy/dt
RHS = Callable[[float, np.ndarray], np.ndarray]

METHODS: Dict[str, Type[OdeSolver]] = {
    "RK45": RK45,  # Dormand-Prince 5(4)
    "DOP853": DOP853,
    "RK23": RK23,  # Bogacki-Shampine 3(2)
}


@dataclass(frozen=True)
class IntegrationStats:
    """Counters of a completed integration run."""

    n_evaluations: int
    n_accepted: int
    n_rejected: int
    n_samples: int

    def __str__(self) -> str:
        return (
            f"Number of function evaluations: {self.n_evaluations}\n"
            f"Number of accepted steps: {self.n_accepted}\n"
            f"Number of rejected steps: {self.n_rejected}\n"
            f"Number of output samples: {self.n_samples}"
        )


def _output_grid(t_start: float, t_end: float, output_step: float) -> np.ndarray:
    """Regular grid t_start, t_start + h, ... whose last point is exactly t_end."""
    n = int(np.floor((t_end - t_start) / output_step + 1e-9))
    grid = t_start + output_step * np.arange(n + 1, dtype=float)
    if t_end - grid[-1] > 1e-9 * output_step:
        grid = np.append(grid, t_end)
    else:
        grid[-1] = t_end
    return grid


def _validate(
    t_start: float,
    t_end: float,
    y0: np.ndarray,
    initial_step: Optional[float],
    abs_tol: float,
    rel_tol: float,
    output_step: Optional[float],
    max_steps: int,
) -> None:
    if not (np.isfinite(t_start) and np.isfinite(t_end)) or t_end <= t_start:
        raise IntegrationError(f"Invalid time span [{t_start}, {t_end}]")
    if y0.ndim != 1 or y0.size == 0 or not np.all(np.isfinite(y0)):
        raise IntegrationError(f"Initial state must be a finite 1-D vector, got {y0!r}")
    if abs_tol <= 0 or rel_tol <= 0:
        raise IntegrationError(f"Tolerances must be positive (abs_tol={abs_tol}, rel_tol={rel_tol})")
    if initial_step is not None and not 0 < initial_step <= t_end - t_start:
        raise IntegrationError(f"initial_step must be in (0, {t_end - t_start}], got {initial_step}")
    if output_step is not None and output_step <= 0:
        raise IntegrationError(f"output_step must be positive, got {output_step}")
    if max_steps < 1:
        raise IntegrationError(f"max_steps must be >= 1, got {max_steps}")


def integrate(
    f: RHS,
    t_start: float,
    t_end: float,
    y0: Union[Sequence[float], np.ndarray],
    *,
    initial_step: Optional[float] = None,
    abs_tol: float = 1e-6,
    rel_tol: float = 1e-3,
    output_step: Optional[float] = None,
    method: str = "RK45",
    max_steps: int = 100_000,
    state_names: Sequence[str] = ("position", "velocity"),
) -> Tuple[Trajectory, IntegrationStats]:
    """
    Integrate dy/dt = f(t, y) from t_start to t_end with adaptive step control.

    Args:
        f: right-hand side, f(t, y) -> dy/dt with the same shape as y.
        t_start, t_end: integration bounds (t_end > t_start).
        y0: initial state.
        initial_step: first trial step (None = chosen by the solver).
        abs_tol, rel_tol: local error tolerances of the embedded pair.
        output_step: spacing of the regular output grid, sampled with the
            stepper's dense output. None records every accepted step.
        method: "RK45" (Dormand-Prince 5(4)), "DOP853" or "RK23".
        max_steps: maximum number of accepted steps.
        state_names: labels of the state components, stored on the trajectory.

    Returns:
        (trajectory, stats). The first sample is (t_start, y0).

    Raises:
        IntegrationError: invalid configuration, solver failure, or step budget exhausted.
    """
    if method not in METHODS:
        raise IntegrationError(f"Unknown method {method!r}, expected one of {sorted(METHODS)}")
    y0_arr = np.asarray(y0, dtype=float)
    _validate(t_start, t_end, y0_arr, initial_step, abs_tol, rel_tol, output_step, max_steps)

    dy0 = np.asarray(f(t_start, y0_arr), dtype=float)
    if dy0.shape != y0_arr.shape:
        raise IntegrationError(
            f"Derivative shape {dy0.shape} does not match state shape {y0_arr.shape}"
        )

    try:
        solver = METHODS[method](
            f,
            t_start,
            y0_arr,
            t_end,
            first_step=initial_step,
            rtol=rel_tol,
            atol=abs_tol,
        )
    except ValueError as exc:
        raise IntegrationError(f"Invalid integrator configuration: {exc}") from exc

    grid = _output_grid(t_start, t_end, output_step) if output_step is not None else None
    times: List[float] = [t_start]
    states: List[np.ndarray] = [y0_arr.copy()]
    next_idx = 1  # grid[0] == t_start is already recorded
    n_accepted = 0
    n_rejected = 0

    while solver.status == "running":
        if n_accepted >= max_steps:
            raise IntegrationError(
                f"Maximum number of steps reached ({max_steps}) at t={solver.t}"
            )
        nfev_before = solver.nfev
        message = solver.step()
        if solver.status == "failed":
            raise IntegrationError(f"Integration failed at t={solver.t}: {message}")
        n_accepted += 1
        # every attempt costs n_stages evaluations; all but the last were rejected
        n_rejected += (solver.nfev - nfev_before) // solver.n_stages - 1

        if grid is None:
            times.append(solver.t)
            states.append(solver.y.copy())
            continue
        stop = int(np.searchsorted(grid, solver.t, side="right"))
        if stop > next_idx:
            chunk = grid[next_idx:stop]
            values = solver.dense_output()(chunk)
            times.extend(chunk.tolist())
            states.extend(values.T)
            next_idx = stop

    trajectory = Trajectory(times, states, state_names=state_names)
    stats = IntegrationStats(
        n_evaluations=int(solver.nfev),
        n_accepted=n_accepted,
        n_rejected=n_rejected,
        n_samples=len(trajectory),
    )
    return trajectory, stats
