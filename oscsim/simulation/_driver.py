"""
Simulation driver: runs a model from its initial condition with the configured integrator.
"""

from typing import Optional, Tuple

from oscsim.core.config import SimulationConfig
from oscsim.core.trajectory import Trajectory
from oscsim.physics.integrators import IntegrationStats, integrate
from oscsim.physics.ode import ODEModel


def simulate(
    model: ODEModel,
    config: Optional[SimulationConfig] = None,
) -> Tuple[Trajectory, IntegrationStats]:
    """
    Integrate `model` over [config.t_start, config.t_end] starting from config.y0.

    Args:
        model: ODE model (callable as model(t, y)).
        config: time span, initial state, tolerances and sampling (default: SimulationConfig()).

    Returns:
        (trajectory, stats) as produced by integrate().

    Raises:
        IntegrationError: if the integrator cannot complete.
    """
    config = config or SimulationConfig()
    return integrate(
        model,
        config.t_start,
        config.t_end,
        config.y0,
        initial_step=config.initial_step,
        abs_tol=config.abs_tol,
        rel_tol=config.rel_tol,
        output_step=config.output_step,
        method=config.method,
        max_steps=config.max_steps,
        state_names=model.state_names or ("position", "velocity"),
    )
