"""
Simulation: run a model to a Trajectory and visualize the result.

Use _driver.simulate to integrate a model with a SimulationConfig and
_utils.render_chart for the scatter view of the trajectory.
"""

from oscsim.simulation._driver import simulate
from oscsim.simulation._utils import render_chart

__all__ = [
    "simulate",
    "render_chart",
]
