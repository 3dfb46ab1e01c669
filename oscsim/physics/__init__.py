"""
Physics models and numerical integration.

Hierarchy:
  - ode: base ODE model (ODEModel)
  - library: ready-made parametric models (HarmonicOscillator)
  - integrators: adaptive-step integration over scipy's Runge-Kutta pairs (integrate)
"""

# --- Base ODE model ---
from oscsim.physics.ode import ODEModel

# --- Library (parametric models) ---
from oscsim.physics.library import HarmonicOscillator

# --- Integrators (numerical level) ---
from oscsim.physics.integrators import METHODS, IntegrationStats, integrate

__all__ = [
    # Base
    "ODEModel",
    # Library
    "HarmonicOscillator",
    # Integratori
    "METHODS",
    "IntegrationStats",
    "integrate",
]
