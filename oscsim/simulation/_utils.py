"""
Visualization utilities for simulation results.

render_chart() draws the (time, state component) projection of a Trajectory as a
scatter series on a single fixed view and saves it as a one-page image. The
output format is taken from the file suffix (svg, png, pdf, ...).
"""

from pathlib import Path
from typing import Optional, Tuple, Union

import numpy as np

from oscsim.core.config import ChartConfig
from oscsim.core.errors import RenderError
from oscsim.core.trajectory import Trajectory


def _get_series(trajectory: Trajectory, component: int) -> Tuple[np.ndarray, np.ndarray]:
    """Resolve the (time, component) series, validating it can be plotted."""
    if len(trajectory) == 0:
        raise RenderError("Trajectory is empty, nothing to plot.")
    try:
        pairs = np.asarray(trajectory.points(component))
    except IndexError as exc:
        raise RenderError(str(exc)) from exc
    return pairs[:, 0], pairs[:, 1]


def render_chart(
    trajectory: Trajectory,
    config: Optional[ChartConfig] = None,
    path: Optional[Union[str, Path]] = None,
) -> Path:
    """
    Render a scatter plot of time vs one state component and save it.

    Args:
        trajectory: samples to plot.
        config: view settings: axis ranges, labels, marker colour and size,
            plotted component (default: ChartConfig(), i.e. position).
        path: output file; overrides config.path.

    Returns:
        Path of the saved image.

    Raises:
        RenderError: empty series, invalid component, or the image cannot be saved.
    """
    try:
        import matplotlib.pyplot as plt
    except ImportError as exc:
        raise RenderError("matplotlib is required for render_chart.") from exc
    config = config or ChartConfig()
    out = Path(path if path is not None else config.path)
    t, values = _get_series(trajectory, config.component)

    fig, ax = plt.subplots(1, 1, figsize=(8, 5))
    try:
        ax.scatter(t, values, s=config.marker_size, c=config.colour, marker="o")
        ax.set_xlim(*config.x_range)
        ax.set_ylim(*config.y_range)
        ax.set_xlabel(config.x_label)
        ax.set_ylabel(config.y_label)
        fig.savefig(out)
    except (OSError, ValueError) as exc:
        raise RenderError(f"Could not save chart to {out}: {exc}") from exc
    finally:
        plt.close(fig)
    return out
