"""Save and load trajectories as flat delimited text."""

import sys
from pathlib import Path
from typing import List, Sequence, Union

import numpy as np

from oscsim.core.errors import TrajectoryWriteError
from oscsim.core.trajectory import Trajectory

SEPARATOR = ", "


def format_value(value: float) -> str:
    """
    Shortest round-trip positional representation of a float.
    Integral values have no fractional part: 0.0 -> "0", 1.0 -> "1", 1e-10 -> "0.0000000001".
    """
    return np.format_float_positional(float(value), trim="-")


def format_line(t: float, state: Sequence[float]) -> str:
    """One record: time, then each state component preceded by the separator."""
    return format_value(t) + "".join(SEPARATOR + format_value(v) for v in state) + "\n"


def save_trajectory(trajectory: Trajectory, path: Union[str, Path]) -> Path:
    """
    Write the trajectory to `path`, one line per sample: "t, x0, x1, ...".

    The file is created or truncated; the parent directory must already exist.
    Lines already written are left in place if a later write or the final flush fails.

    Raises:
        TrajectoryWriteError: the file cannot be created or written.
    """
    path = Path(path)
    try:
        f = open(path, "w", encoding="utf-8")
    except OSError as exc:
        raise TrajectoryWriteError(f"Could not open file {path}: {exc}") from exc
    try:
        with f:
            for t, state in trajectory:
                f.write(format_line(t, state))
            f.flush()
    except OSError as exc:
        raise TrajectoryWriteError(f"Could not write to file {path}: {exc}") from exc
    return path


def save(trajectory: Trajectory, path: Union[str, Path]) -> bool:
    """
    Like save_trajectory, but reports failures on stderr instead of raising.

    Returns:
        True if the whole trajectory was written and flushed.
    """
    try:
        save_trajectory(trajectory, path)
    except TrajectoryWriteError as exc:
        print(exc, file=sys.stderr)
        return False
    return True


def load_trajectory(
    path: Union[str, Path],
    state_names: Sequence[str] = ("position", "velocity"),
) -> Trajectory:
    """Load a trajectory written by save_trajectory."""
    path = Path(path)
    times: List[float] = []
    states: List[List[float]] = []
    with open(path, "r", encoding="utf-8") as f:
        for lineno, line in enumerate(f, start=1):
            line = line.rstrip("\n")
            if not line:
                continue
            try:
                fields = [float(v) for v in line.split(SEPARATOR)]
            except ValueError as exc:
                raise ValueError(f"{path}:{lineno}: invalid record {line!r}") from exc
            times.append(fields[0])
            states.append(fields[1:])
    return Trajectory(times, states, state_names=state_names)
