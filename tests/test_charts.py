"""Tests for the scatter chart renderer."""

import numpy as np
import pytest

from oscsim.core import ChartConfig, RenderError, Trajectory
from oscsim.simulation import render_chart


@pytest.fixture
def trajectory() -> Trajectory:
    t = np.linspace(0.0, 50.0, 501)
    return Trajectory(t, np.column_stack([np.cos(t), -np.sin(t)]))


def test_render_svg(tmp_path, trajectory) -> None:
    out = render_chart(trajectory, ChartConfig(path=str(tmp_path / "scatter.svg")))
    assert out.exists()
    text = out.read_text()
    assert text.lstrip().startswith("<?xml")
    assert "<svg" in text


def test_render_path_overrides_config(tmp_path, trajectory) -> None:
    out = render_chart(trajectory, ChartConfig(path="ignored.svg"), path=tmp_path / "chart.png")
    assert out == tmp_path / "chart.png"
    assert out.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"
    assert not (tmp_path / "ignored.svg").exists()


def test_render_view_settings(tmp_path, trajectory, monkeypatch) -> None:
    import matplotlib.pyplot as plt

    captured = {}
    close = plt.close

    def spy_close(fig) -> None:
        ax = fig.axes[0]
        captured["xlim"] = ax.get_xlim()
        captured["ylim"] = ax.get_ylim()
        captured["xlabel"] = ax.get_xlabel()
        captured["ylabel"] = ax.get_ylabel()
        captured["offsets"] = ax.collections[0].get_offsets()
        captured["colour"] = ax.collections[0].get_facecolor()[0]
        close(fig)

    monkeypatch.setattr(plt, "close", spy_close)
    render_chart(trajectory, ChartConfig(path=str(tmp_path / "scatter.svg")))

    assert captured["xlim"] == (0.0, 10.0)
    assert captured["ylim"] == (-2.0, 2.0)
    assert captured["xlabel"] == "Some varying variable"
    assert captured["ylabel"] == "The response of something"
    offsets = np.asarray(captured["offsets"])
    np.testing.assert_allclose(offsets[:, 0], trajectory.times)
    np.testing.assert_allclose(offsets[:, 1], trajectory.positions)
    np.testing.assert_allclose(captured["colour"][:3], [0xDD / 255, 0x33 / 255, 0x55 / 255])


def test_render_empty_trajectory(tmp_path) -> None:
    with pytest.raises(RenderError):
        render_chart(Trajectory([], []), ChartConfig(path=str(tmp_path / "s.svg")))


def test_render_invalid_component(tmp_path, trajectory) -> None:
    with pytest.raises(RenderError):
        render_chart(trajectory, ChartConfig(path=str(tmp_path / "s.svg"), component=5))


def test_render_unwritable_path(tmp_path, trajectory) -> None:
    with pytest.raises(RenderError):
        render_chart(trajectory, ChartConfig(path=str(tmp_path / "missing" / "s.svg")))


def test_render_unknown_format(tmp_path, trajectory) -> None:
    with pytest.raises(RenderError):
        render_chart(trajectory, ChartConfig(path=str(tmp_path / "s.notaformat")))
