"""Growth plot of a run record (rendered off-screen)."""

import matplotlib

matplotlib.use("Agg")

import pytest

from reactor.cli import main as reactor_main
from reactor.results.schema import RunRecordError
from reactor.scripts.plot_growth import main as plot_main, plot_growth


def test_plot_from_cli_report(small_example_file, tmp_path, capsys):
    report = tmp_path / "run.json"
    assert reactor_main([str(small_example_file), "--report", str(report)]) == 0
    capsys.readouterr()

    image = tmp_path / "plots" / "growth.png"
    assert plot_main([str(report), "--out", str(image)]) == 0
    assert image.exists()
    assert image.stat().st_size > 0


def test_plot_growth_returns_figure(tmp_path):
    run = {
        "run_id": "r1",
        "progress": {"per_step": [
            {"index": 0, "turn_on": True, "cuboid_count": 1, "volume": 27},
            {"index": 1, "turn_on": False, "cuboid_count": 6, "volume": 26},
        ]},
    }
    fig = plot_growth(run, tmp_path / "g.png", title="two steps")
    assert fig.axes[0].get_title() == "two steps"


def test_plot_growth_needs_steps(tmp_path):
    with pytest.raises(RunRecordError):
        plot_growth({"run_id": "r1"}, tmp_path / "g.png")
