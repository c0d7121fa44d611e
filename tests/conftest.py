from __future__ import annotations

import sys
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pytest  # noqa: E402

PROJECT_ROOT = Path(__file__).resolve().parents[1]
for _path in (PROJECT_ROOT / "src", PROJECT_ROOT / "cli"):
    if str(_path) not in sys.path:
        sys.path.insert(0, str(_path))


@pytest.fixture(autouse=True, scope="module")
def _close_figures():
    yield
    plt.close("all")


@pytest.fixture
def line_figure():
    fig, ax = plt.subplots()
    ax.plot([0, 1, 2], [0, 1, 4], label="squares")
    ax.plot([0, 1, 2], [0, 1, 2], label="linear")
    ax.legend()
    yield fig
    plt.close(fig)
