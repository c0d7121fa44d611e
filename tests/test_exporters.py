from __future__ import annotations

import re
from pathlib import Path

import matplotlib.pyplot as plt
import pytest

from figkit import MissingDependencyError, export_figure
from figkit import errors
from figkit.exporters import validate_formats


def test_export_figure_writes_all_formats(tmp_path: Path, line_figure) -> None:
    written = export_figure(line_figure, filename="figure", path=tmp_path, dpi=100)
    assert written == [tmp_path / "figure.pdf", tmp_path / "figure.png", tmp_path / "figure.jpeg"]
    assert all(path.exists() and path.stat().st_size > 0 for path in written)


def test_export_figure_defaults_to_current_figure(tmp_path: Path) -> None:
    plt.figure()
    plt.plot([0, 1], [0, 1])
    written = export_figure(filename="current", path=tmp_path, dpi=50, formats="png")
    assert written == [tmp_path / "current.png"]


def test_export_figure_creates_missing_folders(tmp_path: Path, line_figure) -> None:
    export_figure(line_figure, filename="nested/deeper/plot", path=tmp_path, dpi=50, formats=["png"])
    assert (tmp_path / "nested" / "deeper" / "plot.png").exists()


@pytest.mark.parametrize(
    ("width", "height", "units", "dpi", "expected"),
    [
        (3, 2, "in", 100, (300, 200)),
        (300, 150, "px", 100, (300, 150)),
        (2.54, 5.08, "cm", 100, (100, 200)),
    ],
)
def test_raster_pixel_size(tmp_path: Path, line_figure, width, height, units, dpi, expected) -> None:
    (target,) = export_figure(
        line_figure, filename="sized", path=tmp_path, width=width, height=height, units=units, dpi=dpi, formats="png"
    )
    image = plt.imread(target)
    assert (image.shape[1], image.shape[0]) == expected


def test_export_restores_figure_size(tmp_path: Path, line_figure) -> None:
    before = tuple(line_figure.get_size_inches())
    export_figure(line_figure, filename="restore", path=tmp_path, width=10, height=4, dpi=50)
    assert tuple(line_figure.get_size_inches()) == before


def test_formats_are_written_in_fixed_order(tmp_path: Path, line_figure) -> None:
    written = export_figure(line_figure, filename="order", path=tmp_path, dpi=50, formats=["jpeg", "pdf"])
    assert [path.suffix for path in written] == [".pdf", ".jpeg"]


@pytest.mark.parametrize("filename", ["plot.png", "out/plot.v2", "."])
def test_filename_with_extension_is_rejected(tmp_path: Path, line_figure, filename: str) -> None:
    with pytest.raises(ValueError, match="extension"):
        export_figure(line_figure, filename=filename, path=tmp_path)
    assert list(tmp_path.iterdir()) == []


@pytest.mark.parametrize("units", ["mm", "pt", "IN", ""])
def test_unknown_units_are_rejected(tmp_path: Path, line_figure, units: str) -> None:
    with pytest.raises(ValueError, match="units"):
        export_figure(line_figure, filename="plot", path=tmp_path, units=units)


@pytest.mark.parametrize("formats", [["svg"], ["pdf", "jpg"], "tiff", []])
def test_unknown_formats_are_rejected(tmp_path: Path, line_figure, formats) -> None:
    with pytest.raises(ValueError, match="formats"):
        export_figure(line_figure, filename="plot", path=tmp_path, formats=formats)
    assert list(tmp_path.iterdir()) == []


def test_validate_formats_deduplicates() -> None:
    assert validate_formats(["png", "pdf", "png"]) == ("pdf", "png")


def test_non_positive_sizes_are_rejected(tmp_path: Path, line_figure) -> None:
    with pytest.raises(ValueError):
        export_figure(line_figure, filename="plot", path=tmp_path, width=0)
    with pytest.raises(ValueError):
        export_figure(line_figure, filename="plot", path=tmp_path, dpi=-1)


def test_missing_cairo_raises(monkeypatch: pytest.MonkeyPatch, tmp_path: Path, line_figure) -> None:
    real_find_spec = errors.importlib.util.find_spec

    def fake_find_spec(name, *args, **kwargs):
        if name == "cairo":
            return None
        return real_find_spec(name, *args, **kwargs)

    monkeypatch.setattr(errors.importlib.util, "find_spec", fake_find_spec)
    with pytest.raises(MissingDependencyError) as excinfo:
        export_figure(line_figure, filename="plot", path=tmp_path, cairo=True)
    assert excinfo.value.package == "pycairo"
    assert "pip install pycairo" in str(excinfo.value)


def test_export_logs_saved_files(tmp_path: Path, line_figure, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level("INFO", logger="figkit")
    export_figure(line_figure, filename="logged", path=tmp_path, dpi=50, formats="pdf")
    assert any("Saved PDF file" in record.getMessage() for record in caplog.records)


@pytest.mark.parametrize(
    ("width", "height", "units", "dpi", "expected"),
    [
        (2.54, 5.08, "cm", 600, (72, 144)),
        (2, 1, "in", 600, (144, 72)),
        (300, 150, "px", 100, (216, 108)),
    ],
)
def test_pdf_page_size_in_points(tmp_path: Path, line_figure, width, height, units, dpi, expected) -> None:
    (target,) = export_figure(
        line_figure, filename="page", path=tmp_path, width=width, height=height, units=units, dpi=dpi, formats="pdf"
    )
    match = re.search(rb"/MediaBox\s*\[\s*0\s+0\s+([\d.]+)\s+([\d.]+)\s*\]", target.read_bytes())
    assert match is not None
    assert (float(match.group(1)), float(match.group(2))) == pytest.approx(expected)
