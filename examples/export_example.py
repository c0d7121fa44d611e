"""Example script showing how to theme and export a figure programmatically."""
from __future__ import annotations

from pathlib import Path
import sys

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = PROJECT_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

import matplotlib.pyplot as plt  # noqa: E402

from figkit import MODIFIED_THEMES, export_figure  # type: ignore  # noqa: E402
from figkit.utils.logging import configure_logging  # type: ignore  # noqa: E402


def main() -> None:
    configure_logging()
    output_dir = PROJECT_ROOT / "outputs" / "themes"
    for name, theme in MODIFIED_THEMES.items():
        with theme.context():
            fig, ax = plt.subplots()
            ax.bar(["alpha", "beta", "gamma"], [3, 5, 2], label="counts")
            ax.set_title(name)
            ax.legend()
            theme.apply(fig)
            export_figure(fig, filename=name, path=output_dir, width=8, height=6, formats="png", dpi=300)
            plt.close(fig)


if __name__ == "__main__":
    main()
