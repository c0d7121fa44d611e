"""Typer-based command line interface for figkit."""
from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer

import sys

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = PROJECT_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from figkit import MODIFIED_THEMES, export_figure, generate_modified_theme, get_theme  # type: ignore  # noqa: E402
from figkit.themes import base_theme_constructor  # type: ignore  # noqa: E402
from figkit.utils.config import load_config  # type: ignore  # noqa: E402
from figkit.utils.logging import configure_logging  # type: ignore  # noqa: E402

app = typer.Typer(add_completion=False)


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging.")) -> None:
    configure_logging("DEBUG" if verbose else "INFO")


@app.command()
def themes() -> None:
    """List the derived themes."""

    for name in MODIFIED_THEMES:
        typer.echo(name)


@app.command()
def plot_demo(
    output: Path = typer.Argument(Path("plots/demo"), help="Output base path (no extension) for the demo plot."),
    theme: str = typer.Option("ggplot", "--theme", help="Derived theme or base style sheet name."),
    config: Optional[Path] = typer.Option(None, "--config", help="YAML configuration file."),
    formats: Optional[List[str]] = typer.Option(None, "--format", help="Format to write; repeat for several."),
) -> None:
    import numpy as np
    import matplotlib.pyplot as plt

    try:
        published = get_theme(theme)
    except KeyError as exc:
        raise typer.BadParameter(str(exc.args[0]), param_hint="--theme") from exc
    settings = load_config(config) if config is not None else load_config(Path("figkit.yml"))
    selected = generate_modified_theme(
        base_theme_constructor(published.base_name),
        **settings.theme.model_dump(),
    )
    kwargs = settings.export.export_kwargs()
    if formats:
        kwargs["formats"] = formats

    with selected.context():
        x = np.linspace(0, 10, 100)
        fig, ax = plt.subplots()
        ax.plot(x, np.sin(x), label="sin(x)")
        ax.plot(x, np.cos(x), label="cos(x)")
        ax.set_xlabel("x")
        ax.set_ylabel("y")
        ax.set_title("Demo")
        ax.legend()
        selected.apply(fig)
        try:
            written = export_figure(fig, filename=output, **kwargs)
        except ValueError as exc:
            raise typer.BadParameter(str(exc)) from exc
        finally:
            plt.close(fig)
    for path in written:
        typer.echo(f"Saved {path}")


if __name__ == "__main__":
    app()
