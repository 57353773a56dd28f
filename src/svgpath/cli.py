from __future__ import annotations

import html
import importlib.util
import math
import pathlib
import sys
import traceback
from types import ModuleType
from typing import Callable

import typer
from rich.console import Console
from rich.panel import Panel

from svgpath._config import get_format_settings
from svgpath.commands import format_number
from svgpath.path import Path

console = Console()
app = typer.Typer(help="Build SVG path data for circles, arcs and path models.")


class ModelBuildError(RuntimeError):
    """Raised when a model module cannot provide a usable path."""


def _resolve_precision(precision: int | None) -> int | None:
    if precision is not None:
        return precision
    return get_format_settings().precision


def _to_radians(value: float, degrees: bool) -> float:
    return math.radians(value) if degrees else value


def _load_module(path: pathlib.Path) -> ModuleType:
    module_name = "svgpath_user_model"
    if module_name in sys.modules:
        del sys.modules[module_name]

    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise ModelBuildError(f"Unable to import model at {path}")

    module = importlib.util.module_from_spec(spec)
    # Register module so features relying on sys.modules (e.g., dataclasses) work.
    sys.modules[module_name] = module
    spec.loader.exec_module(module)
    return module


def _format_exception(exc: BaseException) -> str:
    return "".join(traceback.format_exception(exc))


def _path_factory_from_module(model_path: pathlib.Path) -> Callable[[], Path]:
    def factory() -> Path:
        module = _load_module(model_path)
        builder = getattr(module, "build", None)
        if builder is None or not callable(builder):
            raise ModelBuildError(f"{model_path} must define a callable build() function.")
        path = builder()
        if not isinstance(path, Path):
            raise ModelBuildError(f"build() in {model_path} returned {type(path).__name__}, expected a Path.")
        return path

    return factory


def _build_model(model: pathlib.Path) -> Path:
    if not model.exists():
        raise typer.BadParameter(f"Model path {model} does not exist.")
    try:
        return _path_factory_from_module(model)()
    except ModelBuildError as exc:
        raise typer.BadParameter(str(exc)) from exc
    except Exception as exc:
        console.print(Panel.fit(_format_exception(exc), title="Model build failed", style="red"))
        raise typer.BadParameter(f"Model execution failed: {exc}") from exc


def _next_available_path(path: pathlib.Path) -> pathlib.Path:
    """Return a non-conflicting path by appending ' (n)' before the suffix."""

    if not path.exists():
        return path

    parent = path.parent
    stem = path.stem
    suffix = path.suffix
    n = 1
    while True:
        candidate = parent / f"{stem} ({n}){suffix}"
        if not candidate.exists():
            return candidate
        n += 1


def svg_document(
    data: str,
    width: float,
    height: float,
    stroke: str = "black",
    fill: str = "none",
) -> str:
    """Wrap path data in a minimal standalone SVG document."""

    w = format_number(width)
    h = format_number(height)
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{w}" height="{h}" viewBox="0 0 {w} {h}">\n'
        f'  <path d="{html.escape(data, quote=True)}" '
        f'fill="{html.escape(fill, quote=True)}" stroke="{html.escape(stroke, quote=True)}"/>\n'
        "</svg>\n"
    )


@app.command(context_settings={"ignore_unknown_options": True})
def circle(
    cx: float = typer.Argument(..., help="Center x coordinate."),
    cy: float = typer.Argument(..., help="Center y coordinate."),
    radius: float = typer.Argument(..., help="Circle radius."),
    start: float = typer.Option(0.0, "--start", help="Angle where the circle starts and ends."),
    clockwise: bool = typer.Option(
        True, "--clockwise/--counterclockwise", help="On-screen direction in SVG's y-down space."
    ),
    degrees: bool = typer.Option(False, "--degrees", help="Read angles as degrees instead of radians."),
    precision: int | None = typer.Option(
        None, "--precision", min=0, help="Max digits after the decimal point (default: from svgpath.cfg)."
    ),
) -> None:
    """
    Print the path data of a full circle.
    """

    path = Path(precision=_resolve_precision(precision))
    path.circle(cx, cy, radius, _to_radians(start, degrees), clockwise)
    typer.echo(path.render())


@app.command(context_settings={"ignore_unknown_options": True})
def arc(
    cx: float = typer.Argument(..., help="Center x coordinate."),
    cy: float = typer.Argument(..., help="Center y coordinate."),
    radius: float = typer.Argument(..., help="Circle radius."),
    start: float = typer.Argument(..., help="Start angle."),
    end: float = typer.Argument(..., help="End angle."),
    degrees: bool = typer.Option(False, "--degrees", help="Read angles as degrees instead of radians."),
    move: bool = typer.Option(True, "--move/--no-move", help="Begin with a move-to the start point."),
    precision: int | None = typer.Option(
        None, "--precision", min=0, help="Max digits after the decimal point (default: from svgpath.cfg)."
    ),
) -> None:
    """
    Print the path data of a circular arc from START to END.
    """

    path = Path(precision=_resolve_precision(precision))
    path.partial_circle(cx, cy, radius, _to_radians(start, degrees), _to_radians(end, degrees), move=move)
    typer.echo(path.render())


@app.command()
def show(
    model: pathlib.Path = typer.Argument(..., help="Python module whose build() returns a Path."),
    precision: int | None = typer.Option(
        None, "--precision", min=0, help="Max digits after the decimal point (default: from svgpath.cfg)."
    ),
) -> None:
    """
    Build a model module and print its path data.
    """

    path = _build_model(model)
    typer.echo(path.render(_resolve_precision(precision)))


@app.command()
def export(
    model: pathlib.Path = typer.Argument(..., help="Model module to export."),
    output: pathlib.Path = typer.Option(
        pathlib.Path("path.svg"),
        "--output",
        "-o",
        help="Path to the SVG file that will be produced.",
    ),
    overwrite: bool = typer.Option(False, "--overwrite", help="Allow replacing an existing SVG."),
    width: float = typer.Option(100.0, "--width", min=0.0, help="Document width in user units."),
    height: float = typer.Option(100.0, "--height", min=0.0, help="Document height in user units."),
    stroke: str = typer.Option("black", "--stroke", help="Stroke color of the path."),
    fill: str = typer.Option("none", "--fill", help="Fill color of the path."),
    precision: int | None = typer.Option(
        None, "--precision", min=0, help="Max digits after the decimal point (default: from svgpath.cfg)."
    ),
) -> None:
    """
    Build a model module and save its path as a standalone SVG file.
    """

    path = _build_model(model)

    final_output = output
    if output.exists() and not overwrite:
        final_output = _next_available_path(output)
        console.print(f"[yellow]Output {output} exists; writing to {final_output} instead.[/yellow]")

    data = path.render(_resolve_precision(precision))
    final_output.parent.mkdir(parents=True, exist_ok=True)
    try:
        final_output.write_text(svg_document(data, width, height, stroke=stroke, fill=fill))
    except OSError as exc:
        raise typer.BadParameter(f"Failed to export SVG: {exc}") from exc

    console.print(
        Panel(
            f"Wrote {len(path)} commands to [green]{final_output}[/green].",
            title="Export complete",
            border_style="green",
        )
    )


def main() -> None:
    app()


if __name__ == "__main__":
    main()
