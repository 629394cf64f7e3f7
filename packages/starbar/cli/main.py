"""Command-line interface for Starbar.

Renders a star row in the terminal and replays interactions against a
widget, printing each accepted rating change.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys
from typing import Any

from pydantic import ValidationError
from rich.color import ColorParseError
from rich.console import Console
from rich.markup import escape
from rich.style import Style
from rich.text import Text

from starbar.core.config.loader import load_app_config, load_rating_config
from starbar.core.rating import (
    RatingChangeEvent,
    RatingConfig,
    RenderedRow,
    StarRatingWidget,
    StarVisualState,
)
from starbar.core.utils.json import write_json
from starbar.core.utils.logging import configure_logging

console = Console()
logger = logging.getLogger(__name__)

GLYPHS = {
    StarVisualState.FILLED: "★",
    StarVisualState.HALF: "⯪",
    StarVisualState.EMPTY: "☆",
}

CLICK_PREFIX = "click:"


def _style_for(color: str | None) -> Style:
    if color is None:
        return Style(dim=True)
    try:
        return Style(color=color)
    except ColorParseError:
        logger.debug("Terminal cannot show color %r, rendering unstyled", color)
        return Style()


def format_row(row: RenderedRow) -> Text:
    """Render a resolved row as styled terminal text."""
    text = Text()
    for star in row.stars:
        text.append(GLYPHS[star.state], style=_style_for(star.fill_color))
    return text


def _build_config(args: argparse.Namespace) -> RatingConfig:
    """Resolve the widget config: file (or app default), then CLI overrides."""
    if args.config:
        config = load_rating_config(Path(args.config))
    else:
        config = load_app_config().widget

    overrides: dict[str, Any] = {}
    if args.rating is not None:
        overrides["rating"] = args.rating
    if args.stars is not None:
        overrides["number_of_stars"] = args.stars
    if args.half:
        overrides["show_half_stars"] = True
    if args.static_color:
        overrides["static_color"] = args.static_color
    if args.label:
        overrides["label_text"] = args.label

    if not overrides:
        return config
    return RatingConfig.model_validate({**config.model_dump(), **overrides})


def _print_row(row: RenderedRow) -> None:
    line = format_row(row)
    if row.label:
        line = Text.assemble(row.label, " ", line)
    console.print(line)


def run_render(args: argparse.Namespace) -> int:
    """Print the star row for a configuration."""
    widget = StarRatingWidget(_build_config(args))
    row = widget.render()

    _print_row(row)
    console.print(f"class: {row.class_name}", style="dim", highlight=False)

    if args.json:
        write_json(args.json, row)
        console.print(f"[green]Render state written to[/green] {args.json}")
    return 0


def run_press(args: argparse.Namespace) -> int:
    """Replay keys and clicks against a widget and print accepted changes."""
    widget = StarRatingWidget(_build_config(args))

    def on_change(event: RatingChangeEvent) -> None:
        console.print(f"ratingchange: {event.previous:g} -> {event.value:g}", highlight=False)

    widget.add_listener(on_change)

    for item in args.inputs:
        if item.startswith(CLICK_PREFIX):
            try:
                index = int(item[len(CLICK_PREFIX) :])
            except ValueError:
                console.print(f"[red]ERROR: Invalid click target: {escape(item)}[/red]")
                return 1
            result = widget.click(index)
        else:
            result = widget.key_down(item)

        if result is None:
            console.print(f"{escape(item)}: no change", style="dim", highlight=False)

    _print_row(widget.render())
    return 0


def _add_widget_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--config", help="Widget config (.json, .yaml or .yml)")
    p.add_argument("--rating", type=float, help="Override the rating")
    p.add_argument("--stars", type=int, help="Override the number of stars (max 15)")
    p.add_argument("--half", action="store_true", help="Show half stars")
    p.add_argument("--static-color", help="Single fill color for all stars")
    p.add_argument("--label", help="Label text, ${rating} is substituted")


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""
    p = argparse.ArgumentParser(
        prog="starbar",
        description="Starbar - interactive star-rating widget core",
    )
    p.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    render = sub.add_parser("render", help="Print the star row")
    _add_widget_args(render)
    render.add_argument("--json", help="Also write the render state to this JSON file")

    press = sub.add_parser("press", help="Replay key presses and clicks")
    _add_widget_args(press)
    press.add_argument(
        "inputs",
        nargs="+",
        help="Key identifiers (ArrowUp, Digit3, Backspace...) or click:N",
    )

    return p


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    args = build_arg_parser().parse_args(argv)
    configure_logging(level=args.log_level)

    try:
        if args.cmd == "render":
            return run_render(args)
        return run_press(args)
    except (FileNotFoundError, ValueError, ValidationError) as e:
        console.print(f"[red]ERROR: Could not load config: {escape(str(e))}[/red]")
        return 1


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
