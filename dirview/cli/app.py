from __future__ import annotations

import logging
import sys
from dataclasses import replace
from typing import Annotated

import typer
from result import Err
from rich.console import Console
from rich.markup import escape
from textual.logging import TextualHandler

from dirview.config.defaults import default_config
from dirview.config.loader import load_config, sample_config_json
from dirview.models.enums import VerticalAlign
from dirview.services.loader import load_directory
from dirview.ui.app import DirViewApp

console = Console()


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, handlers=[TextualHandler()], force=True)
    else:
        logging.getLogger("dirview").addHandler(logging.NullHandler())


def run(
    path: Annotated[str, typer.Argument(help="Directory to browse.")] = ".",
    config_path: Annotated[str | None, typer.Option("--config", "-C", help="Path to a config JSON file.")] = None,
    sample_config: Annotated[bool, typer.Option("--sample-config", help="Print sample config JSON.")] = False,
    page_step: Annotated[int | None, typer.Option("--page-step", help="Rows to jump on PgUp/PgDn.")] = None,
    align: Annotated[str | None, typer.Option("--align", "-a", help="Vertical alignment: top, middle, bottom.")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Send debug logs to the textual console.")] = False,
) -> None:
    if sys.platform == "win32":
        console.print("[red]Windows support is not implemented yet.[/]")
        raise typer.Exit(1)

    if sample_config:
        console.print(sample_config_json())
        raise typer.Exit(0)

    _configure_logging(verbose)

    config_result = load_config(config_path)
    if isinstance(config_result, Err):
        console.print(f"[yellow]{escape(config_result.unwrap_err())} Using defaults.[/]")
        config = default_config()
    else:
        config = config_result.unwrap()

    overrides: dict[str, object] = {}
    if page_step is not None:
        overrides["page_step"] = max(1, page_step)
    if align is not None:
        try:
            overrides["vertical_align"] = VerticalAlign(align)
        except ValueError:
            console.print(f"[red]Unknown alignment: {escape(align)}. Use: top, middle, bottom.[/]")
            raise typer.Exit(1) from None
    if overrides:
        config = replace(config, **overrides)

    load_result = load_directory(path, config)
    if isinstance(load_result, Err):
        error = load_result.unwrap_err()
        console.print(f"[red]Cannot open {escape(error.path)}: {escape(error.message)}[/]")
        raise typer.Exit(1)

    DirViewApp(view=load_result.unwrap(), config=config).run()


def cli() -> None:
    typer.run(run)


if __name__ == "__main__":
    cli()
