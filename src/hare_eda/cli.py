from __future__ import annotations

import logging

import click

from .eda.run_eda import run_eda
from .errors import HareEdaError
from .utils.logging import setup_logging


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.option("--log-file", type=click.Path(dir_okay=False), default=None, help="Also write logs to this file.")
def cli(verbose: bool, log_file: str | None) -> None:
    """hare_eda command line interface."""

    setup_logging(level=logging.DEBUG if verbose else logging.INFO, log_file=log_file)


@cli.command("run-eda")
@click.option("--config", "config_path", default="config/eda.yml", show_default=True)
@click.option("--input", "input_path", type=click.Path(dir_okay=False, resolve_path=True), default=None,
              help="Hare observations file; overrides input_path from the config.")
def run_eda_cmd(config_path: str, input_path: str | None) -> None:
    """Run the juvenile hare analysis and write the report, statistics and figures."""

    try:
        result = run_eda(config_path, input_path=input_path)
    except (HareEdaError, FileNotFoundError) as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo("Report finished:")
    click.echo(f"  Report: {result['report']}")
    click.echo(f"  Statistics: {result['stats_json']}")
    click.echo(f"  Figures: {len(result['figures'])}")


if __name__ == "__main__":
    cli()
