# ABOUTME: CLI package for nextread, built on Click.
# ABOUTME: Defines the root command group, logging setup, and registers subcommands.

import logging

import click
from rich.logging import RichHandler

from nextread.cli.commands import backlog_cmd, pick_cmd, profile_cmd, stats_cmd


@click.group()
@click.version_option(package_name="nextread")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Show debug logging.")
def cli(verbose: bool) -> None:
    """nextread - pick your next book from your reading history."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


cli.add_command(stats_cmd.stats)
cli.add_command(profile_cmd.profile)
cli.add_command(backlog_cmd.backlog)
cli.add_command(pick_cmd.pick)
