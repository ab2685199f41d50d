"""Main CLI entry point for pokerlog.

This module provides the main click group and lazy loading
for command modules to keep startup fast.
"""

import logging
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler

from pokerlog.config import get_currency_symbol, get_db_path, load_config


class LazyGroup(click.Group):
    """A click Group that imports a command's module on first use."""

    def __init__(self, *args, lazy_subcommands: dict[str, str] | None = None, **kwargs):
        """
        Args:
            lazy_subcommands: Mapping of command names to
                ``"module.path:attribute"`` targets.
        """
        super().__init__(*args, **kwargs)
        self._lazy_subcommands = lazy_subcommands or {}

    def list_commands(self, ctx: click.Context) -> list[str]:
        return sorted(set(super().list_commands(ctx)) | set(self._lazy_subcommands))

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        if cmd_name not in self.commands and cmd_name in self._lazy_subcommands:
            self.add_command(self._lazy_load(cmd_name), cmd_name)
        return self.commands.get(cmd_name)

    def _lazy_load(self, cmd_name: str) -> click.Command:
        import importlib

        module_path, attr_name = self._lazy_subcommands[cmd_name].split(":")
        cmd = getattr(importlib.import_module(module_path), attr_name, None)
        if not isinstance(cmd, click.Command):
            raise click.ClickException(f"Could not find command '{cmd_name}' in {module_path}")
        return cmd


LAZY_SUBCOMMANDS = {
    "add": "pokerlog.cli.sessions:add",
    "edit": "pokerlog.cli.sessions:edit",
    "delete": "pokerlog.cli.sessions:delete",
    "clear": "pokerlog.cli.sessions:clear",
    "list": "pokerlog.cli.sessions:list_sessions",
    "stats": "pokerlog.cli.stats:stats",
    "years": "pokerlog.cli.stats:years",
    "export": "pokerlog.cli.backup:export",
    "import": "pokerlog.cli.backup:import_",
}


CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


@click.group(cls=LazyGroup, lazy_subcommands=LAZY_SUBCOMMANDS, context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="pokerlog")
@click.option(
    "--config", "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file (default: ~/.config/pokerlog/config.toml).",
)
@click.option(
    "--db", "db_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Session database file (overrides the config).",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
@click.pass_context
def cli(
    ctx: click.Context,
    config_path: Optional[Path],
    db_path: Optional[Path],
    verbose: bool,
) -> None:
    """pokerlog - track poker sessions and year-to-date results.

    Record each session's buy-in, cash-out and hours, then review
    totals, hourly rate and your best month, day and weekday.

    \b
    Quick Start:
      pokerlog add --buyin 100 --cashout 250 --hours 3
      pokerlog stats               # This year so far
      pokerlog stats --year 2024   # Another year
    """
    _setup_logging(verbose)

    config = load_config(config_path)
    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["db_path"] = get_db_path(config, db_path)
    ctx.obj["currency_symbol"] = get_currency_symbol(config)


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
