"""CLI entry point: updatescout.

Usage:
    updatescout                              # package.json + yarn.lock in cwd
    updatescout -c app/package.json -l app/yarn.lock
    updatescout --json                       # machine-readable report
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

import click
import structlog
from rich.console import Console

from updatescout.config import Settings, load_priority_packages
from updatescout.core.logging import setup_logging
from updatescout.engines.update_checker.runner import check_dependencies
from updatescout.exceptions import UpdateScoutError
from updatescout.render import print_tables, render_json

log = structlog.get_logger("updatescout.cli")


@click.command()
@click.option(
    "-c", "--config", "manifest", default="package.json", show_default=True,
    help="Path to the package.json file",
)
@click.option(
    "-l", "--lockfile", default="yarn.lock", show_default=True,
    help="Path to the yarn.lock file",
)
@click.option(
    "--config-file", default="priority-packages.json", show_default=True,
    help="Path to the priority packages config file",
)
@click.option("-j", "--json", "as_json", is_flag=True, help="Output results as JSON")
@click.option("--registry-url", default=None, help="Registry API base URL")
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(
    manifest: str,
    lockfile: str,
    config_file: str,
    as_json: bool,
    registry_url: str | None,
    verbose: bool,
) -> None:
    """Check package.json dependencies for newer versions on the registry."""
    setup_logging("DEBUG" if verbose else None)

    try:
        settings = Settings.from_env()
        if registry_url:
            settings.registry_url = registry_url

        config_path = Path(config_file)
        existed = config_path.exists()
        priority_packages = load_priority_packages(config_path)
        if not existed and config_path.exists():
            click.echo(
                f"Default config file created at {config_path}. "
                "You can add more priority packages to this file.",
                err=as_json,
            )

        report = asyncio.run(
            check_dependencies(
                Path(manifest).resolve(),
                Path(lockfile).resolve(),
                priority_packages,
                settings,
            )
        )
    except UpdateScoutError as exc:
        log.debug("cli.fatal", error=str(exc))
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(render_json(report))
    else:
        print_tables(report, Console())


if __name__ == "__main__":
    main()
