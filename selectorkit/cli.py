"""selectorkit CLI: render selectors from a YAML catalog."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from selectorkit.builder.definitions import load_selectors
from selectorkit.config.logging import setup_logging
from selectorkit.exceptions import DefinitionError


@click.group()
@click.option("--log-level", default=None, help="Override the LOG_LEVEL setting.")
def cli(log_level: str | None) -> None:
    """selectorkit - build CSS selector strings."""
    setup_logging(log_level=log_level)


@cli.command()
@click.argument("catalog", type=click.Path(exists=True, dir_okay=False))
@click.option("--name", "names", multiple=True, help="Only render these selectors.")
def render(catalog: str, names: tuple[str, ...]) -> None:
    """Render every selector defined in a YAML CATALOG file."""
    try:
        selectors = load_selectors(Path(catalog).read_text(encoding="utf-8"))
    except DefinitionError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    missing = [n for n in names if n not in selectors]
    if missing:
        click.echo(f"Error: unknown selector(s): {', '.join(missing)}", err=True)
        sys.exit(1)

    for name, selector in selectors.items():
        if names and name not in names:
            continue
        click.echo(f"{name}: {selector.stringify()}")


if __name__ == "__main__":
    cli()
