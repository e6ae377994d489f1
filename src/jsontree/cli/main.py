"""
jsontree CLI - Main entry point.

This module registers all CLI commands. Each command is implemented
in its own module under cli/commands/.
"""

import logging
from pathlib import Path
from typing import Optional

import click

from ..config import load_settings
from ..core.exceptions import ConfigError
from .commands import build, demo, explore, search, show


@click.group()
@click.version_option(package_name="jsontree")
@click.option("-v", "--verbose", is_flag=True, help="Log build and search details")
@click.option("-c", "--config", "config_path", type=click.Path(exists=True, dir_okay=False),
              help="Settings file (default: .jsontree/config.yaml)")
@click.pass_context
def main(ctx: click.Context, verbose: bool, config_path: Optional[str]):
    """jsontree: JSON documents as navigable trees.

    Builds a positioned node/edge graph from a JSON document and
    locates nodes by path.

    \b
    Quick Start:
      jsontree show data.json
      jsontree search user.age data.json
      jsontree build data.json --output tree.json
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(message)s",
            datefmt="[%X]"
        )

    ctx.ensure_object(dict)
    try:
        ctx.obj["settings"] = load_settings(Path(config_path) if config_path else None)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e


# Register commands
main.add_command(build.build)
main.add_command(search.search)
main.add_command(show.show)
main.add_command(explore.explore)
main.add_command(demo.demo)

if __name__ == "__main__":
    main()
