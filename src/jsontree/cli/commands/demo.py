"""
Demo Command - Write the sample document.
"""

from pathlib import Path

import click

from ...core.demo import DemoManager
from ..utils import echo_info, echo_success


@click.command()
@click.argument("directory", default=".", type=click.Path(file_okay=False))
@click.option("--force", is_flag=True, help="Overwrite an existing sample.json")
def demo(directory: str, force: bool) -> None:
    """
    Write the sample document to DIRECTORY/sample.json.
    """
    target = DemoManager(Path(directory)).provision(overwrite=force)
    echo_success(f"Sample document: {target}")
    echo_info(f"Try: jsontree show {target}")
    echo_info(f"     jsontree search age {target}")
