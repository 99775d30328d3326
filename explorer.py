#!/usr/bin/env python3
"""
Explorer - Interactive Console File Explorer

Main entry point for the Explorer CLI application.
"""

import os
import sys

import click
from rich.console import Console

from core import AuditLogger, __version__, load_config
from modules.fs_explorer import FileExplorer, MenuLoop, TokenReader, Workspace


console = Console()


@click.command()
@click.version_option(version=__version__, prog_name="Explorer")
@click.option(
    "--config",
    "config_path",
    default="config.yaml",
    show_default=True,
    type=click.Path(dir_okay=False),
    help="Optional YAML settings file."
)
def explorer(config_path: str):
    """
    Explorer - browse and manage files from an interactive menu.

    List directories, create and delete files, change directory and
    search a directory tree by exact file name.
    """
    try:
        config = load_config(config_path)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--config")

    # The workspace changes the process directory, so pin the log location now
    logger = AuditLogger(
        log_path=os.path.abspath(config.audit_log_path),
        enabled=config.audit_enabled
    )

    file_explorer = FileExplorer(
        Workspace(bind_process=True),
        console=console,
        logger=logger,
        config=config
    )
    menu = MenuLoop(file_explorer, TokenReader(sys.stdin.readline), console)
    sys.exit(menu.run())


if __name__ == "__main__":
    explorer()
