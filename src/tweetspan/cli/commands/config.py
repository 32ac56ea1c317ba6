"""
Config commands.
"""

from __future__ import annotations

import click

from tweetspan.settings import get_settings


@click.group()
def config():
    """Configuration management."""
    pass


@config.command("show")
def config_show():
    """Display current configuration."""
    settings = get_settings()
    click.echo(settings.model_dump_json(indent=2))
