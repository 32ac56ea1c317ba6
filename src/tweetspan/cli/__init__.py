"""
TweetSpan command line interface.

Usage:
    tweetspan extract [TEXT] [--kind KIND] [--format table|json]
    tweetspan validate url|hashtag|username|list VALUE
    tweetspan config show
"""

import click

from tweetspan.cli.commands import config, extract, validate
from tweetspan.exceptions import ConfigurationError
from tweetspan.logging import setup_logging
from tweetspan.settings import get_settings


@click.group()
@click.version_option(package_name="tweetspan")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool):
    """TweetSpan - entity extraction for tweet text"""
    try:
        settings = get_settings()
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e

    setup_logging(
        level="DEBUG" if verbose else settings.logging.level,
        json_format=settings.logging.format == "json",
        log_file=settings.logging.file,
    )


cli.add_command(extract)
cli.add_command(validate)
cli.add_command(config)

__all__ = ["cli"]
