"""
CLI command modules.
"""

from tweetspan.cli.commands.config import config
from tweetspan.cli.commands.extract import extract
from tweetspan.cli.commands.validate import validate

__all__ = [
    "config",
    "extract",
    "validate",
]
