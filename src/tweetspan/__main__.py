"""
TweetSpan CLI entry point.

Usage:
    python -m tweetspan extract "Hello #world"
"""

from tweetspan.cli import cli

if __name__ == "__main__":
    cli()
