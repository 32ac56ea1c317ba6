"""
Validate commands: check a single URL, hashtag, username or list.

Exit status is 0 when the value is valid and 1 when it is not.
"""

from __future__ import annotations

import click

from tweetspan.core.validation import Validator


def _report(ctx: click.Context, kind: str, value: str, valid: bool) -> None:
    status = "valid" if valid else "invalid"
    click.echo(f"{value}: {status} {kind}")
    ctx.exit(0 if valid else 1)


@click.group()
def validate():
    """Validate a single entity."""
    pass


@validate.command("url")
@click.argument("value")
@click.option("--ascii-only", is_flag=True, help="Reject internationalized domain names")
@click.option("--no-protocol", is_flag=True, help="Do not require http(s)://")
@click.pass_context
def validate_url(ctx: click.Context, value: str, ascii_only: bool, no_protocol: bool):
    """Validate a URL."""
    valid = Validator().is_valid_url(
        value,
        unicode_domains=not ascii_only,
        require_protocol=not no_protocol,
    )
    _report(ctx, "url", value, valid)


@validate.command("hashtag")
@click.argument("value")
@click.pass_context
def validate_hashtag(ctx: click.Context, value: str):
    """Validate a hashtag such as #python."""
    _report(ctx, "hashtag", value, Validator().is_valid_hashtag(value))


@validate.command("username")
@click.argument("value")
@click.pass_context
def validate_username(ctx: click.Context, value: str):
    """Validate a username such as @jack."""
    _report(ctx, "username", value, Validator().is_valid_username(value))


@validate.command("list")
@click.argument("value")
@click.pass_context
def validate_list(ctx: click.Context, value: str):
    """Validate a list reference such as @jack/team."""
    _report(ctx, "list", value, Validator().is_valid_list(value))
