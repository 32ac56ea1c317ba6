"""
Extract command: print the entities found in tweet text.
"""

from __future__ import annotations

import sys

import click

from tweetspan.cli.output import OutputFormatter
from tweetspan.core.config import ExtractionConfig
from tweetspan.core.extraction import Extractor
from tweetspan.core.types import Entity
from tweetspan.settings import get_settings

_COLUMNS = ["kind", "text", "start", "end"]


def _select(extractor: Extractor, kind: str, text: str) -> list[Entity]:
    if kind == "urls":
        return extractor.extract_urls_with_indices(text)
    if kind == "hashtags":
        return extractor.extract_hashtags_with_indices(text)
    if kind == "mentions":
        return extractor.extract_mentions_or_lists_with_indices(text)
    if kind == "cashtags":
        return extractor.extract_cashtags_with_indices(text)
    return extractor.extract_entities_with_indices(text)


@click.command()
@click.argument("text", required=False)
@click.option(
    "--kind",
    default="all",
    type=click.Choice(["all", "urls", "hashtags", "mentions", "cashtags"]),
    help="Entity kind to extract",
)
@click.option("--no-protocol-less", is_flag=True, help="Only extract URLs with http(s)://")
@click.option("--no-overlap-check", is_flag=True, help="Keep entities that fall inside URLs")
@click.option(
    "--format", "output_format",
    default="table",
    type=click.Choice(["table", "json"]),
    help="Output format",
)
def extract(
    text: str | None,
    kind: str,
    no_protocol_less: bool,
    no_overlap_check: bool,
    output_format: str,
):
    """Extract entities from TEXT (or stdin when TEXT is omitted).

    Examples:
        tweetspan extract "Hello #world, visit example.com"
        echo "@jack hi" | tweetspan extract --kind mentions --format json
    """
    if text is None:
        text = sys.stdin.read()

    defaults = get_settings().extraction.to_config()
    config = ExtractionConfig(
        extract_urls_without_protocol=defaults.extract_urls_without_protocol and not no_protocol_less,
        check_url_overlap=defaults.check_url_overlap and not no_overlap_check,
    )

    entities = _select(Extractor(config=config), kind, text)

    fmt = OutputFormatter(output_format)
    if output_format == "json":
        rows = [e.to_dict() for e in entities]
    else:
        rows = [
            {"kind": e.kind.value, "text": e.text, "start": e.start, "end": e.end}
            for e in entities
        ]
    fmt.print_table(rows, columns=_COLUMNS)
