"""Shared source loading for the CLI subcommands."""

import sys

from urlshort.errors import UrlshortError
from urlshort.routing.loaders import parse_file
from urlshort.routing.mapping import MappingEntry


def load_entries(source: str) -> list[MappingEntry]:
    """Parse *source*, or print the problem and exit with status 1."""
    try:
        return parse_file(source)
    except (OSError, UrlshortError) as exc:
        print(f"Error: {source}: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
