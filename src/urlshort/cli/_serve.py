"""``urlshort serve`` — load redirect files and start the server."""

import argparse
import logging
import sys

from urlshort.app import App
from urlshort.config import AppConfig
from urlshort.errors import UrlshortError


def run_serve(args: argparse.Namespace) -> None:
    """Build an ``App`` from ``args.sources`` and serve it.

    Configuration problems are fatal: a bad file stops startup instead
    of serving a partial redirect table.
    """
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    defaults = AppConfig()
    config = AppConfig(
        host=args.host if args.host is not None else defaults.host,
        port=args.port if args.port is not None else defaults.port,
        debug=args.debug,
        sources=tuple(args.sources),
        log_level=args.log_level,
    )

    try:
        app = App.from_config(config)
    except (OSError, UrlshortError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    app.run()
