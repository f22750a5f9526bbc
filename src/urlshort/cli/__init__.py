"""Urlshort CLI — serve, validate, and list redirect files.

Entry point registered as ``urlshort`` in ``pyproject.toml``::

    [project.scripts]
    urlshort = "urlshort.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``urlshort`` command."""
    parser = argparse.ArgumentParser(
        prog="urlshort",
        description="Urlshort — map request paths to permanent redirects.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- urlshort serve ---------------------------------------------------
    serve_parser = subparsers.add_parser("serve", help="Serve redirects over HTTP")
    serve_parser.add_argument(
        "sources",
        nargs="+",
        metavar="SOURCE",
        help="Redirect file (.yaml, .yml or .json); later files take precedence",
    )
    serve_parser.add_argument("--host", default=None, help="Bind host address")
    serve_parser.add_argument("--port", type=int, default=None, help="Bind port number")
    serve_parser.add_argument(
        "--log-level",
        default="info",
        choices=("debug", "info", "warning", "error"),
        help="Logging level (default: info)",
    )
    serve_parser.add_argument(
        "--debug",
        action="store_true",
        help="Include tracebacks in 500 responses and reload on changes",
    )

    # -- urlshort check ---------------------------------------------------
    check_parser = subparsers.add_parser("check", help="Validate redirect files")
    check_parser.add_argument("sources", nargs="+", metavar="SOURCE", help="Redirect file")

    # -- urlshort routes --------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List the merged redirect table")
    routes_parser.add_argument("sources", nargs="+", metavar="SOURCE", help="Redirect file")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "serve":
        from urlshort.cli._serve import run_serve

        run_serve(args)
    elif args.command == "check":
        from urlshort.cli._check import run_check

        run_check(args)
    elif args.command == "routes":
        from urlshort.cli._routes import run_routes

        run_routes(args)
