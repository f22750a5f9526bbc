"""``urlshort routes`` — list the merged redirect table.

Files are merged in order, so a path defined in a later file replaces
the same path from an earlier one, matching how ``urlshort serve``
chains them.
"""

import argparse

from urlshort.cli._load import load_entries
from urlshort.routing.mapping import build_map


def run_routes(args: argparse.Namespace) -> None:
    """Print a PATH / URL table for ``args.sources``."""
    entries = [entry for source in args.sources for entry in load_entries(source)]
    paths = build_map(entries)
    if not paths:
        print("No redirects defined.")
        return

    rows = sorted(paths.items())
    max_path = max(max(len(path) for path, _ in rows), 4)  # "PATH" header

    fmt = f"{{:<{max_path}}}  {{}}"
    print(fmt.format("PATH", "URL"))
    sep_len = max_path + 2 + max(len(url) for _, url in rows)
    print("-" * min(max(sep_len, 9), 80))
    for path, url in rows:
        print(fmt.format(path, url))
