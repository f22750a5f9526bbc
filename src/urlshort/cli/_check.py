"""``urlshort check`` — redirect file validation command.

Parses each file and prints its entry count. Exits with code 1 at the
first file that cannot be read or parsed.
"""

import argparse

from urlshort.cli._load import load_entries


def run_check(args: argparse.Namespace) -> None:
    """Validate every file in ``args.sources``."""
    for source in args.sources:
        entries = load_entries(source)
        paths = {entry.path for entry in entries}
        duplicates = len(entries) - len(paths)
        line = f"{source}: {len(entries)} entries, {len(paths)} paths"
        if duplicates:
            line += f" ({duplicates} overridden)"
        print(line)
