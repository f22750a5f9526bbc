"""Redirect entries and the path -> URL lookup table built from them."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True, slots=True)
class MappingEntry:
    """One redirect rule: requests for ``path`` go to ``url``."""

    path: str
    url: str


def build_map(entries: Iterable[MappingEntry]) -> Mapping[str, str]:
    """Build a read-only path -> URL mapping from *entries*.

    Entries are applied in order, so when a path appears more than once
    the last entry wins.
    """
    paths: dict[str, str] = {}
    for entry in entries:
        paths[entry.path] = entry.url
    return MappingProxyType(paths)
