"""Routing — exact-path redirect handlers.

A ``MapHandler`` looks the request path up in an immutable mapping and
answers with a 301 on a hit, or delegates to its fallback handler on a
miss. The loaders build one from YAML or JSON redirect lists.
"""

from urlshort.routing.handler import MapHandler, map_handler
from urlshort.routing.loaders import (
    file_handler,
    json_handler,
    parse_file,
    parse_json_mapping,
    parse_yaml_mapping,
    yaml_handler,
)
from urlshort.routing.mapping import MappingEntry, build_map
from urlshort.routing.protocol import Handler
from urlshort.routing.redirect import redirect_to

__all__ = [
    "Handler",
    "MapHandler",
    "MappingEntry",
    "build_map",
    "file_handler",
    "json_handler",
    "map_handler",
    "parse_file",
    "parse_json_mapping",
    "parse_yaml_mapping",
    "redirect_to",
    "yaml_handler",
]
