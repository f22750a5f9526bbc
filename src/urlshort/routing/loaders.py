"""YAML and JSON redirect loaders.

Both formats describe an ordered list of redirect entries with
lowercase ``path`` and ``url`` keys::

    # YAML
    - path: /some-path
      url: https://www.some-url.com/demo

    # JSON
    [{"path": "/some-path", "url": "https://www.some-url.com/demo"}]

Each loader parses the payload into ``MappingEntry`` values, builds the
lookup table, and wraps the given fallback in a ``MapHandler``. Parsing
is all-or-nothing: a bad payload raises ``ConfigParseError`` and no
handler is built.
"""

import json
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

import yaml

from urlshort.errors import ConfigParseError, ConfigurationError
from urlshort.routing.handler import MapHandler
from urlshort.routing.mapping import MappingEntry, build_map
from urlshort.routing.protocol import AnyHandler

logger = logging.getLogger("urlshort.routing")

_FIELDS = ("path", "url")


def _entries_from(data: Any, kind: str) -> list[MappingEntry]:
    """Validate decoded data and convert it to entries."""
    # An empty YAML document or a JSON null is an empty list
    if data is None:
        return []
    if not isinstance(data, list):
        msg = f"expected a list of entries, got {type(data).__name__}"
        raise ConfigParseError(kind, msg)

    entries: list[MappingEntry] = []
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            msg = f"expected an object with 'path' and 'url', got {type(item).__name__}"
            raise ConfigParseError(kind, msg, index)
        for name in _FIELDS:
            if name not in item:
                raise ConfigParseError(kind, f"missing required field {name!r}", index)
            value = item[name]
            if not isinstance(value, str):
                msg = f"field {name!r} must be a string, got {type(value).__name__}"
                if kind == "yaml" and value is not None:
                    # YAML 1.1 resolves bare 2024, yes, 1.5 or 2024-01-01 to non-strings
                    msg += "; quote it so YAML keeps it as text"
                raise ConfigParseError(kind, msg, index)
        entries.append(MappingEntry(path=item["path"], url=item["url"]))
    return entries


def parse_yaml_mapping(data: bytes | str) -> list[MappingEntry]:
    """Parse a YAML sequence of ``path``/``url`` mappings into entries.

    Raises:
        ConfigParseError: If the YAML is invalid or has the wrong shape.
    """
    try:
        decoded = yaml.safe_load(data)
    except yaml.YAMLError as exc:
        raise ConfigParseError("yaml", str(exc)) from exc
    return _entries_from(decoded, "yaml")


def parse_json_mapping(data: bytes | str) -> list[MappingEntry]:
    """Parse a JSON array of ``path``/``url`` objects into entries.

    Raises:
        ConfigParseError: If the JSON is invalid or has the wrong shape.
    """
    try:
        decoded = json.loads(data)
    except ValueError as exc:
        # JSONDecodeError, or UnicodeDecodeError for non-UTF bytes
        raise ConfigParseError("json", str(exc)) from exc
    return _entries_from(decoded, "json")


def _build(
    parse: Callable[[bytes | str], list[MappingEntry]],
    data: bytes | str,
    fallback: AnyHandler,
) -> MapHandler:
    entries = parse(data)
    handler = MapHandler(build_map(entries), fallback)
    logger.debug("Loaded %d entries (%d paths)", len(entries), len(handler))
    return handler


def yaml_handler(data: bytes | str, fallback: AnyHandler) -> MapHandler:
    """Parse YAML redirects and wrap *fallback* in a ``MapHandler``.

    Paths not listed in the YAML are passed to *fallback*. See
    ``map_handler`` to build the same handler from a plain dict.

    Raises:
        ConfigParseError: If the YAML is invalid. No handler is built.
    """
    return _build(parse_yaml_mapping, data, fallback)


def json_handler(data: bytes | str, fallback: AnyHandler) -> MapHandler:
    """Parse JSON redirects and wrap *fallback* in a ``MapHandler``.

    Paths not listed in the JSON are passed to *fallback*. See
    ``map_handler`` to build the same handler from a plain dict.

    Raises:
        ConfigParseError: If the JSON is invalid. No handler is built.
    """
    return _build(parse_json_mapping, data, fallback)


_PARSERS: dict[str, Callable[[bytes | str], list[MappingEntry]]] = {
    ".yaml": parse_yaml_mapping,
    ".yml": parse_yaml_mapping,
    ".json": parse_json_mapping,
}


def parse_file(path: str | Path) -> list[MappingEntry]:
    """Read a redirect file and parse it according to its suffix.

    Raises:
        ConfigurationError: If the file suffix is not a known format.
        ConfigParseError: If the file contents are invalid.
        OSError: If the file cannot be read.
    """
    path = Path(path)
    parse = _PARSERS.get(path.suffix.lower())
    if parse is None:
        msg = f"Unsupported redirect file {str(path)!r}: expected .yaml, .yml or .json"
        raise ConfigurationError(msg)
    return parse(path.read_bytes())


def file_handler(path: str | Path, fallback: AnyHandler) -> MapHandler:
    """Load redirects from a ``.yaml``, ``.yml`` or ``.json`` file.

    Same errors as ``parse_file``.
    """
    entries = parse_file(path)
    handler = MapHandler(build_map(entries), fallback)
    logger.debug("Loaded %d entries (%d paths) from %s", len(entries), len(handler), path)
    return handler
