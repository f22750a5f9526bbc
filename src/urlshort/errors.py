"""Urlshort exception hierarchy.

Shared across the loaders, the ASGI app, and the CLI so every module
raises and catches the same types.
"""

from dataclasses import dataclass


class UrlshortError(Exception):
    """Base for all urlshort-specific errors."""


class ConfigurationError(UrlshortError):
    """Raised when application setup is invalid.

    Typically raised while building an ``App`` from its config, before
    any request is served.
    """


@dataclass(frozen=True, slots=True)
class ConfigParseError(UrlshortError):
    """A redirect mapping payload could not be turned into entries.

    Raised by the YAML and JSON loaders for syntax errors and for
    payloads with the wrong shape. The decoder's own exception, when
    there is one, is chained as ``__cause__``.
    """

    kind: str
    detail: str
    index: int | None = None

    def __str__(self) -> str:
        if self.index is not None:
            return f"invalid {self.kind} mapping (entry {self.index}): {self.detail}"
        return f"invalid {self.kind} mapping: {self.detail}"
