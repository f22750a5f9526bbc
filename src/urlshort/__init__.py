"""Urlshort — map request paths to permanent redirects.

Redirects come from a dict or from YAML/JSON redirect lists, and
anything unmapped falls through to a fallback handler.

Basic usage::

    from urlshort import App, map_handler, not_found, yaml_handler

    handler = map_handler({"/gh": "https://github.com"}, not_found)
    handler = yaml_handler(open("redirects.yaml", "rb").read(), handler)

    App(handler).run()
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "AppConfig",
    "ConfigParseError",
    "ConfigurationError",
    "Handler",
    "MapHandler",
    "MappingEntry",
    "Request",
    "Response",
    "UrlshortError",
    "build_map",
    "file_handler",
    "json_handler",
    "map_handler",
    "not_found",
    "redirect_to",
    "yaml_handler",
]

# name -> module that defines it
_LAZY_IMPORTS: dict[str, str] = {
    "App": "urlshort.app",
    "AppConfig": "urlshort.config",
    "ConfigParseError": "urlshort.errors",
    "ConfigurationError": "urlshort.errors",
    "Handler": "urlshort.routing.protocol",
    "MapHandler": "urlshort.routing.handler",
    "MappingEntry": "urlshort.routing.mapping",
    "Request": "urlshort.http.request",
    "Response": "urlshort.http.response",
    "UrlshortError": "urlshort.errors",
    "build_map": "urlshort.routing.mapping",
    "file_handler": "urlshort.routing.loaders",
    "json_handler": "urlshort.routing.loaders",
    "map_handler": "urlshort.routing.handler",
    "not_found": "urlshort.routing.fallback",
    "redirect_to": "urlshort.routing.redirect",
    "yaml_handler": "urlshort.routing.loaders",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import urlshort`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
