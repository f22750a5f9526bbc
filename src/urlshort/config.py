"""Application configuration.

AppConfig is a frozen dataclass: immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = AppConfig(
            port=3000,
            sources=("redirects.yaml", "extra.json"),
            redirects=(("/gh", "https://github.com"),),
        )
    """

    # Server
    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False

    # Redirect sources, consulted last-to-first ahead of the inline redirects
    sources: tuple[str | Path, ...] = ()

    # Inline (path, url) pairs, consulted just before the fallback
    redirects: tuple[tuple[str, str], ...] = ()

    # Logging: level for the "urlshort" loggers, applied by App.run()
    log_level: str = "info"
