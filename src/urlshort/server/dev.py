"""Development server.

Starts a pounce ASGI server with the live urlshort App object.
"""

from __future__ import annotations


def run_dev_server(
    app: object,
    host: str,
    port: int,
    *,
    reload: bool = False,
) -> None:
    """Start a pounce server with the given urlshort App.

    Pounce's ``run()`` takes an import string, but the CLI builds a live
    ``App`` from redirect files. We use ``pounce.Server`` directly with
    the ASGI callable.

    Args:
        app: ASGI callable (urlshort App instance).
        host: Bind host address.
        port: Bind port number.
        reload: Enable auto-reload on file changes.
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    config = ServerConfig(
        host=host,
        port=port,
        workers=1,
        reload=reload,
    )
    server = Server(config, app)
    server.run()
