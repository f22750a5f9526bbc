"""ASGI application serving a redirect handler chain."""

from __future__ import annotations

import logging

from urlshort._internal.asgi import Receive, Scope, Send
from urlshort.config import AppConfig
from urlshort.routing.fallback import not_found
from urlshort.routing.handler import MapHandler
from urlshort.routing.loaders import file_handler
from urlshort.routing.protocol import AnyHandler
from urlshort.server.handler import handle_request

logger = logging.getLogger("urlshort.server")


class App:
    """ASGI 3.0 application wrapping a single handler.

    The handler is usually a chain of ``MapHandler`` instances ending in
    a fallback. Build one by hand::

        app = App(map_handler({"/gh": "https://github.com"}, not_found))

    or from configuration::

        app = App.from_config(AppConfig(sources=("redirects.yaml",)))
    """

    __slots__ = ("config", "handler")

    def __init__(self, handler: AnyHandler, config: AppConfig | None = None) -> None:
        self.handler = handler
        self.config = config or AppConfig()

    @classmethod
    def from_config(cls, config: AppConfig, fallback: AnyHandler | None = None) -> App:
        """Compose the handler chain described by *config*.

        The chain is built inside-out: *fallback* (``not_found`` when
        omitted), wrapped by the inline ``redirects``, wrapped by each
        file in ``sources`` in order. A request is therefore checked
        against the last source first and reaches the fallback only when
        nothing matches.

        Raises:
            ConfigParseError: If a source file is malformed.
            ConfigurationError: If a source file has an unknown suffix.
            OSError: If a source file cannot be read.
        """
        handler: AnyHandler = fallback if fallback is not None else not_found
        if config.redirects:
            handler = MapHandler(dict(config.redirects), handler)
        for source in config.sources:
            handler = file_handler(source, handler)
            logger.info("Loaded redirects from %s", source)
        return cls(handler, config)

    # -- Server --

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Serve the app with pounce.

        ``config.log_level`` is applied to the ``urlshort`` logger tree.
        Handlers are left to the caller (the CLI uses ``basicConfig``).
        """
        logging.getLogger("urlshort").setLevel(self.config.log_level.upper())

        from urlshort.server.dev import run_dev_server

        run_dev_server(
            self,
            host if host is not None else self.config.host,
            port if port is not None else self.config.port,
            reload=self.config.debug,
        )

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        await handle_request(
            scope,
            receive,
            send,
            handler=self.handler,
            debug=self.config.debug,
        )

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Acknowledge the ASGI lifespan protocol.

        All configuration is loaded before the app exists, so there is
        nothing to do at startup or shutdown.
        """
        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                await send({"type": "lifespan.startup.complete"})
            elif msg_type == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return
