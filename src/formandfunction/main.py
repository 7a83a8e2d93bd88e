# SPDX-License-Identifier: Apache-2.0
"""File: src/formandfunction/main.py
Project: Form & Function API (process supervisor)

Starts the gRPC listener (backend services) and the HTTP REST listener
(frontend) concurrently in one asyncio loop, both sharing a single
`BeamStore` and `StockLookupClient`.

Lifecycle
---------
- Bind failure on either port aborts the process with a non-zero exit.
- SIGINT/SIGTERM: the REST listener stops accepting connections and lets
  in-flight requests finish, bounded by `SHUTDOWN_GRACE_SEC`; the gRPC
  listener is then stopped without a grace period.

Environment
-----------
- `PORT`               : REST port (default: 8080)
- `GRPC_PORT`          : gRPC port (default: 9090)
- `HOST`               : bind interface (default: 0.0.0.0)
- `LOG_LEVEL`          : root log level (default: INFO)
- `SHUTDOWN_GRACE_SEC` : REST graceful shutdown bound (default: 30)
"""  # noqa: D205

from __future__ import annotations

import asyncio
import contextlib
import logging
import signal
import sys
from typing import Iterator, Optional

import uvicorn

from .clients.stock import StockLookupClient
from .config import Settings
from .exceptions import ConfigurationError
from .gateway.rest import create_app
from .logs import configure_logging
from .rpc.service import build_server
from .store import BeamStore

logger = logging.getLogger(__name__)


class RestServer(uvicorn.Server):
    """uvicorn server whose signal handling is owned by the supervisor."""

    @contextlib.contextmanager
    def capture_signals(self) -> Iterator[None]:
        yield


class Supervisor:
    """Runs both listeners and coordinates their shutdown."""

    def __init__(
        self,
        settings: Settings,
        store: Optional[BeamStore] = None,
        stock_client: Optional[StockLookupClient] = None,
    ) -> None:
        self.settings = settings
        self.store = store if store is not None else BeamStore.seeded()
        self.stock_client = stock_client if stock_client is not None else StockLookupClient()
        self._shutdown_event = asyncio.Event()

    def request_shutdown(self, signum: Optional[int] = None) -> None:
        if signum is not None:
            logger.info(f"Received signal {signal.Signals(signum).name}, shutting down gracefully...")
        self._shutdown_event.set()

    def _build_rest_server(self) -> RestServer:
        app = create_app(self.store, self.stock_client, self.settings)
        config = uvicorn.Config(
            app,
            host=self.settings.host,
            port=self.settings.http_port,
            log_config=None,
            timeout_graceful_shutdown=int(self.settings.shutdown_grace_sec),
        )
        return RestServer(config)

    async def run(self) -> None:
        grpc_server, grpc_port = build_server(
            self.store, self.stock_client, self.settings.host, self.settings.grpc_port
        )
        await grpc_server.start()
        logger.info(f"gRPC server started on port {grpc_port} (for backend services)")

        rest_server = self._build_rest_server()
        rest_task = asyncio.create_task(rest_server.serve(), name="rest-listener")
        shutdown_task = asyncio.create_task(self._shutdown_event.wait(), name="shutdown-wait")
        logger.info(f"Starting HTTP REST API server on port {self.settings.http_port} (for frontend)")

        try:
            done, _ = await asyncio.wait(
                {rest_task, shutdown_task}, return_when=asyncio.FIRST_COMPLETED
            )
            if rest_task in done:
                # The REST listener exited on its own: surface its error, if any.
                rest_task.result()
            else:
                logger.info("Shutting down HTTP server...")
                rest_server.should_exit = True
                await rest_task
        finally:
            shutdown_task.cancel()
            await grpc_server.stop(None)
            await self.stock_client.aclose()
            logger.info("Services shut down successfully")


async def serve(settings: Settings) -> None:
    loop = asyncio.get_running_loop()
    supervisor = Supervisor(settings)
    for sig in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(sig, supervisor.request_shutdown, sig)
    await supervisor.run()


def main() -> None:
    """Console entrypoint (`formandfunction`)."""
    try:
        settings = Settings.from_env()
    except ConfigurationError as e:
        configure_logging()
        logger.critical(str(e))
        sys.exit(2)

    configure_logging(settings.log_level)
    try:
        asyncio.run(serve(settings))
    except RuntimeError as e:
        # grpc bind failure; uvicorn exits on its own bind failure
        logger.critical(f"Failed to start services: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
