"""Start and stop the HTTP server programmatically"""

import asyncio
from dataclasses import dataclass
from typing import Optional

import uvicorn

from .config import Settings, settings as default_settings
from .utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class ServerHandle:
    """A running server. Pass it to close_server() to shut it down."""

    server: uvicorn.Server
    task: asyncio.Task

    @property
    def port(self) -> int:
        return self.server.config.port


async def run_server(settings: Optional[Settings] = None) -> ServerHandle:
    """
    Start serving the application in the current event loop

    Returns once the server is accepting connections. The app's lifespan
    initializes the database before the socket is bound.

    Raises:
        RuntimeError: If the server exits before it starts listening
    """
    settings = settings or default_settings
    config = uvicorn.Config(
        "locations_api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_config=None,
        lifespan="on"
    )
    server = uvicorn.Server(config)
    task = asyncio.create_task(server.serve())

    while not server.started:
        if task.done():
            # Surface bind or startup errors from the serve task
            task.result()
            raise RuntimeError("Server exited during startup")
        await asyncio.sleep(0.05)

    logger.info("Your app is listening", host=settings.HOST, port=settings.PORT)
    return ServerHandle(server=server, task=task)


async def close_server(handle: ServerHandle) -> None:
    """Stop a server started with run_server() and wait for it to finish"""

    logger.info("Closing server", port=handle.port)
    handle.server.should_exit = True
    await handle.task


def main() -> None:
    """Run the service in the foreground until interrupted"""

    uvicorn.run(
        "locations_api.main:app",
        host=default_settings.HOST,
        port=default_settings.PORT,
        log_config=None
    )
