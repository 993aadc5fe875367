# greeter/main.py
import logging
import socket
import sys

import uvicorn
from fastapi import FastAPI

from greeter.routers import greeting
from greeter.settings import ServerSettings, load_settings

log = logging.getLogger("greeter")


def create_app(settings: ServerSettings | None = None) -> FastAPI:
    app = FastAPI(title="Greeter")
    app.state.settings = settings or load_settings()
    app.include_router(greeting.router)
    return app


def bind_listener(host: str, port: int) -> socket.socket:
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((host, port))
        sock.listen(socket.SOMAXCONN)
    except OSError:
        sock.close()
        raise
    return sock


def serve(settings: ServerSettings | None = None) -> None:
    """
    Bind the listener, announce it once on stdout, then hand the socket to
    uvicorn until interrupted. Bind errors (port in use) propagate.
    """
    settings = settings or load_settings()
    logging.basicConfig(level=logging.INFO, stream=sys.stdout, format="%(message)s")

    sock = bind_listener(settings.host, settings.port)
    try:
        bound_port = sock.getsockname()[1]
        log.info("Server is listening on http://localhost:%d", bound_port)

        config = uvicorn.Config(
            create_app(settings),
            log_level="warning",
            access_log=False,
        )
        uvicorn.Server(config).run(sockets=[sock])
    finally:
        sock.close()
