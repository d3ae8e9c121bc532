"""
Development server.

Binds all interfaces on a fixed port and refuses to start when the port is
taken instead of picking another one.

Usage:
    car-compare-dev
    # or
    python -m car_compare.entrypoints.server
"""

from __future__ import annotations

import logging
import socket

import uvicorn

from car_compare.infra.config import log_level, server_host, server_port

logger = logging.getLogger(__name__)


class PortInUseError(RuntimeError):
    """Raised when the configured port is already bound by another process."""

    pass


def ensure_port_available(host: str, port: int) -> None:
    """
    Fail fast if host:port cannot be bound.

    Raises:
        PortInUseError: If another process holds the port
    """
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        try:
            sock.bind((host, port))
        except OSError as exc:
            raise PortInUseError(f"Port {port} on {host} is already in use") from exc


def main() -> int:
    logging.basicConfig(
        level=log_level(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    host = server_host()
    port = server_port()

    try:
        ensure_port_available(host, port)
    except PortInUseError as exc:
        logger.error(str(exc))
        return 1

    logger.info("Starting dev server", extra={"host": host, "port": port})
    uvicorn.run("car_compare.entrypoints.http.app:app", host=host, port=port)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
