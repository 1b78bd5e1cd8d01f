"""
HTTP server bootstrap: bind the listening socket, then serve with uvicorn.
"""

import socket
from ipaddress import IPv4Address, IPv6Address

import click
import uvicorn
from fastapi import FastAPI

from ..logging import get_logger

logger = get_logger(__name__)

IPAddress = IPv4Address | IPv6Address


def format_address(address: IPAddress, port: int) -> str:
    host = f"[{address}]" if address.version == 6 else str(address)
    return f"{host}:{port}"


def bind_socket(address: IPAddress, port: int) -> socket.socket:
    """Create a TCP socket of the right family and bind it to ``address:port``.

    Raises:
        OSError: If the address cannot be bound
    """
    family = socket.AF_INET6 if address.version == 6 else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_STREAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        if family == socket.AF_INET6:
            sock.setsockopt(socket.IPPROTO_IPV6, socket.IPV6_V6ONLY, 1)
        sock.bind((str(address), port))
    except OSError:
        sock.close()
        raise
    sock.set_inheritable(True)
    return sock


def run_server(app: FastAPI, address: IPAddress, port: int, log_level: str = "info") -> None:
    """Bind ``address:port`` and serve ``app`` until the process is signalled."""
    sock = bind_socket(address, port)
    bound_port = sock.getsockname()[1]

    config = uvicorn.Config(
        app,
        host=str(address),
        port=bound_port,
        log_level=log_level,
        access_log=False,
    )
    server = uvicorn.Server(config)

    click.echo(f"Listening on http://{format_address(address, bound_port)}")
    logger.info("Server bound", address=str(address), port=bound_port)

    try:
        server.run(sockets=[sock])
    finally:
        sock.close()
        logger.info("Server stopped")
