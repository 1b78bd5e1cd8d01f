#!/usr/bin/env python3
"""
Main CLI entry point for the usergraph server and offline demos.
"""

import json
import sys
from collections.abc import Callable
from ipaddress import IPv4Address, IPv6Address, ip_address
from typing import Any

import click

from usergraph import __version__
from usergraph.api.server import format_address, run_server
from usergraph.config import settings
from usergraph.logging import (
    LOG_LEVELS,
    configure_demo_logging,
    configure_logging,
    get_logger,
)

logger = get_logger(__name__)


class IPAddressType(click.ParamType):
    """Click parameter accepting a textual IPv4 or IPv6 address."""

    name = "ip_address"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None):
        if isinstance(value, (IPv4Address, IPv6Address)):
            return value
        try:
            return ip_address(value)
        except ValueError:
            self.fail(f"{value!r} is not a valid IPv4 or IPv6 address", param, ctx)


IP_ADDRESS = IPAddressType()


@click.group()
@click.version_option(version=__version__, prog_name="usergraph")
def cli() -> None:
    """usergraph CLI - serve the GraphQL API or run the offline demos."""
    pass


@cli.command()
@click.argument("bind_address", required=False, type=IP_ADDRESS)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(LOG_LEVELS),
    help="Log level (default: info)",
)
def serve(bind_address: IPv4Address | IPv6Address | None, log_level: str) -> None:
    """Start the GraphQL server on BIND_ADDRESS (default: 127.0.0.1), port 3000."""

    configure_logging(log_level=log_level, debug=settings.debug)

    address = bind_address or IP_ADDRESS.convert(settings.api_host, None, None)
    port = settings.api_port

    logger.info("Starting usergraph server", address=str(address), port=port)

    from usergraph.api.app import create_app

    try:
        run_server(create_app(), address, port, log_level=log_level)
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except OSError as e:
        logger.error("Server startup failed", error=str(e))
        click.echo(f"✗ Could not listen on {format_address(address, port)}: {e}", err=True)
        sys.exit(1)


@cli.group()
def demo() -> None:
    """Run a GraphQL document offline and check the result."""
    pass


def _run_demo(run: Callable[[], dict[str, Any]]) -> None:
    from usergraph.demos import DemoError

    configure_demo_logging()

    try:
        data = run()
    except DemoError as e:
        logger.error("Demo failed", error=str(e))
        click.echo(f"✗ {e}", err=True)
        sys.exit(1)

    click.echo(json.dumps(data))


@demo.command("person")
def demo_person() -> None:
    """Query a static person resolver."""
    from usergraph.demos import person

    _run_demo(person.run)


@demo.command("users")
def demo_users() -> None:
    """Create a user, then read it back."""
    from usergraph.demos import users

    _run_demo(users.run)


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
