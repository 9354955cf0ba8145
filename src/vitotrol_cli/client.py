#!/usr/bin/env python3
"""A CLI for the vitotrol library."""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import Any, Final

import click
from colorama import Fore, Style, init as colorama_init

from vitotrol import Session, exc
from vitotrol.const import DEFAULT_MAIN_URL, STATUS_DONE
from vitotrol.schemas import SZ_DEBUG, SZ_MAIN_URL, SZ_POLL_TIMEOUT
from vitotrol_tx.logger import set_logging

DEVICES: Final = "devices"
REFRESH_STATUS: Final = "refresh_status"
WRITE_STATUS: Final = "write_status"
WAIT_REFRESH: Final = "wait_refresh"
WAIT_WRITE: Final = "wait_write"

SZ_PASSWORD: Final = "password"
SZ_UPDATE_ID: Final = "update_id"
SZ_USERNAME: Final = "username"

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])

LIB_LOGGERS: Final = ("vitotrol", "vitotrol_tx")


def _lib_config(kwargs: dict[str, Any]) -> dict[str, Any]:
    """Return the library's session config from the CLI's kwargs."""

    config: dict[str, Any] = {
        SZ_MAIN_URL: kwargs[SZ_MAIN_URL],
        SZ_DEBUG: kwargs[SZ_DEBUG] > 1,
    }
    if kwargs.get(SZ_POLL_TIMEOUT) is not None:
        config[SZ_POLL_TIMEOUT] = kwargs[SZ_POLL_TIMEOUT]
    return config


@click.group(context_settings=CONTEXT_SETTINGS)
@click.option("-u", "--username", envvar="VITOTROL_USERNAME", required=True)
@click.option("-p", "--password", envvar="VITOTROL_PASSWORD", required=True)
@click.option(
    "--url", SZ_MAIN_URL, default=DEFAULT_MAIN_URL, help="endpoint of the service"
)
@click.option("-d", "--debug", count=True, help="-dd will also log the payloads")
@click.pass_context
def cli(ctx: click.Context, **kwargs: Any) -> None:
    """A CLI for the vitotrol library."""
    ctx.obj = kwargs


#
# 1/3: DEVICES
@click.command()
@click.pass_obj
def devices(obj: dict[str, Any]) -> tuple[str, dict[str, Any], dict[str, Any]]:
    """List the devices of the account."""
    return DEVICES, obj, {}


#
# 2/3: STATUS (of a refresh/write operation)
@click.command("refresh-status")
@click.argument(SZ_UPDATE_ID)
@click.pass_obj
def refresh_status(
    obj: dict[str, Any], update_id: str
) -> tuple[str, dict[str, Any], dict[str, Any]]:
    """Get the status of a refresh operation."""
    return REFRESH_STATUS, obj, {SZ_UPDATE_ID: update_id}


@click.command("write-status")
@click.argument(SZ_UPDATE_ID)
@click.pass_obj
def write_status(
    obj: dict[str, Any], update_id: str
) -> tuple[str, dict[str, Any], dict[str, Any]]:
    """Get the status of a write operation."""
    return WRITE_STATUS, obj, {SZ_UPDATE_ID: update_id}


#
# 3/3: WAIT (until a refresh/write operation is done)
@click.command("wait-refresh")
@click.argument(SZ_UPDATE_ID)
@click.option("-t", "--timeout", SZ_POLL_TIMEOUT, type=float, help="in seconds")
@click.pass_obj
def wait_refresh(
    obj: dict[str, Any], update_id: str, **kwargs: Any
) -> tuple[str, dict[str, Any], dict[str, Any]]:
    """Wait until a refresh operation is done."""
    return WAIT_REFRESH, obj | kwargs, {SZ_UPDATE_ID: update_id}


@click.command("wait-write")
@click.argument(SZ_UPDATE_ID)
@click.option("-t", "--timeout", SZ_POLL_TIMEOUT, type=float, help="in seconds")
@click.pass_obj
def wait_write(
    obj: dict[str, Any], update_id: str, **kwargs: Any
) -> tuple[str, dict[str, Any], dict[str, Any]]:
    """Wait until a write operation is done."""
    return WAIT_WRITE, obj | kwargs, {SZ_UPDATE_ID: update_id}


def print_devices(session: Session) -> None:
    for dev in session.devices:
        colour = Fore.RED if dev.has_error else Fore.GREEN
        state = "connected" if dev.is_connected else "disconnected"
        print(
            f"{Style.BRIGHT}{dev.location_id:>8} {dev.device_id:>8}{Style.NORMAL} "
            f"{dev.location_name} / {dev.device_name} {colour}({state})"
        )


def print_status(update_id: str, status: int) -> None:
    colour = Fore.GREEN if status == STATUS_DONE else Fore.YELLOW
    print(f"{update_id}: {colour}status {status}")


async def async_main(command: str, kwargs: dict[str, Any], **params: Any) -> int:
    """Log in, run the command, and return the exit code."""

    try:
        async with Session(_lib_config(kwargs)) as session:
            await session.login(kwargs[SZ_USERNAME], kwargs[SZ_PASSWORD])

            if command == DEVICES:
                await session.get_devices()
                print_devices(session)

            elif command == REFRESH_STATUS:
                status = await session.request_refresh_status(params[SZ_UPDATE_ID])
                print_status(params[SZ_UPDATE_ID], status)

            elif command == WRITE_STATUS:
                status = await session.request_write_status(params[SZ_UPDATE_ID])
                print_status(params[SZ_UPDATE_ID], status)

            elif command == WAIT_REFRESH:
                status = await session.wait_refresh_status(params[SZ_UPDATE_ID])
                print_status(params[SZ_UPDATE_ID], status)

            elif command == WAIT_WRITE:
                status = await session.wait_write_status(params[SZ_UPDATE_ID])
                print_status(params[SZ_UPDATE_ID], status)

    except exc.ApplicationError as err:
        print(f"{Fore.RED}Error {err.error_num}: {err.error_str}")
        return 1
    except exc.VitotrolException as err:
        print(f"{Fore.RED}Error: {err}")
        return 1

    return 0


cli.add_command(devices)
cli.add_command(refresh_status)
cli.add_command(write_status)
cli.add_command(wait_refresh)
cli.add_command(wait_write)


def main() -> None:
    try:
        result = cli(standalone_mode=False)
    except click.ClickException as err:
        err.show()
        sys.exit(err.exit_code)

    if isinstance(result, int):  # e.g. --help
        sys.exit(result)

    (command, kwargs, params) = result

    colorama_init(autoreset=True)
    for name in LIB_LOGGERS:
        set_logging(
            logging.getLogger(name),
            logging.DEBUG if kwargs[SZ_DEBUG] else logging.WARNING,
        )

    try:
        sys.exit(asyncio.run(async_main(command, kwargs, **params)))
    except KeyboardInterrupt:
        print("\r\nvitotrol: ended via: KeyboardInterrupt")


if __name__ == "__main__":
    main()
