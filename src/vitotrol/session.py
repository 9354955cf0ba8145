#!/usr/bin/env python3
"""Vitotrol - a session with the Vitotrol service, and its typed operations.

Each operation is a single round trip via the dispatcher: there are no retries, no
caching and no background tasks. A session is expected to have at most one call in
flight at a time, but distinct sessions are independent (they share no state).
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from types import TracebackType
from typing import TYPE_CHECKING, Any

from vitotrol_tx.dispatcher import send_request
from vitotrol_tx.message import ResponseT
from vitotrol_tx.transport import SoapTransport

from . import exceptions as exc
from .const import STATUS_DONE, Action
from .messages import (
    GetDevicesResponse,
    LoginResponse,
    RequestRefreshStatusResponse,
    RequestWriteStatusResponse,
    get_devices_request,
    login_request,
    request_refresh_status_request,
    request_write_status_request,
)
from .schemas import (
    SZ_DEBUG,
    SZ_MAIN_URL,
    SZ_POLL_INTERVAL,
    SZ_POLL_TIMEOUT,
    load_session_config,
)

if TYPE_CHECKING:
    import aiohttp

    from .device import Device


_LOGGER = logging.getLogger(__name__)


class Session:
    """A logical session (i.e. a sequence of calls sharing cookies) with the service."""

    def __init__(
        self,
        config: dict[str, Any] | None = None,
        /,
        *,
        client_session: aiohttp.ClientSession | None = None,
    ) -> None:
        """Create a session from a config (see SCH_SESSION_CONFIG).

        If no client_session is provided, one is created (and closed by close()). An
        injected one must use aiohttp.DummyCookieJar, as each session has its cookies.
        """

        self._config = load_session_config(config)
        self.debug: bool = self._config[SZ_DEBUG]

        self._transport = SoapTransport(
            self._config[SZ_MAIN_URL], client_session=client_session
        )

        self.login_info: LoginResponse | None = None
        self.devices: list[Device] = []

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(main_url={self._transport.main_url!r})"

    async def __aenter__(self) -> Session:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        await self.close()

    async def close(self) -> None:
        await self._transport.close()

    @property
    def cookies(self) -> list[str]:
        """Return the cookies that are replayed on every request of this session."""
        return self._transport.cookies

    @cookies.setter
    def cookies(self, cookies: list[str]) -> None:
        self._transport.cookies = list(cookies)

    @property
    def is_authenticated(self) -> bool:
        return self.login_info is not None

    async def _send_request(
        self, action: Action, body: str, response_cls: type[ResponseT]
    ) -> ResponseT:
        return await send_request(
            self._transport, action, body, response_cls, debug=self.debug
        )

    async def login(self, username: str, password: str) -> LoginResponse:
        """Authenticate the session (the server tracks it via cookies)."""

        resp = await self._send_request(
            Action.LOGIN, login_request(username, password), LoginResponse
        )
        self.login_info = resp

        _LOGGER.info(
            "Logged in as %s (%s %s)", username, resp.first_name, resp.last_name
        )
        return resp

    async def get_devices(self) -> list[Device]:
        """Obtain the devices of the account.

        The list replaces any previous one (with its attributes/timesheets) wholesale.
        """

        resp = await self._send_request(
            Action.GET_DEVICES, get_devices_request(), GetDevicesResponse
        )
        self.devices = resp.devices()

        _LOGGER.debug("Found %s device(s)", len(self.devices))
        return self.devices

    def get_device(self, device_id: int, location_id: int | None = None) -> Device:
        """Return the (known) device with the id, optionally at a specific location."""

        for dev in self.devices:
            if dev.device_id == device_id and location_id in (None, dev.location_id):
                return dev

        raise exc.DeviceNotFound(
            f"No device {device_id}"
            + (f" at location {location_id}" if location_id is not None else "")
        )

    async def request_refresh_status(self, update_id: str) -> int:
        """Return the status of a refresh operation (STATUS_DONE when completed)."""

        resp = await self._send_request(
            Action.REQUEST_REFRESH_STATUS,
            request_refresh_status_request(update_id),
            RequestRefreshStatusResponse,
        )
        return resp.status

    async def request_write_status(self, update_id: str) -> int:
        """Return the status of a write operation (STATUS_DONE when completed)."""

        resp = await self._send_request(
            Action.REQUEST_WRITE_STATUS,
            request_write_status_request(update_id),
            RequestWriteStatusResponse,
        )
        return resp.status

    async def _wait_for_status(
        self,
        get_status: Callable[[str], Awaitable[int]],
        update_id: str,
        poll_interval: float | None,
        poll_timeout: float | None,
    ) -> int:
        if poll_interval is None:
            poll_interval = self._config[SZ_POLL_INTERVAL]
        if poll_timeout is None:
            poll_timeout = self._config[SZ_POLL_TIMEOUT]

        async def poll_until_done() -> int:
            while (status := await get_status(update_id)) != STATUS_DONE:
                _LOGGER.debug("Update %s has status %s", update_id, status)
                await asyncio.sleep(poll_interval)
            return status

        try:
            return await asyncio.wait_for(poll_until_done(), timeout=poll_timeout)
        except TimeoutError as err:
            raise exc.StatusTimeout(
                f"Update {update_id} not done after {poll_timeout}s"
            ) from err

    async def wait_refresh_status(
        self,
        update_id: str,
        /,
        *,
        poll_interval: float | None = None,
        poll_timeout: float | None = None,
    ) -> int:
        """Poll the status of a refresh operation until it is done.

        Errors are not retried. Raise StatusTimeout if not done within the timeout.
        """
        return await self._wait_for_status(
            self.request_refresh_status, update_id, poll_interval, poll_timeout
        )

    async def wait_write_status(
        self,
        update_id: str,
        /,
        *,
        poll_interval: float | None = None,
        poll_timeout: float | None = None,
    ) -> int:
        """Poll the status of a write operation until it is done.

        Errors are not retried. Raise StatusTimeout if not done within the timeout.
        """
        return await self._wait_for_status(
            self.request_write_status, update_id, poll_interval, poll_timeout
        )
