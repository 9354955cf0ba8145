#!/usr/bin/env python3
"""Vitotrol - the HTTP transport of a logical session.

Operates at the bytes layer of: app (session) - dispatcher - envelope - transport

The server assigns its affinity via cookies, so every Set-Cookie received is kept,
and replayed (as a single Cookie header) on every subsequent request of the session.
The transport does its own cookie handling; aiohttp's cookie jar is not used.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Final

import aiohttp

from . import exceptions as exc
from .const import (
    CONTENT_TYPE,
    SOAP_URL,
    SZ_CONTENT_TYPE,
    SZ_COOKIE,
    SZ_SET_COOKIE,
    SZ_SOAP_ACTION,
)
from .schemas import is_valid_url

_HTTP_STATUS_OK_MIN: Final[int] = 200
_HTTP_STATUS_OK_MAX: Final[int] = 299

_LOGGER = logging.getLogger(__name__)


def _cookie_name(cookie: str) -> str:
    return cookie.partition("=")[0].strip()


def merge_cookies(cookies: list[str], set_cookies: Iterable[str]) -> list[str]:
    """Merge Set-Cookie header values into a list of cookies (in place).

    Only the name=value pair of each Set-Cookie is kept (not its attributes). A cookie
    with an already-known name replaces the old value in its original position.
    """

    for value in set_cookies:
        cookie = value.split(";", 1)[0].strip()
        if not cookie:
            continue

        name = _cookie_name(cookie)
        for idx, old in enumerate(cookies):
            if _cookie_name(old) == name:
                cookies[idx] = cookie
                break
        else:
            cookies.append(cookie)

    return cookies


class SoapTransport:
    """The HTTP exchange of a single logical session, including its cookies.

    At most one request is expected to be in flight at a time.
    """

    def __init__(
        self,
        main_url: str,
        client_session: aiohttp.ClientSession | None = None,
    ) -> None:
        """Create a transport to the endpoint.

        An injected client_session must not have a cookie jar of its own (i.e. it
        must use aiohttp.DummyCookieJar), as the cookies belong to this transport.
        """

        if client_session is not None and not isinstance(
            client_session.cookie_jar, aiohttp.DummyCookieJar
        ):
            raise exc.ConfigError(
                "An injected client session must use aiohttp.DummyCookieJar"
            )

        self.main_url = main_url
        self.cookies: list[str] = []

        self._client_session = client_session
        self._is_session_owner = client_session is None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(main_url={self.main_url!r})"

    def _url(self) -> str:
        if not is_valid_url(self.main_url):
            raise exc.ConfigError(f"Invalid endpoint URL: {self.main_url!r}")
        return self.main_url

    def _headers(self, action: str) -> dict[str, str]:
        headers = {
            SZ_SOAP_ACTION: SOAP_URL + action,
            SZ_CONTENT_TYPE: CONTENT_TYPE,
        }
        if self.cookies:
            headers[SZ_COOKIE] = "; ".join(self.cookies)
        return headers

    def _get_client_session(self) -> aiohttp.ClientSession:
        if self._client_session is not None and self._client_session.closed:
            if not self._is_session_owner:
                raise exc.TransportError("The injected client session is closed")
            self._client_session = None

        if self._client_session is None:
            self._client_session = aiohttp.ClientSession(
                cookie_jar=aiohttp.DummyCookieJar()
            )
        return self._client_session

    async def post(self, action: str, data: bytes) -> bytes:
        """POST the envelope for the action, and return the raw response body.

        Raise a ConfigError if the endpoint is malformed (before any I/O), and a
        TransportError if the exchange fails, or if the status is not 2xx.
        """

        url = self._url()
        headers = self._headers(action)

        try:
            async with self._get_client_session().post(
                url, data=data, headers=headers
            ) as resp:
                if not _HTTP_STATUS_OK_MIN <= resp.status <= _HTTP_STATUS_OK_MAX:
                    raise exc.TransportError(
                        f"{action}: HTTP status {resp.status} ({resp.reason})",
                        status=resp.status,
                    )

                merge_cookies(self.cookies, resp.headers.getall(SZ_SET_COOKIE, []))
                return await resp.read()

        except (aiohttp.ClientError, TimeoutError) as err:
            raise exc.TransportError(f"{action}: {err!r}") from err

    async def close(self) -> None:
        """Close the HTTP client session, if it was created by this transport."""

        if self._is_session_owner and self._client_session is not None:
            await self._client_session.close()
            self._client_session = None
