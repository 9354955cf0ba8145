#!/usr/bin/env python3
"""Fixtures for testing against an (in-process) fake Vitotrol server."""

import dataclasses
from collections.abc import AsyncGenerator, Mapping

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from common import envelope
from vitotrol import Session
from vitotrol.schemas import SZ_MAIN_URL, SZ_POLL_INTERVAL
from vitotrol_tx.transport import SoapTransport


@dataclasses.dataclass
class RecordedRequest:
    headers: Mapping[str, str]  # case-insensitive
    body: bytes


@dataclasses.dataclass
class CannedReply:
    body: bytes
    status: int = 200
    set_cookies: tuple[str, ...] = ()


class FakeVitotrolServer:
    """A SOAP server that records each request, and replies with canned responses.

    Replies are used in the order they were queued, but the last one is used for any
    further requests. The cookies of a request are echoed back (as Set-Cookie),
    unless echo_cookies is False.
    """

    def __init__(self) -> None:
        self.requests: list[RecordedRequest] = []
        self.echo_cookies = True

        self._replies: list[CannedReply] = []

        app = web.Application()
        app.router.add_post("/", self._handle)
        self._server = TestServer(app)

    @property
    def url(self) -> str:
        return str(self._server.make_url("/"))

    async def start(self) -> None:
        await self._server.start_server()

    async def close(self) -> None:
        await self._server.close()

    def reply(
        self,
        body: str,
        /,
        *,
        status: int = 200,
        set_cookies: tuple[str, ...] = (),
        raw: bool = False,
    ) -> None:
        """Queue a reply (the body is wrapped in a SOAP envelope, unless raw)."""

        self._replies.append(
            CannedReply(
                body=body.encode("utf-8") if raw else envelope(body),
                status=status,
                set_cookies=set_cookies,
            )
        )

    async def _handle(self, request: web.Request) -> web.Response:
        self.requests.append(
            RecordedRequest(headers=request.headers.copy(), body=await request.read())
        )

        assert self._replies, "no reply has been queued"
        reply = self._replies.pop(0) if len(self._replies) > 1 else self._replies[0]

        resp = web.Response(
            status=reply.status,
            body=reply.body,
            headers={"Content-Type": "text/xml; charset=utf-8"},
        )

        if self.echo_cookies and (cookie := request.headers.get("Cookie")):
            for value in cookie.split(";"):
                resp.headers.add("Set-Cookie", value.strip())
        for value in reply.set_cookies:
            resp.headers.add("Set-Cookie", value)

        return resp


#######################################################################################


@pytest.fixture()
async def server() -> AsyncGenerator[FakeVitotrolServer, None]:
    """Utilize a fake Vitotrol server."""

    server = FakeVitotrolServer()
    await server.start()

    try:
        yield server
    finally:
        await server.close()


@pytest.fixture()
async def transport(server: FakeVitotrolServer) -> AsyncGenerator[SoapTransport, None]:
    """Utilize a transport to the fake server."""

    transport = SoapTransport(server.url)

    try:
        yield transport
    finally:
        await transport.close()


@pytest.fixture()
async def session(server: FakeVitotrolServer) -> AsyncGenerator[Session, None]:
    """Utilize a session with the fake server (polling without delay)."""

    async with Session({SZ_MAIN_URL: server.url, SZ_POLL_INTERVAL: 0}) as session:
        yield session
