#!/usr/bin/env python3
"""Vitotrol - the generic request dispatcher.

Every typed operation is a specialization of send_request(): encode the body, POST it
(with the session's cookies), decode the typed response and check its Result Header.
There is a single attempt per call; any retry policy belongs to the caller.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from . import exceptions as exc
from .envelope import decode, encode
from .message import ResponseT, check_result

if TYPE_CHECKING:
    from .transport import SoapTransport


_LOGGER = logging.getLogger(__name__)


async def send_request(
    transport: SoapTransport,
    action: str,
    body: str,
    response_cls: type[ResponseT],
    debug: bool = False,
) -> ResponseT:
    """Send the action's request body, and return its typed response.

    Raises ConfigError, TransportError, DecodeError, or ApplicationError (the latter
    holds the Result Header of the response).
    """

    data = encode(body)
    _LOGGER.debug("Sending %s to %s", action, transport.main_url)
    if debug:
        _LOGGER.debug("%s request: %s", action, data.decode("utf-8"))

    try:
        raw = await transport.post(action, data)
    except exc.TransportError as err:
        _LOGGER.warning("%s failed: %s", action, err)
        raise

    if debug:
        _LOGGER.debug("%s response: %s", action, raw.decode("utf-8", "replace"))

    try:
        response = decode(raw, response_cls)
    except exc.DecodeError as err:
        _LOGGER.warning("%s response is invalid: %s", action, err)
        raise

    return check_result(response)
