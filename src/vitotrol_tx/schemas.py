#!/usr/bin/env python3
"""Vitotrol - schema processor for the transport (lower) layer."""

from __future__ import annotations

import logging
from typing import Final, TypedDict
from urllib.parse import urlsplit

import voluptuous as vol

from .const import DEFAULT_MAIN_URL

_LOGGER = logging.getLogger(__name__)


#
# 0/2: Endpoint configuration
SZ_MAIN_URL: Final = "main_url"


class TransportConfigT(TypedDict):
    main_url: str


def is_valid_url(url: str) -> bool:
    """Return True if the URL can be parsed and has a scheme.

    An unsupported scheme is not detected here (it fails later, as a TransportError).
    """

    try:
        parts = urlsplit(url)
    except ValueError:
        return False
    return bool(parts.scheme)


def EndpointUrl() -> vol.All:
    def endpoint_url(node_value: str) -> str:
        if not is_valid_url(node_value):
            raise vol.Invalid(f"not a valid URL: {node_value!r}")
        return node_value

    return vol.All(str, endpoint_url)


#
# 1/2: Transport configuration
def sch_transport_dict_factory() -> dict[vol.Optional, vol.Any]:
    """Return the transport config keys, for extending by the upper layer."""

    return {
        vol.Optional(SZ_MAIN_URL, default=DEFAULT_MAIN_URL): EndpointUrl(),
    }


SCH_TRANSPORT_CONFIG = vol.Schema(
    sch_transport_dict_factory(), extra=vol.PREVENT_EXTRA
)
