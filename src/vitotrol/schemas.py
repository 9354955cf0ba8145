#!/usr/bin/env python3
"""Vitotrol - schema processor for the session (upper) layer."""

from __future__ import annotations

import logging
from typing import Any, Final

import voluptuous as vol

from vitotrol_tx.schemas import (  # noqa: F401
    SZ_MAIN_URL as SZ_MAIN_URL,
    TransportConfigT,
    sch_transport_dict_factory,
)

from . import exceptions as exc
from .const import DEFAULT_POLL_INTERVAL, DEFAULT_POLL_TIMEOUT

_LOGGER = logging.getLogger(__name__)


#
# 0/2: Session configuration
SZ_DEBUG: Final = "debug"
SZ_POLL_INTERVAL: Final = "poll_interval"
SZ_POLL_TIMEOUT: Final = "poll_timeout"


class SessionConfigT(TransportConfigT):
    debug: bool
    poll_interval: float
    poll_timeout: float


SCH_SESSION_CONFIG = vol.Schema(
    {
        **sch_transport_dict_factory(),
        vol.Optional(SZ_DEBUG, default=False): bool,
        vol.Optional(SZ_POLL_INTERVAL, default=DEFAULT_POLL_INTERVAL): vol.All(
            vol.Coerce(float), vol.Range(min=0)
        ),
        vol.Optional(SZ_POLL_TIMEOUT, default=DEFAULT_POLL_TIMEOUT): vol.All(
            vol.Coerce(float), vol.Range(min=0)
        ),
    },
    extra=vol.PREVENT_EXTRA,
)


#
# 1/2: Validation
def load_session_config(config: dict[str, Any] | None) -> SessionConfigT:
    """Return a validated session config (with defaults), or raise a ConfigError."""

    try:
        return SCH_SESSION_CONFIG(config or {})  # type: ignore[no-any-return]
    except vol.Invalid as err:
        raise exc.ConfigError(f"Invalid session config: {err}") from err
