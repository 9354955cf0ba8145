#!/usr/bin/env python3
"""Vitotrol - a client for the Viessmann Vitotrol SOAP service.

Works with the (heating) devices of a Vitotrol/Vitodata account:
- login, and list the account's devices
- get the status of (asynchronous) refresh & write operations
"""

from __future__ import annotations

import logging

from vitotrol_tx import VERSION  # noqa: F401

from . import exceptions as exc  # noqa: F401
from .const import STATUS_DONE, Action  # noqa: F401
from .device import AttrId, Device, TimesheetId, Timeslot, Value  # noqa: F401
from .messages import (  # noqa: F401
    GetDevicesResponse,
    LoginResponse,
    RequestRefreshStatusResponse,
    RequestWriteStatusResponse,
)
from .session import Session  # noqa: F401

_LOGGER = logging.getLogger(__name__)
