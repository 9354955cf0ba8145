#!/usr/bin/env python3
"""Vitotrol - exceptions above the envelope/dispatcher/transport layer."""

from __future__ import annotations

from vitotrol_tx.exceptions import (  # noqa: F401
    ApplicationError as ApplicationError,
    ConfigError as ConfigError,
    DecodeError as DecodeError,
    TransportError as TransportError,
    VitotrolException as VitotrolException,
)


class _VitotrolUpperError(VitotrolException):
    """A failure in the upper layer (session, devices, status polling)."""


class DeviceNotFound(_VitotrolUpperError):
    """Raised when no known device matches the device (and location) id."""

    HINT = "the list of devices is refreshed by get_devices()"


class StatusTimeout(_VitotrolUpperError):
    """Raised when a refresh/write operation is not done within the poll timeout."""
