#!/usr/bin/env python3
"""Vitotrol - the request bodies & response shapes of the typed operations.

Element names (and their nesting) are those of the vendor's fixed schema.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import TYPE_CHECKING, Self

from lxml import etree
from lxml.builder import ElementMaker

from vitotrol_tx.message import (
    Response,
    ResultHeader,
    child_bool,
    child_int,
    child_text,
    children,
    response_path,
)

from . import exceptions as exc
from .const import (
    APP_ID,
    APP_OS,
    APP_VERSION,
    SOAP_URL,
    SZ_APP_ID,
    SZ_APP_VERSION,
    SZ_CIRCUIT,
    SZ_CIRCUIT_ENABLED,
    SZ_CIRCUIT_ID,
    SZ_CIRCUIT_LIST,
    SZ_CIRCUIT_NAME,
    SZ_DEVICE,
    SZ_DEVICE_ID,
    SZ_DEVICE_LIST,
    SZ_DEVICE_NAME,
    SZ_DEVICE_TYPE,
    SZ_FIRST_NAME,
    SZ_HAS_ERROR,
    SZ_IS_CONNECTED,
    SZ_LAST_NAME,
    SZ_LOCATION,
    SZ_LOCATION_ID,
    SZ_LOCATION_LIST,
    SZ_LOCATION_NAME,
    SZ_LOCATION_SITE,
    SZ_OS,
    SZ_PASSWORD,
    SZ_SALUTATION,
    SZ_STATUS,
    SZ_TECH_VERSION,
    SZ_UPDATE_ID,
    SZ_USERNAME,
    Action,
)
from .device import Device

if TYPE_CHECKING:
    from lxml.etree import _Element


_E = ElementMaker(namespace=SOAP_URL, nsmap={None: SOAP_URL})

_LOGGER = logging.getLogger(__name__)


def _to_str(elem: _Element) -> str:
    return etree.tostring(elem, encoding="unicode")


def _field(name: str, value: str) -> _Element:
    """Return an element holding a caller-provided value as its text."""

    try:
        return _E(name, value)
    except ValueError as err:  # e.g. control chars, which XML 1.0 can't hold
        raise exc.ConfigError(f"Invalid value for <{name}>: {err}") from err


########################################################################################
# Request bodies


def login_request(username: str, password: str) -> str:
    return _to_str(
        _E(
            Action.LOGIN,
            _E(SZ_APP_ID, APP_ID),
            _E(SZ_APP_VERSION, APP_VERSION),
            _field(SZ_PASSWORD, password),
            _E(SZ_OS, APP_OS),
            _field(SZ_USERNAME, username),
        )
    )


def get_devices_request() -> str:
    return _to_str(_E(Action.GET_DEVICES))


def request_refresh_status_request(update_id: str) -> str:
    return _to_str(
        _E(Action.REQUEST_REFRESH_STATUS, _field(SZ_UPDATE_ID, update_id))
    )


def request_write_status_request(update_id: str) -> str:
    return _to_str(
        _E(Action.REQUEST_WRITE_STATUS, _field(SZ_UPDATE_ID, update_id))
    )


########################################################################################
# Response shapes


@dataclasses.dataclass(frozen=True, kw_only=True)
class LoginResponse(Response):
    """The profile of the user, which is passed through (but otherwise unused)."""

    RESULT_PATH = response_path(Action.LOGIN)

    tech_version: str = ""
    salutation: str = ""
    first_name: str = ""
    last_name: str = ""

    @classmethod
    def from_xml(cls, elem: _Element) -> Self:
        return cls(
            result=ResultHeader.from_xml(elem),
            tech_version=child_text(elem, SZ_TECH_VERSION),
            salutation=child_text(elem, SZ_SALUTATION),
            first_name=child_text(elem, SZ_FIRST_NAME),
            last_name=child_text(elem, SZ_LAST_NAME),
        )


@dataclasses.dataclass(frozen=True, kw_only=True)
class HeatingCircuit:
    circuit_id: int
    name: str
    is_enabled: bool

    @classmethod
    def from_xml(cls, elem: _Element) -> Self:
        return cls(
            circuit_id=child_int(elem, SZ_CIRCUIT_ID),
            name=child_text(elem, SZ_CIRCUIT_NAME),
            is_enabled=child_bool(elem, SZ_CIRCUIT_ENABLED),
        )


@dataclasses.dataclass(frozen=True, kw_only=True)
class DeviceInfo:
    device_id: int
    name: str
    device_type: int
    has_error: bool
    is_connected: bool
    circuits: tuple[HeatingCircuit, ...] = ()

    @classmethod
    def from_xml(cls, elem: _Element) -> Self:
        return cls(
            device_id=child_int(elem, SZ_DEVICE_ID),
            name=child_text(elem, SZ_DEVICE_NAME),
            device_type=child_int(elem, SZ_DEVICE_TYPE),
            has_error=child_bool(elem, SZ_HAS_ERROR),
            is_connected=child_bool(elem, SZ_IS_CONNECTED),
            circuits=tuple(
                HeatingCircuit.from_xml(e)
                for e in children(elem, SZ_CIRCUIT_LIST, SZ_CIRCUIT)
            ),
        )


@dataclasses.dataclass(frozen=True, kw_only=True)
class LocationInfo:
    location_id: int
    name: str
    site: str
    has_error: bool
    is_connected: bool
    devices: tuple[DeviceInfo, ...] = ()

    @classmethod
    def from_xml(cls, elem: _Element) -> Self:
        return cls(
            location_id=child_int(elem, SZ_LOCATION_ID),
            name=child_text(elem, SZ_LOCATION_NAME),
            site=child_text(elem, SZ_LOCATION_SITE),
            has_error=child_bool(elem, SZ_HAS_ERROR),
            is_connected=child_bool(elem, SZ_IS_CONNECTED),
            devices=tuple(
                DeviceInfo.from_xml(e)
                for e in children(elem, SZ_DEVICE_LIST, SZ_DEVICE)
            ),
        )


@dataclasses.dataclass(frozen=True, kw_only=True)
class GetDevicesResponse(Response):
    RESULT_PATH = response_path(Action.GET_DEVICES)

    locations: tuple[LocationInfo, ...] = ()

    @classmethod
    def from_xml(cls, elem: _Element) -> Self:
        return cls(
            result=ResultHeader.from_xml(elem),
            locations=tuple(
                LocationInfo.from_xml(e)
                for e in children(elem, SZ_LOCATION_LIST, SZ_LOCATION)
            ),
        )

    def devices(self) -> list[Device]:
        """Return a new Device for each device of each location."""

        return [
            Device(
                location_id=loc.location_id,
                location_name=loc.name,
                device_id=dev.device_id,
                device_name=dev.name,
                has_error=dev.has_error,
                is_connected=dev.is_connected,
            )
            for loc in self.locations
            for dev in loc.devices
        ]


@dataclasses.dataclass(frozen=True, kw_only=True)
class _StatusResponse(Response):
    status: int = 0

    @classmethod
    def from_xml(cls, elem: _Element) -> Self:
        return cls(
            result=ResultHeader.from_xml(elem),
            status=child_int(elem, SZ_STATUS, required=True),
        )


@dataclasses.dataclass(frozen=True, kw_only=True)
class RequestRefreshStatusResponse(_StatusResponse):
    RESULT_PATH = response_path(Action.REQUEST_REFRESH_STATUS)


@dataclasses.dataclass(frozen=True, kw_only=True)
class RequestWriteStatusResponse(_StatusResponse):
    RESULT_PATH = response_path(Action.REQUEST_WRITE_STATUS)
