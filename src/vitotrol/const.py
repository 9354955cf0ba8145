#!/usr/bin/env python3
"""Vitotrol - constants for the typed operations."""

from __future__ import annotations

from enum import StrEnum
from typing import Final

from vitotrol_tx.const import (  # noqa: F401
    DEFAULT_MAIN_URL as DEFAULT_MAIN_URL,
    RESULT_OK as RESULT_OK,
    RESULT_OK_TEXT as RESULT_OK_TEXT,
    SOAP_URL as SOAP_URL,
)


class Action(StrEnum):
    """The remote operations (the suffix of their SOAPAction header)."""

    LOGIN = "Login"
    GET_DEVICES = "GetDevices"
    REQUEST_REFRESH_STATUS = "RequestRefreshStatus"
    REQUEST_WRITE_STATUS = "RequestWriteStatus"


#
# Login: the identity of the (emulated) mobile app
APP_ID: Final = "prod"
APP_VERSION: Final = "4.3.1"
APP_OS: Final = "Android"

#
# Status of an asynchronous refresh/write operation (as per RequestXxxStatus)
STATUS_DONE: Final[int] = 4

DEFAULT_POLL_INTERVAL: Final[float] = 1.0  # seconds
DEFAULT_POLL_TIMEOUT: Final[float] = 60.0  # seconds

#
# Element names of the vendor's schema
SZ_APP_ID: Final = "AppId"
SZ_APP_VERSION: Final = "AppVersion"
SZ_PASSWORD: Final = "Passwort"
SZ_OS: Final = "Betriebssystem"
SZ_USERNAME: Final = "Benutzer"

SZ_TECH_VERSION: Final = "TechVersion"
SZ_SALUTATION: Final = "Anrede"
SZ_FIRST_NAME: Final = "Vorname"
SZ_LAST_NAME: Final = "Nachname"

SZ_LOCATION_LIST: Final = "AnlageListe"
SZ_LOCATION: Final = "AnlageV2"
SZ_LOCATION_ID: Final = "AnlageId"
SZ_LOCATION_NAME: Final = "AnlageName"
SZ_LOCATION_SITE: Final = "AnlageStandort"

SZ_DEVICE_LIST: Final = "GeraeteListe"
SZ_DEVICE: Final = "GeraetV2"
SZ_DEVICE_ID: Final = "GeraetId"
SZ_DEVICE_NAME: Final = "GeraetName"
SZ_DEVICE_TYPE: Final = "GeraetTyp"
SZ_HAS_ERROR: Final = "HatFehler"
SZ_IS_CONNECTED: Final = "IstVerbunden"

SZ_CIRCUIT_LIST: Final = "Heizkreise"
SZ_CIRCUIT: Final = "BenutzerHeizkreis"
SZ_CIRCUIT_ID: Final = "HeizkreisId"
SZ_CIRCUIT_NAME: Final = "HeizkreisBezeichnung"
SZ_CIRCUIT_ENABLED: Final = "Benutzerfreigabe"

SZ_UPDATE_ID: Final = "AktualisierungsId"
SZ_STATUS: Final = "Status"
