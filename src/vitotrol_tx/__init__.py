#!/usr/bin/env python3
"""Vitotrol - the SOAP wire layer of the Viessmann Vitotrol client."""

from __future__ import annotations

from .const import DEFAULT_MAIN_URL, SOAP_URL
from .dispatcher import send_request
from .envelope import decode, encode
from .exceptions import (
    ApplicationError,
    ConfigError,
    DecodeError,
    TransportError,
    VitotrolException,
)
from .message import (
    HasResultHeader,
    Response,
    ResultHeader,
    check_result,
    response_path,
)
from .schemas import SCH_TRANSPORT_CONFIG, SZ_MAIN_URL, is_valid_url
from .transport import SoapTransport, merge_cookies
from .version import VERSION

__all__ = [
    "DEFAULT_MAIN_URL",
    "SOAP_URL",
    "VERSION",
    #
    "SCH_TRANSPORT_CONFIG",
    "SZ_MAIN_URL",
    "is_valid_url",
    #
    "decode",
    "encode",
    #
    "HasResultHeader",
    "Response",
    "ResultHeader",
    "check_result",
    "response_path",
    #
    "SoapTransport",
    "merge_cookies",
    "send_request",
    #
    "ApplicationError",
    "ConfigError",
    "DecodeError",
    "TransportError",
    "VitotrolException",
]
