#!/usr/bin/env python3
"""Vitotrol - exceptions within the envelope/dispatcher/transport layer."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .message import ResultHeader


class _VitotrolBaseException(Exception):
    """Base class for all vitotrol exceptions."""

    pass


class VitotrolException(_VitotrolBaseException):
    """Base class for all vitotrol exceptions."""

    HINT: None | str = None

    def __init__(self, *args: object):
        super().__init__(*args)
        self.message: str | None = args[0] if args else None  # type: ignore[assignment]

    def __str__(self) -> str:
        if self.message and self.HINT:
            return f"{self.message} (hint: {self.HINT})"
        if self.message:
            return self.message
        if self.HINT:
            return f"Hint: {self.HINT}"
        return ""


class _VitotrolLowerError(VitotrolException):
    """A failure in the lower layer (envelope, dispatcher, transport)."""


########################################################################################
# Errors detected before any network I/O


class ConfigError(_VitotrolLowerError):
    """The config (usu. the endpoint URL), or a value to be sent, is invalid."""

    HINT = "check the session config (e.g. main_url), and the values being sent"


########################################################################################
# Errors at the transport layer (HTTP)


class TransportError(_VitotrolLowerError):
    """The HTTP exchange failed, or the server replied with a non-2xx status."""

    def __init__(self, *args: object, status: int | None = None):
        super().__init__(*args)
        self.status = status


########################################################################################
# Errors when processing the response payload


class DecodeError(_VitotrolLowerError):
    """The response is not valid XML, or does not have the expected shape."""


class ApplicationError(_VitotrolLowerError):
    """The service's Result Header reported a non-zero error number."""

    def __init__(self, header: ResultHeader):
        super().__init__(f"{header.error_str} (error {header.error_num})")
        self.header = header

    @property
    def error_num(self) -> int:
        return self.header.error_num

    @property
    def error_str(self) -> str:
        return self.header.error_str
