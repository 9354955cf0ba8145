#!/usr/bin/env python3
"""Vitotrol - constants for the SOAP wire layer."""

from __future__ import annotations

from typing import Final

# the base of every SOAPAction header, and the namespace of the vendor's elements
SOAP_URL: Final = "http://www.e-controlnet.de/services/vii/"

DEFAULT_MAIN_URL: Final = (
    "http://www.viessmann.com/app_vitodata/VIIWebService-1.16.0.0/iPhoneWebService.asmx"
)

CONTENT_TYPE: Final = "text/xml; charset=utf-8"

REQ_HEADER: Final = (
    '<?xml version="1.0" encoding="utf-8"?>'
    '<soap:Envelope xmlns:soap="http://schemas.xmlsoap.org/soap/envelope/"'
    ' xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance"'
    ' xmlns:xsd="http://www.w3.org/2001/XMLSchema">'
    "<soap:Body>"
)
REQ_FOOTER: Final = "</soap:Body></soap:Envelope>"

#
# HTTP headers
SZ_CONTENT_TYPE: Final = "Content-Type"
SZ_COOKIE: Final = "Cookie"
SZ_SET_COOKIE: Final = "Set-Cookie"
SZ_SOAP_ACTION: Final = "SOAPAction"

#
# Element names shared by every response (the Result Header)
SZ_BODY: Final = "Body"
SZ_ERGEBNIS: Final = "Ergebnis"  # error number, 0 is success
SZ_ERGEBNIS_TEXT: Final = "ErgebnisText"  # error message

RESULT_OK: Final[int] = 0
RESULT_OK_TEXT: Final = "Kein Fehler"
