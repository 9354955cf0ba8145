#!/usr/bin/env python3
"""Vitotrol - the SOAP envelope codec (no I/O).

Requests are a fixed envelope header, the caller's body fragment, and a fixed footer.
Responses are located by the structural path of their result element, regardless of
the namespaces (or prefixes) that the server may declare.
"""

from __future__ import annotations

import logging

from lxml import etree

from . import exceptions as exc
from .const import REQ_FOOTER, REQ_HEADER
from .message import ResponseT

_LOGGER = logging.getLogger(__name__)


def _xml_parser() -> etree.XMLParser:
    return etree.XMLParser(resolve_entities=False, no_network=True, huge_tree=False)


def encode(body: str) -> bytes:
    """Wrap a body fragment (already XML) in the SOAP envelope.

    The fragment is not validated.
    """
    return (REQ_HEADER + body + REQ_FOOTER).encode("utf-8")


def parse(raw: bytes) -> etree._Element:
    """Return the root element of a response, or raise a DecodeError."""

    try:
        return etree.fromstring(raw, parser=_xml_parser())
    except etree.XMLSyntaxError as err:
        raise exc.DecodeError(f"Response is not valid XML: {err}") from err


def find_result(root: etree._Element, path: tuple[str, ...]) -> etree._Element:
    """Return the result element at the path below the root element."""

    elem = root.find("/".join(f"{{*}}{p}" for p in path))
    if elem is None:
        raise exc.DecodeError(f"Response has no <{'>'.join(path)}> element")
    return elem


def decode(raw: bytes, response_cls: type[ResponseT]) -> ResponseT:
    """Return the typed response from a raw SOAP envelope."""

    elem = find_result(parse(raw), response_cls.RESULT_PATH)
    return response_cls.from_xml(elem)
