#!/usr/bin/env python3
"""Vitotrol - the Result Header, and the base of all response shapes.

Every response of the service embeds a Result Header (Ergebnis/ErgebnisText). The
dispatcher relies only upon the HasResultHeader capability to decide between success
and an application error, whatever the concrete response shape.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import (
    TYPE_CHECKING,
    ClassVar,
    Final,
    Protocol,
    Self,
    TypeVar,
    runtime_checkable,
)

from . import exceptions as exc
from .const import RESULT_OK, SZ_BODY, SZ_ERGEBNIS, SZ_ERGEBNIS_TEXT

if TYPE_CHECKING:
    from lxml import etree


_TRUE_STRS: Final = ("true", "1")
_FALSE_STRS: Final = ("false", "0", "")

_LOGGER = logging.getLogger(__name__)


def _find(elem: etree._Element, name: str) -> etree._Element | None:
    """Return the first child with the local name, whatever its namespace."""
    return elem.find(f"{{*}}{name}")


def child_text(elem: etree._Element, name: str, default: str = "") -> str:
    """Return the text of a child element, or the default if there is none."""

    child = _find(elem, name)
    if child is None or child.text is None:
        return default
    return str(child.text)


def child_int(
    elem: etree._Element, name: str, default: int = 0, required: bool = False
) -> int:
    """Return the text of a child element as an int."""

    child = _find(elem, name)
    if child is None:
        if required:
            raise exc.DecodeError(f"Missing element <{name}> in <{_tag(elem)}>")
        return default

    try:
        return int((child.text or "").strip())
    except ValueError as err:
        raise exc.DecodeError(
            f"Element <{name}> is not an integer: {child.text!r}"
        ) from err


def child_bool(elem: etree._Element, name: str, default: bool = False) -> bool:
    """Return the text of a child element as a bool (as per xsd:boolean)."""

    child = _find(elem, name)
    if child is None:
        return default

    value = (child.text or "").strip().lower()
    if value in _TRUE_STRS:
        return True
    if value in _FALSE_STRS:
        return False
    raise exc.DecodeError(f"Element <{name}> is not a boolean: {child.text!r}")


def children(elem: etree._Element, *path: str) -> list[etree._Element]:
    """Return all elements at the (namespace-agnostic) path below elem."""
    return list(elem.iterfind("/".join(f"{{*}}{p}" for p in path)))


def _tag(elem: etree._Element) -> str:
    return str(elem.tag).rpartition("}")[2]


def response_path(action: str) -> tuple[str, ...]:
    """Return the path of the result element of an action's response envelope."""
    return (SZ_BODY, f"{action}Response", f"{action}Result")


@dataclasses.dataclass(frozen=True)
class ResultHeader:
    """The success/error indicator embedded in every response."""

    error_num: int = RESULT_OK
    error_str: str = ""

    def __str__(self) -> str:
        return f"{self.error_num}: {self.error_str}"

    @property
    def is_error(self) -> bool:
        return self.error_num != RESULT_OK

    @classmethod
    def from_xml(cls, elem: etree._Element) -> ResultHeader:
        return cls(
            error_num=child_int(elem, SZ_ERGEBNIS, required=True),
            error_str=child_text(elem, SZ_ERGEBNIS_TEXT),
        )


@runtime_checkable
class HasResultHeader(Protocol):
    """A response shape that exposes its embedded Result Header."""

    def result_header(self) -> ResultHeader: ...


_HasResultHeaderT = TypeVar("_HasResultHeaderT", bound=HasResultHeader)


@dataclasses.dataclass(frozen=True, kw_only=True)
class Response:
    """The base of all response shapes, which hold (rather than are) a ResultHeader.

    Subclasses declare where their result element lives in the envelope, and how to
    build themselves from it.
    """

    RESULT_PATH: ClassVar[tuple[str, ...]] = response_path("")

    result: ResultHeader = dataclasses.field(default_factory=ResultHeader)

    def result_header(self) -> ResultHeader:
        return self.result

    @classmethod
    def from_xml(cls, elem: etree._Element) -> Self:
        return cls(result=ResultHeader.from_xml(elem))


ResponseT = TypeVar("ResponseT", bound=Response)


def check_result(response: _HasResultHeaderT) -> _HasResultHeaderT:
    """Return the response if its Result Header is OK, otherwise raise an error."""

    header = response.result_header()
    if header.is_error:
        _LOGGER.warning("Application error: %s", header)
        raise exc.ApplicationError(header)
    return response
