#!/usr/bin/env python3
"""Vitotrol - the devices of an account, as listed by GetDevices.

A device's attributes & timesheets are not provided by GetDevices, so they are created
empty (and are then populated by other operations).
"""

from __future__ import annotations

import dataclasses
from datetime import datetime as dt
from typing import NewType

AttrId = NewType("AttrId", int)
TimesheetId = NewType("TimesheetId", int)


@dataclasses.dataclass
class Value:
    """The value of an attribute, and when it was obtained."""

    value: str
    time: dt | None = None


@dataclasses.dataclass(frozen=True)
class Timeslot:
    """A period of a day's timesheet, as HHMM ints (e.g. 2230)."""

    from_: int
    to: int


TimeslotList = list[Timeslot]


@dataclasses.dataclass
class Device:
    """A device (e.g. a heating controller), and the location where it is installed."""

    location_id: int
    location_name: str
    device_id: int
    device_name: str
    has_error: bool = False
    is_connected: bool = False

    attributes: dict[AttrId, Value] = dataclasses.field(default_factory=dict)
    timesheets: dict[TimesheetId, dict[str, TimeslotList]] = dataclasses.field(
        default_factory=dict
    )

    def __str__(self) -> str:
        return (
            f"{self.device_name} ({self.device_id}) @ "
            f"{self.location_name} ({self.location_id})"
        )
