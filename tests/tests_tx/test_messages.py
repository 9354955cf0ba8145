#!/usr/bin/env python3
"""Vitotrol - Test the request bodies & response shapes of the typed operations."""

import pytest
from lxml import etree

from common import GET_DEVICES_RESPONSE, LOGIN_RESPONSE, envelope, status_response
from vitotrol import exc
from vitotrol.const import SOAP_URL, Action
from vitotrol.device import Device
from vitotrol.messages import (
    DeviceInfo,
    GetDevicesResponse,
    HeatingCircuit,
    LocationInfo,
    LoginResponse,
    RequestRefreshStatusResponse,
    RequestWriteStatusResponse,
    get_devices_request,
    login_request,
    request_refresh_status_request,
    request_write_status_request,
)
from vitotrol_tx.envelope import decode


def _fields(body: str) -> tuple[str, dict[str, str]]:
    elem = etree.fromstring(body)
    assert etree.QName(elem).namespace == SOAP_URL
    return (
        etree.QName(elem).localname,
        {etree.QName(e).localname: e.text or "" for e in elem},
    )


# ### REQUESTS ########################################################################


def test_login_request() -> None:
    tag, fields = _fields(login_request("joe", "s3cr3t"))

    assert tag == "Login"
    assert list(fields) == [  # the order of the vendor's schema
        "AppId",
        "AppVersion",
        "Passwort",
        "Betriebssystem",
        "Benutzer",
    ]
    assert fields["Benutzer"] == "joe"
    assert fields["Passwort"] == "s3cr3t"


def test_get_devices_request() -> None:
    assert _fields(get_devices_request()) == ("GetDevices", {})


@pytest.mark.parametrize(
    "build,action",
    [
        (request_refresh_status_request, Action.REQUEST_REFRESH_STATUS),
        (request_write_status_request, Action.REQUEST_WRITE_STATUS),
    ],
)
def test_status_requests(build, action: Action) -> None:  # type: ignore[no-untyped-def]
    assert _fields(build("5<6")) == (action, {"AktualisierungsId": "5<6"})


# ### RESPONSES #######################################################################


def test_login_response() -> None:
    resp = decode(envelope(LOGIN_RESPONSE), LoginResponse)

    assert resp.tech_version == "2.5.6.0"
    assert resp.salutation == "1"
    assert resp.first_name == "Maxime"
    assert resp.last_name == "Soulé"


def test_get_devices_response() -> None:
    resp = decode(envelope(GET_DEVICES_RESPONSE), GetDevicesResponse)

    assert resp.locations == (
        LocationInfo(
            location_id=31456,
            name="Paris",
            site="Paris",
            has_error=False,
            is_connected=True,
            devices=(
                DeviceInfo(
                    device_id=40213,
                    name="VT 200 (HO1C)",
                    device_type=350,
                    has_error=True,
                    is_connected=True,
                    circuits=(
                        HeatingCircuit(
                            circuit_id=19179,
                            name="viessmann.eventtypegroupHC.name.VScotHO1_72~HC1",
                            is_enabled=True,
                        ),
                    ),
                ),
            ),
        ),
    )


def test_get_devices_flattened() -> None:
    """Devices are flattened across locations, and use the device's own flags."""

    xml = """<GetDevicesResponse><GetDevicesResult>
  <Ergebnis>0</Ergebnis><ErgebnisText>Kein Fehler</ErgebnisText>
  <AnlageListe>
    <AnlageV2>
      <AnlageId>1</AnlageId><AnlageName>Paris</AnlageName>
      <GeraeteListe>
        <GeraetV2><GeraetId>11</GeraetId><GeraetName>A</GeraetName></GeraetV2>
        <GeraetV2>
          <GeraetId>12</GeraetId><GeraetName>B</GeraetName>
          <HatFehler>1</HatFehler><IstVerbunden>0</IstVerbunden>
        </GeraetV2>
      </GeraeteListe>
      <HatFehler>false</HatFehler><IstVerbunden>true</IstVerbunden>
    </AnlageV2>
    <AnlageV2>
      <AnlageId>2</AnlageId><AnlageName>Lyon</AnlageName>
      <GeraeteListe>
        <GeraetV2>
          <GeraetId>21</GeraetId><GeraetName>C</GeraetName>
          <IstVerbunden>true</IstVerbunden>
        </GeraetV2>
      </GeraeteListe>
    </AnlageV2>
  </AnlageListe>
</GetDevicesResult></GetDevicesResponse>"""

    devices = decode(envelope(xml), GetDevicesResponse).devices()

    assert devices == [
        Device(location_id=1, location_name="Paris", device_id=11, device_name="A"),
        Device(
            location_id=1,
            location_name="Paris",
            device_id=12,
            device_name="B",
            has_error=True,
            is_connected=False,
        ),
        Device(
            location_id=2,
            location_name="Lyon",
            device_id=21,
            device_name="C",
            is_connected=True,
        ),
    ]


def test_get_devices_bad_bool() -> None:
    xml = GET_DEVICES_RESPONSE.replace("<HatFehler>true", "<HatFehler>maybe")

    with pytest.raises(exc.DecodeError):
        decode(envelope(xml), GetDevicesResponse)


def test_status_responses() -> None:
    resp = decode(
        envelope(status_response(Action.REQUEST_REFRESH_STATUS, 3)),
        RequestRefreshStatusResponse,
    )
    assert resp.status == 3

    resp2 = decode(
        envelope(status_response(Action.REQUEST_WRITE_STATUS, 4)),
        RequestWriteStatusResponse,
    )
    assert resp2.status == 4


def test_status_response_wrong_action() -> None:
    """A response for another action does not have the expected result element."""

    with pytest.raises(exc.DecodeError):
        decode(
            envelope(status_response(Action.REQUEST_WRITE_STATUS, 4)),
            RequestRefreshStatusResponse,
        )


def test_status_response_missing_status() -> None:
    """A status response without its Status is a shape mismatch (not status 0)."""

    xml = (
        "<RequestRefreshStatusResponse><RequestRefreshStatusResult>"
        "<Ergebnis>0</Ergebnis><ErgebnisText>Kein Fehler</ErgebnisText>"
        "</RequestRefreshStatusResult></RequestRefreshStatusResponse>"
    )

    with pytest.raises(exc.DecodeError):
        decode(envelope(xml), RequestRefreshStatusResponse)


@pytest.mark.parametrize(
    "build",
    [
        lambda v: login_request(v, "123"),
        lambda v: login_request("joe", v),
        request_refresh_status_request,
        request_write_status_request,
    ],
)
def test_requests_invalid_chars(build) -> None:  # type: ignore[no-untyped-def]
    """Values that XML can't hold (e.g. control chars) are a config error."""

    with pytest.raises(exc.ConfigError):
        build("bad\x01value")
