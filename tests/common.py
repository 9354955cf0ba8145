#!/usr/bin/env python3
"""Vitotrol - canned responses & helpers shared by the tests."""

import logging
import warnings

from lxml import etree


warnings.filterwarnings("ignore", category=DeprecationWarning)

logging.disable(logging.WARNING)  # usu. WARNING


RESP_HEADER = (
    '<?xml version="1.0" encoding="utf-8"?>'
    '<soap:Envelope xmlns:soap="http://schemas.xmlsoap.org/soap/envelope/"'
    ' xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance"'
    ' xmlns:xsd="http://www.w3.org/2001/XMLSchema">'
    "<soap:Body>"
)
RESP_FOOTER = "</soap:Body></soap:Envelope>"


def envelope(body: str) -> bytes:
    """Return a response, as the server would send it (note the trailing newline)."""
    return (RESP_HEADER + body + RESP_FOOTER + "\n").encode("utf-8")


def request_fields(raw: bytes, action: str) -> dict[str, str]:
    """Return the {local_name: text} of the children of an action's request element."""

    root = etree.fromstring(raw)
    elem = root.find(f"{{*}}Body/{{*}}{action}")
    assert elem is not None, f"no <Body><{action}> in the request"
    return {etree.QName(e).localname: e.text or "" for e in elem}


#
# sendRequest: a generic action (Test), whose result has an extra field (Pipo)
TEST_BODY = """
<Test>
  <Foo>foo</Foo>
  <Bar>bar</Bar>
</Test>"""

TEST_RESPONSE_OK = """<TestResponse xmlns="http://www/">
  <TestResult>
   <Ergebnis>0</Ergebnis>
   <ErgebnisText>Kein Fehler</ErgebnisText>
   <Pipo>hello</Pipo>
  </TestResult>
</TestResponse>"""

TEST_RESPONSE_ERROR = """<TestResponse xmlns="http://www/">
  <TestResult>
   <Ergebnis>42</Ergebnis>
   <ErgebnisText>ERROR!!!</ErgebnisText>
   <Pipo>hello</Pipo>
  </TestResult>
</TestResponse>"""

BAD_XML = "<bad XML>"


#
# The typed operations
LOGIN_RESPONSE = """<LoginResponse xmlns="http://www.e-controlnet.de/services/vii/">
  <LoginResult>
    <Ergebnis>0</Ergebnis>
    <ErgebnisText>Kein Fehler</ErgebnisText>
    <TechVersion>2.5.6.0</TechVersion>
    <Anrede>1</Anrede>
    <Vorname>Maxime</Vorname>
    <Nachname>Soulé</Nachname>
  </LoginResult>
</LoginResponse>"""

LOGIN_RESPONSE_ERROR = """<LoginResponse xmlns="http://www.e-controlnet.de/services/vii/">
  <LoginResult>
    <Ergebnis>7</Ergebnis>
    <ErgebnisText>Benutzer oder Passwort falsch</ErgebnisText>
  </LoginResult>
</LoginResponse>"""

GET_DEVICES_RESPONSE = """<GetDevicesResponse xmlns="http://www.e-controlnet.de/services/vii/GetDevices">
  <GetDevicesResult>
    <Ergebnis>0</Ergebnis>
    <ErgebnisText>Kein Fehler</ErgebnisText>
    <AnlageListe>
      <AnlageV2>
        <AnlageId>31456</AnlageId>
        <AnlageName>Paris</AnlageName>
        <AnlageStandort>Paris</AnlageStandort>
        <AnlageTyp />
        <GeraeteListe>
          <GeraetV2>
            <GeraetId>40213</GeraetId>
            <GeraetName>VT 200 (HO1C)</GeraetName>
            <GeraetTyp>350</GeraetTyp>
            <Heizkreise>
              <BenutzerHeizkreis>
                <HeizkreisId>19179</HeizkreisId>
                <HeizkreisBezeichnung>viessmann.eventtypegroupHC.name.VScotHO1_72~HC1</HeizkreisBezeichnung>
                <Benutzerfreigabe>true</Benutzerfreigabe>
              </BenutzerHeizkreis>
            </Heizkreise>
            <ViaFreigabe>true</ViaFreigabe>
            <Regelungstype>GWG</Regelungstype>
            <Regelungsadresse>VScotHO1_72</Regelungsadresse>
            <HatFehler>true</HatFehler>
            <IstVerbunden>true</IstVerbunden>
          </GeraetV2>
        </GeraeteListe>
        <VerbindungsTyp />
        <HatFehler>false</HatFehler>
        <IstVerbunden>true</IstVerbunden>
      </AnlageV2>
    </AnlageListe>
  </GetDevicesResult>
</GetDevicesResponse>"""


def status_response(action: str, status: int, error_num: int = 0) -> str:
    """Return the response to a RequestRefreshStatus/RequestWriteStatus."""

    error_str = "Kein Fehler" if error_num == 0 else "Fehler"
    return f"""<{action}Response xmlns="http://www.e-controlnet.de/services/vii/">
  <{action}Result>
    <Ergebnis>{error_num}</Ergebnis>
    <ErgebnisText>{error_str}</ErgebnisText>
    <Status>{status}</Status>
  </{action}Result>
</{action}Response>"""
