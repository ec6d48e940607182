"""Client for the aircraft state-vector service and the model lookup service."""

from __future__ import annotations

import logging

import requests

from .packet import CALLSIGN_SIZE, ICAO24_SIZE, MODEL_SIZE, FlightInfo

log = logging.getLogger(__name__)

BOUNDING_BOX = {"lamin": 50.83, "lomin": -114.05, "lamax": 50.87, "lomax": -113.97}
TIMEOUT = 30.0


class OpenSkyError(RuntimeError):
    """A request failed or its response could not be read."""


class OpenSkyClient:
    """Looks up the first aircraft inside a bounding box and its model."""

    states_url = "https://opensky.example.com/api/states/all"
    token_url = "https://auth.example.com/protocol/openid-connect/token"
    model_url = "http://models.example.com/api/"

    def __init__(self, client_id: str, client_secret: str, session: requests.Session | None = None):
        self.client_id = client_id
        self.client_secret = client_secret
        self.session = session if session is not None else requests.Session()
        self.bounding_box = dict(BOUNDING_BOX)
        self.token = ""

    def get_token(self) -> str:
        """Fetch a new bearer token with the client-credentials grant."""
        log.info("Getting token")
        form = {
            "grant_type": "client_credentials",
            "client_id": self.client_id,
            "client_secret": self.client_secret,
        }
        try:
            response = self.session.post(self.token_url, data=form, timeout=TIMEOUT)
        except requests.RequestException as exc:
            raise OpenSkyError(f"Request failed: {exc}") from exc
        try:
            payload = response.json()
        except ValueError as exc:
            raise OpenSkyError(f"Token deserialization failed: {exc}") from exc
        token = payload.get("access_token") if isinstance(payload, dict) else None
        if not isinstance(token, str):
            raise OpenSkyError("Token response holds no access_token")
        self.token = token
        return token

    def _fetch_states(self) -> requests.Response:
        return self.session.get(
            self.states_url,
            params=self.bounding_box,
            headers={"Authorization": f"Bearer {self.token}"},
            timeout=TIMEOUT,
        )

    def get_info(self) -> FlightInfo | None:
        """Return the first aircraft in the box, or None if there is none.

        A 401 answer triggers one token refresh and retry.
        """
        log.info("getting info")
        try:
            response = self._fetch_states()
            log.info("Data fetch response code = %d", response.status_code)
            if response.status_code == 401:
                self.get_token()
                response = self._fetch_states()
        except requests.RequestException as exc:
            raise OpenSkyError(f"Request failed: {exc}") from exc
        try:
            data = response.json()
        except ValueError as exc:
            raise OpenSkyError(f"Data deserialization failed: {exc}") from exc

        states = data.get("states") if isinstance(data, dict) else None
        if not states or not isinstance(states, list):
            log.info("States array empty")
            return None
        first = states[0]
        if not first or not isinstance(first, list):
            log.info("First state vector empty")
            return None
        icao24 = first[0]
        if not isinstance(icao24, str) or not icao24:
            log.info("icao24 is null")
            return None
        callsign = first[1] if len(first) > 1 and isinstance(first[1], str) else ""
        icao24 = icao24[: ICAO24_SIZE - 1]
        return FlightInfo(icao24, callsign[: CALLSIGN_SIZE - 1], self.get_model(icao24))

    def get_model(self, icao24: str) -> str:
        """Return the aircraft model for a transponder address, or "" on failure."""
        url = self.model_url + icao24.upper()[: ICAO24_SIZE - 1]
        log.info(url)
        try:
            response = self.session.get(url, timeout=TIMEOUT)
        except requests.RequestException as exc:
            log.warning("Model Request failed: %s", exc)
            return ""
        return response.content[: MODEL_SIZE - 1].decode("latin-1")