"""Polls for aircraft overhead and sends each new one to the display."""

from __future__ import annotations

import argparse
import itertools
import logging
import os
import socket
import time
from collections.abc import Callable

from .opensky import OpenSkyClient, OpenSkyError
from .packet import FlightInfo

log = logging.getLogger(__name__)


class Transmitter:
    """Forwards each newly seen aircraft that has a callsign."""

    def __init__(
        self,
        source: Callable[[], FlightInfo | None],
        send: Callable[[bytes], None],
    ) -> None:
        self.source = source
        self.send = send
        self.previous_icao24 = ""

    def step(self) -> FlightInfo | None:
        """Poll once; return the aircraft if it is new, else None."""
        try:
            info = self.source()
        except OpenSkyError as exc:
            log.warning("%s", exc)
            return None
        if info is None or not info.icao24 or info.icao24 == self.previous_icao24:
            return None
        log.info("ICAO24: %s", info.icao24)
        if info.callsign:
            log.info("Callsign: %s", info.callsign)
            self.send(info.to_bytes())
        log.info("Model: %s", info.model)
        self.previous_icao24 = info.icao24
        return info


def _address(text: str) -> tuple[str, int]:
    host, _, port = text.rpartition(":")
    if not host or not port.isdigit():
        raise argparse.ArgumentTypeError(f"expected host:port, got {text!r}")
    return host, int(port)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Send aircraft overhead to the display.")
    parser.add_argument("--client-id", default=os.environ.get("FLIGHTTRACK_CLIENT_ID"))
    parser.add_argument("--client-secret", default=os.environ.get("FLIGHTTRACK_CLIENT_SECRET"))
    parser.add_argument("--peer", type=_address, default=("127.0.0.1", 4210), help="host:port")
    parser.add_argument("--interval", type=float, default=5.0, help="seconds between polls")
    parser.add_argument("--count", type=int, default=None, help="stop after this many polls")
    parser.add_argument("--states-url")
    parser.add_argument("--token-url")
    parser.add_argument("--model-url")
    args = parser.parse_args(argv)
    if not args.client_id or not args.client_secret:
        parser.error("client id and client secret are required")

    logging.basicConfig(level=logging.INFO, format="%(message)s")
    client = OpenSkyClient(args.client_id, args.client_secret)
    if args.states_url:
        client.states_url = args.states_url
    if args.token_url:
        client.token_url = args.token_url
    if args.model_url:
        client.model_url = args.model_url
    try:
        client.get_token()
    except OpenSkyError as exc:
        log.error("%s", exc)

    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:

        def send(packet: bytes) -> None:
            try:
                sock.sendto(packet, args.peer)
            except OSError as exc:
                log.warning("Delivery Fail: %s", exc)
            else:
                log.info("Delivery Success")

        transmitter = Transmitter(client.get_info, send)
        polls = itertools.count() if args.count is None else range(args.count)
        try:
            for n in polls:
                if n:
                    time.sleep(args.interval)
                transmitter.step()
        except KeyboardInterrupt:
            pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())