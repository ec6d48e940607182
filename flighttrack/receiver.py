"""Receives flight packets and scrolls them across the LED matrix."""

from __future__ import annotations

import argparse
import logging
import socket
import sys
import time
from collections.abc import Callable
from typing import TextIO

from .matrix import Frame, scroll_frames
from .packet import FlightInfo, PacketSizeError

log = logging.getLogger(__name__)


class Receiver:
    """Holds the latest flight packet and scrolls it when asked."""

    def __init__(self, show: Callable[[Frame], None], delay_ms: int = 35, repeats: int = 3) -> None:
        self.show = show
        self.delay_ms = delay_ms
        self.repeats = repeats
        self.incoming: FlightInfo | None = None
        self.new_data = False

    def on_data(self, data: bytes) -> FlightInfo:
        """Accept a packet; raise PacketSizeError if it has the wrong length."""
        info = FlightInfo.from_bytes(data)
        self.incoming = info
        self.new_data = True
        log.info("Received flight info:")
        log.info("ICAO24: %s", info.icao24)
        log.info("Callsign: %s", info.callsign)
        log.info("Model: %s", info.model)
        return info

    def step(self) -> bool:
        """Scroll the pending flight if there is one; return whether it did."""
        if not self.new_data or self.incoming is None:
            return False
        self.new_data = False
        info = self.incoming
        for _ in range(self.repeats):
            for frame in scroll_frames(info.callsign, info.model):
                self.show(frame)
                if self.delay_ms > 0:
                    time.sleep(self.delay_ms / 1000)
            self.show(Frame())
        return True


def _terminal_show(stream: TextIO) -> Callable[[Frame], None]:
    def show(frame: Frame) -> None:
        lines = []
        for y in range(frame.height):
            cells = []
            for x in range(frame.width):
                c = frame.get(x, y)
                cells.append(f"\x1b[38;2;{c.r};{c.g};{c.b}m" + ("#" if (x, y) in frame.pixels else "."))
            lines.append("".join(cells) + "\x1b[0m")
        stream.write("\x1b[H" + "\n".join(lines) + "\n")
        stream.flush()

    return show


def _address(text: str) -> tuple[str, int]:
    host, _, port = text.rpartition(":")
    if not host or not port.isdigit():
        raise argparse.ArgumentTypeError(f"expected host:port, got {text!r}")
    return host, int(port)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Show aircraft overhead on a terminal matrix.")
    parser.add_argument("--listen", type=_address, default=("0.0.0.0", 4210), help="host:port")
    parser.add_argument("--delay-ms", type=int, default=35)
    parser.add_argument("--repeats", type=int, default=3)
    parser.add_argument("--packets", type=int, default=None, help="stop after this many packets")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(message)s", stream=sys.stderr)
    receiver = Receiver(_terminal_show(sys.stdout), args.delay_ms, args.repeats)
    received = 0
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        sock.bind(args.listen)
        try:
            while args.packets is None or received < args.packets:
                data, _ = sock.recvfrom(1024)
                received += 1
                try:
                    receiver.on_data(data)
                except PacketSizeError as exc:
                    log.error("Error: %s", exc)
                    continue
                receiver.step()
        except KeyboardInterrupt:
            pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())