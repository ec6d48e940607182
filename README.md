# flighttrack

flighttrack watches a small patch of sky through an aircraft state-vector
service and shows the aircraft it finds as a banner that scrolls across a
32×8 pixel matrix.

It has two halves:

- a **transmitter**, which polls the state-vector service, looks up the model
  of the first aircraft it finds and sends a fixed-size `FlightInfo` packet
  over UDP whenever a new aircraft with a callsign appears;
- a **receiver**, which listens for those packets and scrolls
  `PLANE OVERHEAD: <callsign> <model>` across the matrix, drawn in the
  terminal, three times by default.

## Installation

```
pip install flighttrack
```

For development and tests:

```
pip install "flighttrack[test]"
pytest
```

## Commands

```
flighttrack-transmit --help
flighttrack-receive --help
```

### flighttrack-transmit

Gets a bearer token with the client-credentials grant, then polls every
`--interval` seconds (default 5). Each poll asks for aircraft inside the
client's bounding box; if the first one found is new and has a callsign, its
packet is sent to `--peer`.

| Option | Default | Meaning |
| --- | --- | --- |
| `--client-id` | `$FLIGHTTRACK_CLIENT_ID` | API client id (required) |
| `--client-secret` | `$FLIGHTTRACK_CLIENT_SECRET` | API client secret (required) |
| `--peer` | `127.0.0.1:4210` | `host:port` to send packets to |
| `--interval` | `5.0` | seconds between polls |
| `--count` | unlimited | stop after this many polls |
| `--states-url` | built-in placeholder | state-vector endpoint |
| `--token-url` | built-in placeholder | token endpoint |
| `--model-url` | built-in placeholder | model lookup prefix; the upper-case ICAO24 address is appended |

The built-in endpoint URLs are placeholders; pass the real ones with the
three `--*-url` options.

### flighttrack-receive

Binds a UDP socket and scrolls each valid packet on the terminal, using
24-bit ANSI colour escapes. Packets of the wrong size are logged and ignored.

| Option | Default | Meaning |
| --- | --- | --- |
| `--listen` | `0.0.0.0:4210` | `host:port` to bind |
| `--delay-ms` | `35` | pause between frames |
| `--repeats` | `3` | times each banner is scrolled |
| `--packets` | unlimited | stop after this many packets |

## Library use

```python
from flighttrack.packet import FlightInfo
from flighttrack.matrix import Topology, scroll_frames

info = FlightInfo(icao24="abc123", callsign="TEST123", model="Example Jet")
packet = info.to_bytes()            # 144 bytes
same = FlightInfo.from_bytes(packet)

topology = Topology(32, 8)
for frame in scroll_frames(same.callsign, same.model, 32, 8):
    pixels = frame.strip(topology)  # colours in LED-strip order
```

- `flighttrack.packet`: `FlightInfo` packs into three NUL-padded fields of
  7, 9 and 128 bytes, each truncated to leave room for its terminator.
  `FlightInfo.from_bytes` raises `PacketSizeError` when a packet is not
  exactly 144 bytes.
- `flighttrack.font`: a 5×7 column font covering A–Z (either case), the
  digits, `-` and `:`. `char_index` and `glyph` return `None` for other
  characters, which are left blank when scrolling.
- `flighttrack.matrix`: `Rgb`, `Frame` (`set`, `get`, `pixels`, `strip`),
  `Topology.map` for a column-major serpentine wiring rotated by 180°, and
  `scroll_frames`, which colours the prefix orange, the callsign cyan and the
  model violet.
- `flighttrack.opensky`: `OpenSkyClient` with `get_token`, `get_info` and
  `get_model`. `get_info` returns `None` when no aircraft is in the
  `bounding_box`, refreshes the token once on an HTTP 401 answer, and raises
  `OpenSkyError` when a request fails or its answer is not JSON. `get_model`
  returns the lookup's response body (at most 127 bytes), or `""` if the
  request fails.
- `flighttrack.transmitter.Transmitter` and `flighttrack.receiver.Receiver`
  hold the polling and display logic of the two commands, with the data
  source, the sender and the display passed in as callables.

## What it does not do

flighttrack does not drive LED hardware: the receiver only draws frames in a
terminal, though `Frame.strip` gives the colours in strip order for any
driver you attach. Packets travel as plain UDP datagrams with no
acknowledgement beyond what the socket reports.