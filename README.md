# udpdecode

A small toolkit for looking inside UDP datagrams. It reads the 8-byte header
(source port, destination port, length, checksum) and the payload that follows
it from raw bytes, and it can wait for one datagram on a local socket and show
the bytes that arrived.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Command-line use

### `udpdecode`

With no argument, decodes the built-in sample datagram and prints its header
fields (the checksum in binary) and the message it carries:

```
udpdecode
```

Give a datagram as a hexadecimal string to decode that instead (spaces between
byte pairs are allowed):

```
udpdecode "cfb3 0035 000c abcd 74657374"
```

If the bytes cannot be read as a datagram, the command prints
`Failed to parse datagram: ...` and exits with status 1. A string that is not
hexadecimal is rejected as a usage error.

### `udpdecode-listen`

Binds a UDP socket, waits for a single datagram and prints the receive buffer
as a list of byte values (the datagram's bytes, padded with zeros to the
buffer size):

```
udpdecode-listen
```

Options:

- `--host` – address to bind to (default `127.0.0.1`)
- `--port` – port to bind to (default `8080`)
- `--bufsize` – receive buffer size in bytes (default `1024`)
- `--timeout` – seconds to wait before giving up (default: wait forever)

If the socket cannot be bound or receiving fails (including a timeout), an
error is printed to standard error and the command exits with status 1.

## Library use

```python
from udpdecode.datagram import UdpDatagram, DatagramError

raw = bytes([
    0xCF, 0xB3,  # source port 53171
    0x00, 0x35,  # destination port 53
    0x00, 0x0C,  # length 12
    0xAB, 0xCD,  # checksum
]) + b"test"

datagram = UdpDatagram.from_bytes(raw)
print(datagram.source, datagram.destination, datagram.length)  # 53171 53 12
print(datagram.payload_text())  # "test"
print(str(datagram))            # "test"

try:
    UdpDatagram.from_bytes(raw[:7])
except DatagramError as exc:
    print("not a datagram:", exc)
```

- `UdpDatagram` is a frozen dataclass with `source` and `destination`
  (`Port` values), `length`, `checksum` and `payload` (bytes).
- `UdpDatagram.from_bytes` accepts `bytes`, `bytearray` or `memoryview`. The
  payload is taken from byte 8 up to the length given in the header. It raises
  `DatagramError` (a `ValueError`) when fewer than eight bytes are given, when
  the length field is smaller than the 8-byte header, or when it is larger
  than the bytes available.
- `payload_text()` decodes the payload strictly as UTF-8 and raises
  `DatagramError` if it is not valid UTF-8; `str()` decodes it with invalid
  bytes replaced.
- `Port` wraps a port number and rejects values outside 0–65535. It converts
  with `int()` and `str()` and can be compared and sorted.

To receive one datagram from code, call
`udpdecode.receiver.receive_one(host="127.0.0.1", port=8080, bufsize=1024, timeout=None)`.
It binds a UDP socket, waits for one packet and returns a tuple of the bytes
received and the sender's address. Socket errors, including timeouts, are
raised as `OSError`.

## What it does not do

The checksum is read and reported but never verified, and nothing here builds
or sends datagrams: the package only decodes bytes it is given and receives a
single packet.