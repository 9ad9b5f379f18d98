"""UDP datagram parsing: header fields and payload."""

from __future__ import annotations

import argparse
import struct
from dataclasses import dataclass

HEADER_LENGTH = 8
_HEADER = struct.Struct("!HHHH")

# Source port 53171, destination port 53 (DNS), length 12, checksum 0xABCD, payload "test".
EXAMPLE_DATAGRAM = bytes.fromhex("cfb3 0035 000c abcd") + b"test"

SECRET_MESSAGE = bytes.fromhex("cfb3 0035 0056 abcd") + (
    b"The sky above the port was the color of a UDP packet, tuned to a dead channel."
)


@dataclass(frozen=True, order=True)
class Port:
    """A 16-bit UDP port number."""

    number: int

    def __post_init__(self) -> None:
        if not 0 <= self.number <= 0xFFFF:
            raise ValueError(f"port number out of range: {self.number}")

    def __int__(self) -> int:
        return self.number

    def __str__(self) -> str:
        return str(self.number)


class DatagramError(ValueError):
    """Raised when bytes cannot be read as a UDP datagram."""


@dataclass(frozen=True)
class UdpDatagram:
    """A UDP datagram: four header fields followed by the payload."""

    source: Port
    destination: Port
    length: int
    checksum: int
    payload: bytes

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | memoryview) -> UdpDatagram:
        """Parse a datagram; the payload spans up to the header's length field."""
        data = bytes(data)
        if len(data) < HEADER_LENGTH:
            raise DatagramError("Too short to be a UDPDatagram")
        source, destination, length, checksum = _HEADER.unpack_from(data)
        if length < HEADER_LENGTH:
            raise DatagramError(
                f"Length field {length} is shorter than the {HEADER_LENGTH}-byte header"
            )
        if length > len(data):
            raise DatagramError(
                f"Length field {length} exceeds the {len(data)} bytes available"
            )
        return cls(
            source=Port(source),
            destination=Port(destination),
            length=length,
            checksum=checksum,
            payload=data[HEADER_LENGTH:length],
        )

    def payload_text(self) -> str:
        """Return the payload decoded strictly as UTF-8."""
        try:
            return self.payload.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise DatagramError("Payload is not valid UTF-8") from exc

    def __str__(self) -> str:
        return self.payload.decode("utf-8", errors="replace")


def main(argv: list[str] | None = None) -> int:
    """Decode a datagram given as hex, or the built-in secret message."""
    parser = argparse.ArgumentParser(description="Decode a UDP datagram.")
    parser.add_argument(
        "hex",
        nargs="?",
        help="datagram bytes as hexadecimal; defaults to the built-in secret message",
    )
    args = parser.parse_args(argv)

    if args.hex is None:
        raw = SECRET_MESSAGE
    else:
        try:
            raw = bytes.fromhex(args.hex)
        except ValueError:
            parser.error(f"not a hexadecimal string: {args.hex!r}")

    print("\n•• Δεcοδιηg Sεcrεt Μεssαgε •••\n")
    try:
        datagram = UdpDatagram.from_bytes(raw)
    except DatagramError as exc:
        print(f"Failed to parse datagram: {exc}")
        return 1

    print(
        f"Source: {datagram.source} Destination: {datagram.destination}, "
        f"Length: {datagram.length}, Checksum: {datagram.checksum:b}"
    )
    print(f"Secret message: {datagram}\n\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())