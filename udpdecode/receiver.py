"""Receive a single UDP datagram on a local socket and show its raw bytes."""

from __future__ import annotations

import argparse
import socket
import sys

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080
DEFAULT_BUFSIZE = 1024


def _bind_socket(host: str, port: int, timeout: float | None) -> socket.socket:
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    try:
        sock.settimeout(timeout)
        sock.bind((host, port))
    except OSError:
        sock.close()
        raise
    return sock


def _receive_from(
    sock: socket.socket, bufsize: int
) -> tuple[bytes, tuple[str, int]]:
    buffer = bytearray(bufsize)
    size, address = sock.recvfrom_into(buffer)
    return bytes(buffer[:size]), address


def receive_one(
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
    bufsize: int = DEFAULT_BUFSIZE,
    timeout: float | None = None,
) -> tuple[bytes, tuple[str, int]]:
    """Bind to host:port, wait for one datagram and return its bytes and sender."""
    with _bind_socket(host, port, timeout) as sock:
        return _receive_from(sock, bufsize)


def main(argv: list[str] | None = None) -> int:
    """Listen for one datagram and print the whole receive buffer."""
    parser = argparse.ArgumentParser(description="Receive one UDP datagram.")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument("--bufsize", type=int, default=DEFAULT_BUFSIZE)
    parser.add_argument("--timeout", type=float, default=None)
    args = parser.parse_args(argv)

    print("Listening for datagrams...", flush=True)
    try:
        sock = _bind_socket(args.host, args.port, args.timeout)
    except OSError as exc:
        print(f"Error binding to socket: {exc}", file=sys.stderr)
        return 1

    with sock:
        try:
            data, _address = _receive_from(sock, args.bufsize)
        except OSError as exc:
            print(f"Error receiving datagram {exc}", file=sys.stderr)
            return 1

    print(list(data.ljust(args.bufsize, b"\0")))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())