"""Decode UDP datagram headers and payloads from raw bytes, and receive one datagram."""

__version__ = "0.1.0"
__all__ = ["datagram", "receiver"]