"""Building the UDP probe datagrams."""

from __future__ import annotations

import struct

DEFAULT_PORT = 33434
SOURCE_PORT = 33434
DEFAULT_PACKET_SIZE = 60
IP_HEADER_SIZE = 20
UDP_HEADER_SIZE = 8

UDP_PACKET_SIZE = DEFAULT_PACKET_SIZE - IP_HEADER_SIZE
PAYLOAD_SIZE = UDP_PACKET_SIZE - UDP_HEADER_SIZE

_HEADER = struct.Struct("!HHHH")
_FIRST_CHAR = ord("@")
_DEL = 127


def fill_payload(length: int) -> bytes:
    """Return the probe payload: characters from '@' up to DEL, repeating."""
    span = _DEL + 1 - _FIRST_CHAR
    return bytes(_FIRST_CHAR + i % span for i in range(length))


def create_udp_packet(sequence: int) -> bytes:
    """Build the UDP header and payload for the probe numbered ``sequence``."""
    port = (DEFAULT_PORT + sequence) & 0xFFFF
    # The checksum is left at zero for the kernel to fill in.
    header = _HEADER.pack(SOURCE_PORT, port, UDP_HEADER_SIZE + PAYLOAD_SIZE, 0)
    return header + fill_payload(PAYLOAD_SIZE)


def destination_port(packet: bytes) -> int:
    """Read the destination port from a UDP header."""
    return _HEADER.unpack_from(packet)[1]


def packet_length(packet: bytes) -> int:
    """Read the length field from a UDP header."""
    return _HEADER.unpack_from(packet)[2]