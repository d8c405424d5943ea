"""Socket setup and host resolution."""

from __future__ import annotations

import socket

DEFAULT_RECV_TIMEOUT_SEC = 5


class ResolveError(Exception):
    """Raised when a host name cannot be resolved to an IPv4 address."""


def open_icmp_socket(timeout: float = DEFAULT_RECV_TIMEOUT_SEC) -> socket.socket:
    """Open a raw ICMP socket that gives up on reads after ``timeout`` seconds."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_RAW, socket.IPPROTO_ICMP)
    sock.settimeout(timeout)
    return sock


def open_udp_socket() -> socket.socket:
    """Open a raw UDP socket; the kernel adds the IP header."""
    return socket.socket(socket.AF_INET, socket.SOCK_RAW, socket.IPPROTO_UDP)


def set_ttl(sock: socket.socket, ttl: int) -> None:
    """Set the time-to-live of outgoing packets."""
    sock.setsockopt(socket.IPPROTO_IP, socket.IP_TTL, ttl)


def resolve_host(host: str) -> str:
    """Return the first IPv4 address of ``host`` in dotted form."""
    try:
        infos = socket.getaddrinfo(host, None, socket.AF_INET, socket.SOCK_RAW)
    except (socket.gaierror, UnicodeError) as exc:
        raise ResolveError(f"{host} Name or service not known") from exc
    if not infos:
        raise ResolveError(f"{host} Name or service not known")
    return infos[0][4][0]