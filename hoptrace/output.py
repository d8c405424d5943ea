"""Writing traceroute results."""

from __future__ import annotations

import socket
import sys
from typing import TextIO


def _out(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def print_traceroute_info(host: str, address: str, stream: TextIO | None = None) -> None:
    """Write the banner naming the target and its address."""
    _out(stream).write(f"traceroute to {host} ({address})\n")


def print_hop(hop: int, stream: TextIO | None = None) -> None:
    """Write the hop number that starts a line."""
    _out(stream).write(f"{hop}")


def print_response_timeout(stream: TextIO | None = None) -> None:
    """Write the marker for a probe that got no answer."""
    out = _out(stream)
    out.write(" *")
    out.flush()


def _reverse_lookup(address: str) -> str:
    try:
        host, _ = socket.getnameinfo((address, 0), 0)
    except OSError:
        return address
    return host


def print_router(address: str, stream: TextIO | None = None) -> None:
    """Write the name and address of a router that answered."""
    out = _out(stream)
    out.write(f" {_reverse_lookup(address)} ({address})")
    out.flush()


def format_trip_time(send_time: float, recv_time: float, errors: TextIO | None = None) -> str:
    """Format the round trip between two timestamps given in seconds."""
    interval = round((recv_time - send_time) * 1_000_000)
    if interval < 0:
        err = sys.stderr if errors is None else errors
        err.write(f"Warning: time of day goes back ({interval}us), taking countermeasures")
        interval = 0
    return f" {interval / 1000:.3f} ms"


def print_trip_time(
    send_time: float,
    recv_time: float,
    stream: TextIO | None = None,
    errors: TextIO | None = None,
) -> None:
    """Write the round trip between two timestamps given in seconds."""
    out = _out(stream)
    out.write(format_trip_time(send_time, recv_time, errors))
    out.flush()