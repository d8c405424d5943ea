"""The traceroute probe loop and its command."""

from __future__ import annotations

import sys
import time
from dataclasses import dataclass
from typing import Sequence, TextIO

from .net import ResolveError, open_icmp_socket, open_udp_socket, resolve_host, set_ttl
from .options import UsageError, parse_options
from .output import (
    print_hop,
    print_response_timeout,
    print_router,
    print_traceroute_info,
    print_trip_time,
)
from .udp import create_udp_packet, destination_port

DEFAULT_MAX_HOPS = 30
DEFAULT_PROBES_PER_HOP = 3
MAX_ICMP_PACKET_SIZE = 1024


@dataclass(frozen=True)
class Response:
    """An ICMP packet received in answer to a probe."""

    address: str
    data: bytes
    received_at: float


class Traceroute:
    """Sends probes with growing TTL and reports the routers that answer."""

    def __init__(self, host, address, send_sock, recv_sock, stream: TextIO | None = None):
        self.host = host
        self.address = address
        self.send_sock = send_sock
        self.recv_sock = recv_sock
        self._stream = stream
        self.packets_sent = 0
        self.send_time = 0.0
        self.last_address: str | None = None

    @property
    def stream(self) -> TextIO:
        return sys.stdout if self._stream is None else self._stream

    def run(self) -> None:
        """Probe hop after hop until the destination answers or the limit is hit."""
        for hop in range(1, DEFAULT_MAX_HOPS + 1):
            set_ttl(self.send_sock, hop)
            self.execute_hop(hop)
            if self.last_address == self.address:
                break

    def execute_hop(self, hop: int) -> None:
        """Send every probe of one hop and write its line."""
        seen: list[str] = []
        print_hop(hop, self.stream)
        for _ in range(DEFAULT_PROBES_PER_HOP):
            self.send_probe()
            response = self.receive_response()
            if response is None:
                print_response_timeout(self.stream)
            else:
                self.process_response(response, seen)
        self.stream.write("\n")
        self.stream.flush()

    def send_probe(self) -> None:
        """Send the next UDP probe to the destination."""
        packet = create_udp_packet(self.packets_sent)
        self.send_time = time.time()
        self.send_sock.sendto(packet, (self.address, destination_port(packet)))
        self.packets_sent += 1

    def receive_response(self) -> Response | None:
        """Wait for an ICMP answer; return None if none came."""
        try:
            data, (address, *_) = self.recv_sock.recvfrom(MAX_ICMP_PACKET_SIZE)
        except OSError:
            return None
        self.last_address = address
        return Response(address=address, data=data, received_at=time.time())

    def process_response(self, response: Response, seen: list) -> None:
        """Write a router (once per hop) and the probe's round trip."""
        if response.address not in seen:
            print_router(response.address, self.stream)
        print_trip_time(self.send_time, response.received_at, self.stream)
        seen.append(response.address)

    def close(self) -> None:
        """Close both sockets."""
        self.send_sock.close()
        self.recv_sock.close()

    def __enter__(self) -> Traceroute:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def _report(label: str, exc: OSError) -> int:
    sys.stderr.write(f"{label}: {exc.strerror or exc}\n")
    return exc.errno or 1


def main(argv: Sequence[str] | None = None) -> int:
    """Trace the route to the host named on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        options = parse_options(args)
    except UsageError as exc:
        sys.stderr.write(str(exc))
        return 1
    try:
        address = resolve_host(options.host)
    except ResolveError as exc:
        sys.stderr.write(f"{exc}\n")
        return 2
    print_traceroute_info(options.host, address)
    try:
        recv_sock = open_icmp_socket()
    except OSError as exc:
        return _report("icmp socket", exc)
    try:
        send_sock = open_udp_socket()
    except OSError as exc:
        recv_sock.close()
        return _report("raw socket", exc)
    try:
        with Traceroute(options.host, address, send_sock, recv_sock) as tracer:
            tracer.run()
    except OSError as exc:
        return _report("traceroute", exc)
    return 0


if __name__ == "__main__":
    sys.exit(main())