# hoptrace

`hoptrace` lists the routers an IPv4 packet passes through on its way to a host.

It sends UDP probes to the host and raises the time-to-live (TTL) by one for each hop. Routers send ICMP replies back, and `hoptrace` reads them. Each hop gets three probes. Each output line shows:

- the hop number,
- the name and address of each router that answered, shown once per hop,
- the round-trip time of each probe in milliseconds.

A `*` marks a probe that got no reply within five seconds. If a router's address cannot be resolved to a name, the address is printed in place of the name.

The trace stops when either of these happens:

- a reply comes from the destination address itself, or
- 30 hops have been tried.

## Installation

```
pip install .
```

## Usage

`hoptrace` uses raw sockets. It must run as root or with the `CAP_NET_RAW` capability:

```
sudo hoptrace example.com
```

Sample output:

```
traceroute to example.com (203.0.113.10)
1 gateway (192.168.1.1) 1.204 ms 0.998 ms 1.101 ms
2 * * *
3 203.0.113.10 (203.0.113.10) 12.513 ms 12.240 ms 12.377 ms
```

The command takes exactly one argument, which is a host name or an IPv4 address. Exit statuses:

- With any other number of arguments, it prints `Need 1 arguments` to standard error and exits with status 1.
- If the host cannot be resolved, it prints `<host> Name or service not known` and exits with status 2.
- If a socket cannot be opened or used, it prints the error and exits with the system error number.

## What it does not do

The number of hops (30), the probes per hop (3), the reply timeout (5 seconds), the packet size (60 bytes) and the base port (33434) are fixed. No command-line options change them. Only IPv4 is supported. Probes are always UDP.

## Library use

The parts can also be used as a library:

- `hoptrace.options.parse_options(argv)` takes the arguments that follow the program name. It returns an `Options` with a `host`, or raises `UsageError`.
- `hoptrace.net.resolve_host(host)` returns the first IPv4 address of a host, or raises `ResolveError`. The same module has:
  - `open_icmp_socket(timeout)`,
  - `open_udp_socket()`,
  - `set_ttl(sock, ttl)`.
- `hoptrace.udp.create_udp_packet(sequence)` builds the UDP header and payload of a probe. `destination_port` and `packet_length` read fields back from a header.
- `hoptrace.output` holds the functions that write the banner, hop numbers, routers, timeouts and round-trip times. Each writes to the stream it is given, or to standard output if none is given. `format_trip_time` returns the round-trip text as a string instead of writing it.
- `hoptrace.tracer.Traceroute(host, address, send_sock, recv_sock, stream)` runs a trace over sockets you provide. Start it with `run()`. Use it as a context manager so that both sockets are closed.

## Running the tests

```
pip install .[test]
pytest
```