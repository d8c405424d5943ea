import io
import socket

from hoptrace.output import (
    format_trip_time,
    print_hop,
    print_response_timeout,
    print_router,
    print_traceroute_info,
    print_trip_time,
)


def test_banner():
    out = io.StringIO()
    print_traceroute_info("example.com", "192.0.2.7", out)
    assert out.getvalue() == "traceroute to example.com (192.0.2.7)\n"


def test_banner_defaults_to_stdout(capsys):
    print_traceroute_info("example.com", "192.0.2.7")
    assert capsys.readouterr().out == "traceroute to example.com (192.0.2.7)\n"


def test_hop_number_has_no_newline():
    out = io.StringIO()
    print_hop(12, out)
    assert out.getvalue() == "12"


def test_timeout_marker():
    out = io.StringIO()
    print_response_timeout(out)
    print_response_timeout(out)
    assert out.getvalue() == " * *"


def test_router_uses_reverse_name(monkeypatch):
    monkeypatch.setattr(socket, "getnameinfo", lambda sa, flags: ("gw.example.com", "0"))
    out = io.StringIO()
    print_router("192.0.2.1", out)
    assert out.getvalue() == " gw.example.com (192.0.2.1)"


def test_router_falls_back_to_address(monkeypatch):
    def fail(sa, flags):
        raise socket.gaierror(-2, "Name or service not known")

    monkeypatch.setattr(socket, "getnameinfo", fail)
    out = io.StringIO()
    print_router("192.0.2.1", out)
    assert out.getvalue() == " 192.0.2.1 (192.0.2.1)"


def test_trip_time_in_milliseconds():
    assert format_trip_time(1.0, 1.0015) == " 1.500 ms"


def test_zero_trip_time():
    errors = io.StringIO()
    assert format_trip_time(5.0, 5.0, errors) == " 0.000 ms"
    assert errors.getvalue() == ""


def test_clock_going_back_warns_and_clamps():
    errors = io.StringIO()
    assert format_trip_time(2.0, 1.0, errors) == " 0.000 ms"
    assert "Warning: time of day goes back" in errors.getvalue()


def test_print_trip_time_writes_formatted_value():
    out = io.StringIO()
    print_trip_time(3.0, 3.25, out)
    assert out.getvalue() == format_trip_time(3.0, 3.25)