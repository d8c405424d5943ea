"""Trace the network path to an IPv4 host with UDP probes and ICMP replies."""

__version__ = "0.1.0"
__all__ = ["__version__"]