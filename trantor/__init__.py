"""Networking helpers: 64-bit byte-order conversion, string splitting, an MPSC queue and socket scatter reads."""

__version__ = "1.5.23"
__all__ = ["funcs", "mpsc_queue", "sockio"]