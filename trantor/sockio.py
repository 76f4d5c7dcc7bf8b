"""Scatter reads from a socket into a sequence of buffers."""

from __future__ import annotations

import socket
from typing import Iterable


def readv(sock: socket.socket, buffers: Iterable[bytearray | memoryview]) -> int:
    """Read from ``sock`` into each buffer in turn and return the bytes read.

    Each buffer is filled with one receive call. Reading stops at the first
    buffer that is not filled completely. If a receive fails before anything
    was read the error is raised; if some bytes were already read, their
    count is returned instead.
    """
    total = 0
    for buf in buffers:
        view = memoryview(buf).cast("B")
        wanted = len(view)
        try:
            received = sock.recv_into(view, wanted)
        except OSError:
            if total == 0:
                raise
            return total
        total += received
        if received != wanted:
            break
    return total