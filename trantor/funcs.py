"""Small helpers: 64-bit byte-order conversion and string splitting."""

from __future__ import annotations

import sys

_UINT64_MAX = (1 << 64) - 1


def _check_uint64(n: int) -> None:
    if not isinstance(n, int) or isinstance(n, bool):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    if not 0 <= n <= _UINT64_MAX:
        raise ValueError(f"{n} does not fit in an unsigned 64-bit integer")


def hton64(n: int) -> int:
    """Convert an unsigned 64-bit integer from host to network byte order.

    The result is the integer whose in-memory (host order) representation is
    the big-endian encoding of ``n``. On big-endian hosts this is ``n`` itself.
    """
    _check_uint64(n)
    return int.from_bytes(n.to_bytes(8, "big"), sys.byteorder)


def ntoh64(n: int) -> int:
    """Convert an unsigned 64-bit integer from network to host byte order."""
    return hton64(n)


def split_string(
    s: str, delimiter: str, accept_empty_string: bool = False
) -> list[str]:
    """Split ``s`` on ``delimiter``.

    Empty pieces are dropped unless ``accept_empty_string`` is true. An empty
    delimiter yields an empty list.
    """
    if not delimiter:
        return []
    pieces = s.split(delimiter)
    if accept_empty_string:
        return pieces
    return [piece for piece in pieces if piece]