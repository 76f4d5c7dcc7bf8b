# trantor

A few small building blocks for network code.

## Install

```
pip install trantor
```

To run the tests, install the `test` extra and then run `pytest`:

```
pip install "trantor[test]"
pytest
```

## What is in it

### `trantor.funcs`

- `hton64(n)` / `ntoh64(n)`: convert an unsigned 64-bit integer between host
  and network (big-endian) byte order. On a big-endian host the value comes
  back unchanged. Each is its own inverse. A value that is not an `int`
  raises `TypeError`; one outside `0 .. 2**64 - 1` raises `ValueError`.
- `split_string(s, delimiter, accept_empty_string=False)`: split `s` on every
  occurrence of `delimiter`. Empty pieces are dropped unless
  `accept_empty_string` is true. An empty delimiter gives an empty list.

```python
from trantor.funcs import split_string

split_string("trantor::::splitString", "::")        # ['trantor', 'splitString']
split_string("trantor::::splitString", "::", True)  # ['trantor', '', 'splitString']
split_string("", ",")                               # []
split_string("", ",", True)                         # ['']
```

### `trantor.mpsc_queue`

`MpscQueue` is a FIFO queue that any number of threads can put items into
with `enqueue`, while one consumer takes them out with `dequeue`. `empty()`
tells whether anything is waiting, and `len(q)` gives the number of items.
`dequeue` on an empty queue raises `QueueEmpty`.

```python
from trantor.mpsc_queue import MpscQueue, QueueEmpty

q = MpscQueue()
q.enqueue("job")
q.empty()      # False
q.dequeue()    # 'job'
try:
    q.dequeue()
except QueueEmpty:
    pass
```

### `trantor.sockio`

`readv(sock, buffers)` fills a sequence of writable buffers (`bytearray` or
`memoryview`) from a socket, in order, with one receive per buffer. It stops
at the first buffer that is not filled completely and returns the total
number of bytes received. If a receive fails before any data has been read,
the `OSError` is raised; if it fails after some data has arrived, the count
so far is returned.

## What it does not do

This package holds only the helpers above. It has no event loop, no TCP
server or client, no timers, no logging and no TLS support, and it installs
no commands.