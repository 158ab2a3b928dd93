"""Bounded stdin reader.

Claude Code pipes the status JSON to the command and closes stdin. If it
never does, a plain read would hang the prompt, so the read runs on a
background thread and the caller gives up after a deadline.
"""

import time
from queue import Empty, Queue
from threading import Thread
from typing import BinaryIO, Tuple, Union

from .config import DEFAULT_STDIN_TIMEOUT

# How often the waiting side checks that the reader thread is still alive
_POLL_INTERVAL = 0.05


class StdinError(Exception):
    """Standard input could not be read."""

    pass


class StdinReadError(StdinError):
    """Reading or decoding stdin failed."""

    pass


class StdinTimeoutError(StdinError):
    """No complete input arrived before the deadline."""

    pass


class StdinDisconnectedError(StdinError):
    """The reader thread exited without reporting a result."""

    pass


def _read_into(stream: BinaryIO, results: "Queue[Tuple[bool, Union[str, Exception]]]") -> None:
    """Thread target: read the stream to EOF and post the outcome."""
    try:
        text = stream.read().decode("utf-8")
    except (OSError, ValueError) as e:
        # ValueError covers UnicodeDecodeError and reads on a closed stream
        results.put((False, e))
    else:
        results.put((True, text))


def read_stdin_with_timeout(stream: BinaryIO, timeout: float = DEFAULT_STDIN_TIMEOUT) -> str:
    """Read all of a binary stream as UTF-8 text, waiting at most timeout seconds.

    The reader thread is a daemon and is not cancelled when the deadline
    passes; whatever it reads afterwards is dropped.

    Args:
        stream: Binary stream to read (normally stdin's buffer).
        timeout: Maximum time to wait, in seconds.

    Returns:
        The decoded text. May be empty.

    Raises:
        StdinReadError: If the read or UTF-8 decoding fails.
        StdinTimeoutError: If the deadline passes first.
        StdinDisconnectedError: If the reader thread dies without a result.
    """
    results: "Queue[Tuple[bool, Union[str, Exception]]]" = Queue(maxsize=1)
    reader = Thread(target=_read_into, args=(stream, results), name="stdin-reader", daemon=True)
    reader.start()

    deadline = time.monotonic() + timeout
    while True:
        remaining = deadline - time.monotonic()
        if remaining <= 0:
            raise StdinTimeoutError(f"Error: No input received within {timeout:g} seconds")
        try:
            ok, value = results.get(timeout=min(remaining, _POLL_INTERVAL))
            break
        except Empty:
            if reader.is_alive():
                continue
            # The thread may have posted just before exiting
            try:
                ok, value = results.get_nowait()
                break
            except Empty:
                raise StdinDisconnectedError(
                    "Error: stdin reader unexpectedly disconnected"
                ) from None

    if not ok:
        raise StdinReadError(f"Error reading stdin: {value}")
    return value  # type: ignore[return-value]
