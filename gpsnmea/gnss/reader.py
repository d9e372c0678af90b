"""GPSDLineReader: raw NMEA line source backed by gpsd.

Connects to a local gpsd instance over TCP (localhost:2947) instead of
opening the serial port directly, so decoding can coexist with other gpsd
clients (e.g. Chrony time synchronization).

Reading strategy:
    The NMEA watch command makes gpsd pass the receiver's sentences through
    verbatim, one per line. gpsd also writes its own JSON notices (VERSION,
    DEVICES, WATCH) on the same socket; those do not start with '$' and are
    skipped. Every remaining line is yielded stripped of its line ending and
    can be fed straight into ``process``::

        with GPSDLineReader() as source:
            process(source, handler)
"""

import contextlib
import selectors
import socket
from collections.abc import Iterator
from types import TracebackType

__all__ = ["GPSDLineReader"]

# --- gpsd connection defaults -------------------------------------------------

_HOST = "localhost"
_PORT = 2947
_TIMEOUT = 2.0  # select() timeout; determines maximum cancel() latency
_RECV_SIZE = 4096

_WATCH_CMD = b'?WATCH={"enable":true,"nmea":true}\n'


class GPSDLineReader:
    """Context manager yielding raw NMEA sentences from a gpsd stream.

    Iteration ends when gpsd closes the stream or after ``cancel()``.
    A connection failure while reading raises ``EOFError``.

    Args:
        host: gpsd host (default: ``"localhost"``).
        port: gpsd TCP port (default: ``2947``).
    """

    def __init__(
        self,
        host: str = _HOST,
        port: int = _PORT,
    ) -> None:
        """Store connection parameters; the socket is opened in ``__enter__``."""
        self._host = host
        self._port = port
        self._sock: socket.socket | None = None
        self._selector: selectors.BaseSelector | None = None
        self._buffer = b""
        self._cancelled: bool = False

    def __enter__(self) -> "GPSDLineReader":
        """Open the gpsd connection and enable NMEA passthrough."""
        self._sock = socket.create_connection((self._host, self._port))
        try:
            self._sock.sendall(_WATCH_CMD)
            self._selector = selectors.DefaultSelector()
            self._selector.register(self._sock, selectors.EVENT_READ)
        except OSError:
            if self._selector is not None:
                self._selector.close()
                self._selector = None
            self._sock.close()
            self._sock = None
            raise
        self._buffer = b""
        self._cancelled = False
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Close the gpsd connection."""
        if self._selector is not None:
            self._selector.close()
            self._selector = None
        if self._sock is not None:
            self._sock.close()
            self._sock = None

    def cancel(self) -> None:
        """Stop iteration gracefully.

        Sets the cancellation flag and shuts down the socket so that a
        ``read_line()`` waiting for data wakes up immediately, allowing a
        background thread running ``process`` to finish without waiting for
        the next timeout cycle.
        """
        self._cancelled = True
        if self._sock is not None:
            with contextlib.suppress(OSError):
                self._sock.shutdown(socket.SHUT_RDWR)

    def _recv_raw(
        self, sock: socket.socket, selector: selectors.BaseSelector
    ) -> bytes | None:
        """Read one raw line from gpsd.

        The socket stays blocking; ``select`` provides the timeout, so a quiet
        period only costs one retry.

        Returns:
            The line, ``b""`` at end of stream, or ``None`` if no complete
            line arrived within the timeout.

        Raises:
            EOFError: If the connection failed.
        """
        newline = self._buffer.find(b"\n")
        if newline >= 0:
            raw = self._buffer[: newline + 1]
            self._buffer = self._buffer[newline + 1 :]
            return raw

        if not selector.select(_TIMEOUT):
            return None

        try:
            chunk = sock.recv(_RECV_SIZE)
        except OSError as e:
            if self._cancelled:
                return b""
            raise EOFError("gpsd connection closed.") from e

        if not chunk:
            # end of stream; flush an unterminated last line first
            raw, self._buffer = self._buffer, b""
            return raw

        self._buffer += chunk
        return None

    def read_line(self) -> str | None:
        """Block until the next NMEA sentence and return it.

        Returns:
            The sentence without its line ending, or None once the stream
            has ended or the reader was cancelled.

        Raises:
            RuntimeError: If called outside a ``with`` block.
            EOFError: If the connection failed.
        """
        if self._sock is None or self._selector is None:
            raise RuntimeError("GPSDLineReader must be used as a context manager.")
        while not self._cancelled:
            raw = self._recv_raw(self._sock, self._selector)
            if raw is None:
                continue
            if not raw:
                return None
            line = raw.decode("ascii", errors="replace").strip()
            if line.startswith("$"):
                return line
        return None

    def __iter__(self) -> Iterator[str]:
        """Yield NMEA sentences until the stream ends or ``cancel()`` is called."""
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line
