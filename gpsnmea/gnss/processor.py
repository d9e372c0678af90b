"""Stream driver: decode every line of an NMEA source into a handler.

``process`` reads lines one at a time, runs each through ``parse_sentence``,
and hands any decode failure to an error policy::

    with open("track.nmea") as source:
        process(source, handler, on_error=log_errors)

An error policy is a callable ``(line, error) -> object | None``. Returning
None continues with the next line; returning anything else stops the stream
and makes ``process`` return that value. Only ``NMEAError`` failures reach the
policy: errors raised by the source itself (an ``OSError`` from a file or
socket, ``EOFError`` from a gpsd reader) and by the handler's own methods
propagate out of ``process`` unchanged.
"""

import logging
from collections.abc import Callable, Iterable
from typing import Any

from gpsnmea.nmea.errors import NMEAError
from gpsnmea.nmea.registry import parse_sentence

__all__ = ["ErrorPolicy", "ignore_errors", "log_errors", "process"]

logger = logging.getLogger(__name__)

ErrorPolicy = Callable[[str, NMEAError], Any]


def ignore_errors(line: str, error: NMEAError) -> None:
    """Default policy: drop the failed line and continue."""
    return None


def log_errors(line: str, error: NMEAError) -> None:
    """Log the failed line as a warning and continue."""
    logger.warning("On %r: %s", line, error)
    return None


def process(
    lines: Iterable[str],
    handler: Any,
    on_error: ErrorPolicy | None = None,
) -> Any:
    """Decode and dispatch every line of ``lines``.

    Args:
        lines: Any iterable of NMEA text lines, e.g. an open text file,
            ``sys.stdin``, or a ``GPSDLineReader``. Line endings are ignored.
        handler: Object implementing any subset of the handler capabilities.
        on_error: Error policy; ``ignore_errors`` if None.

    Returns:
        None when the source is exhausted, otherwise the first non-None
        value returned by the error policy.
    """
    if on_error is None:
        on_error = ignore_errors

    for line in lines:
        try:
            parse_sentence(line, handler)
        except NMEAError as error:
            decision = on_error(line, error)
            if decision is not None:
                return decision

    return None
