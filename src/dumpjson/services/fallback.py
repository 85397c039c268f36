"""Non-failing wrappers around :func:`deserialize`.

Every failure is treated alike: malformed JSON, null input, and
unconvertible values all take the fallback path. Failures are logged at
debug level and never re-raised.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from dumpjson.domain.values import HostValue
from dumpjson.services.deserializer import TreeObserver, deserialize

logger = logging.getLogger(__name__)


def parse_or_default[T](
    text: str | None, fallback: T, observer: TreeObserver | None = None
) -> HostValue | T:
    """Return the parsed value of *text*, or *fallback* unchanged on any failure."""
    try:
        return deserialize(text, observer)
    except Exception:
        logger.debug("Parse failed, using fallback value", exc_info=True)
        return fallback


def parse_or_compute[T](
    text: str | None, supplier: Callable[[], T], observer: TreeObserver | None = None
) -> HostValue | T:
    """Return the parsed value of *text*, or ``supplier()`` on any failure.

    Errors raised by *supplier* itself propagate.
    """
    try:
        return deserialize(text, observer)
    except Exception:
        logger.debug("Parse failed, computing fallback value", exc_info=True)
    return supplier()


def is_parseable(text: str | None) -> bool:
    """Whether :func:`deserialize` accepts *text*. The parsed value is discarded."""
    try:
        deserialize(text)
    except Exception:
        logger.debug("Text is not parseable", exc_info=True)
        return False
    return True
