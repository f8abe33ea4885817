import logging
from typing import Any

from transmission import Transmitter

logger = logging.getLogger(__name__)

PROCESSING_ERROR = "Error processing request:"


async def send_guarded(
    res: Transmitter,
    body: Any,
    log: logging.Logger = logger,
    status: int | None = None,
) -> None:
    """Send ``body`` (with ``status`` if given); log and absorb a failed send."""
    try:
        if status is not None:
            res = res.status(status)
        await res.send(body)
    except Exception as exc:
        log.error(f"{PROCESSING_ERROR} %s", exc, exc_info=exc)


async def send_with_fallback(
    res: Transmitter,
    body: Any,
    fallback: Any,
    log: logging.Logger = logger,
    status: int | None = None,
) -> None:
    """Send ``body``; if that fails, log it and send ``fallback`` once.

    The fallback send is not guarded, so a broken transmitter surfaces
    instead of looping.
    """
    try:
        await res.send(body)
    except Exception as exc:
        log.error(f"{PROCESSING_ERROR} %s", exc, exc_info=exc)
        if status is not None:
            res = res.status(status)
        await res.send(fallback)
