"""Propagate HTTP client disconnects to in-flight health probes."""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import Request

from healthboard.shared import get_logger

logger = get_logger(__name__)

DISCONNECT_POLL_SECONDS = 0.25


@asynccontextmanager
async def cancel_on_disconnect(
    request: Request, poll_interval: float = DISCONNECT_POLL_SECONDS
) -> AsyncIterator[asyncio.Event]:
    """
    Yield an event that is set once the client disconnects.

    The watcher polls ``request.is_disconnected()`` until the event is set
    or the block exits.
    """
    cancel_event = asyncio.Event()

    async def _watch() -> None:
        while not cancel_event.is_set():
            if await request.is_disconnected():
                logger.info("http.client_disconnected", path=request.url.path)
                cancel_event.set()
                return
            await asyncio.sleep(poll_interval)

    watcher = asyncio.ensure_future(_watch())
    try:
        yield cancel_event
    finally:
        watcher.cancel()
