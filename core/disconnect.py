"""
Client Disconnect Handling

Runs a route's downstream work as a task and cancels it as soon as the
inbound connection goes away, so upstream calls do not outlive the caller.
"""

import asyncio
import logging
from contextlib import suppress
from typing import Awaitable, TypeVar

from fastapi import Request

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ClientDisconnectedError(Exception):
    """Raised when the client went away before the response was ready"""
    status_code = 499
    detail = "Client closed request"


async def _wait_for_disconnect(request: Request) -> None:
    while True:
        message = await request.receive()
        if message["type"] == "http.disconnect":
            return


async def cancel_on_disconnect(request: Request, awaitable: Awaitable[T]) -> T:
    """
    Await `awaitable`, cancelling it if the client disconnects first.

    Call only after the request body has been read; any message received
    afterwards is taken from the connection.

    Raises:
        ClientDisconnectedError: the client disconnected and the work was cancelled
    """
    work = asyncio.ensure_future(awaitable)
    watcher = asyncio.ensure_future(_wait_for_disconnect(request))

    try:
        await asyncio.wait({work, watcher}, return_when=asyncio.FIRST_COMPLETED)
    except asyncio.CancelledError:
        work.cancel()
        watcher.cancel()
        raise

    if work.done():
        watcher.cancel()
        with suppress(asyncio.CancelledError):
            await watcher
        return work.result()

    work.cancel()
    with suppress(asyncio.CancelledError):
        await work
    logger.info(f"Client disconnected from {request.url.path}, downstream work cancelled")
    raise ClientDisconnectedError()


__all__ = ["ClientDisconnectedError", "cancel_on_disconnect"]
