"""Console progress spinner for long-running network calls."""

import asyncio
import sys
from typing import TextIO

FRAMES = "-\\|/"
INTERVAL_SECONDS = 0.1


async def spin(stop: asyncio.Event, stream: TextIO, interval: float = INTERVAL_SECONDS) -> None:
    """Draw spinner frames on ``stream`` until ``stop`` is set."""
    try:
        while not stop.is_set():
            for frame in FRAMES:
                if stop.is_set():
                    break
                stream.write(f"\r{frame}")
                stream.flush()
                await asyncio.sleep(interval)
    finally:
        stream.write("\r  \r")
        stream.flush()


class Spinner:
    """Async context manager running ``spin`` as a background task.

    Usage::

        async with Spinner():
            repos = await service.discover()

    Exiting signals the stop event and cancels the task; it does not wait
    for the task to finish.
    """

    def __init__(self, stream: TextIO | None = None, enabled: bool = True) -> None:
        self._stream = stream or sys.stdout
        self._enabled = enabled
        self._stop = asyncio.Event()
        self._task: asyncio.Task | None = None

    async def __aenter__(self) -> "Spinner":
        if self._enabled:
            self._task = asyncio.create_task(spin(self._stop, self._stream))
        return self

    async def __aexit__(self, *exc_info) -> None:
        self._stop.set()
        if self._task is not None:
            self._task.cancel()
