# zfinder/core/dispatch.py

import logging
import queue
from typing import Callable

logger = logging.getLogger(__name__)


class QueueDispatcher:
    """
    A FIFO hand-off onto the single context that owns UI state.

    Any thread may `post` a callback. Callbacks only run when the owning
    context calls `run_pending`, one at a time and in the order they were
    posted. The GUI uses `zfinder.gui.dispatcher.QtDispatcher` instead, which
    offers the same `post` method on top of the Qt event loop.
    """

    def __init__(self):
        self._tasks: "queue.Queue[Callable[[], None]]" = queue.Queue()

    def post(self, callback: Callable[[], None]):
        """Enqueues a callback. Safe to call from any thread; never blocks."""
        self._tasks.put(callback)

    def pending(self) -> int:
        """The number of callbacks waiting to run."""
        return self._tasks.qsize()

    def run_pending(self) -> int:
        """
        Runs queued callbacks until the queue is empty.

        Callbacks posted while draining run in the same call, after
        everything that was already queued.

        Returns:
            The number of callbacks that ran.
        """
        ran = 0
        while True:
            try:
                callback = self._tasks.get_nowait()
            except queue.Empty:
                break
            callback()
            ran += 1
        if ran:
            logger.debug(f"Dispatcher ran {ran} pending task(s).")
        return ran
