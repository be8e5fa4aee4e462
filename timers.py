# timers.py
# Deferred callbacks owned by a view; closing the view cancels what is pending

import asyncio
import logging

logger = logging.getLogger(__name__)


class TaskScope:
    def __init__(self):
        self._tasks = set()
        self.closed = False

    @property
    def pending(self):
        return len(self._tasks)

    def defer(self, delay, callback, *args):
        """Run ``callback(*args)`` after ``delay`` seconds on the running loop."""
        if self.closed:
            raise RuntimeError("cannot defer on a closed TaskScope")

        async def run():
            await asyncio.sleep(delay)
            if not self.closed:
                callback(*args)

        task = asyncio.get_running_loop().create_task(run())
        self._tasks.add(task)
        task.add_done_callback(self._finished)
        return task

    def _finished(self, task):
        self._tasks.discard(task)
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            logger.error("Deferred callback failed", exc_info=error)

    def cancel_pending(self):
        for task in list(self._tasks):
            task.cancel()

    def close(self):
        self.closed = True
        self.cancel_pending()
