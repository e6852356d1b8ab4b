"""
Completion-style adapters.

Every operation is written once as a coroutine function. ``callbackify``
turns such a function into one that reports its outcome through a
node-style ``callback(error, result)`` instead of an awaitable.
"""

from __future__ import annotations
import asyncio
import functools
import logging
from typing import Any, Awaitable, Callable, Optional, Set

logger = logging.getLogger(__name__)

Callback = Callable[[Optional[BaseException], Any], Any]

# Strong references to scheduled tasks so they are not collected mid-flight
_pending_tasks: Set[asyncio.Task] = set()


def _deliver(callback: Callback, task: asyncio.Task) -> None:
    if task.cancelled():
        callback(asyncio.CancelledError(), None)
        return
    error = task.exception()
    if error is not None:
        callback(error, None)
    else:
        callback(None, task.result())


def callbackify(fn: Callable[..., Awaitable[Any]]) -> Callable[..., None]:
    """
    Adapt a coroutine function to the completion-callback style.

    The returned function takes the same arguments as ``fn`` plus a trailing
    callback. The callback is invoked exactly once with ``(error, None)`` or
    ``(None, result)``.

    When called from inside a running event loop the coroutine is scheduled
    as a task and the callback fires when the task is done, never before the
    call returns. With no running loop the coroutine is driven to completion
    with ``asyncio.run`` and the callback fires before the call returns.

    Exceptions raised by the callback itself are not fed back into it.
    """

    @functools.wraps(fn)
    def wrapper(*args: Any) -> None:
        if not args or not callable(args[-1]):
            raise TypeError("The last argument must be a callable callback")
        *call_args, callback = args

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            loop = None

        if loop is not None:
            task = loop.create_task(fn(*call_args))
            _pending_tasks.add(task)
            task.add_done_callback(_pending_tasks.discard)
            task.add_done_callback(functools.partial(_deliver, callback))
            return None

        try:
            result = asyncio.run(fn(*call_args))
        except Exception as e:
            logger.debug(f"{fn.__name__} failed, reporting through callback: {e!r}")
            error: Optional[BaseException] = e
            result = None
        else:
            error = None
        callback(error, result)
        return None

    return wrapper


__all__ = ["callbackify", "Callback"]
