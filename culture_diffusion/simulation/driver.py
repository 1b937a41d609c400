"""Periodic tick driver and cooperative interrupt handling.

``drive`` stands in for an outer render/event loop: it invokes a per-tick
hook until the hook reports completion and then invokes the shutdown hook
exactly once, even when the loop is left through an exception.
"""

from __future__ import annotations

import signal
import threading
from contextlib import contextmanager
from typing import Callable, Iterator


def drive(tick_hook: Callable[[], bool], exit_hook: Callable[[], object]) -> None:
    """Call ``tick_hook`` until it returns False, then call ``exit_hook``.

    When a tick raises, ``exit_hook`` still runs. If the shutdown fails as
    well, its error is raised with the tick's exception as ``__cause__``.
    """
    try:
        while tick_hook():
            pass
    except BaseException as exc:
        try:
            exit_hook()
        except Exception as exit_exc:
            raise exit_exc from exc
        raise
    exit_hook()


@contextmanager
def interrupt_guard(request_stop: Callable[[], None]) -> Iterator[bool]:
    """Route the first SIGINT to ``request_stop`` for the duration of the block.

    The first Ctrl-C only requests a stop and puts the previous handler back,
    so a second Ctrl-C interrupts the tick in progress. Yields True when the
    handler was installed. Signal handlers can only be installed from the
    main thread; elsewhere the block runs unguarded.
    """
    if threading.current_thread() is not threading.main_thread():
        yield False
        return

    def _handler(signum: int, frame: object) -> None:
        signal.signal(signal.SIGINT, restore)
        request_stop()

    previous = signal.signal(signal.SIGINT, _handler)
    restore = previous if previous is not None else signal.SIG_DFL
    try:
        yield True
    finally:
        signal.signal(signal.SIGINT, restore)
