from __future__ import annotations
import sys
import time
from typing import Callable, Optional

from othello.config import AI_THINKING_SPINNER, AI_THINK_DELAY_SEC


def ai_thinking(label: str = "CPU is thinking") -> None:
    """
    Small user-visible delay + optional spinner so CPU moves are not instant.
    """
    if AI_THINK_DELAY_SEC <= 0:
        return

    if not AI_THINKING_SPINNER:
        time.sleep(AI_THINK_DELAY_SEC)
        return

    frames = ["|", "/", "-", "\\"]
    start = time.time()
    i = 0
    while (time.time() - start) < AI_THINK_DELAY_SEC:
        sys.stdout.write(f"\r{label}... {frames[i % len(frames)]}")
        sys.stdout.flush()
        time.sleep(0.08)
        i += 1
    sys.stdout.write("\r" + (" " * (len(label) + 10)) + "\r")
    sys.stdout.flush()


def thinking_scheduler(
    label: str = "CPU is thinking",
    before: Optional[Callable[[], None]] = None,
) -> Callable[[Callable[[], None]], None]:
    """Scheduler for the controller: optional redraw, spinner, then the CPU's move."""
    def schedule(callback: Callable[[], None]) -> None:
        if before is not None:
            before()
        ai_thinking(label)
        callback()

    return schedule
