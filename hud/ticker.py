# hud/ticker.py
"""
Collapses the host's many change events into one "recompute requested"
signal carrying a reason tag, plus an async watcher that polls the world
clock and raises that signal whenever the clock moves.
"""
import asyncio
import logging
from typing import Callable, List, Optional

log = logging.getLogger(__name__)

# Reason tags attached to a recompute request
REASON_CLOCK = "clock"
REASON_SCENE = "scene"
REASON_TOKEN = "token"
REASON_COMBAT = "combat"
REASON_PLAYLIST = "playlist"
REASON_SETTINGS = "settings"
REASON_MANUAL = "manual"

REASONS = {REASON_CLOCK, REASON_SCENE, REASON_TOKEN, REASON_COMBAT, REASON_PLAYLIST, REASON_SETTINGS, REASON_MANUAL}

# Subscribers receive the reason tag
ChangeCallback = Callable[[str], None]


class RecomputeChannel:
    """A generic change-notification channel. Subscribers run synchronously."""

    def __init__(self):
        self._callbacks: List[ChangeCallback] = []

    def subscribe(self, callback: ChangeCallback):
        """Subscribe a function to be called on every recompute request."""
        if not callable(callback):
            log.error("Channel subscription failed: %r is not callable.", callback)
            return
        if callback not in self._callbacks:
            self._callbacks.append(callback)
        log.debug("Callback %s subscribed to recompute channel.", getattr(callback, "__name__", callback))

    def unsubscribe(self, callback: ChangeCallback):
        if callback in self._callbacks:
            self._callbacks.remove(callback)
        log.debug("Callback %s unsubscribed from recompute channel.", getattr(callback, "__name__", callback))

    def notify(self, reason: str = REASON_MANUAL):
        """Signal that something changed. A failing subscriber does not stop the others."""
        if reason not in REASONS:
            log.debug("Recompute requested with unrecognised reason '%s'.", reason)
        # Copy the list in case callbacks modify it during dispatch
        for callback in list(self._callbacks):
            try:
                callback(reason)
            except Exception:
                log.exception("Recompute subscriber '%s' failed for reason '%s'.",
                              getattr(callback, "__name__", "unknown callback"), reason)


class ClockWatcher:
    """Polls the host world clock and requests a recompute when it changes."""

    def __init__(self, read_clock: Callable[[], int], channel: RecomputeChannel):
        self.read_clock = read_clock
        self.channel = channel
        self._task: Optional[asyncio.Task] = None
        self._interval_seconds: float = 1.0
        self._last_seen: Optional[int] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self, interval_seconds: float = 1.0):
        """Starts the watcher task if not already running. Needs a running event loop."""
        if self.running:
            log.warning("Clock watcher is already running.")
            return
        if interval_seconds <= 0:
            log.error("Clock watcher interval must be positive. Watcher not started.")
            return

        self._interval_seconds = interval_seconds
        log.info("Starting clock watcher with interval: %.2f seconds.", interval_seconds)
        self._task = asyncio.create_task(self._run(), name="ClockWatcher")

    async def stop(self):
        """Stops the watcher task gracefully."""
        if not self.running:
            log.info("Clock watcher is not running or already stopped.")
            self._task = None
            return

        log.info("Stopping clock watcher...")
        self._task.cancel()
        try:
            await asyncio.wait_for(self._task, timeout=5.0)
        except asyncio.CancelledError:
            log.info("Clock watcher successfully cancelled.")
        except asyncio.TimeoutError:
            log.warning("Clock watcher did not finish cancelling within timeout.")
        finally:
            self._task = None

    def poll(self) -> bool:
        """Reads the clock once. Returns True if it moved and a recompute was requested."""
        current = self.read_clock()
        if current == self._last_seen:
            return False
        self._last_seen = current
        self.channel.notify(REASON_CLOCK)
        return True

    async def _run(self):
        log.debug("Clock watcher loop starting.")
        while True:
            try:
                await asyncio.sleep(self._interval_seconds)
                self.poll()
            except asyncio.CancelledError:
                log.info("Clock watcher loop cancelled.")
                raise
            except Exception:
                # The host may be briefly unavailable, keep polling
                log.exception("Clock watcher encountered unexpected error:")
                await asyncio.sleep(max(5.0, self._interval_seconds))
