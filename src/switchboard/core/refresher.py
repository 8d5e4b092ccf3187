"""Read cycle driver: periodically reads bound registers from the active device."""

import logging
import threading
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Optional

from switchboard.exceptions import DeviceReadError, ErrorContext, ExecutionError
from switchboard.protocols import FrameworkEvent

if TYPE_CHECKING:
    from .framework import Framework

logger = logging.getLogger(__name__)


class Refresher:
    """
    Delivers read snapshots to a framework.

    Each cycle reads every register referenced by a read or hybrid
    binding from the active device, fires `refresh` with the snapshot and
    passes it to `Framework.on_read`. Read failures are fired on
    `refresh_error`; the loop keeps running. An `ExecutionError` stops it.
    """

    def __init__(self, framework: "Framework"):
        self._framework = framework
        self._running = False
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self.cycles = 0

    @property
    def interval(self) -> float:
        """Seconds between cycles, from the framework's current refresh rate."""
        return self._framework.refresh_rate / 1000.0

    @property
    def is_running(self) -> bool:
        return self._running

    def tick(self) -> Optional[Mapping[str, Any]]:
        """
        Run one read cycle.

        Returns:
            The snapshot delivered, or None when no device is selected or the read failed
        """
        framework = self._framework
        with framework.lock:
            device = framework.get_selected_device()
            registers = list(dict.fromkeys(r.binding for r in framework.bindings.read_bindings()))

        if device is None:
            logger.debug("No device selected, skipping read cycle")
            return None

        try:
            snapshot = dict(device.read(registers)) if registers else {}
        except Exception as e:
            error = DeviceReadError(registers, str(e))
            error.__cause__ = e
            framework.report_error(FrameworkEvent.REFRESH_ERROR, error)
            return None

        with framework.lock:
            framework.fire(FrameworkEvent.REFRESH, snapshot)
            framework.on_read(snapshot)
        self.cycles += 1
        return snapshot

    def start(self) -> None:
        """Start reading on a daemon thread."""
        if self._running:
            logger.warning("Refresher is already running")
            return

        self._running = True
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._run, name="switchboard-refresh", daemon=True)
        self._thread.start()
        logger.debug(f"Refresher started (every {self._framework.refresh_rate} ms)")

    def stop(self) -> None:
        """Stop the read loop and wait for the thread to finish."""
        self._running = False
        self._stop_event.set()
        if self._thread and self._thread.is_alive() and self._thread is not threading.current_thread():
            self._thread.join(timeout=max(1.0, self.interval * 2))
        self._thread = None
        logger.debug("Refresher stopped")

    def _run(self) -> None:
        while self._running:
            with ErrorContext("run read cycle", logger_instance=logger, re_raise=False) as ctx:
                self.tick()

            if isinstance(ctx.error, ExecutionError):
                logger.error("Stopping refresher after execution error")
                self._running = False
                break

            if self._stop_event.wait(self.interval):
                break
