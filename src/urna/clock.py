"""Reloj de la sesión: llama a ``tick()`` periódicamente hasta el cierre.

Session clock: calls ``tick()`` periodically until the session closes.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Optional

from urna.core.models import SessionPhase
from urna.core.session import BallotSession

logger = logging.getLogger(__name__)

TickCallback = Callable[[SessionPhase], None]
ClosedCallback = Callable[[], None]


class SessionClock:
    """Driver de cuenta regresiva en un hilo de fondo.

    Bilingual: Background countdown driver.

    Un tick por ``interval`` segundos; una vez cerrada la sesión no se
    vuelve a programar. La serialización con ``cast_vote`` la garantiza el
    bloqueo de la sesión. Un callback que falla se registra y el reloj
    sigue contando.

    Args:
        session: Sesión a controlar.
        interval: Segundos entre ticks.
        on_tick: Callback opcional tras cada tick con la fase resultante.
        on_closed: Callback opcional, una sola vez, al cerrarse la sesión.

    Raises:
        ValueError: If ``interval`` is not positive.
    """

    def __init__(
        self,
        session: BallotSession,
        interval: float = 1.0,
        *,
        on_tick: Optional[TickCallback] = None,
        on_closed: Optional[ClosedCallback] = None,
    ) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.session = session
        self.interval = float(interval)
        self._on_tick = on_tick
        self._on_closed = on_closed
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None
        self._sync_guard = threading.Lock()

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Inicia el hilo del reloj.

        English: Start the clock thread.

        Raises:
            RuntimeError: If ``run_until_closed`` is driving this clock.
        """
        if self.running:
            return
        if self._sync_guard.locked():
            raise RuntimeError("session clock is already running")
        self._stop.clear()
        self._thread = threading.Thread(
            target=self._loop,
            name=f"ballot-clock-{self.session.session_id[:8]}",
            daemon=True,
        )
        self._thread.start()
        logger.debug("session_clock_started session=%s interval=%s", self.session.session_id, self.interval)

    def stop(self, timeout: float = 2.0) -> None:
        """Detiene el hilo del reloj de forma segura.

        English: Stop the clock thread gracefully.
        """
        self._stop.set()
        if self._thread and self._thread.is_alive() and self._thread is not threading.current_thread():
            self._thread.join(timeout=timeout)

    def join(self, timeout: Optional[float] = None) -> None:
        if self._thread:
            self._thread.join(timeout=timeout)

    def run_until_closed(self) -> None:
        """Variante síncrona: ejecuta el bucle en el hilo actual.

        English: Synchronous variant: run the loop on the calling thread.

        Raises:
            RuntimeError: If another loop is already driving this clock.
        """
        if self.running or not self._sync_guard.acquire(blocking=False):
            raise RuntimeError("session clock is already running")
        try:
            self._stop.clear()
            self._loop()
        finally:
            self._sync_guard.release()

    def _loop(self) -> None:
        if self.session.phase is SessionPhase.CLOSED:
            self._notify_closed()
            return
        while not self._stop.wait(self.interval):
            phase = self.session.tick()
            if self._on_tick is not None:
                self._run_callback("on_tick", self._on_tick, phase)
            if phase is SessionPhase.CLOSED:
                self._notify_closed()
                return

    def _notify_closed(self) -> None:
        logger.info("session_clock_finished session=%s", self.session.session_id)
        if self._on_closed is not None:
            self._run_callback("on_closed", self._on_closed)

    def _run_callback(self, name: str, callback: Callable[..., None], *args: object) -> None:
        # A failing host callback must not stop the countdown.
        try:
            callback(*args)
        except Exception as exc:  # noqa: BLE001
            logger.error(
                "session_clock_callback_failed session=%s callback=%s error=%s",
                self.session.session_id,
                name,
                exc,
                exc_info=True,
            )
