"""
Keyproof Background Worker
===========================

QThread-based worker that runs the generate → write → re-read → self-test
pipeline off the GUI thread.  Every pipeline step is forwarded as a signal
so the log panel can follow along; the result or the error message is
emitted once at the end together with the elapsed time.
"""

from __future__ import annotations

import logging
import time
from typing import Optional

from PySide6.QtCore import QThread, Signal

import keygen

logger = logging.getLogger(__name__)


class KeyPairWorker(QThread):
    """Create and verify one key pair in a background thread."""

    step = Signal(str, str)            # (step description, status)
    finished = Signal(object, float)   # (keygen.KeyPairResult, elapsed_sec)
    error = Signal(str, float)         # (error message, elapsed_sec)

    def __init__(
        self,
        directory: str,
        bits: int = keygen.DEFAULT_KEY_SIZE,
        comment: Optional[str] = None,
        parent=None,
    ):
        super().__init__(parent)
        self._directory = directory
        self._bits = bits
        self._comment = comment

    def run(self) -> None:
        t0 = time.perf_counter()
        try:
            result = keygen.create_and_test_key_pair(
                self._directory,
                self._bits,
                self._comment,
                progress_callback=self.step.emit,
            )
        except Exception as exc:
            logger.exception("Key pair run failed.")
            self.error.emit(str(exc), time.perf_counter() - t0)
            return
        self.finished.emit(result, time.perf_counter() - t0)
