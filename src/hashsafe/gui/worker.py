"""Background hash worker for the GUI."""

from __future__ import annotations

import logging
import queue
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from hashsafe.constants import CHUNK_SIZE
from hashsafe.io.hash import describe_io_error, sha256_file


@dataclass(frozen=True)
class HashOutcome:
    """Result of one background calculation."""

    path: Path
    digest: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        """Check if the calculation succeeded."""
        return self.error is None


class HashWorker:
    """Runs one hash calculation off the Tk loop."""

    def __init__(
        self,
        chunk_size: int = CHUNK_SIZE,
        hash_func: Callable[[Path, int], str] = sha256_file,
    ):
        """
        Initialize hash worker.

        Args:
            chunk_size: Bytes per read passed to the hash function
            hash_func: Callable(path, chunk_size) returning a hex digest
        """
        self.chunk_size = chunk_size
        self.hash_func = hash_func
        self.thread: Optional[threading.Thread] = None
        self._results: Optional[queue.Queue] = None
        self._cancel: Optional[threading.Event] = None

    def start(self, path: Path) -> None:
        """
        Start a calculation in a background thread.

        Args:
            path: File to hash
        """
        if self.is_running():
            logging.warning("Hash calculation already running")
            return

        results: queue.Queue = queue.Queue(maxsize=1)
        cancel = threading.Event()
        self._results = results
        self._cancel = cancel
        self.thread = threading.Thread(
            target=self._run, args=(Path(path), results, cancel), daemon=True
        )
        self.thread.start()
        logging.info("Hash calculation started for %s", path)

    def poll(self) -> Optional[HashOutcome]:
        """
        Check for a finished calculation without blocking.

        Returns:
            The outcome once, or None while still calculating or idle
        """
        if self._results is None:
            return None
        try:
            outcome = self._results.get_nowait()
        except queue.Empty:
            return None
        self._results = None
        self._cancel = None
        return outcome

    def cancel(self) -> None:
        """Discard the pending result (the read loop itself keeps going)."""
        if self._cancel is not None:
            self._cancel.set()
            logging.info("Hash calculation cancelled")
        self._results = None
        self._cancel = None

    def is_running(self) -> bool:
        """Check if a result is pending."""
        return self._results is not None

    def _run(self, path: Path, results: queue.Queue, cancel: threading.Event) -> None:
        """Compute the digest (runs in background thread)."""
        try:
            digest = self.hash_func(path, self.chunk_size)
            outcome = HashOutcome(path=path, digest=digest)
        except OSError as e:
            logging.error("Failed to hash %s: %s", path, e)
            outcome = HashOutcome(path=path, error=describe_io_error(e))
        except Exception as e:
            logging.error(f"Unexpected error hashing {path}: {e}")
            outcome = HashOutcome(path=path, error=str(e) or type(e).__name__)

        # Cancellation is only observed once hashing is done
        if cancel.is_set():
            logging.debug("Dropping cancelled result for %s", path)
            return
        results.put_nowait(outcome)
        logging.info("Hash calculation finished for %s", path)
