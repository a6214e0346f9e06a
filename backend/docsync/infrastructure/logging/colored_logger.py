"""Colored sync logger — ANSI-colored console logging for sync batches.

Provides a SyncLogger with color-coded output per sync stage, so a batch
run can be followed record by record in the terminal.

Color scheme:
    🔵 Blue    — Reading local details
    🟡 Yellow  — Upload in flight
    🟢 Green   — Synced
    🔴 Red     — Failed
    ⚪ Gray    — Timing / Stats
"""

import logging
import time
from contextlib import contextmanager
from typing import Any


class _Colors:
    """ANSI escape codes for terminal colors."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"
    WHITE = "\033[97m"
    GRAY = "\033[90m"


class SyncStage:
    """Predefined sync stages with colors and icons."""

    READ = ("READ", _Colors.BLUE, "📂")
    UPLOAD = ("UPLOAD", _Colors.YELLOW, "📤")
    SYNCED = ("SYNCED", _Colors.GREEN, "✅")
    FAILED = ("FAILED", _Colors.RED, "❌")


class SyncLogger:
    """Color-coded logger for sync batches.

    Usage:
        log = SyncLogger("SyncEngine")
        log.separator("Sync pending")
        log.step_start(SyncStage.UPLOAD, "Uploading 1/3", record_id=record.id)
        log.step_complete(SyncStage.SYNCED, "Remote id 42")
    """

    def __init__(self, component_name: str):
        self._logger = logging.getLogger(component_name)

    @staticmethod
    def _kwargs(kwargs: dict[str, Any]) -> str:
        if not kwargs:
            return ""
        details = " | ".join(f"{k}={v}" for k, v in kwargs.items())
        return f" {_Colors.GRAY}({details}){_Colors.RESET}"

    def step_start(self, stage: tuple[str, str, str], message: str, **kwargs: Any) -> None:
        label, color, icon = stage
        self._logger.info(
            f"{color}{_Colors.BOLD}{icon} [{label}]{_Colors.RESET} "
            f"{color}{message}{_Colors.RESET}{self._kwargs(kwargs)}"
        )

    def step_complete(self, stage: tuple[str, str, str], message: str, **kwargs: Any) -> None:
        label, color, icon = stage
        self._logger.info(
            f"{color}{icon} [{label}]{_Colors.RESET} "
            f"{_Colors.GREEN}✓ {message}{_Colors.RESET}{self._kwargs(kwargs)}"
        )

    def step_error(self, stage: tuple[str, str, str], message: str, error: Exception | None = None) -> None:
        """Log a failed step in red at WARNING level."""
        label, _, icon = stage
        formatted = (
            f"{_Colors.RED}{_Colors.BOLD}{icon} [{label}]{_Colors.RESET} "
            f"{_Colors.RED}{message}{_Colors.RESET}"
        )
        if error:
            formatted += f" {_Colors.DIM}→ {type(error).__name__}: {error}{_Colors.RESET}"
        self._logger.warning(formatted)

    def separator(self, title: str = "") -> None:
        if title:
            self._logger.info(
                f"{_Colors.GRAY}{'─' * 10} {title} {'─' * max(0, 50 - len(title))}{_Colors.RESET}"
            )
        else:
            self._logger.info(f"{_Colors.GRAY}{'─' * 60}{_Colors.RESET}")

    def progress(self, index: int, total: int, record_id: str) -> None:
        """Batch position line; matches the sync engine's progress callback."""
        self._logger.info(
            f"{_Colors.WHITE}{_Colors.BOLD}Syncing {index}/{total}{_Colors.RESET}"
            f"{self._kwargs({'record_id': record_id})}"
        )

    def stats(self, **kwargs: Any) -> None:
        parts = [f"{k}: {v}" for k, v in kwargs.items()]
        self._logger.info(f"   {_Colors.GRAY}📈 {' | '.join(parts)}{_Colors.RESET}")

    @contextmanager
    def timed_batch(self, title: str):
        """Context manager that frames a batch and logs its elapsed time."""
        self.separator(title)
        start = time.perf_counter()
        try:
            yield
        finally:
            self.stats(elapsed=f"{time.perf_counter() - start:.2f}s")
