"""Structured run logging utilities.

Responsibilities:
- Emit concise, deterministic stage-level runtime logs through `loguru`.
- Keep log lines on stderr so rendered text on stdout stays clean.
"""

from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger

_SAFE_PUNCTUATION = frozenset("-_.:/")


class RunLogger:
    """Emit deterministic stage logs for CLI-observable conversion activity."""

    def __init__(self, sink: TextIO | None = None, level: str = "INFO") -> None:
        """Route loguru output to `sink` with message-only formatting."""

        self._sink = sink or sys.stderr
        logger.remove()
        logger.add(self._sink, format="{message}", level=level, colorize=False)

    @staticmethod
    def _token(value: object) -> str:
        """Render one context value as a shell-safe token; blanks become `none`."""

        raw = str(value).strip()
        if not raw:
            return "none"
        return "".join(
            character if character.isalnum() or character in _SAFE_PUNCTUATION else "_"
            for character in raw
        )

    def _emit(self, level: str, event: str, stage: str, **context: object) -> None:
        """Emit one `[phase]` line with context keys in sorted order."""

        fields = [f"level={level}", f"stage={stage}", f"event={event}"]
        fields.extend(f"{key}={self._token(context[key])}" for key in sorted(context))
        logger.log(level, "[phase] " + " ".join(fields))

    def log_stage_start(self, stage: str, **context: object) -> None:
        """Emit a stage-start runtime event."""

        self._emit("INFO", "start", stage, **context)

    def log_stage_complete(self, stage: str, **context: object) -> None:
        """Emit a stage-complete runtime event with optional result metrics."""

        self._emit("INFO", "complete", stage, **context)

    def log_stage_failure(self, stage: str, error_type: str) -> None:
        """Emit a stage-failure runtime event without payload details."""

        self._emit("ERROR", "failure", stage, error_type=error_type)
