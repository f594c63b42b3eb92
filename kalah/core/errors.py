from __future__ import annotations


class KalahError(Exception):
    """Base class for every error raised by the engine."""


class IllegalMoveError(KalahError, ValueError):
    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class InvalidConfigurationError(KalahError, ValueError):
    pass


class InvalidStateError(KalahError, RuntimeError):
    """An operation was requested in a game state that does not allow it."""


class InvariantViolationError(KalahError, RuntimeError):
    """Internal consistency fault. Never expected under correct engine logic."""
