"""Mirror of the browser's speech recognition session.

The page reports start/end/error events; the command engine never reads
this state.
"""
from __future__ import annotations
import logging
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    IDLE = "idle"
    LISTENING = "listening"


class SessionError(Exception):
    pass


class RecognitionSession:
    def __init__(self):
        self.state = SessionState.IDLE
        self.last_error: Optional[str] = None

    @property
    def listening(self) -> bool:
        return self.state is SessionState.LISTENING

    def start(self) -> None:
        if self.listening:
            raise SessionError("recognition session already listening")
        self.state = SessionState.LISTENING
        self.last_error = None
        logger.debug("Recognition session started")

    def end(self) -> None:
        # the browser fires "end" after errors too, so ending while idle is allowed
        self.state = SessionState.IDLE
        logger.debug("Recognition session ended")

    def error(self, reason: str = "unknown") -> None:
        self.state = SessionState.IDLE
        self.last_error = reason
        logger.warning("Recognition error: %s", reason)

    def handle(self, event: str, reason: Optional[str] = None) -> SessionState:
        if event == "start":
            self.start()
        elif event == "end":
            self.end()
        elif event == "error":
            self.error(reason or "unknown")
        else:
            raise SessionError(f"unknown session event {event!r}")
        return self.state

    def to_dict(self) -> dict:
        return {"state": self.state.value, "last_error": self.last_error}
