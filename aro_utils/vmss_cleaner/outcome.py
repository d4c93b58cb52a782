"""
Tagged results for the scale set decisions
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class OutcomeKind(Enum):
    """What the poller should do next"""
    CONVERGED = "converged"
    RETRYABLE = "retryable"
    FATAL = "fatal"


@dataclass(frozen=True)
class Outcome:
    kind: OutcomeKind
    error: Optional[BaseException] = None
    message: str = ""

    @property
    def retry(self) -> bool:
        """Legacy retry signal: anything short of fatal asks to be invoked again"""
        return self.kind is not OutcomeKind.FATAL

    def __bool__(self) -> bool:
        return self.retry

    @classmethod
    def converged(cls, message: str = "") -> "Outcome":
        return cls(OutcomeKind.CONVERGED, message=message)

    @classmethod
    def retryable(cls, message: str = "") -> "Outcome":
        return cls(OutcomeKind.RETRYABLE, message=message)

    @classmethod
    def fatal(cls, error: BaseException, message: str = "") -> "Outcome":
        return cls(OutcomeKind.FATAL, error=error, message=message or str(error))
