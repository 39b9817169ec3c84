"""Result types returned by the live tracker's user actions."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Generic, TypeVar

T = TypeVar('T')


class ResultStatus(Enum):
    """Outcome of a tracker action."""
    SUCCESS = "success"
    SKIPPED = "skipped"
    ERROR = "error"


@dataclass
class Result(Generic[T]):
    """Standard result type for tracker actions."""
    status: ResultStatus
    data: Optional[T] = None
    message: str = ""

    @staticmethod
    def success(data: T, message: str = "") -> 'Result[T]':
        return Result(ResultStatus.SUCCESS, data, message)

    @staticmethod
    def skipped(message: str) -> 'Result[None]':
        """Nothing to do (e.g. undo with no pending event)."""
        return Result(ResultStatus.SKIPPED, None, message)

    @staticmethod
    def error(message: str, data: Optional[T] = None) -> 'Result[T]':
        """Action refused or failed; data may carry the rolled back event."""
        return Result(ResultStatus.ERROR, data, message)

    @property
    def is_success(self) -> bool:
        return self.status == ResultStatus.SUCCESS

    @property
    def is_skipped(self) -> bool:
        return self.status == ResultStatus.SKIPPED

    @property
    def is_error(self) -> bool:
        return self.status == ResultStatus.ERROR
