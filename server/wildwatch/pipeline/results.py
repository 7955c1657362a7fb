"""
Tagged stage results.

Every pipeline stage returns either ``Ok(value)`` or ``Err(error)``; stages do
not raise across their boundary. ``PipelineError.kind`` is always one of the
three ``ErrorKind`` members.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, List, TypeVar, Union

T = TypeVar("T")


class ErrorKind(str, Enum):
    VALIDATION = "ValidationError"
    EXTRACTION = "ExtractionError"
    PROCESSING = "ProcessingError"


@dataclass(frozen=True)
class PipelineError:
    kind: ErrorKind
    message: str
    details: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"error": self.kind.value, "message": self.message, "details": list(self.details)}


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T
    ok: bool = field(default=True, init=False)


@dataclass(frozen=True)
class Err:
    error: PipelineError
    ok: bool = field(default=False, init=False)


Result = Union[Ok[Any], Err]
