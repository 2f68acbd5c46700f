from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Generic, TypeVar, Union

T = TypeVar("T")


class ErrorKind(StrEnum):
    NOT_FOUND = "not_found"
    INVALID_SCHEDULE = "invalid_schedule"
    INCOMPATIBLE_ROOM_TYPE = "incompatible_room_type"
    INVALID_SELECTION = "invalid_selection"


@dataclass(frozen=True)
class DomainError:
    kind: ErrorKind
    message: str


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    error: DomainError

    @property
    def ok(self) -> bool:
        return False

    @property
    def kind(self) -> ErrorKind:
        return self.error.kind

    @property
    def message(self) -> str:
        return self.error.message


Result = Union[Ok[T], Err]


def not_found(what: str) -> Err:
    return Err(DomainError(ErrorKind.NOT_FOUND, f"{what} not found"))
