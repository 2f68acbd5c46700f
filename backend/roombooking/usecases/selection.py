"""1-based menu selections mapped onto the domain enums."""

from enum import Enum
from typing import Type, TypeVar

from ..domain.errors import DomainError, Err, ErrorKind, Ok, Result
from ..models import EventKind, ReservationKind, RoomType

E = TypeVar("E", bound=Enum)


def select_by_index(enum_cls: Type[E], index: int, *, label: str) -> Result[E]:
    members = list(enum_cls)
    if not 1 <= index <= len(members):
        return Err(DomainError(ErrorKind.INVALID_SELECTION, f"invalid {label}"))
    return Ok(members[index - 1])


def select_room_type(index: int) -> Result[RoomType]:
    return select_by_index(RoomType, index, label="room type")


def select_reservation_kind(index: int) -> Result[ReservationKind]:
    return select_by_index(ReservationKind, index, label="reservation kind")


def select_event_kind(index: int) -> Result[EventKind]:
    return select_by_index(EventKind, index, label="event kind")
