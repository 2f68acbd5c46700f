from dataclasses import dataclass
from datetime import time
from typing import Optional

from ..models import ReservationKind, RoomType
from .errors import DomainError, ErrorKind

INVALID_SCHEDULE_MESSAGE = "invalid reservation schedule"


@dataclass(frozen=True)
class RoomRule:
    forbidden_type: Optional[RoomType]
    message: str = ""


ROOM_RULES: dict[ReservationKind, RoomRule] = {
    ReservationKind.CLASS_SESSION: RoomRule(
        forbidden_type=RoomType.AUDITORIUM,
        message="a class session cannot be booked in an auditorium",
    ),
    ReservationKind.PRACTICAL_SESSION: RoomRule(
        forbidden_type=RoomType.LECTURE,
        message="a practical session cannot be booked in a lecture room",
    ),
    ReservationKind.EVENT: RoomRule(forbidden_type=None),
}


@dataclass(frozen=True)
class BookingSnapshot:
    kind: ReservationKind
    room_type: RoomType
    start_time: time
    end_time: time


def validate_reservation(snapshot: BookingSnapshot) -> Optional[DomainError]:
    """
    Pure validation: the schedule rule first, then the room rule of the kind.
    Returns the first failing rule's error, or None when the booking is acceptable.
    """
    if not snapshot.start_time < snapshot.end_time:
        return DomainError(ErrorKind.INVALID_SCHEDULE, INVALID_SCHEDULE_MESSAGE)

    rule = ROOM_RULES[snapshot.kind]
    if rule.forbidden_type is not None and snapshot.room_type == rule.forbidden_type:
        return DomainError(ErrorKind.INCOMPATIBLE_ROOM_TYPE, rule.message)
    return None
