from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from enum import StrEnum
from typing import Optional


class RoomType(StrEnum):
    LECTURE = "lecture"
    LABORATORY = "laboratory"
    AUDITORIUM = "auditorium"


class ReservationKind(StrEnum):
    CLASS_SESSION = "class_session"
    PRACTICAL_SESSION = "practical_session"
    EVENT = "event"


class EventKind(StrEnum):
    CONFERENCE = "conference"
    WORKSHOP = "workshop"
    MEETING = "meeting"


class ReservationStatus(StrEnum):
    ACTIVE = "active"
    CANCELLED = "cancelled"
    # Declared but never entered; no sweep marks past reservations.
    HISTORICAL = "historical"


@dataclass(eq=False)
class Room:
    id: int
    name: str
    type: RoomType


@dataclass(eq=False)
class Reservation:
    """A booking of one room, tagged by ``kind``.

    ``room`` is shared with the catalog, so renaming or retyping a room is
    visible through every reservation that references it. ``id`` stays 0
    until the repository stores the reservation.
    """

    kind: ReservationKind
    requester: str
    date: date
    start_time: time
    end_time: time
    room: Room
    event_kind: Optional[EventKind] = None
    status: ReservationStatus = ReservationStatus.ACTIVE
    id: int = 0
