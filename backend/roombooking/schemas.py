import datetime as dt
from typing import Optional

from pydantic import BaseModel, field_serializer

from .models import EventKind, Reservation, ReservationKind, ReservationStatus, Room, RoomType


class RoomRead(BaseModel):
    room_id: int
    name: str
    room_type: RoomType

    @classmethod
    def from_domain(cls, *, room: Room) -> "RoomRead":
        return cls(room_id=room.id, name=room.name, room_type=room.type)

    def summary(self) -> str:
        return f"{self.room_id} - {self.name} ({self.room_type.name})"


class ReservationRead(BaseModel):
    reservation_id: int
    kind: ReservationKind
    requester: str
    date: dt.date
    start_time: dt.time
    end_time: dt.time
    status: ReservationStatus
    room_id: int
    room_name: str
    event_kind: Optional[EventKind] = None

    @field_serializer("start_time", "end_time")
    def _ser_time(self, value: dt.time) -> str:
        return value.strftime("%H:%M")

    @classmethod
    def from_domain(cls, *, reservation: Reservation) -> "ReservationRead":
        return cls(
            reservation_id=reservation.id,
            kind=reservation.kind,
            requester=reservation.requester,
            date=reservation.date,
            start_time=reservation.start_time,
            end_time=reservation.end_time,
            status=reservation.status,
            room_id=reservation.room.id,
            room_name=reservation.room.name,
            event_kind=reservation.event_kind,
        )

    def summary(self) -> str:
        line = (
            f"[{self.reservation_id}] {self.requester} - {self.date.isoformat()} "
            f"({self.start_time:%H:%M} to {self.end_time:%H:%M}) - "
            f"Room: {self.room_name} - Status: {self.status.name}"
        )
        if self.event_kind is not None:
            line += f" - Event: {self.event_kind.name}"
        return line
