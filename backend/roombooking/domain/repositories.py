from __future__ import annotations

from typing import Protocol, Sequence

from ..models import Reservation, Room, RoomType


class RoomRepository(Protocol):
    def create(self, *, name: str, room_type: RoomType) -> Room: ...

    def get(self, room_id: int) -> Room | None: ...

    def list_all(self) -> Sequence[Room]: ...


class ReservationRepository(Protocol):
    def add(self, reservation: Reservation) -> Reservation: ...

    def get(self, reservation_id: int) -> Reservation | None: ...

    def list_all(self) -> Sequence[Reservation]: ...
