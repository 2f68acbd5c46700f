from __future__ import annotations

from typing import List, Optional

from ..domain.repositories import ReservationRepository, RoomRepository
from ..models import Reservation, Room, RoomType


class InMemoryRoomRepository(RoomRepository):
    def __init__(self) -> None:
        self._rooms: List[Room] = []

    def create(self, *, name: str, room_type: RoomType) -> Room:
        # Rooms are never removed, so count + 1 is always unused.
        room = Room(id=len(self._rooms) + 1, name=name, type=room_type)
        self._rooms.append(room)
        return room

    def get(self, room_id: int) -> Optional[Room]:
        return next((room for room in self._rooms if room.id == room_id), None)

    def list_all(self) -> List[Room]:
        return list(self._rooms)


class InMemoryReservationRepository(ReservationRepository):
    def __init__(self) -> None:
        self._reservations: List[Reservation] = []

    def add(self, reservation: Reservation) -> Reservation:
        reservation.id = len(self._reservations) + 1
        self._reservations.append(reservation)
        return reservation

    def get(self, reservation_id: int) -> Optional[Reservation]:
        return next((res for res in self._reservations if res.id == reservation_id), None)

    def list_all(self) -> List[Reservation]:
        return list(self._reservations)
