from typing import List

from ..domain.errors import Ok, Result, not_found
from ..domain.repositories import RoomRepository
from ..models import Room, RoomType
from ..utils.audit_log import emit_audit_log


def create_room(room_repo: RoomRepository, *, name: str, room_type: RoomType) -> Room:
    room = room_repo.create(name=name, room_type=room_type)
    emit_audit_log(action="room.created", room_id=room.id, extra={"name": room.name, "room_type": str(room.type)})
    return room


def list_rooms(room_repo: RoomRepository) -> List[Room]:
    return list(room_repo.list_all())


def find_room(room_repo: RoomRepository, *, room_id: int) -> Room | None:
    return room_repo.get(room_id)


def update_room(
    room_repo: RoomRepository,
    *,
    room_id: int,
    name: str,
    room_type: RoomType,
) -> Result[Room]:
    room = room_repo.get(room_id)
    if room is None:
        return not_found("room")
    # Reservations already made in this room are not re-validated.
    room.name = name
    room.type = room_type
    emit_audit_log(action="room.updated", room_id=room.id, extra={"name": room.name, "room_type": str(room.type)})
    return Ok(room)
