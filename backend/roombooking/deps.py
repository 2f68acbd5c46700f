from dataclasses import dataclass

from .config import Settings, get_settings
from .infrastructure.repositories import InMemoryReservationRepository, InMemoryRoomRepository
from .models import RoomType

DEFAULT_ROOMS: tuple[tuple[str, RoomType], ...] = (
    ("Aula 1", RoomType.LECTURE),
    ("Aula 2", RoomType.LABORATORY),
    ("Main Auditorium", RoomType.AUDITORIUM),
)


@dataclass(frozen=True)
class Repositories:
    rooms: InMemoryRoomRepository
    reservations: InMemoryReservationRepository


def build_repositories(settings: Settings | None = None) -> Repositories:
    """Create the repositories the caller keeps for the whole session."""
    settings = settings or get_settings()
    repos = Repositories(rooms=InMemoryRoomRepository(), reservations=InMemoryReservationRepository())
    if settings.seed_default_rooms:
        for name, room_type in DEFAULT_ROOMS:
            repos.rooms.create(name=name, room_type=room_type)
    return repos
