from datetime import time

import pytest
from roombooking.domain.errors import ErrorKind
from roombooking.domain.services import INVALID_SCHEDULE_MESSAGE, ROOM_RULES, BookingSnapshot, validate_reservation
from roombooking.models import ReservationKind, RoomType


def _snap(kind: ReservationKind, room_type: RoomType, start: time, end: time) -> BookingSnapshot:
    return BookingSnapshot(kind=kind, room_type=room_type, start_time=start, end_time=end)


@pytest.mark.parametrize("kind", list(ReservationKind))
@pytest.mark.parametrize("room_type", list(RoomType))
@pytest.mark.parametrize("start,end", [(time(10, 0), time(9, 0)), (time(9, 0), time(9, 0))])
def test_rejects_non_increasing_schedule_for_every_kind_and_room(
    kind: ReservationKind, room_type: RoomType, start: time, end: time
) -> None:
    error = validate_reservation(_snap(kind, room_type, start, end))
    assert error is not None
    assert error.kind == ErrorKind.INVALID_SCHEDULE
    assert error.message == INVALID_SCHEDULE_MESSAGE


def test_schedule_error_takes_precedence_over_room_error() -> None:
    error = validate_reservation(_snap(ReservationKind.CLASS_SESSION, RoomType.AUDITORIUM, time(11, 0), time(10, 0)))
    assert error is not None
    assert error.kind == ErrorKind.INVALID_SCHEDULE


def test_rejects_class_session_in_auditorium() -> None:
    error = validate_reservation(_snap(ReservationKind.CLASS_SESSION, RoomType.AUDITORIUM, time(9, 0), time(10, 0)))
    assert error is not None
    assert error.kind == ErrorKind.INCOMPATIBLE_ROOM_TYPE
    assert error.message == "a class session cannot be booked in an auditorium"


@pytest.mark.parametrize("room_type", [RoomType.LECTURE, RoomType.LABORATORY])
def test_accepts_class_session_outside_auditorium(room_type: RoomType) -> None:
    assert validate_reservation(_snap(ReservationKind.CLASS_SESSION, room_type, time(9, 0), time(10, 0))) is None


def test_rejects_practical_session_in_lecture_room() -> None:
    error = validate_reservation(_snap(ReservationKind.PRACTICAL_SESSION, RoomType.LECTURE, time(9, 0), time(10, 0)))
    assert error is not None
    assert error.kind == ErrorKind.INCOMPATIBLE_ROOM_TYPE
    assert error.message == "a practical session cannot be booked in a lecture room"


@pytest.mark.parametrize("room_type", [RoomType.LABORATORY, RoomType.AUDITORIUM])
def test_accepts_practical_session_outside_lecture_room(room_type: RoomType) -> None:
    assert validate_reservation(_snap(ReservationKind.PRACTICAL_SESSION, room_type, time(9, 0), time(10, 0))) is None


@pytest.mark.parametrize("room_type", list(RoomType))
def test_accepts_event_in_any_room(room_type: RoomType) -> None:
    assert validate_reservation(_snap(ReservationKind.EVENT, room_type, time(18, 0), time(20, 30))) is None


def test_every_kind_has_a_room_rule() -> None:
    assert set(ROOM_RULES) == set(ReservationKind)
