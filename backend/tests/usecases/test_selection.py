import pytest
from roombooking.domain.errors import Err, ErrorKind, Ok
from roombooking.models import EventKind, ReservationKind, RoomType
from roombooking.usecases.selection import select_event_kind, select_reservation_kind, select_room_type


def test_room_type_follows_menu_order() -> None:
    assert select_room_type(1) == Ok(RoomType.LECTURE)
    assert select_room_type(2) == Ok(RoomType.LABORATORY)
    assert select_room_type(3) == Ok(RoomType.AUDITORIUM)


def test_reservation_kind_follows_menu_order() -> None:
    assert select_reservation_kind(1) == Ok(ReservationKind.CLASS_SESSION)
    assert select_reservation_kind(2) == Ok(ReservationKind.PRACTICAL_SESSION)
    assert select_reservation_kind(3) == Ok(ReservationKind.EVENT)


def test_event_kind_follows_menu_order() -> None:
    assert select_event_kind(1) == Ok(EventKind.CONFERENCE)
    assert select_event_kind(3) == Ok(EventKind.MEETING)


@pytest.mark.parametrize("select", [select_room_type, select_reservation_kind, select_event_kind])
@pytest.mark.parametrize("index", [0, 4, -1])
def test_out_of_range_index_is_invalid_selection(select, index: int) -> None:
    result = select(index)
    assert isinstance(result, Err)
    assert result.kind == ErrorKind.INVALID_SELECTION


def test_unknown_reservation_kind_message() -> None:
    result = select_reservation_kind(9)
    assert isinstance(result, Err)
    assert result.message == "invalid reservation kind"
