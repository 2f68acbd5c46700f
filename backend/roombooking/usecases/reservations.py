from datetime import date, time
from typing import List, Optional

from ..domain import lifecycle
from ..domain.errors import DomainError, Err, ErrorKind, Ok, Result, not_found
from ..domain.repositories import ReservationRepository, RoomRepository
from ..domain.services import BookingSnapshot, validate_reservation
from ..models import EventKind, Reservation, ReservationKind, ReservationStatus
from ..utils.audit_log import emit_audit_log


def create_reservation(
    room_repo: RoomRepository,
    res_repo: ReservationRepository,
    *,
    kind: ReservationKind,
    requester: str,
    date: date,
    start_time: time,
    end_time: time,
    room_id: int,
    event_kind: Optional[EventKind] = None,
) -> Result[Reservation]:
    room = room_repo.get(room_id)
    if room is None:
        return not_found("room")
    try:
        kind = ReservationKind(kind)
    except ValueError:
        return Err(DomainError(ErrorKind.INVALID_SELECTION, "invalid reservation kind"))
    if kind == ReservationKind.EVENT:
        if event_kind is None:
            return Err(DomainError(ErrorKind.INVALID_SELECTION, "an event requires an event kind"))
        try:
            event_kind = EventKind(event_kind)
        except ValueError:
            return Err(DomainError(ErrorKind.INVALID_SELECTION, "invalid event kind"))

    snapshot = BookingSnapshot(kind=kind, room_type=room.type, start_time=start_time, end_time=end_time)
    error = validate_reservation(snapshot)
    if error is not None:
        emit_audit_log(
            action="reservation.rejected",
            room_id=room.id,
            kind=kind,
            message=error.message,
            extra={"error": str(error.kind)},
        )
        return Err(error)

    reservation = res_repo.add(
        Reservation(
            kind=kind,
            requester=requester,
            date=date,
            start_time=start_time,
            end_time=end_time,
            room=room,
            event_kind=event_kind if kind == ReservationKind.EVENT else None,
        )
    )
    emit_audit_log(
        action="reservation.created",
        room_id=room.id,
        reservation_id=reservation.id,
        kind=kind,
        status_to=reservation.status,
    )
    return Ok(reservation)


def list_reservations(res_repo: ReservationRepository) -> List[Reservation]:
    return list(res_repo.list_all())


def find_reservation(res_repo: ReservationRepository, *, reservation_id: int) -> Reservation | None:
    return res_repo.get(reservation_id)


def cancel_reservation(res_repo: ReservationRepository, *, reservation_id: int) -> Result[Reservation]:
    reservation = res_repo.get(reservation_id)
    if reservation is None:
        return not_found("reservation")
    status_from = lifecycle.cancel(reservation)
    # Already cancelled: nothing changed, nothing to audit.
    if status_from == ReservationStatus.CANCELLED:
        return Ok(reservation)
    emit_audit_log(
        action="reservation.cancelled",
        room_id=reservation.room.id,
        reservation_id=reservation.id,
        kind=reservation.kind,
        status_from=status_from,
        status_to=reservation.status,
    )
    return Ok(reservation)
