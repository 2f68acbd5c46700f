from ..models import Reservation, ReservationStatus


def cancel(reservation: Reservation) -> ReservationStatus:
    """Move the reservation to CANCELLED and return the status it had before.

    The current status is not checked, so cancelling twice is a no-op.
    """
    status_from = reservation.status
    reservation.status = ReservationStatus.CANCELLED
    return status_from
