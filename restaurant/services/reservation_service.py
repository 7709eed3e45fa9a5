"""
Reservation records keyed by date and time.

No check is made against table capacity or other reservations at the
same time.
"""

from typing import List, Optional, Union

from pydantic import ValidationError

from restaurant.errors import NotFoundError, PersistenceError, RestaurantError
from restaurant.models.order import utc_now
from restaurant.models.reservation import (
    ISO_DATE_PREFIX,
    Reservation,
    ReservationDraft,
    date_portion,
)
from restaurant.models.results import OperationResult
from restaurant.services.base import CollectionService, coerce_draft, next_id
from restaurant.storage.json_store import JsonStore
from monitoring.logger import get_logger

logger = get_logger(__name__)


class ReservationService(CollectionService):
    """Reads and edits the reservations document."""

    collection_name = "reservations"

    def __init__(self, store: JsonStore):
        self.store = store

    def _read(self) -> List[Reservation]:
        return self._parse_list(Reservation, self.store.load())

    def _write(self, reservations: List[Reservation]) -> None:
        self.store.save([reservation.to_dict() for reservation in reservations])

    def list(self) -> List[Reservation]:
        try:
            return self._read()
        except PersistenceError as e:
            logger.error(f"Error reading reservations: {e}", exc_info=True)
            return []

    def find_by_id(self, reservation_id: int) -> Optional[Reservation]:
        for reservation in self.list():
            if reservation.id == reservation_id:
                return reservation
        return None

    def list_by_date(self, date: str) -> List[Reservation]:
        """
        Reservations on the given calendar day.

        Only the date portion of ``date`` and of each stored date is
        compared, so any time of day matches.

        Args:
            date: ``YYYY-MM-DD`` or a full ISO datetime
        """
        if not isinstance(date, str) or not ISO_DATE_PREFIX.match(date):
            logger.warning(f"Invalid reservation date query: {date!r}")
            return []

        day = date_portion(date)
        return [r for r in self.list() if r.day == day]

    def create(self, draft: Union[ReservationDraft, dict]) -> OperationResult:
        """
        Store a new reservation with the next id and ``createdAt`` = now.

        Returns:
            Result carrying the created Reservation
        """
        try:
            draft = coerce_draft(ReservationDraft, draft)

            with self.store.lock:
                reservations = self._read()
                reservation = Reservation(id=next_id(reservations), **draft.model_dump())
                reservations.append(reservation)
                self._write(reservations)

        except (RestaurantError, ValidationError) as e:
            return self._failure(e, "creating reservation")

        logger.info(
            f"Created reservation {reservation.id} for {reservation.customer_name}",
            extra={"reservation_id": reservation.id, "date": reservation.date}
        )
        return OperationResult.ok(reservation, f"Reservation #{reservation.id} created")

    def update(self, reservation_id: int, draft: Union[ReservationDraft, dict]) -> OperationResult:
        """Replace a reservation's fields, keeping id and ``createdAt``."""
        try:
            draft = coerce_draft(ReservationDraft, draft)

            with self.store.lock:
                reservations = self._read()
                index = next(
                    (i for i, r in enumerate(reservations) if r.id == reservation_id),
                    None
                )
                if index is None:
                    raise NotFoundError(f"Reservation {reservation_id} does not exist")

                updated = Reservation(
                    id=reservation_id,
                    created_at=reservations[index].created_at,
                    updated_at=utc_now(),
                    **draft.model_dump(),
                )
                reservations[index] = updated
                self._write(reservations)

        except (RestaurantError, ValidationError) as e:
            return self._failure(e, "updating reservation")

        logger.info(f"Updated reservation {reservation_id}", extra={"reservation_id": reservation_id})
        return OperationResult.ok(updated, f"Reservation #{reservation_id} updated")

    def delete(self, reservation_id: int) -> OperationResult:
        try:
            with self.store.lock:
                reservations = self._read()
                reservation = next((r for r in reservations if r.id == reservation_id), None)
                if reservation is None:
                    raise NotFoundError(f"Reservation {reservation_id} does not exist")

                reservations.remove(reservation)
                self._write(reservations)

        except RestaurantError as e:
            return self._failure(e, "deleting reservation")

        logger.info(f"Deleted reservation {reservation_id}", extra={"reservation_id": reservation_id})
        return OperationResult.ok(reservation, f"Reservation #{reservation_id} deleted")
