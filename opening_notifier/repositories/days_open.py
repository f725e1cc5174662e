from __future__ import annotations

from typing import Optional

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from opening_notifier.errors import PersistenceFailure
from opening_notifier.models.store import Store


class DaysOpenRepository:
    """Reads and writes the per-venue days-open counter."""

    def __init__(self, session: Session):
        self.session = session

    def read(self, venue_id: int) -> Optional[int]:
        """Return the stored day number for the venue, or None if never stored.

        Raises:
            PersistenceFailure: the database could not be queried.
        """
        try:
            store = self.session.get(Store, venue_id)
        except SQLAlchemyError as e:
            raise PersistenceFailure(f"Could not read days open for {venue_id}: {e}") from e
        if store is None:
            return None
        return store.days_open

    def write(self, venue_id: int, days_open: int) -> None:
        """Store the day number for the venue, creating the row if needed.

        Raises:
            PersistenceFailure: the value is negative or the commit failed.
        """
        if days_open < 0:
            raise PersistenceFailure(f"Refusing to store negative days open: {days_open}")

        try:
            store = self.session.get(Store, venue_id)
            if store is None:
                store = Store(store_id=venue_id)
                self.session.add(store)
                logger.info(f"Created store row for {venue_id}")
            store.days_open = days_open
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise PersistenceFailure(f"Could not write days open for {venue_id}: {e}") from e
