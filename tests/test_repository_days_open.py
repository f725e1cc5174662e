from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from opening_notifier.db.database import Base
from opening_notifier.errors import PersistenceFailure
from opening_notifier.models import Store
from opening_notifier.repositories.days_open import DaysOpenRepository

VENUE_ID = 39156327


@pytest.fixture
def db_session():
    engine = create_engine("sqlite:///:memory:")
    Base.metadata.create_all(engine)
    with Session(engine) as session:
        yield session
    Base.metadata.drop_all(engine)


def test_read_missing_returns_none(db_session):
    assert DaysOpenRepository(db_session).read(VENUE_ID) is None


def test_read_existing(db_session):
    db_session.add(Store(store_id=VENUE_ID, name="Round1 Plaza Bonita", days_open=7))
    db_session.commit()

    assert DaysOpenRepository(db_session).read(VENUE_ID) == 7


def test_write_creates_row(db_session):
    DaysOpenRepository(db_session).write(VENUE_ID, 8)

    store = db_session.get(Store, VENUE_ID)
    assert store is not None
    assert store.days_open == 8
    assert store.updated_at is not None


def test_write_updates_existing_row(db_session):
    db_session.add(Store(store_id=VENUE_ID, name="Round1 Plaza Bonita", days_open=7))
    db_session.commit()

    repo = DaysOpenRepository(db_session)
    repo.write(VENUE_ID, 8)

    assert repo.read(VENUE_ID) == 8
    assert db_session.query(Store).count() == 1


def test_write_negative_rejected(db_session):
    with pytest.raises(PersistenceFailure):
        DaysOpenRepository(db_session).write(VENUE_ID, -1)
    assert db_session.get(Store, VENUE_ID) is None


def test_read_database_error():
    session = MagicMock()
    session.get.side_effect = OperationalError("SELECT", {}, Exception("locked"))

    with pytest.raises(PersistenceFailure, match="Could not read"):
        DaysOpenRepository(session).read(VENUE_ID)


def test_write_database_error_rolls_back():
    session = MagicMock()
    session.get.return_value = Store(store_id=VENUE_ID, days_open=7)
    session.commit.side_effect = OperationalError("UPDATE", {}, Exception("locked"))

    with pytest.raises(PersistenceFailure, match="Could not write"):
        DaysOpenRepository(session).write(VENUE_ID, 8)
    session.rollback.assert_called_once()


def test_store_repr():
    store = Store(store_id=VENUE_ID, name="Round1 Plaza Bonita", days_open=3)
    assert "Round1 Plaza Bonita" in repr(store)
    assert "day=3" in repr(store)
