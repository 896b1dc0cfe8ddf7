"""Tests for the SQLAlchemy unit of work."""

from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from flashdeck.exceptions import StoreError, StoreFailure
from flashdeck.infrastructure.common.unit_of_work import SqlAlchemyUnitOfWork


def test_commit_is_explicit() -> None:
    session = MagicMock()

    with SqlAlchemyUnitOfWork(session) as uow:
        uow.commit()

    session.commit.assert_called_once()
    session.rollback.assert_not_called()


def test_rolls_back_and_reraises_other_errors() -> None:
    session = MagicMock()

    with pytest.raises(KeyError), SqlAlchemyUnitOfWork(session):
        raise KeyError("boom")

    session.rollback.assert_called_once()
    session.commit.assert_not_called()


def test_driver_errors_leave_as_store_errors() -> None:
    session = MagicMock()
    failure = OperationalError("SELECT 1", {}, Exception("connection refused"))

    with pytest.raises(StoreError) as exc_info, SqlAlchemyUnitOfWork(session):
        raise failure

    assert exc_info.value.kind == StoreFailure.CONNECTIVITY
    assert exc_info.value.__cause__ is failure
    session.rollback.assert_called_once()


def test_failed_rollback_does_not_mask_original_error() -> None:
    session = MagicMock()
    session.rollback.side_effect = OperationalError("ROLLBACK", {}, Exception("gone"))

    with pytest.raises(ValueError, match="original"), SqlAlchemyUnitOfWork(session):
        raise ValueError("original")
