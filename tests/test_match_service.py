"""
Irenet Backend — Donation, Request & Match Service Unit Tests
=============================================================

What we test:
    ✅ Status defaults and presence checks on create
    ✅ Status updates are unconditional (no existence check)
    ✅ Match creation performs the insert plus both status updates
    ✅ A failed status update surfaces as DatabaseError so the session rolls back
    ✅ Ids that cannot name a row skip the UPDATE
    ✅ get_db_session commits on success and rolls back on error
    ✅ A failed commit is rolled back and raised as DatabaseError
"""

from datetime import date
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from sqlalchemy.exc import OperationalError

from irenet.database import get_db_session
from irenet.exceptions import DatabaseError, ValidationError
from irenet.schemas.common import StatusUpdate
from irenet.schemas.donation import DonationCreate
from irenet.schemas.item_request import RequestCreate
from irenet.schemas.match import MatchCreate
from irenet.services.donation_service import DonationService
from irenet.services.item_request_service import RequestService
from irenet.services.match_service import MatchService


class TestDonationService:

    def setup_method(self):
        self.service = DonationService()

    @pytest.mark.asyncio
    async def test_status_defaults_to_available(self, mock_db_session, assign_id):
        assign_id("donation_id", 5)

        donation_id = await self.service.create_donation(
            mock_db_session,
            DonationCreate(donor_id=1, item_name="Canned Food", category="Food", quantity=10),
        )

        assert donation_id == 5
        assert mock_db_session.add.call_args[0][0].status == "available"

    @pytest.mark.asyncio
    async def test_empty_status_also_defaults(self, mock_db_session, assign_id):
        assign_id("donation_id", 6)

        await self.service.create_donation(
            mock_db_session,
            DonationCreate(donor_id=1, item_name="Rice", category="Food", quantity=2, status=""),
        )

        assert mock_db_session.add.call_args[0][0].status == "available"

    @pytest.mark.asyncio
    async def test_zero_quantity_is_missing(self, mock_db_session):
        with pytest.raises(ValidationError):
            await self.service.create_donation(
                mock_db_session,
                DonationCreate(donor_id=1, item_name="Rice", category="Food", quantity=0),
            )
        mock_db_session.add.assert_not_called()

    @pytest.mark.asyncio
    async def test_update_requires_status(self, mock_db_session):
        with pytest.raises(ValidationError) as exc_info:
            await self.service.update_status(mock_db_session, 1, StatusUpdate())

        assert exc_info.value.message == "Status is required"
        mock_db_session.execute.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_update_of_missing_row_is_not_an_error(self, mock_db_session):
        mock_db_session.execute.return_value = MagicMock(rowcount=0)

        await self.service.update_status(mock_db_session, 12345, StatusUpdate(status="withdrawn"))

        mock_db_session.execute.assert_awaited_once()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("raw_id", ["abc", "12abc", "2147483648"])
    async def test_update_of_unmatchable_id_skips_storage(self, mock_db_session, raw_id):
        await self.service.update_status(mock_db_session, raw_id, StatusUpdate(status="matched"))

        mock_db_session.execute.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_update_parses_numeric_path_id(self, mock_db_session):
        mock_db_session.execute.return_value = MagicMock(rowcount=1)

        await self.service.update_status(mock_db_session, "7", StatusUpdate(status="matched"))

        statement = mock_db_session.execute.await_args.args[0]
        assert statement.compile().params["donation_id_1"] == 7


class TestRequestService:

    @pytest.mark.asyncio
    async def test_status_defaults_to_open(self, mock_db_session, assign_id):
        assign_id("request_id", 9)

        request_id = await RequestService().create_request(
            mock_db_session,
            RequestCreate(org_id=2, item_name="Canned Food", category="Food", quantity=5),
        )

        assert request_id == 9
        assert mock_db_session.add.call_args[0][0].status == "open"


class TestMatchServiceCreate:

    def setup_method(self):
        self.service = MatchService()

    @pytest.mark.asyncio
    async def test_inserts_match_and_marks_both_sides(self, mock_db_session, assign_id):
        assign_id("match_id", 11)
        mock_db_session.execute.return_value = MagicMock(rowcount=1)

        match_id = await self.service.create_match(
            mock_db_session, MatchCreate(donation_id=3, request_id=4)
        )

        assert match_id == 11
        match = mock_db_session.add.call_args[0][0]
        assert (match.donation_id, match.request_id) == (3, 4)
        assert match.match_date == date.today()

        # One UPDATE for the donation, one for the request
        assert mock_db_session.execute.await_count == 2
        statements = [str(call.args[0]) for call in mock_db_session.execute.await_args_list]
        assert statements[0].startswith("UPDATE donations")
        assert statements[1].startswith("UPDATE requests")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("payload", [{"donation_id": 3}, {"request_id": 4}, {}])
    async def test_requires_both_ids(self, mock_db_session, payload):
        with pytest.raises(ValidationError):
            await self.service.create_match(mock_db_session, MatchCreate(**payload))

        mock_db_session.add.assert_not_called()
        mock_db_session.execute.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_failed_status_update_raises(self, mock_db_session, assign_id):
        assign_id("match_id", 12)
        mock_db_session.execute = AsyncMock(
            side_effect=[
                MagicMock(rowcount=1),
                OperationalError("UPDATE requests ...", {}, Exception("lock wait timeout")),
            ]
        )

        with pytest.raises(DatabaseError) as exc_info:
            await self.service.create_match(
                mock_db_session, MatchCreate(donation_id=3, request_id=4)
            )

        assert exc_info.value.message == "lock wait timeout"


class TestSessionDependency:

    def _factory(self, session):
        factory = MagicMock()
        factory.return_value.__aenter__.return_value = session
        factory.return_value.__aexit__.return_value = False
        return factory

    @pytest.mark.asyncio
    async def test_commits_on_success(self, mock_db_session):
        with patch("irenet.database.async_session_factory", self._factory(mock_db_session)):
            gen = get_db_session()
            assert await gen.__anext__() is mock_db_session
            with pytest.raises(StopAsyncIteration):
                await gen.__anext__()

        mock_db_session.commit.assert_awaited_once()
        mock_db_session.rollback.assert_not_awaited()
        mock_db_session.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_rolls_back_on_error(self, mock_db_session):
        with patch("irenet.database.async_session_factory", self._factory(mock_db_session)):
            gen = get_db_session()
            await gen.__anext__()
            with pytest.raises(DatabaseError):
                await gen.athrow(DatabaseError("lock wait timeout"))

        mock_db_session.rollback.assert_awaited_once()
        mock_db_session.commit.assert_not_awaited()
        mock_db_session.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_failed_commit_becomes_database_error(self, mock_db_session):
        mock_db_session.commit = AsyncMock(
            side_effect=OperationalError("COMMIT", None, Exception("could not serialize access"))
        )

        with patch("irenet.database.async_session_factory", self._factory(mock_db_session)):
            gen = get_db_session()
            await gen.__anext__()
            with pytest.raises(DatabaseError) as exc_info:
                await gen.__anext__()

        assert exc_info.value.message == "could not serialize access"
        assert exc_info.value.context["operation"] == "commit"
        mock_db_session.rollback.assert_awaited_once()
        mock_db_session.close.assert_awaited_once()
