"""
Tests for RepresentativeService.
"""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from core.exceptions import InvalidIdentifierError, ValidationError
from models.bill import Bill, BillStatus, VoteChoice, VotingRecord
from models.representative import ActivityType, Committee, CommitteeMember, ParliamentaryActivity
from services.representative_service import RepresentativeService


@pytest.fixture
async def seats(make_constituency, make_representative):
    """Two JLP seats and one PNP seat."""
    kingston = await make_constituency(name="Kingston Central", parish="Kingston")
    st_andrew = await make_constituency(name="St. Andrew Western", parish="St. Andrew")
    clarendon = await make_constituency(name="Clarendon Northern", parish="Clarendon")
    return {
        "kingston": await make_representative(kingston, name="Donovan Williams", party="JLP"),
        "st_andrew": await make_representative(st_andrew, name="Angela Brown", party="PNP"),
        "clarendon": await make_representative(clarendon, name="Robert Clarke", party="JLP"),
    }


@pytest.mark.unit
class TestRepresentativeQueries:
    async def test_list_all_carries_identity_and_constituency(self, db_session, seats) -> None:
        reps = await RepresentativeService(db_session).list_all()

        assert [r.user.name for r in reps] == ["Angela Brown", "Donovan Williams", "Robert Clarke"]
        first = reps[0]
        assert first.constituency.name == "St. Andrew Western"
        assert first.constituency.parish == "St. Andrew"
        assert first.user.email
        assert first.social_media.twitter == "@rep"

    async def test_list_by_party_is_case_sensitive(self, db_session, seats) -> None:
        service = RepresentativeService(db_session)

        jlp = await service.list_by_party("JLP")
        lower = await service.list_by_party("jlp")

        assert [r.user.name for r in jlp] == ["Donovan Williams", "Robert Clarke"]
        assert lower == []

    async def test_search_matches_name_or_constituency(self, db_session, seats) -> None:
        service = RepresentativeService(db_session)

        by_name = await service.search("angela")
        by_seat = await service.search("kingston")

        assert [r.user.name for r in by_name] == ["Angela Brown"]
        assert [r.user.name for r in by_seat] == ["Donovan Williams"]

    async def test_get_by_id_includes_committees(self, db_session, seats) -> None:
        rep = seats["kingston"]
        committee = Committee(id=str(uuid4()), name="Public Accounts Committee", description="Spending")
        db_session.add(committee)
        db_session.add(
            CommitteeMember(
                id=str(uuid4()),
                representative_id=rep.id,
                committee_id=committee.id,
                role="Chair",
                start_date=datetime(2020, 10, 1, tzinfo=timezone.utc),
            )
        )
        await db_session.commit()
        db_session.expunge_all()

        detail = await RepresentativeService(db_session).get_by_id(rep.id)

        assert detail.user.name == "Donovan Williams"
        assert len(detail.committees) == 1
        assert detail.committees[0].committee.name == "Public Accounts Committee"
        assert detail.committees[0].role == "Chair"
        assert detail.performance_metrics == []

        seats_held = await RepresentativeService(db_session).get_committees(rep.id)
        assert seats_held[0].committee.description == "Spending"

    async def test_get_by_id_missing_returns_none(self, db_session) -> None:
        assert await RepresentativeService(db_session).get_by_id(str(uuid4())) is None

    async def test_get_by_id_malformed_raises(self, db_session) -> None:
        with pytest.raises(InvalidIdentifierError):
            await RepresentativeService(db_session).get_by_id("not-a-uuid")

    async def test_get_by_constituency(self, db_session, seats, make_constituency) -> None:
        service = RepresentativeService(db_session)
        rep = seats["clarendon"]
        empty = await make_constituency(name="Vacant Seat", parish="Clarendon")

        found = await service.get_by_constituency(rep.constituency_id)

        assert found.id == rep.id
        assert await service.get_by_constituency(empty.id) is None


@pytest.mark.unit
class TestRepresentativeHistory:
    async def test_voting_records_newest_first_with_bill(self, db_session, seats) -> None:
        rep = seats["kingston"]
        base = datetime(2024, 1, 1, tzinfo=timezone.utc)
        for i in range(12):
            bill = Bill(
                id=str(uuid4()),
                title=f"Bill {i}",
                description="...",
                status=BillStatus.INTRODUCED.value,
                introduced_date=base,
                last_updated_date=base,
                category="General",
                sponsor_id=rep.id,
            )
            db_session.add(bill)
            db_session.add(
                VotingRecord(
                    id=str(uuid4()),
                    representative_id=rep.id,
                    bill_id=bill.id,
                    vote=VoteChoice.YES.value,
                    date=base + timedelta(days=i),
                )
            )
        await db_session.commit()

        records = await RepresentativeService(db_session).get_voting_records(rep.id)

        assert len(records) == 10
        assert records[0].bill.title == "Bill 11"
        assert records[-1].bill.title == "Bill 2"
        assert [r.date for r in records] == sorted((r.date for r in records), reverse=True)

    async def test_activity_respects_limit(self, db_session, seats) -> None:
        rep = seats["st_andrew"]
        base = datetime(2024, 1, 1, tzinfo=timezone.utc)
        for i in range(4):
            db_session.add(
                ParliamentaryActivity(
                    id=str(uuid4()),
                    representative_id=rep.id,
                    activity_type=ActivityType.SPEECH.value,
                    date=base + timedelta(days=i),
                    description=f"Speech {i}",
                )
            )
        await db_session.commit()

        activity = await RepresentativeService(db_session).get_activity(rep.id, limit=2)

        assert [a.description for a in activity] == ["Speech 3", "Speech 2"]

    @pytest.mark.parametrize("limit", [0, -5])
    async def test_limit_below_one_rejected(self, db_session, seats, limit: int) -> None:
        with pytest.raises(ValidationError):
            await RepresentativeService(db_session).get_statements(seats["kingston"].id, limit=limit)

    async def test_empty_history_is_empty_list(self, db_session, seats) -> None:
        service = RepresentativeService(db_session)
        rep_id = seats["clarendon"].id

        assert await service.get_statements(rep_id) == []
        assert await service.get_performance_metrics(rep_id) == []
        assert await service.get_committees(rep_id) == []
