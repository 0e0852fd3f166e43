"""
Tests for petition repository queries against SQLite.
"""

from datetime import datetime, timedelta, timezone

import pytest

from models.petition import PetitionStatus
from repositories.petition_repository import PetitionRepository


@pytest.mark.unit
class TestPetitionRepository:
    async def test_list_newest_first_with_status_filter(self, db_session, make_petition) -> None:
        base = datetime(2024, 1, 1, tzinfo=timezone.utc)
        await make_petition("Older", created_at=base)
        await make_petition("Newer", created_at=base + timedelta(days=1))
        await make_petition("Done", status=PetitionStatus.COMPLETED, created_at=base + timedelta(days=2))
        repo = PetitionRepository(db_session)

        everything = await repo.list_petitions()
        active = await repo.list_petitions(PetitionStatus.ACTIVE.value)

        assert [p.title for p in everything] == ["Done", "Newer", "Older"]
        assert [p.title for p in active] == ["Newer", "Older"]

    async def test_signature_counts(self, db_session, make_petition, make_user) -> None:
        signed = await make_petition("Signed")
        unsigned = await make_petition("Unsigned")
        alice = await make_user(name="Alice")
        bob = await make_user(name="Bob")
        repo = PetitionRepository(db_session)
        await repo.add_signature(signed.id, alice.id)
        await repo.add_signature(signed.id, bob.id)

        counts = await repo.signature_counts([signed.id, unsigned.id])

        assert counts == {signed.id: 2}
        assert await repo.count_signatures(unsigned.id) == 0
        assert await repo.signature_counts([]) == {}

    async def test_has_signed(self, db_session, make_petition, make_user) -> None:
        petition = await make_petition()
        signer = await make_user(name="Signer")
        other = await make_user(name="Other")
        repo = PetitionRepository(db_session)
        await repo.add_signature(petition.id, signer.id)

        assert await repo.has_signed(petition.id, signer.id) is True
        assert await repo.has_signed(petition.id, other.id) is False
