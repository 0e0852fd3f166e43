"""
Tests for ConstituencyService, including statistics.
"""

from datetime import datetime, timezone
from uuid import uuid4

import pytest

from core.exceptions import InvalidIdentifierError
from models.constituency import ProjectStatus, ProjectUpdate
from services.constituency_service import ConstituencyService


@pytest.mark.unit
class TestConstituencyQueries:
    async def test_list_all_ordered_with_representative(
        self, db_session, make_constituency, make_representative
    ) -> None:
        st_andrew = await make_constituency(name="St. Andrew Western", parish="St. Andrew")
        await make_constituency(name="Kingston Central", parish="Kingston")
        await make_representative(st_andrew, name="Angela Brown", party="PNP")

        constituencies = await ConstituencyService(db_session).list_all()

        assert [c.name for c in constituencies] == ["Kingston Central", "St. Andrew Western"]
        assert constituencies[0].representative is None
        rep = constituencies[1].representative
        assert rep.party == "PNP"
        assert rep.title == "Hon."
        assert rep.user.name == "Angela Brown"

    async def test_list_by_parish_exact(self, db_session, make_constituency) -> None:
        await make_constituency(name="Kingston Central", parish="Kingston")
        await make_constituency(name="Kingston East", parish="Kingston")
        await make_constituency(name="St. Andrew Western", parish="St. Andrew")
        service = ConstituencyService(db_session)

        assert [c.name for c in await service.list_by_parish("Kingston")] == ["Kingston Central", "Kingston East"]
        assert await service.list_by_parish("kingston") == []

    async def test_get_by_id_embeds_five_recent_projects(self, db_session, make_constituency, make_project) -> None:
        seat = await make_constituency()
        for year in range(2017, 2024):
            await make_project(seat, f"Project {year}", start_date=datetime(year, 1, 1, tzinfo=timezone.utc))

        detail = await ConstituencyService(db_session).get_by_id(seat.id)

        assert detail.name == "Kingston Central"
        assert detail.demographics == {"gender": {"male": 0.48, "female": 0.52}}
        assert [p.title for p in detail.projects] == [f"Project {y}" for y in (2023, 2022, 2021, 2020, 2019)]

    async def test_get_by_id_missing_and_malformed(self, db_session) -> None:
        service = ConstituencyService(db_session)

        assert await service.get_by_id(str(uuid4())) is None
        with pytest.raises(InvalidIdentifierError):
            await service.get_by_id("kingston")

    async def test_get_projects_with_updates_newest_first(
        self, db_session, make_constituency, make_project
    ) -> None:
        seat = await make_constituency()
        project = await make_project(seat, "Market", ProjectStatus.IN_PROGRESS)
        for month in (3, 8, 5):
            db_session.add(
                ProjectUpdate(
                    id=str(uuid4()),
                    project_id=project.id,
                    date=datetime(2024, month, 1, tzinfo=timezone.utc),
                    description=f"Update {month}",
                )
            )
        await db_session.commit()
        db_session.expunge_all()

        [loaded] = await ConstituencyService(db_session).get_projects(seat.id)

        assert loaded.status == "IN_PROGRESS"
        assert loaded.budget == 1000000
        assert [u.description for u in loaded.updates] == ["Update 8", "Update 5", "Update 3"]

    async def test_get_project_by_id(self, db_session, make_constituency, make_project) -> None:
        seat = await make_constituency(name="Clarendon Northern", parish="Clarendon")
        project = await make_project(seat, "Rural Road Improvement")
        service = ConstituencyService(db_session)

        detail = await service.get_project_by_id(project.id)

        assert detail.title == "Rural Road Improvement"
        assert detail.constituency.name == "Clarendon Northern"
        assert await service.get_project_by_id(str(uuid4())) is None

    async def test_list_parishes_counts_sum_to_total(self, db_session, make_constituency) -> None:
        await make_constituency(name="Kingston Central", parish="Kingston")
        await make_constituency(name="Kingston East", parish="Kingston")
        await make_constituency(name="Clarendon Northern", parish="Clarendon")

        parishes = await ConstituencyService(db_session).list_parishes()

        assert [(p.name, p.constituency_count) for p in parishes] == [("Clarendon", 1), ("Kingston", 2)]
        assert sum(p.constituency_count for p in parishes) == 3


@pytest.mark.unit
class TestConstituencyStatistics:
    async def test_three_seats_two_parties(
        self, db_session, make_constituency, make_representative, make_project
    ) -> None:
        a = await make_constituency(name="A", parish="P")
        b = await make_constituency(name="B", parish="P")
        c = await make_constituency(name="C", parish="P")
        await make_representative(a, name="Rep A", party="JLP")
        await make_representative(b, name="Rep B", party="PNP")
        await make_project(a, "One", ProjectStatus.IN_PROGRESS)
        await make_project(a, "Two", ProjectStatus.COMPLETED)
        await make_project(c, "Three", ProjectStatus.PROPOSED)

        stats = await ConstituencyService(db_session).get_statistics()

        assert stats.total_constituencies == 3
        assert [(p.party, p.count, p.percentage) for p in stats.party_representation] == [
            ("JLP", 1, 33),
            ("PNP", 1, 33),
        ]
        assert stats.constituencies_with_projects == 2
        assert stats.total_projects == 3
        assert [(s.status, s.count, s.percentage) for s in stats.projects_by_status] == [
            ("PROPOSED", 1, 33),
            ("IN_PROGRESS", 1, 33),
            ("COMPLETED", 1, 33),
        ]

    async def test_empty_database(self, db_session) -> None:
        stats = await ConstituencyService(db_session).get_statistics()

        assert stats.total_constituencies == 0
        assert stats.party_representation == []
        assert stats.constituencies_with_projects == 0
        assert stats.total_projects == 0
        assert stats.projects_by_status == []

    async def test_percentages_round_half_up(
        self, db_session, make_constituency, make_representative
    ) -> None:
        seats = [await make_constituency(name=f"Seat {i}", parish="P") for i in range(8)]
        await make_representative(seats[0], name="Lone Rep", party="IND")

        stats = await ConstituencyService(db_session).get_statistics()

        # 1 of 8 seats is 12.5%
        assert stats.party_representation[0].percentage == 13
