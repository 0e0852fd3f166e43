"""Tests for the schema converters."""

from datetime import datetime, timezone
from decimal import Decimal
from types import SimpleNamespace

import pytest

from schemas.converters import (
    constituency_model_to_detail_schema,
    constituency_model_to_schema,
    message_model_to_schema,
    petition_model_to_schema,
    project_model_to_detail_schema,
    representative_model_to_detail_schema,
    representative_model_to_schema,
)

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)
REP_ID = "0b7c6b62-4f0e-4b8e-9d6e-2f1c1c0a0001"
USER_ID = "0b7c6b62-4f0e-4b8e-9d6e-2f1c1c0a0002"
SEAT_ID = "0b7c6b62-4f0e-4b8e-9d6e-2f1c1c0a0003"


def _user(name: str = "Angela Brown", user_id: str = USER_ID) -> SimpleNamespace:
    return SimpleNamespace(id=user_id, name=name, email="angela@example.com", image=None)


def _constituency(representative=None) -> SimpleNamespace:
    return SimpleNamespace(
        id=SEAT_ID,
        name="St. Andrew Western",
        parish="St. Andrew",
        boundaries="{}",
        population=52000,
        registered_voters=38000,
        demographics={"gender": {"male": 0.49, "female": 0.51}},
        representative=representative,
    )


def _project(title: str = "Water Supply Upgrade", updates=()) -> SimpleNamespace:
    return SimpleNamespace(
        id="0b7c6b62-4f0e-4b8e-9d6e-2f1c1c0a0010",
        title=title,
        description="Upgrade mains",
        status="APPROVED",
        budget=Decimal("12000000.50"),
        start_date=NOW,
        end_date=None,
        constituency_id=SEAT_ID,
        updates=list(updates),
        constituency=_constituency(),
    )


@pytest.fixture
def representative():
    return SimpleNamespace(
        id=REP_ID,
        user_id=USER_ID,
        title="Hon.",
        party="PNP",
        biography="Advocate for education.",
        phone_number="876-555-0102",
        office_address=None,
        website=None,
        constituency_id=SEAT_ID,
        user=_user(),
        constituency=_constituency(),
        social_media=None,
        committee_members=[
            SimpleNamespace(
                role="Member",
                committee=SimpleNamespace(id="0b7c6b62-4f0e-4b8e-9d6e-2f1c1c0a0020", name="Education Committee"),
            )
        ],
    )


class TestRepresentativeConverters:
    """Tests for representative converters."""

    def test_base_schema(self, representative):
        result = representative_model_to_schema(representative)

        assert result.id == REP_ID
        assert result.user.name == "Angela Brown"
        assert result.user.email == "angela@example.com"
        assert result.constituency.parish == "St. Andrew"
        assert result.social_media is None

    def test_detail_schema_adds_committees_and_metrics(self, representative):
        metric = SimpleNamespace(
            id="0b7c6b62-4f0e-4b8e-9d6e-2f1c1c0a0030",
            metric_type="ATTENDANCE_RATE",
            value=92.0,
            period="2024-Q1",
            description=None,
        )

        result = representative_model_to_detail_schema(representative, [metric])

        assert result.party == "PNP"
        assert result.committees[0].committee.name == "Education Committee"
        assert result.committees[0].role == "Member"
        assert result.performance_metrics[0].value == 92.0


class TestConstituencyConverters:
    """Tests for constituency and project converters."""

    def test_vacant_seat_has_no_representative(self):
        result = constituency_model_to_schema(_constituency())

        assert result.representative is None
        assert result.demographics["gender"]["female"] == 0.51

    def test_representative_summary(self):
        rep = SimpleNamespace(id=REP_ID, title="Hon.", party="JLP", user=_user("Donovan Williams"))

        result = constituency_model_to_schema(_constituency(rep))

        assert result.representative.party == "JLP"
        assert result.representative.user.name == "Donovan Williams"

    def test_detail_embeds_projects(self):
        result = constituency_model_to_detail_schema(_constituency(), [_project()])

        assert [p.title for p in result.projects] == ["Water Supply Upgrade"]
        assert result.projects[0].budget == pytest.approx(12000000.5)

    def test_project_detail(self):
        update = SimpleNamespace(
            id="0b7c6b62-4f0e-4b8e-9d6e-2f1c1c0a0040", date=NOW, description="Survey done", image_url=None
        )

        result = project_model_to_detail_schema(_project(updates=[update]))

        assert result.status == "APPROVED"
        assert result.updates[0].description == "Survey done"
        assert result.constituency.name == "St. Andrew Western"


class TestMessageAndPetitionConverters:
    """Tests for message and petition converters."""

    def test_message(self):
        sender_id = "0b7c6b62-4f0e-4b8e-9d6e-2f1c1c0a0050"
        message = SimpleNamespace(
            id="0b7c6b62-4f0e-4b8e-9d6e-2f1c1c0a0051",
            subject="Water",
            content="No water",
            sender_id=sender_id,
            sender=_user("John Citizen", sender_id),
            recipient_id=USER_ID,
            recipient=_user(),
            read=False,
            created_at=NOW,
            updated_at=NOW,
        )

        result = message_model_to_schema(message)

        assert result.sender.name == "John Citizen"
        assert result.recipient_id == USER_ID
        assert result.read is False

    def test_petition_without_creator(self):
        petition = SimpleNamespace(
            id="0b7c6b62-4f0e-4b8e-9d6e-2f1c1c0a0060",
            title="Fix the roads",
            description="Now",
            target_count=500,
            status="ACTIVE",
            creator_id=None,
            created_at=NOW,
            expires_at=NOW,
        )

        result = petition_model_to_schema(petition, 42)

        assert result.signature_count == 42
        assert result.creator_id is None
        assert result.status == "ACTIVE"
