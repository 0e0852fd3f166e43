"""
Seed script to create the sample Jamaican dataset for development/demo.
Run with: python -m scripts.seed_data

Creates three constituencies with their representatives, committees, bills,
voting records, projects, performance metrics, statements, parliamentary
activity and petitions. Skips seeding when constituencies already exist.
"""

import asyncio
import json
import uuid
from datetime import datetime, timedelta, timezone
from decimal import Decimal

from sqlalchemy import select

from db.session import close_db, create_tables, get_session_maker
from models import (
    ActivityType,
    Bill,
    BillStatus,
    Committee,
    CommitteeMember,
    Constituency,
    MetricType,
    ParliamentaryActivity,
    PerformanceMetric,
    Petition,
    PetitionStatus,
    Project,
    ProjectStatus,
    ProjectUpdate,
    Representative,
    SocialMedia,
    Statement,
    User,
    UserRole,
    VoteChoice,
    VotingRecord,
)


def _id() -> str:
    return str(uuid.uuid4())


def _date(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, tzinfo=timezone.utc)


def _polygon(west: float, north: float) -> str:
    """Square GeoJSON polygon 0.1 degrees on a side."""
    east, south = round(west + 0.1, 1), round(north - 0.1, 1)
    return json.dumps(
        {
            "type": "Polygon",
            "coordinates": [[[west, north], [east, north], [east, south], [west, south], [west, north]]],
        }
    )


SEED_CONSTITUENCIES = [
    {
        "key": "kingston",
        "name": "Kingston Central",
        "parish": "Kingston",
        "boundaries": _polygon(76.8, 18.0),
        "population": 45000,
        "registered_voters": 32500,
        "demographics": {
            "age": {"18-29": 0.25, "30-44": 0.35, "45-64": 0.28, "65+": 0.12},
            "gender": {"male": 0.48, "female": 0.52},
        },
    },
    {
        "key": "st_andrew",
        "name": "St. Andrew Western",
        "parish": "St. Andrew",
        "boundaries": _polygon(76.7, 18.1),
        "population": 52000,
        "registered_voters": 38000,
        "demographics": {
            "age": {"18-29": 0.22, "30-44": 0.32, "45-64": 0.31, "65+": 0.15},
            "gender": {"male": 0.47, "female": 0.53},
        },
    },
    {
        "key": "clarendon",
        "name": "Clarendon Northern",
        "parish": "Clarendon",
        "boundaries": _polygon(77.2, 18.2),
        "population": 48000,
        "registered_voters": 35000,
        "demographics": {
            "age": {"18-29": 0.20, "30-44": 0.30, "45-64": 0.35, "65+": 0.15},
            "gender": {"male": 0.49, "female": 0.51},
        },
    },
]

SEED_REPRESENTATIVES = [
    {
        "constituency": "kingston",
        "name": "Donovan Williams",
        "email": "dwilliams@civiclink.org.jm",
        "image": "https://randomuser.me/api/portraits/men/34.jpg",
        "title": "Hon.",
        "party": "JLP",
        "biography": (
            "Donovan Williams has served as the representative for Kingston Central since 2020. "
            "He focuses on urban development and youth empowerment."
        ),
        "phone_number": "876-555-0101",
        "office_address": "12 South Avenue, Kingston",
        "website": "https://dwilliams.gov.jm",
        "social_media": {"facebook": "DonovanWilliamsJA", "twitter": "@dwilliamsja", "instagram": "donovan_williams_mp"},
    },
    {
        "constituency": "st_andrew",
        "name": "Angela Brown",
        "email": "abrown@civiclink.org.jm",
        "image": "https://randomuser.me/api/portraits/women/45.jpg",
        "title": "Dr.",
        "party": "PNP",
        "biography": (
            "Dr. Angela Brown has been serving St. Andrew Western since 2016. With a background in "
            "education, she champions educational reform and community development."
        ),
        "phone_number": "876-555-0202",
        "office_address": "45 Hope Road, Kingston",
        "website": "https://angelabrown.org.jm",
        "social_media": {"facebook": "DrAngelaBrownJA", "twitter": "@drangelabrown", "instagram": "dr_angela_brown"},
    },
    {
        "constituency": "clarendon",
        "name": "Robert Clarke",
        "email": "rclarke@civiclink.org.jm",
        "image": "https://randomuser.me/api/portraits/men/22.jpg",
        "title": "Mr.",
        "party": "JLP",
        "biography": (
            "Robert Clarke represents Clarendon Northern since 2020. With a focus on agricultural "
            "development and rural infrastructure, he works to improve opportunities for farming communities."
        ),
        "phone_number": "876-555-0303",
        "office_address": "7 Main Street, May Pen",
        "website": "https://robertclarke.gov.jm",
        "social_media": {"facebook": "RobertClarkeMP", "twitter": "@rclarkemp", "instagram": "robert_clarke_mp"},
    },
]

SEED_CITIZENS = [
    {"name": "Admin User", "email": "admin@civiclink.org.jm", "role": UserRole.ADMIN, "constituency": None, "image": None},
    {
        "name": "John Citizen",
        "email": "john@example.com",
        "role": UserRole.CITIZEN,
        "constituency": "kingston",
        "image": "https://randomuser.me/api/portraits/men/75.jpg",
    },
    {
        "name": "Maria Rodriguez",
        "email": "maria@example.com",
        "role": UserRole.CITIZEN,
        "constituency": "st_andrew",
        "image": "https://randomuser.me/api/portraits/women/65.jpg",
    },
]

SEED_COMMITTEES = {
    "public_accounts": (
        "Public Accounts Committee",
        "Examines government expenditures to ensure they conform with parliamentary authorizations",
    ),
    "infrastructure": (
        "Infrastructure and Physical Development",
        "Oversees infrastructure projects and development across Jamaica",
    ),
    "education": (
        "Education and Human Resources",
        "Focuses on educational policy and human resource development",
    ),
}

# (representative, committee, role)
SEED_MEMBERSHIPS = [
    ("kingston", "infrastructure", "Chair"),
    ("kingston", "public_accounts", "Member"),
    ("st_andrew", "education", "Chair"),
    ("st_andrew", "public_accounts", "Vice Chair"),
    ("clarendon", "infrastructure", "Member"),
    ("clarendon", "education", "Member"),
]

SEED_BILLS = {
    "urban_renewal": {
        "title": "Urban Renewal and Development Act",
        "description": "An act to establish a framework for the renewal and development of urban areas across Jamaica",
        "status": BillStatus.PASSED_HOUSE,
        "introduced_date": _date(2024, 9, 15),
        "last_updated_date": _date(2024, 11, 10),
        "category": "Urban Development",
        "document_url": "/documents/bills/urban-renewal-act.pdf",
        "sponsor": "kingston",
    },
    "education": {
        "title": "Education Reform Bill",
        "description": "A bill to modernize the education system and improve educational outcomes across Jamaica",
        "status": BillStatus.IN_COMMITTEE,
        "introduced_date": _date(2024, 8, 20),
        "last_updated_date": _date(2024, 10, 5),
        "category": "Education",
        "document_url": "/documents/bills/education-reform.pdf",
        "sponsor": "st_andrew",
    },
    "agriculture": {
        "title": "Agricultural Investment and Innovation Act",
        "description": "An act to promote investment and innovation in Jamaica's agricultural sector",
        "status": BillStatus.INTRODUCED,
        "introduced_date": _date(2024, 10, 30),
        "last_updated_date": _date(2024, 11, 15),
        "category": "Agriculture",
        "document_url": "/documents/bills/agricultural-investment.pdf",
        "sponsor": "clarendon",
    },
}

# (bill, representative, vote, date); the agriculture bill has no votes yet
SEED_VOTES = [
    ("urban_renewal", "kingston", VoteChoice.YES, _date(2024, 11, 5)),
    ("urban_renewal", "st_andrew", VoteChoice.YES, _date(2024, 11, 5)),
    ("urban_renewal", "clarendon", VoteChoice.ABSTAIN, _date(2024, 11, 5)),
    ("education", "kingston", VoteChoice.NO, _date(2024, 10, 1)),
    ("education", "st_andrew", VoteChoice.YES, _date(2024, 10, 1)),
    ("education", "clarendon", VoteChoice.YES, _date(2024, 10, 1)),
]

SEED_PROJECTS = [
    {
        "constituency": "kingston",
        "title": "Downtown Market Renovation",
        "description": "Renovation of the historic downtown market to improve facilities for vendors and shoppers",
        "status": ProjectStatus.IN_PROGRESS,
        "budget": Decimal("25000000"),
        "start_date": _date(2024, 3, 15),
        "end_date": _date(2025, 3, 15),
        "updates": [
            (_date(2024, 5, 15), "Foundation work completed. Starting structural renovations next week.",
             "/images/projects/downtown-market-1.jpg"),
            (_date(2024, 8, 10), "Structural renovations 60% complete. Electrical and plumbing systems being installed.",
             "/images/projects/downtown-market-2.jpg"),
        ],
    },
    {
        "constituency": "kingston",
        "title": "Youth Technology Center",
        "description": "Establishment of a technology training center to provide digital skills training for youth",
        "status": ProjectStatus.APPROVED,
        "budget": Decimal("18000000"),
        "start_date": _date(2024, 12, 1),
        "end_date": None,
        "updates": [],
    },
    {
        "constituency": "st_andrew",
        "title": "Community Library Expansion",
        "description": "Expansion of the community library to include digital resources and a learning center",
        "status": ProjectStatus.COMPLETED,
        "budget": Decimal("12000000"),
        "start_date": _date(2023, 7, 10),
        "end_date": _date(2024, 6, 20),
        "updates": [
            (_date(2023, 10, 20), "Building expansion completed. Starting interior work and installation of digital systems.",
             "/images/projects/library-1.jpg"),
            (_date(2024, 3, 15), "Interior work completed. Digital systems installed and tested. Staff training in progress.",
             "/images/projects/library-2.jpg"),
            (_date(2024, 6, 20), "Project completed and facility opened to the public. Positive feedback from community.",
             "/images/projects/library-3.jpg"),
        ],
    },
    {
        "constituency": "st_andrew",
        "title": "Public Park Rehabilitation",
        "description": "Rehabilitation of the central park with improved facilities, lighting, and accessibility",
        "status": ProjectStatus.IN_PROGRESS,
        "budget": Decimal("15000000"),
        "start_date": _date(2024, 9, 5),
        "end_date": _date(2025, 5, 30),
        "updates": [],
    },
    {
        "constituency": "clarendon",
        "title": "Rural Road Improvement",
        "description": "Improvement of rural road infrastructure to enhance connectivity for farming communities",
        "status": ProjectStatus.IN_PROGRESS,
        "budget": Decimal("30000000"),
        "start_date": _date(2024, 5, 1),
        "end_date": _date(2025, 4, 30),
        "updates": [
            (_date(2024, 7, 10), "First phase of road improvements (5km section) completed. Starting second phase next month.",
             "/images/projects/rural-road-1.jpg"),
        ],
    },
    {
        "constituency": "clarendon",
        "title": "Agricultural Training Center",
        "description": "Establishment of a training center to provide modern farming techniques and business skills",
        "status": ProjectStatus.PROPOSED,
        "budget": Decimal("22000000"),
        "start_date": _date(2025, 2, 15),
        "end_date": None,
        "updates": [],
    },
]

METRIC_DESCRIPTIONS = {
    MetricType.ATTENDANCE_RATE: "Percentage of parliamentary sessions attended",
    MetricType.BILLS_SPONSORED: "Number of bills sponsored or co-sponsored",
    MetricType.QUESTIONS_ASKED: "Number of parliamentary questions asked",
    MetricType.CONSTITUENCY_VISITS: "Number of official constituency visits/meetings",
    MetricType.RESPONSE_RATE: "Percentage of constituent inquiries responded to within 5 business days",
}

# 2024-Q1 values per representative, in MetricType order
SEED_METRICS = {
    "kingston": [92.5, 3, 15, 8, 78.3],
    "st_andrew": [88.7, 2, 22, 12, 85.2],
    "clarendon": [94.0, 1, 8, 15, 72.8],
}

SEED_STATEMENTS = [
    ("kingston", "Urban Development",
     "The renewal of our urban centers is vital for Jamaica's economic growth. I am committed to supporting "
     "initiatives that improve infrastructure, create jobs, and enhance quality of life in our cities.",
     _date(2024, 10, 15), "Parliamentary Debate", "/documents/statements/urban-development-statement.pdf"),
    ("kingston", "Youth Employment",
     "Addressing youth unemployment is one of my top priorities. We need to invest in skills training, "
     "entrepreneurship programs, and create a business environment that encourages job creation.",
     _date(2024, 9, 22), "Constituency Town Hall", None),
    ("st_andrew", "Education Reform",
     "Our education system needs urgent reform to prepare our youth for the jobs of tomorrow. This includes "
     "modernizing curriculum, improving teacher training, and investing in educational technology.",
     _date(2024, 8, 18), "Policy Statement", "/documents/statements/education-reform-statement.pdf"),
    ("st_andrew", "Healthcare Access",
     "Every Jamaican deserves access to quality healthcare. We must strengthen our primary healthcare system, "
     "reduce wait times, and ensure essential medications are affordable and available.",
     _date(2024, 10, 5), "Media Interview", None),
    ("clarendon", "Agricultural Development",
     "Agriculture remains the backbone of rural Jamaica. To strengthen this sector, we need to invest in modern "
     "farming techniques, improve access to markets, and provide support for farmers affected by climate change.",
     _date(2024, 11, 2), "Parliamentary Committee", "/documents/statements/agricultural-development-statement.pdf"),
    ("clarendon", "Rural Infrastructure",
     "Improving rural infrastructure is essential for balanced national development. This includes better roads, "
     "reliable water supply, and expanded internet access to support rural businesses and communities.",
     _date(2024, 10, 12), "Constituency Meeting", None),
]

SEED_ACTIVITY = [
    ("kingston", ActivityType.SPEECH, _date(2024, 11, 5),
     "Speech on the importance of urban renewal for economic development",
     "/documents/speeches/urban-renewal-speech.pdf"),
    ("kingston", ActivityType.MOTION, _date(2024, 10, 18),
     "Motion to increase funding for youth entrepreneurship programs", None),
    ("st_andrew", ActivityType.QUESTION, _date(2024, 11, 8),
     "Question to Minister of Education regarding teacher training programs", None),
    ("st_andrew", ActivityType.COMMITTEE_WORK, _date(2024, 10, 22),
     "Chaired meeting of the Education and Human Resources Committee",
     "/documents/committee/education-meeting-minutes.pdf"),
    ("clarendon", ActivityType.SPEECH, _date(2024, 10, 28),
     "Speech on the need for increased investment in agricultural innovation",
     "/documents/speeches/agricultural-innovation-speech.pdf"),
    ("clarendon", ActivityType.MOTION, _date(2024, 9, 15),
     "Motion to improve rural road infrastructure", None),
]

# (title, description, target, days since created, days until expiry, status)
SEED_PETITIONS = [
    ("Improve Public Transportation in Kingston",
     "We call on the government to improve the public transportation system in Kingston with more buses, "
     "better routes, and improved reliability.",
     5000, 30, 60, PetitionStatus.ACTIVE),
    ("Increase Funding for Public Schools",
     "We urge the government to increase funding for public schools to improve facilities, provide more "
     "resources, and support teacher development.",
     10000, 120, -30, PetitionStatus.COMPLETED),
    ("Support for Small Farmers",
     "We call for increased support for small farmers including subsidies, technical assistance, and "
     "improved access to markets.",
     3000, 10, 80, PetitionStatus.ACTIVE),
]


async def seed_data():
    """Create the sample dataset in the database."""
    await create_tables()
    session_maker = get_session_maker()

    async with session_maker() as session:
        # Check if data already exists
        result = await session.execute(select(Constituency).limit(1))
        if result.scalar_one_or_none():
            print("Constituencies already exist in database. Skipping seed.")
            return

        constituencies: dict[str, Constituency] = {}
        for data in SEED_CONSTITUENCIES:
            fields = {k: v for k, v in data.items() if k != "key"}
            constituency = Constituency(id=_id(), **fields)
            constituencies[data["key"]] = constituency
            session.add(constituency)
        print(f"Created {len(constituencies)} constituencies")

        representatives: dict[str, Representative] = {}
        for data in SEED_REPRESENTATIVES:
            constituency = constituencies[data["constituency"]]
            user = User(
                id=_id(),
                name=data["name"],
                email=data["email"],
                role=UserRole.REPRESENTATIVE.value,
                image=data["image"],
                constituency_id=constituency.id,
            )
            rep = Representative(
                id=_id(),
                user_id=user.id,
                constituency_id=constituency.id,
                title=data["title"],
                party=data["party"],
                biography=data["biography"],
                phone_number=data["phone_number"],
                office_address=data["office_address"],
                website=data["website"],
            )
            rep.social_media = SocialMedia(id=_id(), representative_id=rep.id, **data["social_media"])
            representatives[data["constituency"]] = rep
            session.add_all([user, rep])
        print(f"Created {len(representatives)} representatives")

        for data in SEED_CITIZENS:
            constituency = constituencies.get(data["constituency"]) if data["constituency"] else None
            session.add(
                User(
                    id=_id(),
                    name=data["name"],
                    email=data["email"],
                    role=data["role"].value,
                    image=data["image"],
                    constituency_id=constituency.id if constituency else None,
                )
            )

        committees = {
            key: Committee(id=_id(), name=name, description=description)
            for key, (name, description) in SEED_COMMITTEES.items()
        }
        session.add_all(committees.values())
        for rep_key, committee_key, role in SEED_MEMBERSHIPS:
            session.add(
                CommitteeMember(
                    id=_id(),
                    representative_id=representatives[rep_key].id,
                    committee_id=committees[committee_key].id,
                    role=role,
                    start_date=_date(2020, 10, 1),
                )
            )
        print(f"Created {len(committees)} committees")

        bills: dict[str, Bill] = {}
        for key, data in SEED_BILLS.items():
            fields = {k: v for k, v in data.items() if k not in ("sponsor", "status")}
            bills[key] = Bill(
                id=_id(),
                status=data["status"].value,
                sponsor_id=representatives[data["sponsor"]].id,
                **fields,
            )
        session.add_all(bills.values())
        for bill_key, rep_key, vote, date in SEED_VOTES:
            session.add(
                VotingRecord(
                    id=_id(),
                    bill_id=bills[bill_key].id,
                    representative_id=representatives[rep_key].id,
                    vote=vote.value,
                    date=date,
                )
            )
        print(f"Created {len(bills)} bills and {len(SEED_VOTES)} votes")

        for data in SEED_PROJECTS:
            project = Project(
                id=_id(),
                constituency_id=constituencies[data["constituency"]].id,
                title=data["title"],
                description=data["description"],
                status=data["status"].value,
                budget=data["budget"],
                start_date=data["start_date"],
                end_date=data["end_date"],
            )
            for date, description, image_url in data["updates"]:
                project.updates.append(
                    ProjectUpdate(id=_id(), date=date, description=description, image_url=image_url)
                )
            session.add(project)
        print(f"Created {len(SEED_PROJECTS)} projects")

        for rep_key, values in SEED_METRICS.items():
            for metric_type, value in zip(MetricType, values):
                session.add(
                    PerformanceMetric(
                        id=_id(),
                        representative_id=representatives[rep_key].id,
                        metric_type=metric_type.value,
                        value=float(value),
                        period="2024-Q1",
                        description=METRIC_DESCRIPTIONS[metric_type],
                    )
                )

        for rep_key, topic, content, date, source, url in SEED_STATEMENTS:
            session.add(
                Statement(
                    id=_id(),
                    representative_id=representatives[rep_key].id,
                    topic=topic,
                    content=content,
                    date=date,
                    source=source,
                    url=url,
                )
            )

        for rep_key, activity_type, date, description, document_url in SEED_ACTIVITY:
            session.add(
                ParliamentaryActivity(
                    id=_id(),
                    representative_id=representatives[rep_key].id,
                    activity_type=activity_type.value,
                    date=date,
                    description=description,
                    document_url=document_url,
                )
            )

        now = datetime.now(timezone.utc)
        for title, description, target, age_days, remaining_days, status in SEED_PETITIONS:
            session.add(
                Petition(
                    id=_id(),
                    title=title,
                    description=description,
                    target_count=target,
                    status=status.value,
                    created_at=now - timedelta(days=age_days),
                    expires_at=now + timedelta(days=remaining_days),
                )
            )
        print(f"Created {len(SEED_PETITIONS)} petitions")

        await session.commit()
        print("\n✅ Seeding completed successfully!")


async def main():
    try:
        await seed_data()
    finally:
        await close_db()


if __name__ == "__main__":
    asyncio.run(main())
