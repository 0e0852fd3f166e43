"""Database models module."""

from models.user import User, UserRole
from models.constituency import Constituency, Project, ProjectStatus, ProjectUpdate
from models.representative import (
    ActivityType,
    Committee,
    CommitteeMember,
    MetricType,
    ParliamentaryActivity,
    PerformanceMetric,
    Representative,
    SocialMedia,
    Statement,
)
from models.bill import Bill, BillStatus, VoteChoice, VotingRecord
from models.message import Message
from models.petition import Petition, PetitionSignature, PetitionStatus

__all__ = [
    "User",
    "UserRole",
    "Constituency",
    "Project",
    "ProjectStatus",
    "ProjectUpdate",
    "Representative",
    "SocialMedia",
    "Committee",
    "CommitteeMember",
    "PerformanceMetric",
    "MetricType",
    "Statement",
    "ParliamentaryActivity",
    "ActivityType",
    "Bill",
    "BillStatus",
    "VoteChoice",
    "VotingRecord",
    "Message",
    "Petition",
    "PetitionSignature",
    "PetitionStatus",
]
