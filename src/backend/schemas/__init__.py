"""Schemas module initialization."""

from schemas.constituency import Constituency, ConstituencyDetail, ConstituencyStatistics, Project, ProjectDetail
from schemas.message import Message, MessageCreate, MessagePage, MessageReply
from schemas.petition import Petition
from schemas.representative import Representative, RepresentativeDetail
from schemas.user import UserIdentity, UserInDB, UserSummary

__all__ = [
    "Constituency",
    "ConstituencyDetail",
    "ConstituencyStatistics",
    "Project",
    "ProjectDetail",
    "Message",
    "MessageCreate",
    "MessagePage",
    "MessageReply",
    "Petition",
    "Representative",
    "RepresentativeDetail",
    "UserIdentity",
    "UserInDB",
    "UserSummary",
]
