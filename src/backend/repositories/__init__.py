"""Repository modules for database access."""

from repositories.constituency_repository import ConstituencyRepository
from repositories.message_repository import MessageRepository
from repositories.petition_repository import PetitionRepository
from repositories.representative_repository import RepresentativeRepository
from repositories.user_repository import UserRepository

__all__ = [
    "ConstituencyRepository",
    "MessageRepository",
    "PetitionRepository",
    "RepresentativeRepository",
    "UserRepository",
]
