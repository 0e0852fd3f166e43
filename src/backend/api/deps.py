"""
Shared dependencies for API endpoints.

Includes:
- User JWT authentication for messaging and petition signing
- Service providers bound to the request's database session
- Presence-flag query parameter helper
"""

from typing import Annotated

import structlog
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import InvalidIdentifierError
from core.security import decode_token
from core.validation import parse_identifier
from db.session import get_db
from models.user import User
from repositories.user_repository import UserRepository
from schemas.user import UserInDB
from services.constituency_service import ConstituencyService
from services.message_service import MessageService
from services.petition_service import PetitionService
from services.representative_service import RepresentativeService

logger = structlog.get_logger(__name__)

# Missing credentials are reported as 401 by get_current_user itself
security = HTTPBearer(auto_error=False)


# =============================================================================
# Helper Functions
# =============================================================================


def _user_model_to_schema(user: User) -> UserInDB:
    """
    Convert a User SQLAlchemy model to a UserInDB Pydantic schema.

    This is the single source of truth for User -> UserInDB conversion.
    """
    return UserInDB(
        id=str(user.id),
        name=user.name,
        email=user.email,
        role=user.role,
        image=user.image,
        constituency_id=str(user.constituency_id) if user.constituency_id else None,
        created_at=user.created_at,
    )


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def has_flag(request: Request, name: str) -> bool:
    """Whether a presence flag appears in the query string, whatever its value."""
    return name in request.query_params


# =============================================================================
# User Authentication (JWT-based)
# =============================================================================


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: AsyncSession = Depends(get_db),
) -> UserInDB:
    """
    Extract and validate the current user from the JWT token.

    Raises:
        HTTPException: 401 if the token is missing, invalid, or its subject
            does not resolve to a user.
    """
    if credentials is None:
        raise _unauthorized("Not authenticated")

    payload = decode_token(credentials.credentials)
    if payload is None:
        raise _unauthorized("Invalid or expired token")

    user_id = payload.get("sub")
    if user_id is None:
        raise _unauthorized("Invalid token payload")

    try:
        user_id = parse_identifier(str(user_id), "sub")
    except InvalidIdentifierError:
        raise _unauthorized("Invalid token payload") from None

    user = await UserRepository(db).get_by_id(user_id)
    if not user:
        logger.warning("token_subject_not_found", user_id=user_id)
        raise _unauthorized("User not found")

    return _user_model_to_schema(user)


CurrentUser = Annotated[UserInDB, Depends(get_current_user)]


# =============================================================================
# Service Providers
# =============================================================================


def get_representative_service(db: AsyncSession = Depends(get_db)) -> RepresentativeService:
    return RepresentativeService(db)


def get_constituency_service(db: AsyncSession = Depends(get_db)) -> ConstituencyService:
    return ConstituencyService(db)


def get_message_service(db: AsyncSession = Depends(get_db)) -> MessageService:
    return MessageService(db)


def get_petition_service(db: AsyncSession = Depends(get_db)) -> PetitionService:
    return PetitionService(db)
