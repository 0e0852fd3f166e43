"""
API v1 router aggregating all endpoints.
"""

from fastapi import APIRouter

from api.v1.constituencies import router as constituencies_router
from api.v1.messages import router as messages_router
from api.v1.petitions import router as petitions_router
from api.v1.representatives import router as representatives_router

router = APIRouter()

router.include_router(representatives_router, prefix="/representatives", tags=["Representatives"])
router.include_router(constituencies_router, prefix="/constituencies", tags=["Constituencies"])
router.include_router(messages_router, prefix="/messages", tags=["Messages"])
router.include_router(petitions_router, prefix="/petitions", tags=["Petitions"])
