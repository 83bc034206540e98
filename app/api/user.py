import logging

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.errors import AuthRequired, ValidationError, failure_as
from app.security import IdentityVerifier, get_identity_verifier
from app.services import users as user_directory
from schemas.user import ProfileResponse, ProfileUpdate, MessageResponse

router = APIRouter()
logger = logging.getLogger("neighbornotes.users")


@router.get("", response_model=ProfileResponse)
async def get_profile(email: str | None = None, db: AsyncSession = Depends(get_db)):
    if not email:
        raise ValidationError("Email is required")
    with failure_as("Failed to fetch user profile", logger):
        user, posts_count = await user_directory.get_by_email(db, email)
        return ProfileResponse(
            id=user.id,
            email=user.email,
            display_name=user.display_name,
            profile_picture_url=user.profile_picture_url,
            bio=user.bio,
            created_at=user.created_at,
            posts_count=posts_count,
        )


@router.put("", response_model=MessageResponse)
async def update_profile(
    payload: ProfileUpdate,
    request: Request,
    db: AsyncSession = Depends(get_db),
    verifier: IdentityVerifier = Depends(get_identity_verifier),
):
    if not payload.email:
        raise AuthRequired("Email is required")
    with failure_as("Failed to update profile", logger):
        email = verifier.verify(request, payload.email)
        # full replace: omitted fields are cleared
        await user_directory.update_profile(
            db,
            email,
            display_name=payload.display_name,
            bio=payload.bio,
            profile_picture_url=payload.profile_picture_url,
        )
        return MessageResponse(message="Profile updated successfully")
