import logging

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.errors import failure_as
from app.security import IdentityVerifier, get_identity_verifier
from app.services import board
from schemas.feed import PostCreate, PostResponse, CreatedResponse

router = APIRouter()
logger = logging.getLogger("neighbornotes.posts")


@router.get("", response_model=list[PostResponse])
async def list_posts(db: AsyncSession = Depends(get_db)):
    with failure_as("Failed to fetch posts. Please try again later.", logger):
        return await board.list_posts(db)


@router.post("", response_model=CreatedResponse)
async def create_post(
    payload: PostCreate,
    request: Request,
    db: AsyncSession = Depends(get_db),
    verifier: IdentityVerifier = Depends(get_identity_verifier),
):
    board.check_post_fields(payload.title, payload.content, payload.author_email)
    with failure_as("Failed to create post. Please try again.", logger):
        author_email = verifier.verify(request, payload.author_email)
        post = await board.create_post(
            db,
            title=payload.title,
            content=payload.content,
            author_email=author_email,
            category=payload.category,
            location=payload.location,
            image_url=payload.image_url,
        )
        return CreatedResponse(id=post.id, message="Post created successfully")
