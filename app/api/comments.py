import logging

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.errors import failure_as
from app.security import IdentityVerifier, get_identity_verifier
from app.services import board
from schemas.feed import CommentCreate, CommentResponse, CreatedResponse

router = APIRouter()
logger = logging.getLogger("neighbornotes.comments")


@router.get("", response_model=list[CommentResponse])
async def list_comments(
    post_id: int | None = Query(None, alias="postId"),
    db: AsyncSession = Depends(get_db),
):
    with failure_as("Failed to fetch comments", logger):
        return await board.list_comments(db, post_id)


@router.post("", response_model=CreatedResponse)
async def add_comment(
    payload: CommentCreate,
    request: Request,
    db: AsyncSession = Depends(get_db),
    verifier: IdentityVerifier = Depends(get_identity_verifier),
):
    board.check_comment_fields(payload.post_id, payload.content, payload.author_email)
    with failure_as("Failed to add comment", logger):
        author_email = verifier.verify(request, payload.author_email)
        comment = await board.add_comment(
            db,
            post_id=payload.post_id,
            content=payload.content,
            author_email=author_email,
        )
        return CreatedResponse(id=comment.id, message="Comment added successfully")
