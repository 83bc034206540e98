"""Posts and their comment threads, joined with author profile fields."""
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.errors import AuthRequired, ValidationError
from app.services import users as user_directory
from models.feed import Post, Comment
from models.user import User
from schemas.feed import DEFAULT_CATEGORY, PostResponse, CommentResponse

logger = logging.getLogger("neighbornotes.board")


def _post_response(post: Post, author: User) -> PostResponse:
    return PostResponse(
        id=post.id,
        title=post.title,
        content=post.content,
        category=post.category,
        location=post.location,
        image_url=post.image_url,
        author_id=post.author_id,
        created_at=post.created_at,
        email=author.email,
        display_name=author.display_name,
        profile_picture_url=author.profile_picture_url,
    )


def _comment_response(comment: Comment, author: User) -> CommentResponse:
    return CommentResponse(
        id=comment.id,
        post_id=comment.post_id,
        author_id=comment.author_id,
        content=comment.content,
        created_at=comment.created_at,
        email=author.email,
        display_name=author.display_name,
        profile_picture_url=author.profile_picture_url,
    )


def check_post_fields(title: str | None, content: str | None, author_email: str | None) -> None:
    if not title or not content:
        raise ValidationError("Title and content are required")
    if not author_email:
        raise AuthRequired("Authentication required")


def check_comment_fields(post_id: int | None, content: str | None, author_email: str | None) -> None:
    if not post_id or not content or not author_email:
        raise ValidationError("Post ID, content, and author email are required")


async def list_posts(db: AsyncSession) -> list[PostResponse]:
    res = await db.execute(
        select(Post, User)
        .join(User, Post.author_id == User.id)
        .order_by(Post.created_at.desc(), Post.id.desc())
    )
    return [_post_response(p, u) for p, u in res.all()]


async def create_post(
    db: AsyncSession,
    *,
    title: str | None,
    content: str | None,
    author_email: str | None,
    category: str | None = None,
    location: str | None = None,
    image_url: str | None = None,
) -> Post:
    check_post_fields(title, content, author_email)
    # the author row is committed before the post; a failed insert below
    # leaves it in place
    author = await user_directory.get_or_create(db, author_email)
    post = Post(
        title=title,
        content=content,
        category=category or DEFAULT_CATEGORY,
        location=location or "",
        image_url=image_url or None,
        author_id=author.id,
    )
    db.add(post)
    await db.commit()
    await db.refresh(post)
    logger.info("post created id=%s author_id=%s", post.id, author.id)
    return post


async def list_comments(db: AsyncSession, post_id: int | None) -> list[CommentResponse]:
    if post_id is None:
        raise ValidationError("Post ID is required")
    res = await db.execute(
        select(Comment, User)
        .join(User, Comment.author_id == User.id)
        .where(Comment.post_id == post_id)
        .order_by(Comment.created_at.asc(), Comment.id.asc())
    )
    return [_comment_response(c, u) for c, u in res.all()]


async def add_comment(
    db: AsyncSession,
    *,
    post_id: int | None,
    content: str | None,
    author_email: str | None,
) -> Comment:
    check_comment_fields(post_id, content, author_email)
    # unlike posts, an unknown author is rejected rather than created
    author = await user_directory.require_user(db, author_email)
    comment = Comment(post_id=post_id, author_id=author.id, content=content)
    db.add(comment)
    await db.commit()
    await db.refresh(comment)
    logger.info("comment created id=%s post_id=%s author_id=%s", comment.id, post_id, author.id)
    return comment
