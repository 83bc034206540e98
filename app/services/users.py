"""User directory: lookup, lazy creation and profile updates keyed by email."""
import logging

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from app.errors import NotFound
from models.feed import Post
from models.user import User

logger = logging.getLogger("neighbornotes.users")


def default_display_name(email: str) -> str:
    return email.split("@")[0]


async def find_by_email(db: AsyncSession, email: str) -> User | None:
    res = await db.execute(select(User).where(User.email == email))
    return res.scalar_one_or_none()


async def require_user(db: AsyncSession, email: str) -> User:
    user = await find_by_email(db, email)
    if not user:
        raise NotFound("User not found")
    return user


async def count_posts(db: AsyncSession, user_id: int) -> int:
    res = await db.execute(select(func.count(Post.id)).where(Post.author_id == user_id))
    return res.scalar_one() or 0


async def get_by_email(db: AsyncSession, email: str) -> tuple[User, int]:
    """Return the user and the number of posts they authored."""
    user = await require_user(db, email)
    return user, await count_posts(db, user.id)


async def get_or_create(db: AsyncSession, email: str) -> User:
    # Two separate round trips with a commit in between; concurrent first
    # posts from one email race on the unique index.
    user = await find_by_email(db, email)
    if user:
        return user
    user = User(email=email, display_name=default_display_name(email))
    db.add(user)
    await db.commit()
    await db.refresh(user)
    logger.info("user created id=%s", user.id)
    return user


async def update_profile(
    db: AsyncSession,
    email: str,
    *,
    display_name: str | None = None,
    bio: str | None = None,
    profile_picture_url: str | None = None,
) -> User:
    """Replace all editable profile fields.

    Fields that are missing or empty are written as NULL, so callers must
    resend the full profile to keep existing values.
    """
    user = await require_user(db, email)
    user.display_name = display_name or None
    user.bio = bio or None
    user.profile_picture_url = profile_picture_url or None
    await db.commit()
    return user
