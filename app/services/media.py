"""Media ingestion: validate an uploaded image, store it, record its metadata."""
import logging
import os
import time

from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.errors import ValidationError
from app.services import users as user_directory
from app.storage import local
from models.media import MediaUpload

logger = logging.getLogger("neighbornotes.upload")


def original_extension(filename: str) -> str:
    # text after the last dot of the base name, or the whole base name
    base = os.path.basename((filename or "").replace("\\", "/"))
    return base.rsplit(".", 1)[-1]


def stored_name(user_id: int, filename: str, timestamp_ms: int | None = None) -> str:
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)
    return f"{user_id}_{timestamp_ms}.{original_extension(filename)}"


def validate_upload(size: int, content_type: str | None) -> None:
    if size > settings.MAX_UPLOAD_BYTES:
        limit_mb = settings.MAX_UPLOAD_BYTES // (1024 * 1024)
        raise ValidationError(f"File size must be less than {limit_mb}MB")
    if (content_type or "") not in settings.allowed_upload_types:
        raise ValidationError(
            "File type not allowed. Only JPEG, PNG, GIF, and WebP images are supported."
        )


async def ingest(
    db: AsyncSession,
    *,
    user_email: str,
    filename: str,
    content_type: str | None,
    data: bytes,
) -> MediaUpload:
    validate_upload(len(data), content_type)
    user = await user_directory.require_user(db, user_email)
    name = stored_name(user.id, filename)
    # bytes reach disk before the metadata row exists
    local.write_file(name, data)
    record = MediaUpload(
        user_id=user.id,
        file_name=filename,
        file_url=local.public_url(name),
        file_type=content_type,
        file_size=len(data),
    )
    db.add(record)
    await db.commit()
    await db.refresh(record)
    logger.info("media stored id=%s user_id=%s name=%s size=%s", record.id, user.id, name, len(data))
    return record
