import logging

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.errors import ValidationError, failure_as
from app.security import IdentityVerifier, get_identity_verifier
from app.services import media
from schemas.media import UploadResponse

router = APIRouter()
logger = logging.getLogger("neighbornotes.upload")


@router.post("/upload", response_model=UploadResponse)
async def upload_file(
    request: Request,
    file: UploadFile | None = File(None),
    userEmail: str | None = Form(None),
    db: AsyncSession = Depends(get_db),
    verifier: IdentityVerifier = Depends(get_identity_verifier),
):
    if file is None or not userEmail:
        raise ValidationError("File and user email are required")
    if file.size is not None:
        # reject oversized uploads before reading the body
        media.validate_upload(file.size, file.content_type)
    with failure_as("Failed to upload file", logger):
        user_email = verifier.verify(request, userEmail)
        data = await file.read()
        record = await media.ingest(
            db,
            user_email=user_email,
            filename=file.filename or "",
            content_type=file.content_type,
            data=data,
        )
        return UploadResponse(id=record.id, url=record.file_url, message="File uploaded successfully")
