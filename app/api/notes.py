import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from app.database import get_db
from app.errors import ValidationError, failure_as
from models.notes import Note as DBNote
from schemas.feed import CreatedResponse, DEFAULT_CATEGORY
from schemas.notes import NoteCreate, NoteResponse

router = APIRouter()
logger = logging.getLogger("neighbornotes.notes")

DEFAULT_AUTHOR_NAME = "Neighbor"


@router.get("", response_model=list[NoteResponse])
async def get_notes(db: AsyncSession = Depends(get_db)):
    with failure_as("Failed to fetch notes", logger):
        result = await db.execute(select(DBNote).order_by(DBNote.created_at.desc(), DBNote.id.desc()))
        return [NoteResponse.model_validate(n) for n in result.scalars().all()]


@router.post("", response_model=CreatedResponse)
async def create_note(note: NoteCreate, db: AsyncSession = Depends(get_db)):
    if not note.title or not note.content:
        raise ValidationError("Title and Content are required")
    with failure_as("Failed to create note", logger):
        db_note = DBNote(
            title=note.title,
            content=note.content,
            category=note.category or DEFAULT_CATEGORY,
            location=note.location or "",
            author_name=note.author_name or DEFAULT_AUTHOR_NAME,
        )
        db.add(db_note)
        await db.commit()
        await db.refresh(db_note)
        logger.info("note created id=%s", db_note.id)
        return CreatedResponse(id=db_note.id, message="Note created successfully")
