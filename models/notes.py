from sqlalchemy import Column, Integer, String, DateTime, Text
from sqlalchemy.sql import func
from app.database import Base

class Note(Base):
    """Board entry from before posts were tied to user accounts."""
    __tablename__ = "notes"
    
    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    content = Column(Text, nullable=False)
    category = Column(String, default="General")
    location = Column(String, default="")
    author_name = Column(String, default="Neighbor")
    created_at = Column(DateTime(timezone=True), server_default=func.now())
