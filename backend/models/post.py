"""Post model definitions."""

from sqlalchemy import Column, Integer, String, Text
from backend.database import Base


class Post(Base):
    """Represents a blog post and the filename of its image."""
    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String)
    description = Column(Text)
    file = Column(String, nullable=False)
