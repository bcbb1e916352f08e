"""
Movie catalogue entry. A movie runs in many shows across theatres.
"""

from sqlalchemy import Column, Integer, String, CheckConstraint, Index
from sqlalchemy.orm import relationship

from app.db.base import Base, AuditMixin


class Movie(Base, AuditMixin):
    __tablename__ = "movies"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    language = Column(String(50), nullable=True)
    genre = Column(String(50), nullable=True)
    duration_in_minutes = Column(Integer, nullable=False, default=0)

    shows = relationship("Show", back_populates="movie", passive_deletes=True)

    __table_args__ = (
        CheckConstraint("duration_in_minutes >= 0", name="check_movie_duration_non_negative"),
        # Show search filters on lower(title)
        Index("ix_movies_title", "title"),
    )

    def __repr__(self) -> str:
        return f"<Movie(id={self.id}, title={self.title})>"
