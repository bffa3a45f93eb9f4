from sqlalchemy import Boolean, Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from w4ffle.db.interfaces.postgresql import Base


class Puzzle(Base):
    __tablename__ = "puzzles"

    id = Column(Integer, primary_key=True)
    # Stored as text by the seeder, "YYYY-MM-DD"
    puzzle_date = Column(String(10), unique=True, nullable=False, index=True)

    images = relationship("PuzzleImage", back_populates="puzzle")


class PuzzleImage(Base):
    __tablename__ = "puzzle_images"

    id = Column(Integer, primary_key=True)
    puzzle_id = Column(Integer, ForeignKey("puzzles.id"), nullable=False, index=True)
    round_index = Column(Integer, nullable=False)

    # Object key in the image bucket, e.g. "2026-01-16/r1_1.png" (not a URL)
    image_key = Column("image_url", String, nullable=False)

    # Authoring metadata; never leaves the service
    is_real = Column(Boolean, nullable=False, default=False)

    puzzle = relationship("Puzzle", back_populates="images")
