import enum
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Enum, Integer, String, Text
from sqlalchemy.orm import relationship

from core.database import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


class ExamType(str, enum.Enum):
    IELTS = "IELTS"
    TOEFL = "TOEFL"


class Difficulty(str, enum.Enum):
    A1 = "A1"
    A2 = "A2"
    B1 = "B1"
    B2 = "B2"
    C1 = "C1"
    C2 = "C2"


class Word(Base):
    __tablename__ = "words"

    id = Column(Integer, primary_key=True)
    term = Column(String(100), unique=True, nullable=False, index=True)
    translation = Column(String(255), nullable=False)
    definition = Column(Text, nullable=False)
    example_sentence = Column(Text, nullable=False)
    audio_url = Column(String(500), nullable=True)
    exam_type = Column(Enum(ExamType, name="exam_type", native_enum=False), nullable=False, index=True)
    difficulty = Column(Enum(Difficulty, name="difficulty", native_enum=False), nullable=False, index=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    progress = relationship("Progress", back_populates="word", cascade="all, delete-orphan")
