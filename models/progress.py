import enum

from sqlalchemy import Column, DateTime, Enum, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import relationship

from core.database import Base
from models.word import utcnow


class ProgressStatus(str, enum.Enum):
    NEW = "NEW"
    LEARNING = "LEARNING"
    MASTERED = "MASTERED"


class Progress(Base):
    __tablename__ = "progress"
    __table_args__ = (
        UniqueConstraint("user_id", "word_id", name="uq_progress_user_word"),
    )

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    word_id = Column(Integer, ForeignKey("words.id", ondelete="CASCADE"), nullable=False, index=True)
    status = Column(
        Enum(ProgressStatus, name="progress_status", native_enum=False),
        nullable=False,
        default=ProgressStatus.NEW,
        index=True,
    )
    next_review = Column(DateTime, nullable=False, default=utcnow, index=True)
    review_count = Column(Integer, nullable=False, default=0)

    word = relationship("Word", back_populates="progress")
    user = relationship("User", backref="progress")
