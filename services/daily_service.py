import math
from dataclasses import dataclass, field

from sqlalchemy.orm import Session

from core.errors import NotFoundError
from models.progress import Progress
from models.user import User
from models.word import Word, utcnow
from repositories.progress_repo import ProgressRepository
from repositories.user_repo import UserRepository
from repositories.word_repo import WordRepository

NEW_WORD_SHARE = 0.5
DEMO_BATCH_SIZE = 10
DEMO_MESSAGE = "Demo mode: words returned without user tracking"


@dataclass
class DailySelection:
    new_words: list[Word] = field(default_factory=list)
    review_words: list[tuple[Word, Progress | None]] = field(default_factory=list)
    user: User | None = None

    @property
    def total(self) -> int:
        return len(self.new_words) + len(self.review_words)


def split_goal(daily_goal: int) -> tuple[int, int]:
    """Return (new, review) word counts for a daily goal."""
    return math.ceil(daily_goal * NEW_WORD_SHARE), math.floor(daily_goal * NEW_WORD_SHARE)


class DailySelectionService:
    def __init__(self, db: Session):
        self.word_repo = WordRepository(db)
        self.progress_repo = ProgressRepository(db)
        self.user_repo = UserRepository(db)

    def get_user_words(self, user_id: int) -> DailySelection:
        user = self.user_repo.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found")

        new_count, review_count = split_goal(user.daily_goal)
        new_words = self.word_repo.list_unseen_by_user(user.id, limit=new_count)
        review_words = self.word_repo.list_due_for_review(user.id, now=utcnow(), limit=review_count)
        progress = self.progress_repo.get_for_words(user.id, [word.id for word in review_words])

        return DailySelection(
            new_words=new_words,
            review_words=[(word, progress.get(word.id)) for word in review_words],
            user=user,
        )

    def get_demo_words(self) -> DailySelection:
        if self.word_repo.count() == 0:
            raise NotFoundError("No words in database. Please run the seeding script.")

        words = self.word_repo.list_first(DEMO_BATCH_SIZE)
        half = DEMO_BATCH_SIZE // 2
        return DailySelection(
            new_words=words[:half],
            review_words=[(word, None) for word in words[half:]],
        )
