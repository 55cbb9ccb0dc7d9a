from sqlalchemy.orm import Session

from core.errors import NotFoundError
from models.word import utcnow
from repositories.progress_repo import ProgressRepository
from repositories.user_repo import UserRepository
from repositories.word_repo import WordRepository


class ProgressService:
    def __init__(self, db: Session):
        self.progress_repo = ProgressRepository(db)
        self.user_repo = UserRepository(db)
        self.word_repo = WordRepository(db)

    def get_summary(self, user_id: int) -> dict:
        user = self.user_repo.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found")

        return {
            "user_id": user.id,
            "daily_goal": user.daily_goal,
            "status_counts": self.progress_repo.count_by_status(user.id),
            "due_for_review": self.progress_repo.count_due(user.id, utcnow()),
            "total_words": self.word_repo.count(),
        }
