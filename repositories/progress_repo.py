from datetime import datetime

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from models.progress import Progress, ProgressStatus


class ProgressRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_for_words(self, user_id: int, word_ids: list[int]) -> dict[int, Progress]:
        """First progress row (lowest id) per word for the user."""
        if not word_ids:
            return {}
        stmt = (
            select(Progress)
            .where(Progress.user_id == user_id, Progress.word_id.in_(word_ids))
            .order_by(Progress.id.asc())
        )
        rows: dict[int, Progress] = {}
        for entry in self.db.execute(stmt).scalars():
            rows.setdefault(entry.word_id, entry)
        return rows

    def count_by_status(self, user_id: int) -> dict[str, int]:
        stmt = (
            select(Progress.status, func.count(Progress.id))
            .where(Progress.user_id == user_id)
            .group_by(Progress.status)
        )
        counts = {status.value: 0 for status in ProgressStatus}
        for status, total in self.db.execute(stmt).all():
            counts[ProgressStatus(status).value] = int(total or 0)
        return counts

    def count_due(self, user_id: int, now: datetime) -> int:
        stmt = select(func.count(Progress.id)).where(
            Progress.user_id == user_id,
            Progress.status == ProgressStatus.LEARNING,
            Progress.next_review <= now,
        )
        return self.db.execute(stmt).scalar_one()
