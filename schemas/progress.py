from pydantic import Field

from schemas.word import CamelModel


class ProgressSummaryOut(CamelModel):
    user_id: int
    daily_goal: int
    status_counts: dict[str, int] = Field(default_factory=dict)
    due_for_review: int
    total_words: int
