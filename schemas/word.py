from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from models.progress import ProgressStatus
from models.word import Difficulty, ExamType


class CamelModel(BaseModel):
    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)


class WordOut(CamelModel):
    id: int
    term: str
    translation: str
    definition: str
    example_sentence: str
    audio_url: str | None = None
    exam_type: ExamType
    difficulty: Difficulty


class NewWordOut(WordOut):
    progress_status: Literal[ProgressStatus.NEW] = ProgressStatus.NEW


class ReviewWordOut(WordOut):
    progress_status: ProgressStatus = ProgressStatus.LEARNING
    next_review: datetime | None = None
    review_count: int = 0


class DailyWordsOut(CamelModel):
    new_words: list[NewWordOut]
    review_words: list[ReviewWordOut]


class UserDailyMeta(CamelModel):
    user_id: int
    daily_goal: int
    total_words: int


class DemoDailyMeta(CamelModel):
    message: str
    total_words: int


class DailyResponse(CamelModel):
    success: bool = True
    data: DailyWordsOut
    meta: UserDailyMeta | DemoDailyMeta
