from datetime import datetime

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from models.progress import Progress, ProgressStatus
from models.word import Difficulty, ExamType, Word


class WordRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_by_term(self, term: str) -> Word | None:
        return self.db.execute(select(Word).where(Word.term == term.lower())).scalar_one_or_none()

    def count(self) -> int:
        return self.db.execute(select(func.count(Word.id))).scalar_one()

    def upsert_word(
        self,
        *,
        term: str,
        translation: str,
        definition: str,
        example_sentence: str,
        audio_url: str | None,
        exam_type: ExamType,
        difficulty: Difficulty,
    ) -> Word:
        entity = self.get_by_term(term)

        if entity:
            entity.translation = translation
            entity.definition = definition
            entity.example_sentence = example_sentence
            entity.audio_url = audio_url
            entity.exam_type = exam_type
            entity.difficulty = difficulty
        else:
            entity = Word(
                term=term.lower(),
                translation=translation,
                definition=definition,
                example_sentence=example_sentence,
                audio_url=audio_url,
                exam_type=exam_type,
                difficulty=difficulty,
            )
            self.db.add(entity)

        self.db.commit()
        self.db.refresh(entity)
        return entity

    def list_first(self, limit: int) -> list[Word]:
        stmt = select(Word).order_by(Word.id.asc()).limit(limit)
        return list(self.db.execute(stmt).scalars())

    def list_unseen_by_user(self, user_id: int, limit: int) -> list[Word]:
        if limit <= 0:
            return []
        seen = select(Progress.word_id).where(Progress.user_id == user_id)
        stmt = (
            select(Word)
            .where(Word.id.not_in(seen))
            .order_by(Word.id.asc())
            .limit(limit)
        )
        return list(self.db.execute(stmt).scalars())

    def list_due_for_review(self, user_id: int, now: datetime, limit: int) -> list[Word]:
        if limit <= 0:
            return []
        due = select(Progress.word_id).where(
            Progress.user_id == user_id,
            Progress.status == ProgressStatus.LEARNING,
            Progress.next_review <= now,
        )
        stmt = (
            select(Word)
            .where(Word.id.in_(due))
            .order_by(Word.id.asc())
            .limit(limit)
        )
        return list(self.db.execute(stmt).scalars())
