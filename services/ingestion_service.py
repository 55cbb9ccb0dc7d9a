import logging
import time
from dataclasses import dataclass, field
from typing import Callable

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.config import settings
from models.word import Difficulty, ExamType
from repositories.word_repo import WordRepository
from services.dictionary_service import DictionaryClient, WordSource
from services.translation_service import translate

logger = logging.getLogger(__name__)

FALLBACK_WORDS: list[tuple[str, Difficulty]] = [
    ("abate", Difficulty.B2),
    ("benevolent", Difficulty.C1),
    ("candid", Difficulty.B2),
    ("diligent", Difficulty.B2),
    ("ephemeral", Difficulty.C1),
]


def default_sources() -> list[WordSource]:
    return [
        WordSource(
            name="IELTS",
            url=settings.IELTS_SOURCE_URL,
            exam_type=ExamType.IELTS,
            default_difficulty=Difficulty.B2,
            fmt="json",
        ),
        WordSource(
            name="TOEFL",
            url=settings.TOEFL_SOURCE_URL,
            exam_type=ExamType.TOEFL,
            default_difficulty=Difficulty.C1,
            fmt="text",
        ),
    ]


@dataclass(frozen=True)
class PendingWord:
    term: str
    exam_type: ExamType
    difficulty: Difficulty


@dataclass
class IngestionReport:
    source_counts: dict[str, int] = field(default_factory=dict)
    failed_sources: list[str] = field(default_factory=list)
    used_fallback: bool = False
    succeeded: int = 0
    failed: int = 0

    @property
    def total_fetched(self) -> int:
        return sum(self.source_counts.values())

    def to_dict(self) -> dict:
        return {
            "sources": dict(self.source_counts),
            "failed_sources": list(self.failed_sources),
            "used_fallback": self.used_fallback,
            "total_fetched": self.total_fetched,
            "success_count": self.succeeded,
            "failed_count": self.failed,
        }


class IngestionService:
    def __init__(
        self,
        db: Session,
        client: DictionaryClient,
        *,
        sources: list[WordSource] | None = None,
        limit: int | None = None,
        delay: float | None = None,
        use_fallback: bool = True,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.repo = WordRepository(db)
        self.db = db
        self.client = client
        self.sources = sources if sources is not None else default_sources()
        self.limit = settings.SEED_WORDS_PER_SOURCE if limit is None else limit
        self.delay = settings.SEED_REQUEST_DELAY if delay is None else delay
        self.use_fallback = use_fallback
        self.sleep = sleep

    def collect_words(self, report: IngestionReport) -> list[PendingWord]:
        pending: list[PendingWord] = []
        for source in self.sources:
            terms = self.client.fetch_word_list(source)
            if terms is None:
                report.failed_sources.append(source.name)
                terms = []
            terms = terms[: self.limit]
            report.source_counts[source.name] = len(terms)
            pending.extend(PendingWord(term, source.exam_type, source.default_difficulty) for term in terms)

        if not pending and self.use_fallback:
            logger.warning("No words fetched from any source, using fallback sample words")
            report.used_fallback = True
            pending = [PendingWord(term, ExamType.TOEFL, difficulty) for term, difficulty in FALLBACK_WORDS]
        return pending

    def run(self) -> IngestionReport:
        report = IngestionReport()
        pending = self.collect_words(report)
        logger.info("Total words to process: %d", len(pending))

        for index, item in enumerate(pending):
            if index and self.delay > 0:
                self.sleep(self.delay)

            entry = self.client.lookup(item.term)
            if entry is None:
                logger.info('Skipping "%s" (dictionary lookup failed)', item.term)
                report.failed += 1
                continue

            try:
                word = self.repo.upsert_word(
                    term=item.term,
                    translation=translate(item.term),
                    definition=entry.definition,
                    example_sentence=entry.example,
                    audio_url=entry.audio_url,
                    exam_type=item.exam_type,
                    difficulty=item.difficulty,
                )
            except SQLAlchemyError:
                self.db.rollback()
                logger.exception('Error saving "%s"', item.term)
                report.failed += 1
                continue

            logger.debug('Saved "%s" (%s, %s)', word.term, word.exam_type.value, word.difficulty.value)
            report.succeeded += 1

        logger.info(
            "Seeding complete: fetched=%d saved=%d failed=%d",
            report.total_fetched,
            report.succeeded,
            report.failed,
        )
        return report

    def seed_if_empty(self) -> dict:
        word_count = self.repo.count()
        if word_count > 0:
            return {
                "success": False,
                "message": f"Database already seeded with {word_count} words",
                "skip_reason": "Words already exist in database",
                "word_count": word_count,
            }

        report = self.run()
        return {
            "success": True,
            "message": f"Database seeded successfully with {report.succeeded} words",
            "details": report.to_dict(),
        }
