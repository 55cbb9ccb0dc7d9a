import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from core.database import get_db
from core.errors import AppError, InternalError
from schemas.word import (
    DailyResponse,
    DailyWordsOut,
    DemoDailyMeta,
    NewWordOut,
    ReviewWordOut,
    UserDailyMeta,
)
from services.daily_service import DEMO_MESSAGE, DailySelection, DailySelectionService
from .deps import optional_user_id

logger = logging.getLogger(__name__)

router = APIRouter(tags=["daily"])


def _review_out(word, progress) -> ReviewWordOut:
    out = ReviewWordOut.model_validate(word, from_attributes=True)
    if progress is not None:
        out.progress_status = progress.status
        out.next_review = progress.next_review
        out.review_count = progress.review_count or 0
    return out


def _words_out(selection: DailySelection) -> DailyWordsOut:
    return DailyWordsOut(
        new_words=[NewWordOut.model_validate(word, from_attributes=True) for word in selection.new_words],
        review_words=[_review_out(word, progress) for word, progress in selection.review_words],
    )


@router.get("/daily", response_model=DailyResponse)
async def get_daily_words(
    user_id: int | None = Depends(optional_user_id),
    db: Session = Depends(get_db),
):
    svc = DailySelectionService(db)
    try:
        if user_id is None:
            selection = svc.get_demo_words()
            meta = DemoDailyMeta(message=DEMO_MESSAGE, total_words=selection.total)
        else:
            selection = svc.get_user_words(user_id)
            meta = UserDailyMeta(
                user_id=selection.user.id,
                daily_goal=selection.user.daily_goal,
                total_words=selection.total,
            )
        data = _words_out(selection)
    except AppError:
        raise
    except Exception as exc:
        logger.exception("Error in /daily")
        raise InternalError(exc) from exc

    return DailyResponse(data=data, meta=meta)
