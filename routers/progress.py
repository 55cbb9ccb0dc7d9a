import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from core.database import get_db
from core.errors import AppError, InternalError
from schemas.progress import ProgressSummaryOut
from services.progress_service import ProgressService
from .deps import required_user_id

logger = logging.getLogger(__name__)

router = APIRouter(tags=["progress"])


@router.get("/progress", response_model=ProgressSummaryOut)
async def get_progress_summary(
    user_id: int = Depends(required_user_id),
    db: Session = Depends(get_db),
):
    svc = ProgressService(db)
    try:
        summary = svc.get_summary(user_id)
    except AppError:
        raise
    except Exception as exc:
        logger.exception("Error in /progress")
        raise InternalError(exc) from exc
    return ProgressSummaryOut.model_validate(summary)
