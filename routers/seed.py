import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from core.database import get_db
from core.errors import InternalError
from schemas.seed import SeedOut
from services.dictionary_service import DictionaryClient
from services.ingestion_service import IngestionService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["seed"])


class SeedError(InternalError):
    def __init__(self, exc: BaseException):
        super().__init__(exc, message="Failed to seed database")

    def to_dict(self) -> dict:
        return {"success": False, **super().to_dict()}


def get_dictionary_client():
    with DictionaryClient() as client:
        yield client


# sync endpoint: the ingestion loop blocks on network calls and the rate-limit delay
@router.get("/seed", response_model=SeedOut, response_model_exclude_none=True)
def seed_words(
    db: Session = Depends(get_db),
    client: DictionaryClient = Depends(get_dictionary_client),
):
    svc = IngestionService(db, client)
    try:
        result = svc.seed_if_empty()
    except Exception as exc:
        logger.exception("Seeding error")
        raise SeedError(exc) from exc
    return SeedOut.model_validate(result)
