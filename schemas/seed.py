from pydantic import Field

from schemas.word import CamelModel


class SeedDetailsOut(CamelModel):
    sources: dict[str, int] = Field(default_factory=dict)
    failed_sources: list[str] = Field(default_factory=list)
    used_fallback: bool = False
    total_fetched: int
    success_count: int
    failed_count: int


class SeedOut(CamelModel):
    success: bool
    message: str
    details: SeedDetailsOut | None = None
    skip_reason: str | None = None
    word_count: int | None = None
