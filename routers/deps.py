from fastapi import Query

from core.errors import NotFoundError


def optional_user_id(user_id: str | None = Query(default=None, alias="userId")) -> int | None:
    if user_id is None or not user_id.strip():
        return None
    try:
        return int(user_id)
    except ValueError as exc:
        raise NotFoundError("User not found") from exc


def required_user_id(user_id: str | None = Query(default=None, alias="userId")) -> int:
    parsed = optional_user_id(user_id)
    if parsed is None:
        raise NotFoundError("User not found")
    return parsed
