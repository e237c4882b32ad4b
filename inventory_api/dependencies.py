from dataclasses import dataclass
from typing import Literal, Optional

from fastapi import Query

from inventory_api.config import get_settings
from inventory_api.database.session import get_db

_settings = get_settings()


@dataclass
class PageParams:
    page: int
    limit: int
    sort_by: Optional[str]
    sort_order: str


def page_params(
    page: int = Query(1, ge=1, description="Page number, starting at 1"),
    limit: Optional[int] = Query(
        None,
        ge=1,
        le=_settings.MAX_PAGE_SIZE,
        description="Items per page",
    ),
    sort_by: Optional[str] = Query(None, alias="sortBy", description="Field to sort by"),
    sort_order: Literal["asc", "desc"] = Query("desc", alias="sortOrder"),
) -> PageParams:
    return PageParams(
        page=page,
        limit=limit or _settings.DEFAULT_PAGE_SIZE,
        sort_by=sort_by,
        sort_order=sort_order,
    )


__all__ = ["PageParams", "get_db", "page_params"]
