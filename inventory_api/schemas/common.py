import math
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Accepts camelCase or snake_case input, serializes camelCase."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        str_strip_whitespace=True,
    )


class Pagination(CamelModel):
    page: int
    limit: int
    total: int
    pages: int

    @classmethod
    def build(cls, page: int, limit: int, total: int) -> "Pagination":
        return cls(page=page, limit=limit, total=total, pages=math.ceil(total / limit) if limit else 0)


def dump(model: BaseModel) -> dict:
    return model.model_dump(by_alias=True, mode="json")


def envelope(
    data: Any = None,
    *,
    message: Optional[str] = None,
    pagination: Optional[Pagination] = None,
    count: Optional[int] = None,
) -> dict:
    body: dict[str, Any] = {"success": True}
    if data is not None:
        body["data"] = data
    if message:
        body["message"] = message
    if pagination is not None:
        body["pagination"] = dump(pagination)
    if count is not None:
        body["count"] = count
    return body


__all__ = ["CamelModel", "Pagination", "dump", "envelope"]
