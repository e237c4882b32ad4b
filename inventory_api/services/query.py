from pydantic.alias_generators import to_snake
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from inventory_api.core.dates import normalize_datetime
from inventory_api.core.errors import InventoryError


def resolve_sort(model, sortable: tuple, sort_by, sort_order, default="created_at"):
    """Map a client sort field (camelCase or snake_case) onto a whitelisted column."""
    column_name = to_snake(sort_by.strip()) if sort_by else default
    if column_name not in sortable:
        raise InventoryError(
            "Cannot sort by '{}'. Allowed: {}".format(sort_by, ", ".join(sortable))
        )
    column = getattr(model, column_name)
    if (sort_order or "desc").lower() == "asc":
        return column.asc()
    return column.desc()


def paginate(db: Session, model, conditions: list, order_by, page: int, limit: int):
    total = db.execute(
        select(func.count()).select_from(model).where(*conditions)
    ).scalar_one()
    items = (
        db.execute(
            select(model)
            .where(*conditions)
            .order_by(order_by, model.id)
            .offset((page - 1) * limit)
            .limit(limit)
        )
        .scalars()
        .all()
    )
    return list(items), total


def date_range_conditions(column, start_date=None, end_date=None) -> list:
    conditions = []
    for label, raw, op in (
        ("startDate", start_date, column.__ge__),
        ("endDate", end_date, column.__le__),
    ):
        if raw is None or raw == "":
            continue
        value = normalize_datetime(raw)
        if value is None:
            raise InventoryError("{} must be an ISO-8601 date or datetime.".format(label))
        conditions.append(op(value))
    return conditions
